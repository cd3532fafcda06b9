# -*- coding: utf-8 -*-
"""
Output Rendering for TOPSIS Results
===================================

Provides the ``OutputManager`` class for turning a :class:`RankedResult`
into the forms callers hand on to users:

    to_frame — pandas DataFrame with the rendering headers
    to_csv   — delimited text, cells quoted when they contain the
               separator, a quote character or a line break
    to_html  — HTML ``<table>`` with escaped cell text

Everything is returned in memory; where the text goes (download, e-mail,
disk) is up to the caller.
"""

import csv
from typing import Optional

import pandas as pd

from .config import Config, OutputConfig, get_config
from .logger import get_module_logger
from .ranking.pipeline import RankedResult

logger = get_module_logger('output_manager')


class OutputManager:
    """Renders ranked results as DataFrame, delimited text or HTML."""

    def __init__(self, config: Optional[Config] = None):
        self.config: OutputConfig = (config or get_config()).output

    def to_frame(self, result: RankedResult) -> pd.DataFrame:
        """Result rows in input order, headers as columns."""
        return result.to_dataframe()

    def to_csv(self, result: RankedResult) -> str:
        """
        Render as delimited text with a header line.

        A field is quoted only when needed, and quotes inside it are doubled:
        ``Acme, Inc`` becomes ``"Acme, Inc"``.
        """
        text = self.to_frame(result).to_csv(
            index=False,
            sep=self.config.csv_separator,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator='\n',
        )
        logger.debug(f"Rendered {len(result)} rows as delimited text")
        return text

    def to_html(self, result: RankedResult) -> str:
        """Render as an HTML table; cell text is escaped."""
        html = self.to_frame(result).to_html(
            index=False,
            escape=True,
            border=1,
            classes=self.config.html_classes,
        )
        logger.debug(f"Rendered {len(result)} rows as HTML")
        return html


def create_output_manager(config: Optional[Config] = None) -> OutputManager:
    """Factory function to create an OutputManager."""
    return OutputManager(config)
