# -*- coding: utf-8 -*-
"""
Ranking Pipeline
================

Single entry point that takes a raw decision table plus weights and impacts
specs, validates them, runs TOPSIS and returns one ranked row per
alternative in input order.

    raw table ──► InputValidator ──► DecisionMatrix ──► TOPSISCalculator
                                                              │
                  RankedResult ◄── headers + rows + scores ◄──┘
"""

import pandas as pd
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

from ..config import Config, get_config
from ..data_loader import InputValidator, SpecLike, TableLike, ValidatedInput
from ..logger import get_module_logger, log_execution, timed_operation
from ..mcdm.topsis import TOPSISCalculator, TOPSISResult

logger = get_module_logger('ranking.pipeline')


# =========================================================================
# Result containers
# =========================================================================

@dataclass(frozen=True)
class RankedRow:
    """
    One alternative with its score and rank.

    Attributes
    ----------
    index : int
        0-based position of the row in the input table.
    cells : tuple
        Original row cells, identifier first, exactly as supplied.
    score : float
        Full-precision closeness coefficient in [0, 1].
    score_text : str
        Score rounded for presentation, e.g. ``'0.5342'``.
    rank : int
        1 = best.
    """
    index: int
    cells: Tuple[Any, ...]
    score: float
    score_text: str
    rank: int

    @property
    def identifier(self) -> Any:
        return self.cells[0]

    def to_record(self) -> List[Any]:
        """Cells followed by score text and rank."""
        return [*self.cells, self.score_text, self.rank]


@dataclass
class RankedResult:
    """
    Ranked alternatives in input order plus rendering headers.

    ``headers`` are the original table headers followed by the score and
    rank headers.
    """
    headers: List[Any]
    rows: List[RankedRow]
    topsis: Optional[TOPSISResult] = field(default=None, repr=False)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[RankedRow]:
        return iter(self.rows)

    @property
    def scores(self) -> List[float]:
        return [row.score for row in self.rows]

    @property
    def ranks(self) -> List[int]:
        return [row.rank for row in self.rows]

    def best(self) -> RankedRow:
        """The rank-1 alternative."""
        return min(self.rows, key=lambda row: row.rank)

    def sorted_by_rank(self) -> List[RankedRow]:
        return sorted(self.rows, key=lambda row: row.rank)

    def to_records(self) -> List[List[Any]]:
        return [row.to_record() for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        """Result as a DataFrame with the rendering headers as columns."""
        return pd.DataFrame(self.to_records(), columns=self.headers)


# =========================================================================
# Pipeline
# =========================================================================

class TopsisRankingPipeline:
    """
    Validates raw input and ranks it with TOPSIS.

    Each :meth:`run` call is independent: nothing about previous inputs or
    results is kept on the pipeline.

    Examples
    --------
    >>> pipeline = TopsisRankingPipeline()
    >>> result = pipeline.run(
    ...     [["Name", "C1", "C2"], ["A", 1, 1], ["B", 2, 2], ["C", 3, 3]],
    ...     "1,1", "+,+")
    >>> result.best().identifier
    'C'
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.validator = InputValidator(self.config.input)
        self.calculator = TOPSISCalculator(config=self.config.topsis)

    @log_execution(logger=logger)
    def run(self,
            table: TableLike,
            weights_spec: SpecLike,
            impacts_spec: SpecLike) -> RankedResult:
        """
        Validate input and rank every alternative.

        Parameters
        ----------
        table : RawTable, DataFrame or list of rows
            Header row first, identifier in column 0, criteria after it
        weights_spec : str or sequence
            Comma-separated weights, one per criterion
        impacts_spec : str or sequence
            Comma-separated ``+``/``-``, one per criterion

        Returns
        -------
        RankedResult

        Raises
        ------
        ShapeTooSmall, ParseError, ShapeMismatch, NonNumericCell
        """
        validated = self.validator.validate(table, weights_spec, impacts_spec)

        with timed_operation(logger, "TOPSIS ranking"):
            topsis_result = self.calculator.calculate(
                validated.matrix, validated.weights, validated.impacts
            )

        return self._build_result(validated, topsis_result)

    def _build_result(self, validated: ValidatedInput,
                      topsis_result: TOPSISResult) -> RankedResult:
        decimals = self.config.topsis.score_decimals
        scores = topsis_result.scores.to_numpy()
        ranks = topsis_result.ranks.to_numpy()

        rows = [
            RankedRow(
                index=i,
                cells=tuple(cells),
                score=float(scores[i]),
                score_text=format_score(scores[i], decimals),
                rank=int(ranks[i]),
            )
            for i, cells in enumerate(validated.table.rows)
        ]

        headers = [
            *validated.table.headers,
            self.config.output.score_header,
            self.config.output.rank_header,
        ]
        return RankedResult(headers=headers, rows=rows, topsis=topsis_result)


def format_score(score: float, decimals: int = 4) -> str:
    """
    Fixed-point text for a score, e.g. ``0.53421 -> '0.5342'``.

    Exact half-way values round up (``0.03125 -> '0.0313'``).
    """
    step = Decimal(1).scaleb(-decimals)
    rounded = Decimal(float(score)).quantize(step, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def validate_and_rank(table: TableLike,
                      weights_spec: SpecLike,
                      impacts_spec: SpecLike,
                      config: Optional[Config] = None) -> RankedResult:
    """
    Validate a decision table and rank its alternatives with TOPSIS.

    >>> result = validate_and_rank(
    ...     [["Name", "C1", "C2"], ["A", "1", "1"], ["B", "2", "2"], ["C", "3", "3"]],
    ...     "1,1", "+,+")
    >>> [(row.identifier, row.score_text, row.rank) for row in result]
    [('A', '0.0000', 3), ('B', '0.5000', 2), ('C', '1.0000', 1)]
    """
    return TopsisRankingPipeline(config).run(table, weights_spec, impacts_spec)
