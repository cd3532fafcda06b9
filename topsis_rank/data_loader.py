# -*- coding: utf-8 -*-
"""Decision table loading, validation, and conversion to typed inputs."""

import math
import numbers

import numpy as np
import pandas as pd
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple, Union
from dataclasses import dataclass

from .config import Config, InputConfig, get_config
from .exceptions import NonNumericCell, ParseError, ShapeMismatch, ShapeTooSmall
from .logger import get_module_logger

logger = get_module_logger('data_loader')


class Impact(Enum):
    """Preference direction of a criterion."""
    BENEFIT = "+"   # larger is better
    COST = "-"      # smaller is better

    @property
    def is_benefit(self) -> bool:
        return self is Impact.BENEFIT


@dataclass(frozen=True)
class RawTable:
    """
    Untyped table as produced by a CSV or spreadsheet reader.

    ``headers[0]`` labels the identifier column; every other header names a
    criterion. Cells are kept exactly as supplied.
    """
    headers: Tuple[Any, ...]
    rows: Tuple[Tuple[Any, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> 'RawTable':
        """Build from a list of rows whose first row holds the headers."""
        rows = [tuple(r) for r in rows]
        if not rows:
            return cls(headers=(), rows=())
        return cls(headers=rows[0], rows=tuple(rows[1:]))

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> 'RawTable':
        """Build from a DataFrame; its columns become the header row."""
        rows = tuple(tuple(r) for r in df.itertuples(index=False, name=None))
        return cls(headers=tuple(df.columns), rows=rows)

    @property
    def n_rows(self) -> int:
        """Row count including the header row."""
        return len(self.rows) + (1 if self.headers else 0)

    @property
    def n_columns(self) -> int:
        return len(self.headers)


@dataclass(frozen=True, eq=False)
class DecisionMatrix:
    """
    Typed N x M decision matrix.

    Row position is the identity of an alternative and never changes.
    """
    values: np.ndarray
    alternatives: Tuple[Any, ...]
    criteria: Tuple[Any, ...]

    def __post_init__(self):
        values = np.array(self.values, dtype=float)
        if values.ndim != 2:
            raise ValueError("matrix must be 2D")
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)

    @property
    def n_alternatives(self) -> int:
        return self.values.shape[0]

    @property
    def n_criteria(self) -> int:
        return self.values.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    def to_frame(self) -> pd.DataFrame:
        """Matrix as a DataFrame indexed by row position."""
        return pd.DataFrame(self.values.copy(), columns=list(self.criteria))


@dataclass(frozen=True, eq=False)
class ValidatedInput:
    """Everything the TOPSIS engine needs, typed and shape-checked."""
    table: RawTable
    matrix: DecisionMatrix
    weights: np.ndarray
    impacts: Tuple[Impact, ...]


TableLike = Union[RawTable, pd.DataFrame, Sequence[Sequence[Any]]]
SpecLike = Union[str, Sequence[Any]]


def load_table(table: TableLike) -> RawTable:
    """Coerce rows-with-header or a DataFrame into a :class:`RawTable`."""
    if isinstance(table, RawTable):
        return table
    if isinstance(table, pd.DataFrame):
        return RawTable.from_dataframe(table)
    return RawTable.from_rows(table)


def _to_float(value: Any) -> Optional[float]:
    """Parse a cell or token as a finite real number, ``None`` if impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        # float() also takes Python digit separators like "1_000"
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


class InputValidator:
    """
    Validates a raw table plus weights/impacts specs.

    This is the only place where untyped cells become numbers; the engine
    downstream assumes every check here has passed.
    """

    def __init__(self, config: Optional[Union[Config, InputConfig]] = None):
        if isinstance(config, Config):
            config = config.input
        self.config = config or get_config().input

    def split_spec(self, spec: SpecLike) -> List[str]:
        """Split a delimited spec into trimmed tokens."""
        if isinstance(spec, str):
            return [t.strip() for t in spec.split(self.config.delimiter)]
        return [self._token_text(t) for t in spec]

    def _token_text(self, token: Any) -> str:
        if isinstance(token, Impact):
            return (self.config.benefit_symbol if token is Impact.BENEFIT
                    else self.config.cost_symbol)
        return str(token).strip()

    @property
    def _separator_text(self) -> str:
        if self.config.delimiter == ",":
            return "commas"
        return f"'{self.config.delimiter}'"

    def parse_weights(self, spec: SpecLike) -> np.ndarray:
        """Parse a weights spec such as ``"1,1,2"``."""
        weights = []
        for token in self.split_spec(spec):
            value = _to_float(token)
            if value is None:
                raise ParseError(
                    f"Weights must be numeric values separated by {self._separator_text} "
                    f"(invalid weight: '{token}').",
                    token=token
                )
            weights.append(value)
        return np.array(weights, dtype=float)

    def parse_impacts(self, spec: SpecLike) -> Tuple[Impact, ...]:
        """Parse an impacts spec such as ``"+,-,+"``."""
        symbols = {
            self.config.benefit_symbol: Impact.BENEFIT,
            self.config.cost_symbol: Impact.COST,
        }
        impacts = []
        for token in self.split_spec(spec):
            if token not in symbols:
                raise ParseError(
                    f"Impacts must be either {self.config.benefit_symbol} or "
                    f"{self.config.cost_symbol} separated by {self._separator_text} "
                    f"(invalid impact: '{token}').",
                    token=token
                )
            impacts.append(symbols[token])
        return tuple(impacts)

    def check_table_size(self, table: RawTable) -> None:
        if table.n_rows < self.config.min_rows:
            raise ShapeTooSmall(
                f"File must contain at least {self.config.min_rows} rows "
                f"(header + data), got {table.n_rows}."
            )
        if table.n_columns < self.config.min_columns:
            raise ShapeTooSmall(
                f"File must contain at least {self.config.min_columns} columns, "
                f"got {table.n_columns}."
            )

    def build_matrix(self, table: RawTable) -> DecisionMatrix:
        """Convert criterion cells to floats, reporting display coordinates."""
        width = table.n_columns
        values = []
        for i, row in enumerate(table.rows):
            if len(row) != width:
                raise ShapeMismatch(
                    f"Row {i + 2} has {len(row)} cells but the header has {width}."
                )
            parsed = []
            for j, cell in enumerate(row[1:]):
                value = _to_float(cell)
                if value is None:
                    raise NonNumericCell(row=i + 2, column=j + 2, value=cell)
                parsed.append(value)
            values.append(parsed)

        return DecisionMatrix(
            values=np.array(values, dtype=float).reshape(len(values), width - 1),
            alternatives=tuple(row[0] for row in table.rows),
            criteria=tuple(table.headers[1:]),
        )

    def validate(self,
                 table: TableLike,
                 weights_spec: SpecLike,
                 impacts_spec: SpecLike) -> ValidatedInput:
        """
        Run every check and return typed inputs.

        Parameters
        ----------
        table : RawTable, DataFrame or list of rows
            Header row first, identifier in column 0
        weights_spec : str or sequence
            e.g. ``"1,1,1,2"``
        impacts_spec : str or sequence
            e.g. ``"+,+,-,+"``

        Raises
        ------
        ShapeTooSmall, ParseError, ShapeMismatch, NonNumericCell
        """
        table = load_table(table)
        self.check_table_size(table)

        weights = self.parse_weights(weights_spec)
        impacts = self.parse_impacts(impacts_spec)

        if len(weights) != len(impacts):
            raise ShapeMismatch(
                f"Number of weights ({len(weights)}) must equal "
                f"number of impacts ({len(impacts)})."
            )

        n_criteria = table.n_columns - 1
        if len(weights) != n_criteria:
            raise ShapeMismatch(
                f"Number of weights/impacts ({len(weights)}) must match "
                f"number of criteria ({n_criteria})."
            )

        matrix = self.build_matrix(table)
        logger.debug(f"Validated {matrix.n_alternatives} alternatives x "
                     f"{matrix.n_criteria} criteria")

        return ValidatedInput(table=table, matrix=matrix,
                              weights=weights, impacts=impacts)


def validate_input(table: TableLike,
                   weights_spec: SpecLike,
                   impacts_spec: SpecLike,
                   config: Optional[Config] = None) -> ValidatedInput:
    """Convenience function for one-off validation."""
    return InputValidator(config).validate(table, weights_spec, impacts_spec)
