# -*- coding: utf-8 -*-
"""Configuration management for TOPSIS ranking."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from enum import Enum
import json
import logging


class LogLevel(Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def numeric(self) -> int:
        return getattr(logging, self.value)


@dataclass
class InputConfig:
    """How weights/impacts specs and raw tables are read."""
    delimiter: str = ","
    benefit_symbol: str = "+"
    cost_symbol: str = "-"
    min_rows: int = 2       # header + one alternative
    min_columns: int = 3    # identifier + two criteria

    def __post_init__(self):
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if self.benefit_symbol == self.cost_symbol:
            raise ValueError("benefit and cost symbols must differ")
        if self.min_rows < 2:
            raise ValueError("min_rows must be at least 2 (header + one row)")
        if self.min_columns < 2:
            raise ValueError("min_columns must be at least 2 (identifier + one criterion)")


@dataclass
class TOPSISConfig:
    """TOPSIS engine configuration."""
    score_decimals: int = 4
    # Score given to a row lying on both ideal points (0/0 closeness)
    degenerate_score: float = 0.5

    def __post_init__(self):
        if self.score_decimals < 0:
            raise ValueError("score_decimals must be non-negative")
        if not 0.0 <= self.degenerate_score <= 1.0:
            raise ValueError("degenerate_score must be between 0 and 1")


@dataclass
class OutputConfig:
    """Result rendering configuration."""
    score_header: str = "Topsis Score"
    rank_header: str = "Rank"
    csv_separator: str = ","
    html_classes: str = "topsis-result"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    log_file: Optional[Path] = None
    use_colors: bool = False


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    input: InputConfig = field(default_factory=InputConfig)
    topsis: TOPSISConfig = field(default_factory=TOPSISConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict:
        def _to_dict(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _to_dict(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, Enum):
                return obj.value
            elif isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, list):
                return [_to_dict(i) for i in obj]
            elif isinstance(obj, dict):
                return {k: _to_dict(v) for k, v in obj.items()}
            return obj
        return _to_dict(self)

    def save(self, filepath: Path) -> None:
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def summary(self) -> str:
        return f"""
{'='*60}
CONFIGURATION SUMMARY - TOPSIS Ranking
{'='*60}

INPUT:
  Spec delimiter: '{self.input.delimiter}'
  Impact symbols: benefit '{self.input.benefit_symbol}', cost '{self.input.cost_symbol}'
  Minimum table size: {self.input.min_rows} rows x {self.input.min_columns} columns

TOPSIS:
  Normalization: vector (Euclidean)
  Score decimals: {self.topsis.score_decimals}
  Degenerate score: {self.topsis.degenerate_score}

OUTPUT:
  Headers: '{self.output.score_header}', '{self.output.rank_header}'
  Separator: '{self.output.csv_separator}'

LOGGING:
  Level: {self.logging.level.value}
  Log file: {self.logging.log_file or '-'}
{'='*60}
"""


_config: Optional[Config] = None

def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config

def get_default_config() -> Config:
    """Get a fresh default configuration."""
    return Config()

def set_config(config: Config) -> None:
    global _config
    _config = config

def reset_config() -> None:
    global _config
    _config = Config()
