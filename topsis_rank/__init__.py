# -*- coding: utf-8 -*-
"""
topsis-rank: TOPSIS Multi-Criteria Ranking
==========================================

Ranks alternatives scored on several criteria with TOPSIS (Technique for
Order Preference by Similarity to Ideal Solution).

Package Structure
-----------------
topsis_rank/
├── config.py           # Dataclass configuration
├── logger.py           # Logging setup, decorators, context managers
├── exceptions.py       # Validation error taxonomy
├── data_loader.py      # RawTable -> DecisionMatrix, input validation
├── mcdm/
│   └── topsis.py       # TOPSIS engine
├── ranking/
│   └── pipeline.py     # validate_and_rank, RankedResult
└── output_manager.py   # Delimited text / HTML rendering

Quick Start
-----------
>>> from topsis_rank import validate_and_rank
>>> result = validate_and_rank(
...     [["Model", "Price", "Storage"], ["M1", 250, 16], ["M2", 200, 32]],
...     "1,1", "-,+")
>>> result.best().identifier
'M2'
"""

import logging

from .config import Config, get_default_config, get_config, set_config, reset_config
from .logger import (
    LOG_NAME,
    setup_logger,
    get_logger,
    get_module_logger,
    LoggerFactory,
    log_execution,
    timed_operation,
)
from .exceptions import (
    TopsisInputError,
    ParseError,
    ShapeMismatch,
    ShapeTooSmall,
    NonNumericCell,
)
from .data_loader import (
    Impact,
    RawTable,
    DecisionMatrix,
    ValidatedInput,
    InputValidator,
    load_table,
    validate_input,
)
from .mcdm import TOPSISCalculator, TOPSISResult, topsis
from .ranking import TopsisRankingPipeline, RankedResult, RankedRow, validate_and_rank
from .output_manager import OutputManager, create_output_manager

# Silent unless the host application configures logging
logging.getLogger(LOG_NAME).addHandler(logging.NullHandler())

__version__ = '1.0.0'

__all__ = [
    # Configuration
    'Config',
    'get_default_config',
    'get_config',
    'set_config',
    'reset_config',

    # Logging
    'setup_logger',
    'get_logger',
    'get_module_logger',
    'LoggerFactory',
    'log_execution',
    'timed_operation',

    # Errors
    'TopsisInputError',
    'ParseError',
    'ShapeMismatch',
    'ShapeTooSmall',
    'NonNumericCell',

    # Input
    'Impact',
    'RawTable',
    'DecisionMatrix',
    'ValidatedInput',
    'InputValidator',
    'load_table',
    'validate_input',

    # Engine
    'TOPSISCalculator',
    'TOPSISResult',
    'topsis',

    # Pipeline
    'TopsisRankingPipeline',
    'RankedResult',
    'RankedRow',
    'validate_and_rank',

    # Output
    'OutputManager',
    'create_output_manager',
]
