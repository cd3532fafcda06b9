# -*- coding: utf-8 -*-
"""Validate-then-rank orchestration and result containers."""

from .pipeline import (
    TopsisRankingPipeline,
    RankedResult,
    RankedRow,
    format_score,
    validate_and_rank,
)

__all__ = [
    'TopsisRankingPipeline',
    'RankedResult',
    'RankedRow',
    'format_score',
    'validate_and_rank',
]
