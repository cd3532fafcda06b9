# -*- coding: utf-8 -*-
"""
Multi-Criteria Decision Making Module
=====================================

Usage
-----
>>> from topsis_rank.mcdm import TOPSISCalculator, topsis
"""

from .topsis import TOPSISCalculator, TOPSISResult, topsis


__all__ = [
    'TOPSISCalculator', 'TOPSISResult', 'topsis',
]
