# -*- coding: utf-8 -*-
"""
TOPSIS Implementation
=====================

Technique for Order Preference by Similarity to Ideal Solution.

Mathematical Steps:
1. Vector-normalize every criterion column by its Euclidean norm
2. Multiply each normalized column by its weight
3. Pick ideal (best) and anti-ideal (worst) values per column by impact
4. Euclidean distance of each alternative to both points
5. Closeness C_i = D-_i / (D+_i + D-_i), rank by C descending
"""

import numpy as np
import pandas as pd
from typing import Optional, Sequence, Tuple, Union
from dataclasses import dataclass

from ..config import Config, TOPSISConfig, get_config
from ..data_loader import DecisionMatrix, Impact
from ..logger import get_module_logger

logger = get_module_logger('mcdm.topsis')


def _euclidean_norm(a: np.ndarray, axis: int) -> np.ndarray:
    """
    Euclidean norm along ``axis`` without overflow or underflow.

    Values are divided by their largest magnitude before squaring, so any
    finite input gives a finite norm that is zero only for all-zero data.
    """
    scale = np.abs(a).max(axis=axis, keepdims=True)
    scale[scale == 0] = 1
    return np.squeeze(scale, axis=axis) * np.sqrt(((a / scale) ** 2).sum(axis=axis))


@dataclass
class TOPSISResult:
    """Result container for TOPSIS calculation."""
    scores: pd.Series                    # Closeness coefficients, full precision
    ranks: pd.Series                     # 1 = best, a permutation of 1..N
    d_positive: pd.Series                # Distance to ideal
    d_negative: pd.Series                # Distance to anti-ideal
    normalized_matrix: pd.DataFrame      # Vector-normalized matrix
    weighted_matrix: pd.DataFrame        # Weighted normalized matrix
    ideal_solution: pd.Series            # Ideal solution values
    anti_ideal_solution: pd.Series       # Anti-ideal solution values
    weights: np.ndarray                  # Weights used

    def top_n(self, n: int = 10) -> pd.DataFrame:
        """Get top n alternatives."""
        return pd.DataFrame({
            'Score': self.scores,
            'Rank': self.ranks
        }).nsmallest(n, 'Rank')

    def bottom_n(self, n: int = 10) -> pd.DataFrame:
        """Get bottom n alternatives."""
        return pd.DataFrame({
            'Score': self.scores,
            'Rank': self.ranks
        }).nlargest(n, 'Rank')


class TOPSISCalculator:
    """
    Standard TOPSIS calculator with vector normalization.

    Parameters
    ----------
    degenerate_score : float
        Score assigned when an alternative coincides with both the ideal and
        the anti-ideal point (D+ = D- = 0), which happens for a single row or
        when every column is constant.

    Notes
    -----
    A criterion column whose values are all zero has a zero norm. Its norm is
    taken as 1, so the column normalizes to zeros and adds nothing to either
    distance.

    Ties in closeness keep input order: the earlier row gets the better rank,
    and every row gets a distinct rank.

    Examples
    --------
    >>> import numpy as np
    >>> from topsis_rank.data_loader import DecisionMatrix, Impact
    >>> matrix = DecisionMatrix(np.array([[1., 1.], [2., 2.], [3., 3.]]),
    ...                         alternatives=('A', 'B', 'C'),
    ...                         criteria=('C1', 'C2'))
    >>> calc = TOPSISCalculator()
    >>> result = calc.calculate(matrix, [1, 1], [Impact.BENEFIT] * 2)
    >>> result.ranks.tolist()
    [3, 2, 1]
    """

    def __init__(self, degenerate_score: Optional[float] = None,
                 config: Optional[Union[Config, TOPSISConfig]] = None):
        if isinstance(config, Config):
            config = config.topsis
        config = config or get_config().topsis
        self.degenerate_score = (config.degenerate_score
                                 if degenerate_score is None else degenerate_score)

    def calculate(self,
                  matrix: DecisionMatrix,
                  weights: Sequence[float],
                  impacts: Sequence[Impact]) -> TOPSISResult:
        """
        Calculate TOPSIS scores and rankings.

        Parameters
        ----------
        matrix : DecisionMatrix
            Decision matrix (alternatives × criteria)
        weights : sequence of float
            One weight per criterion
        impacts : sequence of Impact
            One direction per criterion

        Returns
        -------
        TOPSISResult
            Complete TOPSIS results
        """
        X = matrix.values
        w = np.asarray(weights, dtype=float)
        index = pd.RangeIndex(matrix.n_alternatives)
        columns = list(matrix.criteria)

        # Step 1: Normalize
        norm_matrix = self._normalize(X)

        # Step 2: Apply weights
        weighted_matrix = norm_matrix * w

        # Step 3: Determine ideal solutions
        ideal, anti_ideal = self._get_ideal_solutions(weighted_matrix, impacts)

        # Step 4: Calculate distances
        d_pos = self._calculate_distance(weighted_matrix, ideal)
        d_neg = self._calculate_distance(weighted_matrix, anti_ideal)

        # Step 5: Calculate closeness coefficient
        scores = self._closeness(d_pos, d_neg)

        # Step 6: Rank
        ranks = self._rank(scores)

        logger.debug(f"TOPSIS on {X.shape[0]}x{X.shape[1]} matrix, "
                     f"best row {int(np.argmin(ranks))}")

        return TOPSISResult(
            scores=pd.Series(scores, index=index, name='TOPSIS_Score'),
            ranks=pd.Series(ranks, index=index, name='TOPSIS_Rank'),
            d_positive=pd.Series(d_pos, index=index, name='D_Positive'),
            d_negative=pd.Series(d_neg, index=index, name='D_Negative'),
            normalized_matrix=pd.DataFrame(norm_matrix, index=index, columns=columns),
            weighted_matrix=pd.DataFrame(weighted_matrix, index=index, columns=columns),
            ideal_solution=pd.Series(ideal, index=columns, name='Ideal'),
            anti_ideal_solution=pd.Series(anti_ideal, index=columns, name='Anti_Ideal'),
            weights=w,
        )

    def _normalize(self, X: np.ndarray) -> np.ndarray:
        """Vector-normalize each column by its Euclidean norm."""
        norm = _euclidean_norm(X, axis=0)
        norm[norm == 0] = 1
        return X / norm

    def _get_ideal_solutions(self, weighted: np.ndarray,
                             impacts: Sequence[Impact]
                             ) -> Tuple[np.ndarray, np.ndarray]:
        """Determine ideal and anti-ideal solutions."""
        col_max = weighted.max(axis=0)
        col_min = weighted.min(axis=0)
        benefit = np.array([impact is Impact.BENEFIT for impact in impacts])

        ideal = np.where(benefit, col_max, col_min)
        anti_ideal = np.where(benefit, col_min, col_max)
        return ideal, anti_ideal

    def _calculate_distance(self, weighted: np.ndarray,
                            reference: np.ndarray) -> np.ndarray:
        """Calculate Euclidean distance to reference point."""
        return _euclidean_norm(weighted - reference, axis=1)

    def _closeness(self, d_pos: np.ndarray, d_neg: np.ndarray) -> np.ndarray:
        total = d_pos + d_neg
        scores = np.full_like(total, self.degenerate_score, dtype=float)
        np.divide(d_neg, total, out=scores, where=total > 0)
        return scores

    def _rank(self, scores: np.ndarray) -> np.ndarray:
        """Ordinal 1..N ranking, best first, ties in input order."""
        order = np.argsort(-scores, kind='stable')
        ranks = np.empty(len(scores), dtype=int)
        ranks[order] = np.arange(1, len(scores) + 1)
        return ranks


def topsis(matrix: DecisionMatrix,
           weights: Sequence[float],
           impacts: Sequence[Impact],
           config: Optional[Config] = None) -> TOPSISResult:
    """Convenience function for TOPSIS on validated inputs."""
    calc = TOPSISCalculator(config=config)
    return calc.calculate(matrix, weights, impacts)
