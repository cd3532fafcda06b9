"""
Pytest configuration and fixtures for topsis-rank tests.
"""
import pytest
import numpy as np

from topsis_rank.config import reset_config
from topsis_rank.data_loader import DecisionMatrix, Impact


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def phone_table():
    """Header + 5 phones scored on price (cost), storage, camera, looks."""
    return [
        ["Model", "Price", "Storage", "Camera", "Looks"],
        ["M1", "250", "16", "12", "5"],
        ["M2", "200", "16", "8", "3"],
        ["M3", "300", "32", "16", "4"],
        ["M4", "275", "32", "8", "4"],
        ["M5", "225", "16", "16", "2"],
    ]


@pytest.fixture
def correlated_table():
    """Three alternatives, perfectly correlated benefit criteria."""
    return [
        ["Name", "C1", "C2"],
        ["A", 1, 1],
        ["B", 2, 2],
        ["C", 3, 3],
    ]


@pytest.fixture
def random_matrix():
    """8 alternatives × 4 strictly positive criteria."""
    rng = np.random.RandomState(42)
    values = rng.rand(8, 4) + 0.1
    return DecisionMatrix(
        values,
        alternatives=tuple(f"A{i}" for i in range(8)),
        criteria=("C1", "C2", "C3", "C4"),
    )


@pytest.fixture
def mixed_impacts():
    return (Impact.BENEFIT, Impact.COST, Impact.BENEFIT, Impact.COST)

