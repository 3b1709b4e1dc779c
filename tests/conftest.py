"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_matrix(rng):
    """Random 4x4 symmetric positive definite matrix."""
    A = rng.standard_normal((4, 4))
    return A @ A.T + 4.0 * np.eye(4)


@pytest.fixture
def scenario_a():
    """p=2, unit variances, correlation 0.5."""
    return {
        'mean': np.array([0.0, 0.0]),
        'variances': np.array([1.0, 1.0]),
        'correlations': np.array([0.5]),
        'covariance': np.array([[1.0, 0.5], [0.5, 1.0]]),
    }
