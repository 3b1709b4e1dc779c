"""
Tests for build_covariance and pair_index.
"""

import numpy as np
import pytest

from pymspc.core.exceptions import DimensionError
from pymspc.distributions import build_covariance, n_pairs, pair_index


class TestPairIndex:

    def test_p2(self):
        assert pair_index(0, 1, 2) == 0

    def test_p3_order(self):
        assert [pair_index(0, 1, 3), pair_index(0, 2, 3), pair_index(1, 2, 3)] == [0, 1, 2]

    def test_row_major_enumeration(self):
        p = 6
        indices = [pair_index(i, j, p) for i in range(p) for j in range(i + 1, p)]
        assert indices == list(range(n_pairs(p)))

    def test_invalid_pair(self):
        with pytest.raises(DimensionError):
            pair_index(1, 1, 3)
        with pytest.raises(DimensionError):
            pair_index(0, 3, 3)


class TestBuildCovariance:

    def test_scenario_a(self, scenario_a):
        cov = build_covariance(scenario_a['variances'], scenario_a['correlations'])
        np.testing.assert_allclose(cov, scenario_a['covariance'])

    def test_round_trip_off_diagonal(self):
        cov = build_covariance([2.0, 3.0], [0.4], 2)
        assert cov[0, 1] == pytest.approx(0.4 * np.sqrt(6.0))
        assert cov[0, 1] == pytest.approx(0.9798, abs=1e-4)

    def test_symmetric(self):
        cov = build_covariance([1.0, 4.0, 9.0], [0.1, -0.2, 0.3])
        np.testing.assert_array_equal(cov, cov.T)

    def test_p3_pair_placement(self):
        cov = build_covariance([1.0, 4.0, 9.0], [0.1, -0.2, 0.3])
        assert cov[0, 1] == pytest.approx(0.1 * 2.0)
        assert cov[0, 2] == pytest.approx(-0.2 * 3.0)
        assert cov[1, 2] == pytest.approx(0.3 * 6.0)
        np.testing.assert_allclose(np.diag(cov), [1.0, 4.0, 9.0])

    def test_missing_correlations_are_zero(self):
        cov = build_covariance([1.0, 1.0, 1.0], [0.5])
        assert cov[0, 1] == 0.5
        assert cov[0, 2] == 0.0
        assert cov[1, 2] == 0.0

    def test_one_dimension(self):
        np.testing.assert_array_equal(build_covariance([2.5]), [[2.5]])

    def test_out_of_range_correlation_accepted(self):
        cov = build_covariance([1.0, 1.0], [1.5])
        assert cov[0, 1] == 1.5
        assert np.min(np.linalg.eigvalsh(cov)) < 0

    def test_too_many_correlations(self):
        with pytest.raises(DimensionError, match="only 1 pairs"):
            build_covariance([1.0, 1.0], [0.1, 0.2])

    def test_explicit_p_mismatch(self):
        with pytest.raises(DimensionError):
            build_covariance([1.0, 1.0], [0.1], p=3)
