"""
Tests for Box-Muller variates, sample_mvn and the rmvnorm solver.

Verifies seed reproducibility, the exact draw sequence, moment recovery
and graceful degradation on non-PD covariances.
"""

import warnings

import numpy as np
import pytest

from pymspc.core.exceptions import DegenerateMatrixWarning, DimensionError, ValidationError
from pymspc.core.compute.linalg import cholesky
from pymspc.distributions import (
    EllipticalDesign,
    build_covariance,
    rmvnorm,
    sample_multivariate_normal,
    sample_mvn,
    standard_normal,
)


class ZeroRNG:
    """Uniform source that always returns 0."""

    def random(self, shape):
        return np.zeros(shape)


# ---------------------------------------------------------------------------
# standard_normal
# ---------------------------------------------------------------------------

class TestStandardNormal:

    def test_scalar_is_float(self, rng):
        assert isinstance(standard_normal(rng), float)

    def test_box_muller_formula(self):
        u = np.random.default_rng(3).random((5, 2))
        expected = np.sqrt(-2.0 * np.log(u[:, 0])) * np.cos(2.0 * np.pi * u[:, 1])
        z = standard_normal(np.random.default_rng(3), 5)
        np.testing.assert_allclose(z, expected, rtol=1e-12)

    def test_vectorized_matches_scalar_sequence(self):
        rng = np.random.default_rng(7)
        scalars = [standard_normal(rng) for _ in range(6)]
        vector = standard_normal(np.random.default_rng(7), (3, 2))
        np.testing.assert_allclose(vector.ravel(), scalars, rtol=1e-12)

    def test_zero_uniform_is_clamped(self):
        z = standard_normal(ZeroRNG(), 4)
        assert np.all(np.isfinite(z))
        assert np.all(z > 0)

    def test_moments(self):
        z = standard_normal(np.random.default_rng(0), 200_000)
        assert np.mean(z) == pytest.approx(0.0, abs=0.01)
        assert np.var(z) == pytest.approx(1.0, abs=0.01)


# ---------------------------------------------------------------------------
# sample_mvn
# ---------------------------------------------------------------------------

class TestSampleMVN:

    def test_exact_sequence(self, scenario_a):
        L = cholesky(scenario_a['covariance']).L
        mean = np.array([1.0, -2.0])
        x = sample_mvn(mean, L, 10, np.random.default_rng(11))

        z = standard_normal(np.random.default_rng(11), (10, 2))
        expected = np.array([L @ zi + mean for zi in z])
        np.testing.assert_allclose(x, expected, rtol=1e-12, atol=1e-12)

    def test_moments_recovered(self):
        cov = build_covariance([1.0, 4.0, 0.25], [0.3, -0.5, 0.2])
        mean = np.array([1.0, 2.0, 3.0])
        L = cholesky(cov).L
        x = sample_mvn(mean, L, 50_000, np.random.default_rng(5))
        np.testing.assert_allclose(x.mean(axis=0), mean, atol=0.05)
        np.testing.assert_allclose(np.cov(x, rowvar=False), cov, atol=0.05)

    def test_zero_variance_dimension_is_constant(self):
        cov = build_covariance([0.0, 1.0])
        L = cholesky(cov).L
        x = sample_mvn([5.0, 0.0], L, 100, np.random.default_rng(1))
        np.testing.assert_array_equal(x[:, 0], 5.0)


class TestSampleMultivariateNormal:

    def test_factors_covariance_once(self, scenario_a):
        L = cholesky(scenario_a['covariance']).L
        x = sample_multivariate_normal([1.0, -2.0], scenario_a['covariance'], 25, seed=4)
        expected = sample_mvn([1.0, -2.0], L, 25, np.random.default_rng(4))
        np.testing.assert_array_equal(x, expected)

    def test_matches_rmvnorm(self):
        sol = rmvnorm([0.5, 1.0], [2.0, 3.0], [0.4], n=40, seed=9)
        x = sample_multivariate_normal(sol.mean, sol.covariance, 40, seed=9)
        np.testing.assert_array_equal(x, sol.samples)

    def test_moments_recovered(self):
        cov = np.array([[2.0, -0.6], [-0.6, 0.5]])
        x = sample_multivariate_normal([3.0, -1.0], cov, 50_000, seed=2)
        np.testing.assert_allclose(x.mean(axis=0), [3.0, -1.0], atol=0.05)
        np.testing.assert_allclose(np.cov(x, rowvar=False), cov, atol=0.05)

    def test_non_pd_covariance_still_samples(self):
        x = sample_multivariate_normal([0.0, 0.0], [[1.0, 2.0], [2.0, 1.0]], 10, seed=0)
        assert x.shape == (10, 2)
        assert np.all(np.isfinite(x))

    def test_covariance_must_match_mean(self):
        with pytest.raises(DimensionError):
            sample_multivariate_normal([0.0, 0.0], np.eye(3), 10)

    def test_covariance_must_be_square(self):
        with pytest.raises(DimensionError):
            sample_multivariate_normal([0.0, 0.0], np.zeros((2, 3)), 10)

    def test_rejects_bad_n(self):
        with pytest.raises(ValidationError):
            sample_multivariate_normal([0.0], [[1.0]], 0)


# ---------------------------------------------------------------------------
# rmvnorm
# ---------------------------------------------------------------------------

class TestRmvnorm:

    def test_shapes(self, scenario_a):
        sol = rmvnorm(scenario_a['mean'], scenario_a['variances'],
                      scenario_a['correlations'], n=500, seed=42)
        assert sol.samples.shape == (500, 2)
        np.testing.assert_allclose(sol.covariance, scenario_a['covariance'])
        np.testing.assert_allclose(sol.cholesky @ sol.cholesky.T, sol.covariance)
        assert sol.backend_name == 'cpu_box_muller'
        assert not sol.is_degenerate

    def test_seed_reproducibility(self):
        s1 = rmvnorm([0, 0], [1, 2], [0.3], n=100, seed=42)
        s2 = rmvnorm([0, 0], [1, 2], [0.3], n=100, seed=42)
        np.testing.assert_array_equal(s1.samples, s2.samples)

    def test_different_seeds_differ(self):
        s1 = rmvnorm([0, 0], [1, 1], n=50, seed=1)
        s2 = rmvnorm([0, 0], [1, 1], n=50, seed=2)
        assert not np.array_equal(s1.samples, s2.samples)

    def test_generator_accepted(self):
        sol = rmvnorm([0.0], [1.0], n=10, seed=np.random.default_rng(3))
        assert sol.samples.shape == (10, 1)

    def test_design_input(self):
        design = EllipticalDesign.from_params([1.0, 2.0, 3.0], [1, 1, 1], n=20, seed=0)
        sol = rmvnorm(design)
        assert sol.samples.shape == (20, 3)
        np.testing.assert_array_equal(sol.mean, [1.0, 2.0, 3.0])

    def test_timing_sections(self):
        sol = rmvnorm([0, 0], [1, 1], n=10, seed=0)
        assert {'total_seconds', 'covariance', 'cholesky', 'sampling'} <= set(sol.timing)

    def test_non_pd_warns_but_returns(self):
        with pytest.warns(DegenerateMatrixWarning):
            sol = rmvnorm([0, 0, 0], [1, 1, 1], [0.9, 0.9, -0.9], n=50, seed=0)
        assert sol.is_degenerate
        assert sol.info['cholesky_clamped'] == (2,)
        assert np.all(np.isfinite(sol.samples))

    def test_out_of_range_correlation_warns(self):
        with pytest.warns(DegenerateMatrixWarning, match="outside"):
            sol = rmvnorm([0, 0], [1, 1], [1.5], n=10, seed=0)
        assert sol.info['cholesky_clamped'] == (1,)

    def test_valid_input_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            rmvnorm([0, 0], [1, 1], [0.99], n=10, seed=0)

    def test_missing_variances(self):
        with pytest.raises(TypeError):
            rmvnorm([0, 0])


class TestEllipticalDesignValidation:

    def test_negative_variance(self):
        with pytest.raises(ValidationError, match="negative"):
            EllipticalDesign.from_params([0, 0], [1, -1])

    def test_variance_length(self):
        with pytest.raises(DimensionError):
            EllipticalDesign.from_params([0, 0], [1, 1, 1])

    def test_too_many_correlations(self):
        with pytest.raises(DimensionError):
            EllipticalDesign.from_params([0, 0], [1, 1], [0.1, 0.2, 0.3])

    def test_zero_dimension(self):
        with pytest.raises(DimensionError):
            EllipticalDesign.from_params([], [])

    @pytest.mark.parametrize("n", [0, -5])
    def test_bad_n(self, n):
        with pytest.raises(ValidationError):
            EllipticalDesign.from_params([0], [1], n=n)

    def test_non_finite_mean(self):
        with pytest.raises(ValidationError, match="non-finite"):
            EllipticalDesign.from_params([np.nan, 0], [1, 1])

    def test_bad_seed(self):
        with pytest.raises(ValidationError, match="seed"):
            EllipticalDesign.from_params([0], [1], seed="abc")

    def test_arrays_read_only(self):
        design = EllipticalDesign.from_params([0, 0], [1, 1], [0.5])
        with pytest.raises(ValueError):
            design.mean[0] = 1.0

    def test_repr(self):
        design = EllipticalDesign.from_params([0, 0], [1, 1], n=10, seed=3)
        assert repr(design) == "EllipticalDesign(p=2, n=10, seed=3)"
