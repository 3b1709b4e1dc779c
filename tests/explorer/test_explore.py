"""
End-to-end tests for the explorer pipeline.

explore() covers a whole recomputation: covariance, Cholesky, sampling,
inverse, T2, UCL, outlier flags and the density curves.
"""

import numpy as np
import pytest

from pymspc import explore
from pymspc.core.exceptions import DegenerateMatrixWarning, DimensionError, ValidationError
from pymspc.density import silverman_bandwidth
from pymspc.explorer import ExplorerDesign
from pymspc.monitoring import hotelling


@pytest.fixture
def solution(scenario_a):
    return explore(
        scenario_a['mean'], scenario_a['variances'], scenario_a['correlations'],
        n=500, alpha=0.05, seed=42,
    )


# ═══════════════════════════════════════════════════════════════════════
# Matrices and statistics
# ═══════════════════════════════════════════════════════════════════════


class TestPipeline:

    def test_scenario_a_matrices(self, solution):
        np.testing.assert_allclose(solution.covariance, [[1.0, 0.5], [0.5, 1.0]])
        np.testing.assert_allclose(
            solution.cholesky, [[1.0, 0.0], [0.5, np.sqrt(0.75)]], atol=1e-12,
        )
        np.testing.assert_allclose(
            solution.covariance_inverse,
            [[4 / 3, -2 / 3], [-2 / 3, 4 / 3]], atol=1e-12,
        )

    def test_scenario_b_ucl(self, solution):
        assert solution.ucl == pytest.approx(5.99, abs=0.1)

    def test_per_sample_arrays(self, solution):
        assert solution.samples.shape == (500, 2)
        assert solution.t2.shape == (500,)
        np.testing.assert_allclose(solution.distances ** 2, solution.t2, rtol=1e-12)
        np.testing.assert_array_equal(solution.outliers, solution.t2 > solution.ucl)
        assert solution.n_outliers == solution.info['n_outliers']

    def test_agrees_with_hotelling(self, solution):
        direct = hotelling(solution.samples, solution.mean, solution.covariance)
        np.testing.assert_array_equal(direct.t2, solution.t2)
        assert direct.ucl == solution.ucl

    def test_seed_reproducibility(self):
        a = explore([0, 0], [1, 1], [0.5], n=100, seed=7)
        b = explore([0, 0], [1, 1], [0.5], n=100, seed=7)
        np.testing.assert_array_equal(a.samples, b.samples)
        np.testing.assert_array_equal(a.t2, b.t2)

    def test_f_method(self):
        sol = explore([0, 0, 0], [1, 2, 3], n=50, seed=0, ucl_method='f')
        assert sol.info['ucl_method'] == 'f'
        assert sol.ucl > explore([0, 0, 0], [1, 2, 3], n=50, seed=0).ucl

    def test_one_dimension(self):
        sol = explore([2.0], [4.0], n=200, seed=3)
        assert sol.samples.shape == (200, 1)
        np.testing.assert_allclose(sol.t2, ((sol.samples[:, 0] - 2.0) / 2.0) ** 2)

    def test_timing_and_backend(self, solution):
        assert solution.backend_name == 'cpu_explorer'
        for key in ('total_seconds', 'sampling.cholesky', 'monitoring.inverse', 'kde'):
            assert key in solution.timing


# ═══════════════════════════════════════════════════════════════════════
# Densities
# ═══════════════════════════════════════════════════════════════════════


class TestDensities:

    def test_kde_for_every_dimension_by_default(self, solution):
        assert [entry.variable for entry in solution.kde] == ['X1', 'X2']
        for entry in solution.kde:
            assert len(entry.kde) == 101
            assert entry.kde.integral() == pytest.approx(1.0, abs=0.05)
            np.testing.assert_array_equal(entry.gaussian.x, entry.kde.x)

    def test_kde_uses_theoretical_sigma(self):
        sol = explore([0, 0], [4.0, 1.0], n=300, seed=1)
        assert sol.kde[0].kde.bandwidth == pytest.approx(silverman_bandwidth(2.0, 300))
        assert sol.kde[1].kde.bandwidth == pytest.approx(silverman_bandwidth(1.0, 300))

    def test_selections(self):
        sol = explore([0, 0, 0], [1, 1, 1], n=100, seed=0,
                      kde_vars=[False, True, False],
                      marginal_vars=[True, False, True])
        assert [entry.index for entry in sol.kde] == [1]
        assert [entry.variable for entry in sol.marginals] == ['X1', 'X3']

    def test_marginals(self, solution):
        for entry in solution.marginals:
            assert len(entry.histogram) == 30
            assert entry.histogram.integral() == pytest.approx(1.0)
            assert entry.mean == 0.0
            assert entry.std == pytest.approx(1.0)

    def test_distance_histogram(self, solution):
        hist = solution.distance_histogram
        assert len(hist) == 40
        assert hist.lower == 0.0
        assert hist.edges[-1] == pytest.approx(np.max(solution.distances))
        assert hist.counts.sum() == 500

    def test_custom_resolution(self):
        sol = explore([0, 0], [1, 1], n=100, seed=0,
                      kde_grid_size=20, marginal_bins=10, distance_bins=5)
        assert len(sol.kde[0].kde) == 21
        assert len(sol.marginals[0].histogram) == 10
        assert len(sol.distance_histogram) == 5

    def test_zero_variance_dimension(self):
        with pytest.warns(DegenerateMatrixWarning):
            sol = explore([1.0, 0.0], [0.0, 1.0], n=50, seed=0)
        np.testing.assert_array_equal(sol.samples[:, 0], 1.0)
        assert sol.kde[0].kde.is_empty
        assert sol.marginals[0].histogram.is_empty
        assert not sol.kde[1].kde.is_empty


# ═══════════════════════════════════════════════════════════════════════
# Degenerate input and reporting
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerate:

    def test_invalid_correlation_warns_and_completes(self):
        with pytest.warns(DegenerateMatrixWarning):
            sol = explore([0, 0], [1, 1], [1.5], n=100, seed=0)
        assert sol.is_degenerate
        assert sol.info['cholesky_clamped'] == (1,)
        assert np.all(np.isfinite(sol.t2))
        assert "degenerate" in repr(sol)

    def test_healthy_input_not_degenerate(self, solution):
        assert not solution.is_degenerate
        assert solution.warnings == ()


class TestReporting:

    def test_table(self, solution):
        columns, rows = solution.table()
        assert columns == ('X1', 'X2', 'T2', 'Mahalanobis_Distance', 'Is_Outlier')
        assert rows.shape == (500, 5)
        assert rows[:, 4].sum() == solution.n_outliers

    def test_summary(self, solution):
        text = solution.summary()
        assert "p=2, n=500" in text
        assert "UCL (chisq" in text

    def test_verbose(self, capsys):
        explore([0, 0], [1, 1], n=10, seed=0, verbose=True)
        out = capsys.readouterr().out
        assert "Explorer: p=2, n=10" in out
        assert "UCL:" in out

    def test_quiet_by_default(self, capsys):
        explore([0, 0], [1, 1], n=10, seed=0)
        assert capsys.readouterr().out == ""


class TestExplorerDesign:

    def test_design_input(self):
        design = ExplorerDesign.from_params([0, 0], [1, 1], [0.2], n=30, seed=5)
        sol = explore(design)
        assert sol.design is design
        assert sol.samples.shape == (30, 2)

    def test_selection_length(self):
        with pytest.raises(DimensionError):
            ExplorerDesign.from_params([0, 0], [1, 1], kde_vars=[True])

    def test_f_method_needs_more_samples(self):
        with pytest.raises(ValidationError, match="n > p"):
            ExplorerDesign.from_params([0, 0, 0], [1, 1, 1], n=3, ucl_method='f')

    def test_bad_alpha(self):
        with pytest.raises(ValidationError):
            explore([0, 0], [1, 1], alpha=1.0)

    def test_missing_variances(self):
        with pytest.raises(TypeError):
            explore([0, 0])
