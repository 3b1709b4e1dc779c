"""
Explorer solution types.

ExplorerParams carries every artefact of one recomputation: the samples,
covariance and its inverse, per-sample statistics, and the density curves
for the selected dimensions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymspc.core.result import Result
from pymspc.density._common import DensityCurve, HistogramBins

if TYPE_CHECKING:
    from pymspc.explorer.design import ExplorerDesign


@dataclass(frozen=True)
class VariableKDE:
    """KDE of one dimension with its theoretical normal reference curve."""
    variable: str
    index: int
    kde: DensityCurve
    gaussian: DensityCurve


@dataclass(frozen=True)
class VariableMarginal:
    """Marginal histogram of one dimension with the theoretical mean and sd."""
    variable: str
    index: int
    histogram: HistogramBins
    mean: float
    std: float


@dataclass(frozen=True)
class ExplorerParams:
    """Parameter payload for an explorer recomputation."""
    samples: NDArray[np.floating[Any]]
    covariance: NDArray[np.floating[Any]]
    cholesky: NDArray[np.floating[Any]]
    covariance_inverse: NDArray[np.floating[Any]]
    t2: NDArray[np.floating[Any]]
    distances: NDArray[np.floating[Any]]
    ucl: float
    outliers: NDArray[np.bool_]
    kde: tuple[VariableKDE, ...]
    marginals: tuple[VariableMarginal, ...]
    distance_histogram: HistogramBins


@dataclass
class ExplorerSolution:
    """
    User-facing explorer results.

    Wraps Result[ExplorerParams] and provides convenient accessors.
    """
    _result: Result[ExplorerParams]
    _design: 'ExplorerDesign'

    @property
    def samples(self) -> NDArray[np.floating[Any]]:
        """Samples, shape (n, p), in draw order."""
        return self._result.params.samples

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        return self._design.distribution.mean

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        return self._result.params.covariance

    @property
    def cholesky(self) -> NDArray[np.floating[Any]]:
        return self._result.params.cholesky

    @property
    def covariance_inverse(self) -> NDArray[np.floating[Any]]:
        return self._result.params.covariance_inverse

    @property
    def t2(self) -> NDArray[np.floating[Any]]:
        return self._result.params.t2

    @property
    def distances(self) -> NDArray[np.floating[Any]]:
        return self._result.params.distances

    @property
    def ucl(self) -> float:
        return self._result.params.ucl

    @property
    def outliers(self) -> NDArray[np.bool_]:
        return self._result.params.outliers

    @property
    def n_outliers(self) -> int:
        return int(np.sum(self._result.params.outliers))

    @property
    def kde(self) -> tuple[VariableKDE, ...]:
        """One entry per dimension selected in kde_vars, in dimension order."""
        return self._result.params.kde

    @property
    def marginals(self) -> tuple[VariableMarginal, ...]:
        """One entry per dimension selected in marginal_vars."""
        return self._result.params.marginals

    @property
    def distance_histogram(self) -> HistogramBins:
        """Histogram of Mahalanobis distances on [0, max]."""
        return self._result.params.distance_histogram

    @property
    def design(self) -> 'ExplorerDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def is_degenerate(self) -> bool:
        return self._result.is_degenerate

    def table(self) -> tuple[tuple[str, ...], NDArray[np.floating[Any]]]:
        """
        Per-sample table: X1..Xp, T2, Mahalanobis_Distance, Is_Outlier (1/0).
        """
        p = self._design.p
        columns = tuple(f"X{i + 1}" for i in range(p)) + (
            "T2", "Mahalanobis_Distance", "Is_Outlier",
        )
        rows = np.column_stack([
            self.samples,
            self.t2,
            self.distances,
            self.outliers.astype(np.float64),
        ])
        return columns, rows

    def summary(self) -> str:
        """Human-readable summary of the recomputation."""
        d = self._design
        lines = [
            f"Elliptical distribution explorer: p={d.p}, n={d.n}",
            f"  mean: {np.array2string(self.mean, precision=4)}",
            "  covariance:",
        ]
        for row in self.covariance:
            lines.append(f"    {np.array2string(row, precision=4)}")
        lines.append(
            f"  UCL ({d.ucl_method}, alpha={d.alpha}): {self.ucl:.4f}, "
            f"outliers: {self.n_outliers}/{d.n}"
        )
        for entry in self.marginals:
            lines.append(f"  {entry.variable}: mu={entry.mean:.3f}, sigma={entry.std:.3f}")
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        flag = ", degenerate" if self.is_degenerate else ""
        return (
            f"ExplorerSolution(n={self._design.n}, p={self._design.p}, "
            f"ucl={self.ucl:.4f}, n_outliers={self.n_outliers}{flag})"
        )
