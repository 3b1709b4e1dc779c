"""
ExplorerDesign: the complete configuration of one explorer recomputation.

Bundles the distribution parameters (EllipticalDesign), the control chart
settings and the density options. Any change means a new design and a full
recomputation; nothing is cached between designs.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike

from pymspc.core.compute.precision import DISTANCE_BINS, KDE_GRID_SIZE, MARGINAL_BINS
from pymspc.core.exceptions import ValidationError
from pymspc.core.validation import check_open_unit, check_positive_int, check_selection
from pymspc.distributions.design import EllipticalDesign
from pymspc.monitoring._statistics import UCLMethod


@dataclass(frozen=True)
class ExplorerDesign:
    """
    Design for a full explorer recomputation.

    Construction:
        ExplorerDesign.from_params([0, 0], [1, 1], [0.5], n=500, alpha=0.05)
    """
    distribution: EllipticalDesign
    alpha: float
    ucl_method: UCLMethod
    kde_vars: tuple[bool, ...]
    marginal_vars: tuple[bool, ...]
    kde_grid_size: int
    marginal_bins: int
    distance_bins: int

    @classmethod
    def from_params(
        cls,
        mean: ArrayLike,
        variances: ArrayLike,
        correlations: ArrayLike = (),
        *,
        n: int = 500,
        alpha: float = 0.05,
        kde_vars=None,
        marginal_vars=None,
        seed: int | np.random.Generator | None = None,
        ucl_method: UCLMethod = 'chisq',
        kde_grid_size: int = KDE_GRID_SIZE,
        marginal_bins: int = MARGINAL_BINS,
        distance_bins: int = DISTANCE_BINS,
    ) -> ExplorerDesign:
        """
        Build and validate an ExplorerDesign.

        Parameters
        ----------
        mean, variances, correlations, n, seed
            See EllipticalDesign.from_params.
        alpha : float
            Control chart significance level in (0, 1).
        kde_vars, marginal_vars : sequence of bool, optional
            One flag per dimension selecting which axes get a KDE curve /
            marginal histogram. Default: all dimensions.
        ucl_method : str
            'chisq' (default) or 'f'.
        kde_grid_size, marginal_bins, distance_bins : int
            Grid intervals for KDE, bins for marginals and for the
            Mahalanobis distance histogram.
        """
        distribution = EllipticalDesign.from_params(
            mean, variances, correlations, n=n, seed=seed,
        )
        p = distribution.p

        alpha = check_open_unit(alpha, "alpha")
        if ucl_method not in ('chisq', 'f'):
            raise ValidationError(
                f"Unknown UCL method: {ucl_method!r}. Must be 'chisq' or 'f'."
            )
        if ucl_method == 'f' and distribution.n <= p:
            raise ValidationError(
                f"F-based UCL requires n > p, got n={distribution.n}, p={p}"
            )

        return cls(
            distribution=distribution,
            alpha=alpha,
            ucl_method=ucl_method,
            kde_vars=check_selection(kde_vars, p, "kde_vars"),
            marginal_vars=check_selection(marginal_vars, p, "marginal_vars"),
            kde_grid_size=check_positive_int(kde_grid_size, "kde_grid_size"),
            marginal_bins=check_positive_int(marginal_bins, "marginal_bins"),
            distance_bins=check_positive_int(distance_bins, "distance_bins"),
        )

    @property
    def p(self) -> int:
        return self.distribution.p

    @property
    def n(self) -> int:
        return self.distribution.n

    def __repr__(self) -> str:
        return (
            f"ExplorerDesign(p={self.p}, n={self.n}, alpha={self.alpha}, "
            f"ucl_method={self.ucl_method!r})"
        )
