"""
Elliptical distribution explorer.

One call performs the full recomputation a viewer needs after any
parameter change: covariance, samples, Hotelling T2 with UCL and outlier
flags, per-dimension KDE and marginal histograms, and the Mahalanobis
distance histogram.

Public API:
    explore(mean, variances, correlations, ...) -> ExplorerSolution
"""

from pymspc.explorer.design import ExplorerDesign
from pymspc.explorer.solution import (
    ExplorerParams,
    ExplorerSolution,
    VariableKDE,
    VariableMarginal,
)
from pymspc.explorer.solvers import explore

__all__ = [
    "explore",
    "ExplorerDesign",
    "ExplorerParams",
    "ExplorerSolution",
    "VariableKDE",
    "VariableMarginal",
]
