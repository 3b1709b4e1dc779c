"""
PyMSPC: multivariate statistical process control on elliptical distributions.

A dimension-agnostic engine for exploring multivariate normal data:
correlated sampling, Hotelling T2 monitoring and density estimation.

Submodules:
    distributions: Covariance construction, quantiles, seeded sampling
    monitoring: Mahalanobis distance, Hotelling T2, control limits
    density: Gaussian KDE and density-normalized histograms
    explorer: Full recomputation pipeline over one configuration
"""

__version__ = "0.1.0"

from pymspc import distributions
from pymspc import monitoring
from pymspc import density
from pymspc import explorer
from pymspc.explorer import explore

__all__ = [
    "__version__",
    "distributions",
    "monitoring",
    "density",
    "explorer",
    "explore",
]
