"""
Non-parametric density estimation.

Public API:
    kde(data, bandwidth, grid_size)     - Gaussian KDE on [min, max]
    histogram(data, bins, lower)        - Density-normalized histogram
    silverman_bandwidth(std, n)         - 1.06 * std * n^(-1/5)
    normal_pdf_curve(x, mean, std)      - Theoretical normal reference curve
"""

from pymspc.density._common import DensityCurve, HistogramBins
from pymspc.density._histogram import histogram
from pymspc.density._kde import kde, normal_pdf_curve, silverman_bandwidth

__all__ = [
    "kde",
    "histogram",
    "silverman_bandwidth",
    "normal_pdf_curve",
    "DensityCurve",
    "HistogramBins",
]
