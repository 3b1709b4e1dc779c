"""
Common data structures for density estimation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class DensityCurve:
    """
    Density evaluated on an ordered grid.

    x and density have equal length; both are empty for degenerate input.
    bandwidth is None for curves that are not kernel estimates.
    """
    x: NDArray[np.floating[Any]]
    density: NDArray[np.floating[Any]]
    bandwidth: float | None = None

    def __len__(self) -> int:
        return self.x.shape[0]

    @property
    def is_empty(self) -> bool:
        return self.x.shape[0] == 0

    @property
    def grid_step(self) -> float:
        """Spacing of the (equally spaced) grid; 0.0 for fewer than 2 points."""
        if self.x.shape[0] < 2:
            return 0.0
        return float(self.x[1] - self.x[0])

    def integral(self) -> float:
        """Riemann sum of density * grid step."""
        return float(np.sum(self.density) * self.grid_step)

    @classmethod
    def empty(cls, bandwidth: float | None = None) -> DensityCurve:
        return cls(x=np.empty(0), density=np.empty(0), bandwidth=bandwidth)


@dataclass(frozen=True)
class HistogramBins:
    """
    Equal-width histogram normalized to a density.

    centers:  bin midpoints, shape (bins,)
    density:  count / (n * bin_width), shape (bins,)
    counts:   raw counts, shape (bins,)
    """
    centers: NDArray[np.floating[Any]]
    density: NDArray[np.floating[Any]]
    counts: NDArray[np.integer[Any]]
    bin_width: float
    lower: float

    def __len__(self) -> int:
        return self.centers.shape[0]

    @property
    def is_empty(self) -> bool:
        return self.centers.shape[0] == 0

    @property
    def edges(self) -> NDArray[np.floating[Any]]:
        """Bin edges, shape (bins + 1,)."""
        return self.lower + self.bin_width * np.arange(len(self) + 1)

    def integral(self) -> float:
        """Sum of density * bin_width; 1 for any non-empty histogram."""
        return float(np.sum(self.density) * self.bin_width)

    @classmethod
    def empty(cls) -> HistogramBins:
        return cls(
            centers=np.empty(0),
            density=np.empty(0),
            counts=np.empty(0, dtype=np.int64),
            bin_width=0.0,
            lower=0.0,
        )
