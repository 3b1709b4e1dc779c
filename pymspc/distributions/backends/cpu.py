"""
CPU backend for multivariate normal sampling.

Box-Muller variates correlated through the clamped Cholesky factor.
"""

from __future__ import annotations

from pymspc.core.result import Result
from pymspc.core.compute.timing import Timer
from pymspc.core.compute.linalg import cholesky
from pymspc.core.diagnostics import cholesky_warning, correlation_warning
from pymspc.distributions._covariance import build_covariance
from pymspc.distributions._sampling import as_generator, sample_mvn
from pymspc.distributions.design import EllipticalDesign
from pymspc.distributions.solution import SamplingParams


class CPUSamplingBackend:
    """CPU backend for multivariate normal sampling."""

    @property
    def name(self) -> str:
        return 'cpu_box_muller'

    def solve(self, design: EllipticalDesign) -> Result[SamplingParams]:
        """Build covariance, factor it once, draw design.n samples."""
        timer = Timer()
        timer.start()

        warnings_list: list[str] = []

        msg = correlation_warning(design.correlations)
        if msg is not None:
            warnings_list.append(msg)

        with timer.section('covariance'):
            cov = build_covariance(design.variances, design.correlations, design.p)

        with timer.section('cholesky'):
            chol = cholesky(cov)
        msg = cholesky_warning(chol)
        if msg is not None:
            warnings_list.append(msg)

        with timer.section('sampling'):
            rng = as_generator(design.seed)
            samples = sample_mvn(design.mean, chol.L, design.n, rng)

        timer.stop()

        return Result(
            params=SamplingParams(samples=samples, covariance=cov, cholesky=chol.L),
            info={
                'p': design.p,
                'n': design.n,
                'cholesky_clamped': chol.clamped,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
