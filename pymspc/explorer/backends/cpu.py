"""
CPU backend for the explorer pipeline.

Runs the sampling and monitoring backends in sequence and derives the
density curves from their outputs:

    covariance -> cholesky -> samples -> inverse -> T2 -> UCL -> densities
"""

from __future__ import annotations

import math

from pymspc.core.result import Result
from pymspc.core.compute.timing import Timer
from pymspc.density._histogram import histogram
from pymspc.density._kde import kde, normal_pdf_curve, silverman_bandwidth
from pymspc.distributions.backends.cpu import CPUSamplingBackend
from pymspc.explorer.design import ExplorerDesign
from pymspc.explorer.solution import ExplorerParams, VariableKDE, VariableMarginal
from pymspc.monitoring.backends.cpu import CPUMonitoringBackend
from pymspc.monitoring.design import MonitoringDesign


class CPUExplorerBackend:
    """CPU backend composing sampling, monitoring and density estimation."""

    @property
    def name(self) -> str:
        return 'cpu_explorer'

    def solve(self, design: ExplorerDesign) -> Result[ExplorerParams]:
        timer = Timer()
        timer.start()

        sampling = CPUSamplingBackend().solve(design.distribution)
        samples = sampling.params.samples
        covariance = sampling.params.covariance

        monitoring = CPUMonitoringBackend().solve(
            MonitoringDesign.from_arrays(
                samples,
                design.distribution.mean,
                covariance,
                alpha=design.alpha,
                ucl_method=design.ucl_method,
            )
        )
        stats = monitoring.params

        n = design.n
        mean = design.distribution.mean

        kde_entries: list[VariableKDE] = []
        with timer.section('kde'):
            for i, selected in enumerate(design.kde_vars):
                if not selected:
                    continue
                std = math.sqrt(max(covariance[i, i], 0.0))
                curve = kde(
                    samples[:, i],
                    bandwidth=silverman_bandwidth(std, n),
                    grid_size=design.kde_grid_size,
                )
                kde_entries.append(VariableKDE(
                    variable=f"X{i + 1}",
                    index=i,
                    kde=curve,
                    gaussian=normal_pdf_curve(curve.x, mean[i], std),
                ))

        marginal_entries: list[VariableMarginal] = []
        with timer.section('marginals'):
            for i, selected in enumerate(design.marginal_vars):
                if not selected:
                    continue
                marginal_entries.append(VariableMarginal(
                    variable=f"X{i + 1}",
                    index=i,
                    histogram=histogram(samples[:, i], bins=design.marginal_bins),
                    mean=float(mean[i]),
                    std=math.sqrt(max(covariance[i, i], 0.0)),
                ))

        with timer.section('distance_histogram'):
            distance_hist = histogram(
                stats.distances, bins=design.distance_bins, lower=0.0,
            )

        timer.stop()

        timing = {
            f'sampling.{k}': v for k, v in sampling.timing.items()
        }
        timing.update({
            f'monitoring.{k}': v for k, v in monitoring.timing.items()
        })
        timing.update(timer.result())

        info = {
            'p': design.p,
            'n': n,
            'alpha': design.alpha,
            'ucl_method': design.ucl_method,
            'n_outliers': int(stats.outliers.sum()),
            'cholesky_clamped': sampling.info['cholesky_clamped'],
            'inverse_clamped': monitoring.info['inverse_clamped'],
        }

        return Result(
            params=ExplorerParams(
                samples=samples,
                covariance=covariance,
                cholesky=sampling.params.cholesky,
                covariance_inverse=stats.covariance_inverse,
                t2=stats.t2,
                distances=stats.distances,
                ucl=stats.ucl,
                outliers=stats.outliers,
                kde=tuple(kde_entries),
                marginals=tuple(marginal_entries),
                distance_histogram=distance_hist,
            ),
            info=info,
            timing=timing,
            backend_name=self.name,
            warnings=sampling.warnings + monitoring.warnings,
        )
