"""
CPU backend for Hotelling T2 monitoring.
"""

from __future__ import annotations

import numpy as np

from pymspc.core.result import Result
from pymspc.core.compute.timing import Timer
from pymspc.core.compute.linalg import invert
from pymspc.core.diagnostics import inverse_warning
from pymspc.monitoring._statistics import flag_outliers, hotelling_t2_statistic, hotelling_ucl
from pymspc.monitoring.design import MonitoringDesign
from pymspc.monitoring.solution import MonitoringParams


class CPUMonitoringBackend:
    """CPU backend: Gauss-Jordan inverse, vectorized T2, UCL, flags."""

    @property
    def name(self) -> str:
        return 'cpu_hotelling'

    def solve(self, design: MonitoringDesign) -> Result[MonitoringParams]:
        timer = Timer()
        timer.start()

        warnings_list: list[str] = []

        with timer.section('inverse'):
            inv = invert(design.covariance)
        msg = inverse_warning(inv)
        if msg is not None:
            warnings_list.append(msg)

        with timer.section('t2'):
            t2 = hotelling_t2_statistic(design.samples, design.mean, inv.inverse)
            distances = np.sqrt(t2)

        with timer.section('ucl'):
            ucl = hotelling_ucl(design.p, design.n, design.alpha, design.ucl_method)
            outliers = flag_outliers(t2, ucl)

        timer.stop()

        return Result(
            params=MonitoringParams(
                t2=t2,
                distances=distances,
                ucl=ucl,
                outliers=outliers,
                covariance_inverse=inv.inverse,
            ),
            info={
                'p': design.p,
                'n': design.n,
                'alpha': design.alpha,
                'ucl_method': design.ucl_method,
                'inverse_clamped': inv.clamped_pivots,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
