"""Shared result types for replication sample size planning."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pybucss.correction._common import NCPEstimate


@dataclass(frozen=True)
class ReplicationPlan:
    """Planned sample size for a replication using a dependent t-test."""

    n: int  # number of pairs required in the planned study
    target_power: float
    achieved_power: float  # power at n, >= target_power
    alpha_planned: float
    estimate: NCPEstimate

    @property
    def corrected_ncp(self) -> float:
        return self.estimate.ncp

    @property
    def effect_size(self) -> float:
        """Corrected standardized mean difference used for planning."""
        return self.estimate.effect_size

    def summary(self) -> str:
        """Human-readable summary, similar to R's print.power.htest."""
        est = self.estimate
        lines = [
            "Bias and uncertainty corrected sample size (dependent t test)",
            "",
            f"              n = {self.n}",
            f"  corrected ncp = {est.ncp:.6f}",
            f"    effect size = {self.effect_size:.6f}",
            f"    alpha prior = {est.alpha_prior}",
            f"  alpha planned = {self.alpha_planned}",
            f"      assurance = {est.assurance}",
            f"          power = {self.target_power}",
            f" achieved power = {self.achieved_power:.6f}",
            "",
            "NOTE: n is number of *pairs*",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class BatchReplicationResult:
    """Replication plans for many prior-study configurations.

    Configurations whose prior result is nonsignificant or whose corrected
    noncentrality is degenerate get ``n = NaN`` and the error class name in
    ``error``; successful ones have ``error == ""``.
    """

    n: NDArray[np.floating]  # float so failures can be NaN
    corrected_ncp: NDArray[np.floating]
    error: NDArray[np.object_]
    n_configs: int

    @property
    def ok(self) -> NDArray[np.bool_]:
        return self.error == ""
