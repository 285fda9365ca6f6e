"""Shared constants, result types and validation for noncentrality correction."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pybucss._errors import ConfigurationError

NCP_UPPER = 100.0  # largest candidate noncentrality on the grid
ALPHA_ONE_CLAMP = 0.999  # alpha_prior = 1 ("no publication bias") is evaluated here
MAX_STEP = 0.01


@dataclass(frozen=True)
class AssuranceProfile:
    """Truncated-likelihood profile over the noncentrality grid.

    ``likelihood_ratio[i]`` is the probability, under noncentrality
    ``ncp[i]``, that a significant result falls between the critical value
    and the observed statistic (both tails).
    """

    ncp: NDArray[np.floating]
    power: NDArray[np.floating]  # P(|T| > t_crit) for each grid point
    area_between: NDArray[np.floating]
    likelihood_ratio: NDArray[np.floating]
    df: int
    critical: float
    t_observed: float

    def __len__(self) -> int:
        return len(self.ncp)


@dataclass(frozen=True)
class NCPEstimate:
    """Bias- and uncertainty-corrected noncentrality parameter."""

    ncp: float
    likelihood_ratio: float  # profile value at the selected grid point
    assurance: float
    t_observed: float
    n: int
    df: int
    critical: float
    alpha_prior: float  # as supplied
    alpha_prior_used: float  # after clamping 1 -> ALPHA_ONE_CLAMP
    step: float

    @property
    def effect_size(self) -> float:
        """Corrected standardized mean difference, ``ncp / sqrt(n)``."""
        return self.ncp / math.sqrt(self.n)

    def summary(self) -> str:
        lines = [
            "Bias and uncertainty corrected noncentrality (dependent t)",
            "",
            f"     t observed = {self.t_observed}",
            f"              n = {self.n}",
            f"    alpha prior = {self.alpha_prior}",
            f"      assurance = {self.assurance}",
            f"  corrected ncp = {self.ncp:.6f}",
            f"    effect size = {self.effect_size:.6f}",
        ]
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Shared validation
# ---------------------------------------------------------------------------

def _check_step(step: float) -> float:
    """Grid step must satisfy 0 < step <= MAX_STEP."""
    if step is None or not math.isfinite(step) or not (0.0 < step <= MAX_STEP):
        raise ConfigurationError(
            "step", f"step must be in (0, {MAX_STEP}], got {step}"
        )
    return float(step)


def _check_t_observed(t_observed: float) -> float:
    if t_observed is None or not math.isfinite(t_observed):
        raise ConfigurationError(
            "t_observed", f"t_observed must be a finite number, got {t_observed}"
        )
    return float(t_observed)


def _effective_alpha_prior(alpha_prior: float) -> float:
    """Clamp alpha_prior = 1 so the critical value stays finite."""
    return ALPHA_ONE_CLAMP if alpha_prior == 1.0 else alpha_prior
