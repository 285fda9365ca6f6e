"""Shared result types and input validation for paired t power calculations."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from scipy.optimize import brentq

from pybucss._errors import ConfigurationError


@dataclass(frozen=True)
class PowerResult:
    """Result of a face-value paired t power/sample size calculation.

    Exactly one of n, power, or effect_size will have been solved for
    (the parameter passed as None). The others are the user-supplied inputs.
    """

    n: int | None
    power: float | None
    effect_size: float | None
    alpha: float
    method: str
    note: str = ""

    def summary(self) -> str:
        """Human-readable summary, similar to R's print.power.htest."""
        lines = [self.method, ""]
        if self.n is not None:
            lines.append(f"              n = {self.n}")
        if self.effect_size is not None:
            lines.append(f"    effect size = {self.effect_size:.6f}")
        lines.append(f"          alpha = {self.alpha}")
        if self.power is not None:
            lines.append(f"          power = {self.power:.6f}")
        lines.append("    alternative = two.sided")
        if self.note:
            lines.append("")
            lines.append(f"NOTE: {self.note}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Shared validation
# ---------------------------------------------------------------------------

def _rescale_proportion(value: float, name: str) -> float:
    """Interpret values above 1 as percentages, then require [0, 1].

    Raises
    ------
    ConfigurationError
        If *value* is not finite or falls outside [0, 1] after rescaling.
    """
    if value is None or not math.isfinite(value):
        raise ConfigurationError(name, f"{name} must be a finite number, got {value}")
    if value > 1.0:
        value = value / 100.0
    if not (0.0 <= value <= 1.0):
        raise ConfigurationError(
            name, f"{name} must be in [0, 1] (or a percentage in (1, 100]), got {value}"
        )
    return float(value)


def _check_alpha(alpha: float, name: str = "alpha", *, allow_one: bool = False) -> float:
    """Validate a Type I error rate: (0, 1), or (0, 1] when *allow_one*."""
    if alpha is None or not math.isfinite(alpha):
        raise ConfigurationError(name, f"{name} must be a finite number, got {alpha}")
    upper_ok = alpha <= 1.0 if allow_one else alpha < 1.0
    if not (alpha > 0.0 and upper_ok):
        interval = "(0, 1]" if allow_one else "(0, 1)"
        raise ConfigurationError(name, f"{name} must be in {interval}, got {alpha}")
    return float(alpha)


def _check_n(n: int | float | None, name: str = "n") -> int:
    """Validate a number of pairs: required, integral, and > 1."""
    if n is None:
        raise ConfigurationError(
            name, f"{name} (the number of pairs in the prior study) must be specified"
        )
    if not math.isfinite(n) or n != int(n):
        raise ConfigurationError(name, f"{name} must be a whole number, got {n}")
    if n <= 1:
        raise ConfigurationError(name, f"{name} must be > 1, got {n}")
    return int(n)


def _check_power_args(
    *,
    n: int | float | None,
    effect: float | None,
    power: float | None,
    alpha: float,
    effect_name: str = "d",
) -> str:
    """Validate face-value power inputs. Return the name of the parameter to solve for.

    Rules
    -----
    - Exactly one of *n*, *effect*, *power* must be ``None``.
    - *alpha* must be in (0, 1).
    - If provided, *n* must be >= 2.
    - If provided, *power* must be in (0, 1).
    - If provided, *effect* must be finite.

    Returns
    -------
    str
        ``'n'``, ``'effect'``, or ``'power'``: the parameter to solve for.
    """
    none_count = sum(x is None for x in (n, effect, power))
    if none_count != 1:
        raise ConfigurationError(
            "n",
            f"Exactly one of n, {effect_name}, power must be None "
            f"(got {none_count} None values)",
        )

    _check_alpha(alpha)

    if n is not None and n < 2:
        raise ConfigurationError("n", f"n must be >= 2, got {n}")

    if power is not None and not (0.0 < power < 1.0):
        raise ConfigurationError("power", f"power must be in (0, 1), got {power}")

    if effect is not None and not math.isfinite(effect):
        raise ConfigurationError(effect_name, f"{effect_name} must be finite, got {effect}")

    if n is None:
        return "n"
    if effect is None:
        return "effect"
    return "power"


# ---------------------------------------------------------------------------
# Shared root-finding
# ---------------------------------------------------------------------------

def _solve_parameter(
    func: Callable[[float], float],
    target: float,
    bracket: tuple[float, float],
    *,
    parameter: str = "d",
    xtol: float = 1e-10,
    maxiter: int = 1000,
) -> float:
    """Solve ``func(x) == target`` via Brent's method.

    Parameters
    ----------
    func : callable
        Monotonic function of one variable (e.g. computes power as f(d)).
    target : float
        Target value (e.g. desired power).
    bracket : tuple
        ``(lower, upper)`` bracket. ``func(lower) - target`` and
        ``func(upper) - target`` must have opposite signs.
    parameter : str
        Name of the parameter being solved for, reported on failure.

    Raises
    ------
    ConfigurationError
        If the bracket does not straddle the target (no sign change).
    """
    lo, hi = bracket
    f_lo = func(lo) - target
    f_hi = func(hi) - target

    if f_lo * f_hi > 0:
        raise ConfigurationError(
            parameter,
            f"Cannot solve for {parameter}: target {target:.6f} is outside achievable "
            f"range [{func(lo):.6f}, {func(hi):.6f}] for the given parameters. "
            f"Try different input values."
        )

    return brentq(lambda x: func(x) - target, lo, hi, xtol=xtol, maxiter=maxiter)
