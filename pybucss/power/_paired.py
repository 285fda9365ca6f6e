"""Power calculations for the dependent (paired-samples) t-test.

Validates against: R pwr::pwr.t.test(type='paired')
"""

from __future__ import annotations

import math
from collections.abc import Callable

from scipy.stats import nct, norm
from scipy.stats import t as t_dist

from pybucss._errors import ConfigurationError
from pybucss.power._common import (
    PowerResult,
    _check_n,
    _check_power_args,
    _solve_parameter,
)


# ---------------------------------------------------------------------------
# Internal power computation, also used by the replication search
# ---------------------------------------------------------------------------

def _normal_approx_power(ncp: float, alpha: float) -> float:
    """Normal approximation to two-sided noncentral t power (exact as df -> inf)."""
    z_crit = norm.ppf(1.0 - alpha / 2.0)
    return float(norm.sf(z_crit - ncp) + norm.cdf(-z_crit - ncp))


def _two_sided_t_power(ncp: float, df: float, alpha: float) -> float:
    """Two-sided power of a t-test with *df* degrees of freedom.

    P(|T| > t_crit) where T ~ noncentral t(df, ncp) and t_crit is the
    central ``1 - alpha/2`` quantile.
    """
    if df < 1.0:
        return 0.0

    # For very large df, go straight to normal approximation (exact in limit).
    if df > 1e5:
        return _normal_approx_power(ncp, alpha)

    t_crit = t_dist.ppf(1.0 - alpha / 2.0, df)
    pwr = float(nct.sf(t_crit, df, ncp) + nct.cdf(-t_crit, df, ncp))

    # scipy's nct can return NaN for large noncentrality params at moderate
    # df. The normal approximation is very accurate there.
    if math.isnan(pwr):
        pwr = _normal_approx_power(ncp, alpha)

    return pwr


def _paired_t_power(n: float, d: float, alpha: float) -> float:
    """Paired t power for *n* pairs and standardized mean difference *d*."""
    return _two_sided_t_power(d * math.sqrt(n), n - 1.0, alpha)


def _first_n_reaching(power_at: Callable[[int], float], target: float) -> int:
    """Smallest integer n >= 2 with ``power_at(n) >= target``.

    Linear search, one pair at a time. There is no upper bound: power
    approaches 1 as n grows whenever the effect is nonzero.
    """
    n = 2
    while power_at(n) < target:
        n += 1
    return n


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def effect_size_from_t(t_observed: float, n: int) -> float:
    """Standardized mean difference implied by a paired t statistic.

    ``d = t / sqrt(n)`` for *n* pairs.
    """
    n = _check_n(n)
    if not math.isfinite(t_observed):
        raise ConfigurationError(
            "t_observed", f"t_observed must be finite, got {t_observed}"
        )
    return t_observed / math.sqrt(n)


def power_paired_t_test(
    n: int | None = None,
    d: float | None = None,
    alpha: float = 0.05,
    power: float | None = None,
) -> PowerResult:
    """Face-value power calculation for a two-sided paired t-test.

    Exactly one of ``n``, ``d``, ``power`` must be ``None``; that parameter
    is solved for given the others. Unlike :func:`pybucss.ss_power_dt`, the
    effect size is taken as given, with no correction for publication bias
    or uncertainty.

    Parameters
    ----------
    n : int or None
        Number of pairs.
    d : float or None
        Standardized mean difference of the paired differences.
    alpha : float
        Significance level (default 0.05).
    power : float or None
        Desired statistical power (1 - beta).

    Returns
    -------
    PowerResult

    Examples
    --------
    >>> r = power_paired_t_test(d=0.5, alpha=0.05, power=0.80)
    >>> r.n
    34
    """
    solve_for = _check_power_args(n=n, effect=d, power=power, alpha=alpha)

    # Two-sided: power depends on |d| only
    d_internal = abs(d) if d is not None else None

    if solve_for == "power":
        assert n is not None and d_internal is not None
        result_power = _paired_t_power(float(n), d_internal, alpha)
        result_n = n
        result_d = d

    elif solve_for == "n":
        assert d_internal is not None and power is not None
        if d_internal == 0.0:
            raise ConfigurationError("d", "Cannot solve for n when d = 0 (no effect)")
        result_n = _first_n_reaching(
            lambda k: _paired_t_power(float(k), d_internal, alpha), power,
        )
        result_power = power
        result_d = d

    else:  # solve_for == "effect"
        assert n is not None and power is not None
        result_d = _solve_parameter(
            func=lambda x: _paired_t_power(float(n), x, alpha),
            target=power,
            bracket=(1e-10, 100.0),
            parameter="d",
        )
        result_n = n
        result_power = power

    return PowerResult(
        n=result_n,
        power=result_power,
        effect_size=result_d,
        alpha=alpha,
        method="Paired t test power calculation",
        note="n is number of *pairs*",
    )
