"""Bias and uncertainty corrected sample size for a dependent t-test.

Two stages: :func:`pybucss.correction.estimate_corrected_ncp` turns the
prior study into a corrected noncentrality parameter, then
:func:`search_sample_size` walks n = 2, 3, ... until the planned study's
two-sided power reaches the target.

Validates against: R BUCSS::ss.power.dt()
"""

from __future__ import annotations

import logging
import math

from pybucss._errors import ConfigurationError
from pybucss.correction._common import _check_step, _check_t_observed
from pybucss.correction._ncp import estimate_corrected_ncp
from pybucss.planning._common import ReplicationPlan
from pybucss.power._common import _check_alpha, _check_n, _rescale_proportion
from pybucss.power._paired import _first_n_reaching, _two_sided_t_power

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _check_target_power(power: float) -> float:
    """Rescale percentages, then require [0, 1). Power 1 is never reached."""
    power = _rescale_proportion(power, "power")
    if power >= 1.0:
        raise ConfigurationError("power", f"power must be below 1, got {power}")
    return power


def _replication_power(n: int, corrected_ncp: float, n_prior: int, alpha: float) -> float:
    """Two-sided power with the prior ncp rescaled to *n* pairs."""
    ncp = math.sqrt(n / n_prior) * corrected_ncp
    return _two_sided_t_power(ncp, n - 1.0, alpha)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def search_sample_size(
    corrected_ncp: float,
    n_prior: int,
    alpha_planned: float = 0.05,
    power: float = 0.80,
) -> int:
    """Smallest number of pairs whose two-sided power reaches *power*.

    The noncentrality of a paired t statistic grows with ``sqrt(n)`` for a
    fixed standardized effect, so the prior study's ncp is scaled by
    ``sqrt(n / n_prior)`` at each candidate n. There is no upper bound on
    the search.

    Parameters
    ----------
    corrected_ncp : float
        Noncentrality of the prior study, > 0.
    n_prior : int
        Number of pairs in the prior study.
    alpha_planned : float
        Significance level of the planned study, in (0, 1).
    power : float
        Target power in [0, 1); values above 1 are read as percentages.
    """
    if corrected_ncp is None or not math.isfinite(corrected_ncp) or corrected_ncp <= 0.0:
        raise ConfigurationError(
            "corrected_ncp", f"corrected_ncp must be > 0, got {corrected_ncp}"
        )
    n_prior = _check_n(n_prior, "n_prior")
    alpha_planned = _check_alpha(alpha_planned, "alpha_planned")
    power = _check_target_power(power)

    n = _first_n_reaching(
        lambda k: _replication_power(k, corrected_ncp, n_prior, alpha_planned), power,
    )
    logger.debug("sample size search: ncp %.6f reaches power %.3f at n = %d",
                 corrected_ncp, power, n)
    return n


def plan_replication_dt(
    t_observed: float,
    n: int | None = None,
    alpha_prior: float = 0.05,
    alpha_planned: float = 0.05,
    assurance: float = 0.80,
    power: float = 0.80,
    step: float = 0.001,
) -> ReplicationPlan:
    """Plan a replication of a paired-samples study, correcting the prior effect.

    Parameters
    ----------
    t_observed : float
        Observed t statistic of the prior study.
    n : int
        Number of pairs in the prior study.
    alpha_prior : float
        Significance level assumed necessary for publication, in (0, 1].
        1 assumes no publication bias (corrects for uncertainty only).
    alpha_planned : float
        Significance level of the planned study, in (0, 1).
    assurance : float
        Long-run proportion of replications reaching the target power.
        0.5 corrects for publication bias only.
    power : float
        Target power of the planned study.
    step : float
        Noncentrality grid spacing, in (0, 0.01].

    Returns
    -------
    ReplicationPlan

    Raises
    ------
    ConfigurationError
        On invalid inputs, before any computation.
    NonsignificantPriorError
        If the prior statistic is not above its critical value; raise
        ``alpha_prior``.
    DegenerateEffectError
        If the corrected noncentrality is zero; lower ``assurance`` or raise
        ``alpha_prior``.

    Examples
    --------
    >>> plan = plan_replication_dt(t_observed=3, n=40, assurance=0.80, power=0.80)
    >>> plan.n
    255
    """
    # Validate everything up front so no numerical work is wasted.
    alpha_prior = _check_alpha(alpha_prior, "alpha_prior", allow_one=True)
    alpha_planned = _check_alpha(alpha_planned, "alpha_planned")
    assurance = _rescale_proportion(assurance, "assurance")
    power = _check_target_power(power)
    n = _check_n(n)
    step = _check_step(step)
    t_observed = _check_t_observed(t_observed)

    estimate = estimate_corrected_ncp(
        t_observed, n, alpha_prior=alpha_prior, assurance=assurance, step=step,
    )
    n_rep = search_sample_size(estimate.ncp, n, alpha_planned, power)

    return ReplicationPlan(
        n=n_rep,
        target_power=power,
        achieved_power=_replication_power(n_rep, estimate.ncp, n, alpha_planned),
        alpha_planned=alpha_planned,
        estimate=estimate,
    )


def ss_power_dt(
    t_observed: float,
    n: int | None = None,
    alpha_prior: float = 0.05,
    alpha_planned: float = 0.05,
    assurance: float = 0.80,
    power: float = 0.80,
    step: float = 0.001,
) -> int:
    """Number of pairs needed for a replication (dependent t-test).

    Same arguments as :func:`plan_replication_dt`; returns only the sample
    size.

    Examples
    --------
    >>> ss_power_dt(t_observed=3, n=40, alpha_prior=.05, alpha_planned=.05,
    ...             assurance=.80, power=.80, step=.001)
    255
    """
    return plan_replication_dt(
        t_observed,
        n,
        alpha_prior=alpha_prior,
        alpha_planned=alpha_planned,
        assurance=assurance,
        power=power,
        step=step,
    ).n
