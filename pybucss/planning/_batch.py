"""Batch replication planning over many prior-study configurations.

Each configuration is independent, so the inputs are broadcast against each
other and planned one at a time. A configuration whose prior result cannot
be corrected (nonsignificant or degenerate) is recorded as a failure rather
than aborting the batch. Invalid parameters still raise.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike

from pybucss._errors import DegenerateEffectError, NonsignificantPriorError
from pybucss.planning._common import BatchReplicationResult
from pybucss.planning._dependent import plan_replication_dt

logger = logging.getLogger(__name__)


def ss_power_dt_batch(
    t_observed: ArrayLike,
    n: ArrayLike,
    *,
    alpha_prior: ArrayLike = 0.05,
    alpha_planned: ArrayLike = 0.05,
    assurance: ArrayLike = 0.80,
    power: ArrayLike = 0.80,
    step: float = 0.001,
) -> BatchReplicationResult:
    """Plan replications for every broadcast combination of the inputs.

    Parameters
    ----------
    t_observed, n, alpha_prior, alpha_planned, assurance, power : array_like
        As in :func:`pybucss.ss_power_dt`; broadcast to a common 1-D shape.
    step : float
        Noncentrality grid spacing shared by all configurations.

    Returns
    -------
    BatchReplicationResult

    Raises
    ------
    ConfigurationError
        If any configuration has an invalid parameter.
    """
    arrays = np.broadcast_arrays(
        np.atleast_1d(np.asarray(t_observed, dtype=np.float64)),
        np.atleast_1d(np.asarray(n, dtype=np.float64)),
        np.atleast_1d(np.asarray(alpha_prior, dtype=np.float64)),
        np.atleast_1d(np.asarray(alpha_planned, dtype=np.float64)),
        np.atleast_1d(np.asarray(assurance, dtype=np.float64)),
        np.atleast_1d(np.asarray(power, dtype=np.float64)),
    )
    if arrays[0].ndim != 1:
        raise ValueError(
            f"inputs must broadcast to a 1-D shape, got {arrays[0].shape}"
        )
    t_arr, n_arr, ap_arr, apl_arr, as_arr, pw_arr = arrays

    K = t_arr.shape[0]
    n_out = np.full(K, np.nan)
    ncp_out = np.full(K, np.nan)
    err_out = np.full(K, "", dtype=object)

    for i in range(K):
        try:
            plan = plan_replication_dt(
                float(t_arr[i]),
                float(n_arr[i]),
                alpha_prior=float(ap_arr[i]),
                alpha_planned=float(apl_arr[i]),
                assurance=float(as_arr[i]),
                power=float(pw_arr[i]),
                step=step,
            )
        except (NonsignificantPriorError, DegenerateEffectError) as exc:
            logger.debug("configuration %d not plannable: %s", i, exc)
            err_out[i] = type(exc).__name__
            continue
        n_out[i] = plan.n
        ncp_out[i] = plan.corrected_ncp

    return BatchReplicationResult(
        n=n_out, corrected_ncp=ncp_out, error=err_out, n_configs=K,
    )
