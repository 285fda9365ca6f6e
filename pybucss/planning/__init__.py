"""
Sample size planning for replications of dependent (paired) t-test studies.

Combines the corrected noncentrality from :mod:`pybucss.correction` with an
incremental search for the number of pairs reaching the target power.

Validates against: R BUCSS::ss.power.dt()
"""

from pybucss.planning._common import BatchReplicationResult, ReplicationPlan
from pybucss.planning._dependent import (
    plan_replication_dt,
    search_sample_size,
    ss_power_dt,
)
from pybucss.planning._batch import ss_power_dt_batch

__all__ = [
    "BatchReplicationResult",
    "ReplicationPlan",
    "plan_replication_dt",
    "search_sample_size",
    "ss_power_dt",
    "ss_power_dt_batch",
]
