"""
pybucss: Bias and Uncertainty Corrected Sample Size planning for Python.

Plans the sample size of a replication study from a prior study's observed
t statistic, correcting the prior effect for publication bias and for
uncertainty before computing power. Covers the dependent (paired-samples)
t-test design.

Usage:
    from pybucss import ss_power_dt
    from pybucss import correction, planning, power
"""

__version__ = "0.1.0"

from pybucss import correction
from pybucss import planning
from pybucss import power
from pybucss._errors import (
    BUCSSError,
    ConfigurationError,
    DegenerateEffectError,
    NonsignificantPriorError,
)
from pybucss.planning import plan_replication_dt, ss_power_dt, ss_power_dt_batch

__all__ = [
    "__version__",
    "correction",
    "planning",
    "power",
    "BUCSSError",
    "ConfigurationError",
    "DegenerateEffectError",
    "NonsignificantPriorError",
    "plan_replication_dt",
    "ss_power_dt",
    "ss_power_dt_batch",
]
