"""
Noncentral t power for the dependent (paired-samples) t-test.

Provides the two-sided power computation shared by the corrected replication
search, and a face-value solve-for-any-one power function for contrast with
the bias- and uncertainty-corrected plan.

Validates against: R pwr::pwr.t.test(type='paired').
"""

from pybucss.power._common import PowerResult
from pybucss.power._paired import effect_size_from_t, power_paired_t_test

__all__ = [
    "PowerResult",
    "effect_size_from_t",
    "power_paired_t_test",
]
