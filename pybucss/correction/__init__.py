"""
Publication bias and uncertainty correction of a prior study's noncentrality.

The observed t statistic of a published study overstates the true effect
(only significant results get published) and is itself uncertain. This
module selects a corrected noncentrality parameter from a truncated
noncentral t likelihood at a chosen level of assurance.

Validates against: R BUCSS::ss.power.dt()
"""

from pybucss.correction._common import (
    ALPHA_ONE_CLAMP,
    MAX_STEP,
    NCP_UPPER,
    AssuranceProfile,
    NCPEstimate,
)
from pybucss.correction._ncp import (
    assurance_profile,
    critical_value,
    estimate_corrected_ncp,
    ncp_grid,
    truncated_likelihood,
)

__all__ = [
    "ALPHA_ONE_CLAMP",
    "MAX_STEP",
    "NCP_UPPER",
    "AssuranceProfile",
    "NCPEstimate",
    "assurance_profile",
    "critical_value",
    "estimate_corrected_ncp",
    "ncp_grid",
    "truncated_likelihood",
]
