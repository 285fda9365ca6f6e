"""Error taxonomy for bias- and uncertainty-corrected sample size planning.

Every error derives from ``ValueError`` so callers that validate inputs the
usual way keep working. None of them is transient: the remedy is always to
change the inputs and call again.
"""

from __future__ import annotations


class BUCSSError(ValueError):
    """Base class for all pybucss errors."""


class ConfigurationError(BUCSSError):
    """A parameter is structurally invalid (out of range, missing, non-finite)."""

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__(message)


class NonsignificantPriorError(BUCSSError):
    """The prior study's statistic does not exceed its critical value.

    Raise ``alpha_prior`` so that ``t_observed`` exceeds the critical value.
    """

    def __init__(self, t_observed: float, critical: float, alpha_prior: float) -> None:
        self.t_observed = t_observed
        self.critical = critical
        self.alpha_prior = alpha_prior
        super().__init__(
            f"Observed t statistic {t_observed} is nonsignificant at "
            f"alpha_prior = {alpha_prior} (critical value {critical:.6f}). "
            f"Increase 'alpha_prior' so 't_observed' exceeds the critical value."
        )


class DegenerateEffectError(BUCSSError):
    """The corrected noncentrality parameter is zero.

    Choose a lower assurance and/or a higher ``alpha_prior`` (less
    publication bias).
    """

    def __init__(self, assurance: float, alpha_prior: float) -> None:
        self.assurance = assurance
        self.alpha_prior = alpha_prior
        super().__init__(
            "The corrected noncentrality parameter is zero. Please either choose "
            f"a lower value of assurance (got {assurance}) and/or a higher value "
            f"of alpha_prior (got {alpha_prior}), i.e. account for less "
            "publication bias."
        )
