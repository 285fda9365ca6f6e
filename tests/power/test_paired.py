"""Tests for power_paired_t_test and the shared paired t power helpers."""

import pytest

from pybucss import ConfigurationError
from pybucss.power import effect_size_from_t, power_paired_t_test
from pybucss.power._paired import _first_n_reaching, _paired_t_power, _two_sided_t_power


class TestPowerPairedSolveN:
    """Solve for n (given d, alpha, power)."""

    def test_medium_effect(self):
        """d=0.5, alpha=0.05, power=0.80 -> 34 pairs (pwr gives 33.37)."""
        r = power_paired_t_test(d=0.5, alpha=0.05, power=0.80)
        assert r.n == 34

    def test_higher_power_more_n(self):
        r_80 = power_paired_t_test(d=0.5, alpha=0.05, power=0.80)
        r_90 = power_paired_t_test(d=0.5, alpha=0.05, power=0.90)
        assert r_90.n > r_80.n

    def test_lower_alpha_more_n(self):
        r_05 = power_paired_t_test(d=0.5, alpha=0.05, power=0.80)
        r_01 = power_paired_t_test(d=0.5, alpha=0.01, power=0.80)
        assert r_01.n > r_05.n

    def test_negative_d_symmetric(self):
        """Two-sided: sign of d does not matter."""
        r_pos = power_paired_t_test(d=0.5, alpha=0.05, power=0.80)
        r_neg = power_paired_t_test(d=-0.5, alpha=0.05, power=0.80)
        assert r_pos.n == r_neg.n

    def test_n_is_minimal(self):
        """Power at n meets the target, power at n - 1 does not."""
        r = power_paired_t_test(d=0.3, alpha=0.05, power=0.90)
        assert _paired_t_power(float(r.n), 0.3, 0.05) >= 0.90
        assert _paired_t_power(float(r.n - 1), 0.3, 0.05) < 0.90


class TestPowerPairedSolvePower:
    """Solve for power (given n, d, alpha)."""

    def test_n34_d05(self):
        r = power_paired_t_test(n=34, d=0.5, alpha=0.05)
        assert r.power == pytest.approx(0.80, abs=0.02)

    def test_power_increases_with_n(self):
        powers = [power_paired_t_test(n=n, d=0.4, alpha=0.05).power for n in (10, 20, 40, 80)]
        for i in range(len(powers) - 1):
            assert powers[i] < powers[i + 1]

    def test_large_n_high_power(self):
        r = power_paired_t_test(n=5000, d=0.5, alpha=0.05)
        assert r.power > 0.999


class TestPowerPairedSolveD:
    """Solve for d (given n, alpha, power)."""

    def test_n50_power80(self):
        """n=50, power=0.80 -> d ~ 0.404 (pwr.t.test one-sample)."""
        r = power_paired_t_test(n=50, alpha=0.05, power=0.80)
        assert r.effect_size == pytest.approx(0.404, abs=0.01)

    def test_unreachable_power(self):
        """A target below alpha cannot be reached by any positive d."""
        with pytest.raises(ConfigurationError, match="Cannot solve for d") as info:
            power_paired_t_test(n=50, alpha=0.05, power=0.01)
        assert info.value.parameter == "d"


class TestTwoSidedPower:
    """Internal two-sided noncentral t power."""

    def test_zero_ncp_is_alpha(self):
        assert _two_sided_t_power(0.0, 20.0, 0.05) == pytest.approx(0.05, abs=1e-10)

    def test_df_below_one(self):
        assert _two_sided_t_power(3.0, 0.5, 0.05) == 0.0

    def test_huge_df_uses_normal(self):
        """df > 1e5 matches the normal approximation z-test power."""
        pwr = _two_sided_t_power(2.8, 2e5, 0.05)
        assert pwr == pytest.approx(0.80, abs=0.01)

    def test_first_n_reaching_starts_at_two(self):
        assert _first_n_reaching(lambda n: 1.0, 0.5) == 2
        assert _first_n_reaching(lambda n: n / 10.0, 0.55) == 6


class TestEffectSizeFromT:

    def test_value(self):
        assert effect_size_from_t(3.0, 36) == pytest.approx(0.5)

    def test_invalid_n(self):
        with pytest.raises(ConfigurationError, match="n"):
            effect_size_from_t(3.0, 1)


class TestPowerPairedValidation:
    """Input validation."""

    def test_all_given(self):
        with pytest.raises(ConfigurationError, match="Exactly one"):
            power_paired_t_test(n=50, d=0.5, alpha=0.05, power=0.80)

    def test_invalid_alpha(self):
        with pytest.raises(ConfigurationError, match="alpha"):
            power_paired_t_test(d=0.5, alpha=1.5, power=0.80)

    def test_invalid_power(self):
        with pytest.raises(ConfigurationError, match="power"):
            power_paired_t_test(n=50, d=0.5, alpha=0.05, power=1.5)

    def test_zero_d(self):
        with pytest.raises(ConfigurationError, match="d = 0"):
            power_paired_t_test(d=0.0, alpha=0.05, power=0.80)

    def test_is_value_error(self):
        """Configuration errors are still ValueErrors."""
        with pytest.raises(ValueError):
            power_paired_t_test(alpha=0.05)


class TestPowerPairedSummary:

    def test_summary_contains_key_fields(self):
        s = power_paired_t_test(d=0.5, alpha=0.05, power=0.80).summary()
        assert "n = 34" in s
        assert "effect size" in s
        assert "two.sided" in s
        assert "pairs" in s
