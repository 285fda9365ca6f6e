"""Tests for ss_power_dt_batch."""

import numpy as np
import pytest

from pybucss import ConfigurationError, ss_power_dt, ss_power_dt_batch

STEP = 0.01


class TestBatchPlanning:

    def test_matches_single(self):
        res = ss_power_dt_batch([3.0, 3.5], [40, 30], step=STEP)
        assert res.n_configs == 2
        assert res.n[0] == ss_power_dt(3.0, 40, step=STEP)
        assert res.n[1] == ss_power_dt(3.5, 30, step=STEP)
        assert res.ok.all()

    def test_broadcast_scalar(self):
        res = ss_power_dt_batch(3.0, 40, power=[0.7, 0.8, 0.9], step=STEP)
        assert res.n_configs == 3
        assert np.all(np.diff(res.n) >= 0)

    def test_failures_recorded(self):
        """Unplannable configurations do not abort the batch."""
        res = ss_power_dt_batch([3.0, 2.05, 1.0], 40, step=STEP)
        assert list(res.error) == ["", "DegenerateEffectError", "NonsignificantPriorError"]
        assert np.isfinite(res.n[0])
        assert np.isnan(res.n[1]) and np.isnan(res.n[2])
        assert np.isnan(res.corrected_ncp[2])
        assert list(res.ok) == [True, False, False]

    def test_configuration_error_propagates(self):
        with pytest.raises(ConfigurationError, match="n"):
            ss_power_dt_batch([3.0, 3.0], [40, 1], step=STEP)

    def test_two_dimensional_rejected(self):
        with pytest.raises(ValueError, match="1-D"):
            ss_power_dt_batch([[3.0, 3.0]], [[40], [40]], step=STEP)
