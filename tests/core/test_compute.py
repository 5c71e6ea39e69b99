"""
Tests for the shared compute utilities: Timer and tolerance tiers.
"""

import numpy as np
import pytest

from numstat.core.compute import (
    CPU_FP64,
    INVERSION_ROUND_TRIP,
    REGRESSION_FIT,
    Timer,
    near_singular_threshold,
    select_tolerance,
)


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('b'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'a', 'b'}
        assert all(v >= 0.0 for v in result.values())

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        with timer.section('loop'):
            pass
        first = timer._sections['loop']
        with timer.section('loop'):
            pass
        timer.stop()
        assert timer.result()['loop'] >= first

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('boom'):
                1 / 0
        timer.stop()
        assert 'boom' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


class TestTolerances:

    def test_select_by_name(self):
        assert select_tolerance('cpu_fp64') is CPU_FP64
        assert select_tolerance('inversion_round_trip') is INVERSION_ROUND_TRIP
        assert select_tolerance('regression_fit') is REGRESSION_FIT

    def test_unknown_tier(self):
        with pytest.raises(ValueError, match="Unknown tolerance tier"):
            select_tolerance('gpu_fp16')

    def test_documented_tolerances(self):
        assert INVERSION_ROUND_TRIP.atol == 1e-9
        assert REGRESSION_FIT.atol == 1e-6

    def test_near_singular_threshold_scales(self):
        eps = np.finfo(np.float64).eps
        assert near_singular_threshold(3, 54.0) == pytest.approx(3 * eps * 54.0)
        assert near_singular_threshold(0, 1.0) == pytest.approx(eps)
