"""Tests for easer.progression."""

from __future__ import annotations

import logging
from fractions import Fraction

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from easer import CURVES, exp_in, linear, quad_in, quad_out
from easer.progression import Easer


class TestScenarios:
    def test_quad_in(self) -> None:
        values = [round(float(v), 5) for v in quad_in(0, 10000, 10)]
        assert values == [100, 400, 900, 1600, 2500, 3600, 4900, 6400, 8100, 10000]

    def test_linear(self) -> None:
        values = list(linear(0.0, 1.0, 10))
        assert values == pytest.approx([i / 10 for i in range(1, 11)])

    def test_exp_in(self) -> None:
        values = list(exp_in(0.0, 10000.0, 10))
        expected = [19.53125, 39.0625, 78.125, 156.25, 312.5, 625, 1250, 2500, 5000, 10000]
        assert values == pytest.approx(expected)


class TestSequence:
    @pytest.mark.parametrize("name", sorted(CURVES))
    def test_yields_exactly_n_values_ending_at_end(self, name: str) -> None:
        values = list(CURVES[name](-3.0, 7.0, 7))
        assert len(values) == 7
        assert values[-1] == 7.0
        assert all(v != -3.0 for v in values)

    @pytest.mark.parametrize("name", sorted(CURVES))
    def test_single_step_yields_end(self, name: str) -> None:
        assert list(CURVES[name](2.0, 5.0, 1)) == [5.0]

    @pytest.mark.parametrize("name", sorted(CURVES))
    def test_monotonic_toward_end(self, name: str) -> None:
        values = np.array(list(CURVES[name](10.0, 0.0, 50)))
        assert np.all(np.diff(values) <= 0.0)

    def test_first_value_is_step_one(self) -> None:
        walk = linear(0.0, 1.0, 4)
        assert walk.advance_by() == 0.25
        assert walk.current_step == 1


class TestExhaustion:
    def test_zero_steps_exhausts_immediately(self) -> None:
        walk = quad_in(0.0, 1.0, 0)
        assert walk.advance_by() is None
        assert walk.exhausted

    def test_zero_steps_iterates_empty(self) -> None:
        assert list(quad_in(0.0, 1.0, 0)) == []

    def test_negative_steps_exhaust_immediately(self) -> None:
        assert linear(0.0, 1.0, -5).advance_by() is None

    def test_stays_exhausted(self) -> None:
        walk = linear(0.0, 1.0, 3)
        assert len(list(walk)) == 3
        for _ in range(5):
            assert walk.advance_by() is None
        with pytest.raises(StopIteration):
            next(walk)

    def test_step_counter_never_decreases(self) -> None:
        walk = linear(0.0, 1.0, 2)
        seen = []
        for _ in range(5):
            walk.advance_by()
            seen.append(walk.current_step)
        assert seen == sorted(seen)

    def test_iteration_stops_one_past_total(self) -> None:
        walk = linear(0.0, 1.0, 2)
        list(walk)
        assert walk.current_step == 3
        assert walk.exhausted


class TestAdvanceBy:
    def test_skips_steps(self) -> None:
        walk = quad_in(0.0, 10000.0, 10)
        assert float(walk.advance_by(3)) == pytest.approx(900.0)
        assert walk.current_step == 3
        assert float(walk.advance_by()) == pytest.approx(1600.0)

    def test_matches_direct_evaluation(self) -> None:
        walk = quad_out(1.0, 2.0, 9)
        assert walk.advance_by(4) == quad_out.evaluate(1.0, 2.0, 9, 4)

    def test_overshoot_exhausts(self) -> None:
        walk = linear(0.0, 1.0, 5)
        assert walk.advance_by(6) is None
        assert walk.advance_by() is None

    def test_landing_on_last_step(self) -> None:
        walk = linear(0.0, 1.0, 5)
        assert walk.advance_by(5) == 1.0
        assert walk.advance_by() is None

    def test_remaining_values_after_skip(self) -> None:
        walk = linear(0.0, 1.0, 4)
        walk.advance_by(2)
        assert list(walk) == [0.75, 1.0]


class TestAt:
    def test_does_not_advance(self) -> None:
        walk = quad_in(0.0, 100.0, 10)
        assert float(walk.at(5)) == pytest.approx(25.0)
        assert walk.current_step == 0
        assert float(walk.advance_by()) == pytest.approx(1.0)

    def test_beyond_total_not_clamped(self) -> None:
        walk = linear(0.0, 1.0, 10)
        assert float(walk.at(20)) == pytest.approx(2.0)


class TestStepTypes:
    def test_float_counter(self) -> None:
        walk = linear(0.0, 1.0, 2.5)
        assert list(walk) == pytest.approx([0.4, 0.8])
        assert isinstance(walk.current_step, float)

    def test_numpy_integer_counter(self) -> None:
        walk = linear(0.0, 1.0, np.int32(4))
        walk.advance_by()
        assert isinstance(walk.current_step, np.int32)
        assert len(list(walk)) == 3

    def test_jax_scalar_counter(self) -> None:
        walk = linear(0.0, 1.0, jnp.int32(4))
        values = list(walk)
        assert values == pytest.approx([0.25, 0.5, 0.75, 1.0])
        assert all(isinstance(v, np.float64) for v in values)
        assert isinstance(walk.current_step, jax.Array)
        assert walk.exhausted is True

    def test_jax_scalar_counter_zero_exhausts(self) -> None:
        walk = quad_in(0.0, 1.0, jnp.int32(0))
        assert int(walk.current_step) == 0
        assert walk.advance_by() is None

    def test_jax_scalar_step_for_at(self) -> None:
        walk = quad_in(0.0, 100.0, 10)
        assert float(walk.at(jnp.int32(5))) == pytest.approx(25.0)

    def test_fraction_counter(self) -> None:
        walk = linear(0.0, 1.0, Fraction(5, 2))
        assert walk.current_step == Fraction(0)
        assert list(walk) == pytest.approx([0.4, 0.8])

    def test_fractional_delta(self) -> None:
        walk = linear(0.0, 1.0, 1.0)
        assert walk.advance_by(0.5) == 0.5
        assert walk.advance_by(0.5) == 1.0
        assert walk.advance_by(0.5) is None


class TestValueDtype:
    def test_explicit_dtype(self, float_dtype) -> None:
        values = list(quad_in(0.0, 1.0, 4, dtype=float_dtype))
        assert all(isinstance(v, float_dtype) for v in values)
        assert values[-1] == 1.0

    def test_inferred_from_start_end(self) -> None:
        walk = quad_in(np.float32(0.0), np.float32(1.0), 4)
        assert walk.dtype == np.float32
        assert isinstance(walk.advance_by(), np.float32)

    def test_integer_endpoints_default_to_float64(self) -> None:
        walk = quad_in(0, 10, 4)
        assert walk.dtype == np.float64

    def test_distance_fixed_at_construction(self) -> None:
        walk = linear(np.float32(1.5), np.float32(4.0), 4)
        assert walk.distance == np.float32(2.5)
        list(walk)
        assert walk.distance == np.float32(2.5)

    def test_rejects_integer_dtype(self) -> None:
        with pytest.raises(TypeError, match="floating point"):
            linear(0.0, 1.0, 4, dtype=np.int32)


class TestEaserMisc:
    def test_is_its_own_iterator(self) -> None:
        walk = linear(0.0, 1.0, 3)
        assert iter(walk) is walk

    def test_direct_construction(self) -> None:
        walk = Easer(CURVES["cubic_in"], 0.0, 8.0, 2)
        assert list(walk) == [1.0, 8.0]

    def test_repr(self) -> None:
        walk = quad_in(0.0, 1.0, 10)
        walk.advance_by()
        assert "quad_in" in repr(walk)
        assert "1/10" in repr(walk)

    def test_logs_exhaustion_once(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="easer")
        walk = linear(0.0, 1.0, 1)
        list(walk)
        walk.advance_by()
        walk.advance_by()
        exhausted = [r for r in caplog.records if "exhausted" in r.getMessage()]
        assert len(exhausted) == 1
        assert exhausted[0].name == "easer.progression"
