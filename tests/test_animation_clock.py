import math

import pytest

import constants
from animation_clock import CYCLE_FRAMES, state_at_time, tick


def test_first_frame_is_a_full_uncontracted_circle() -> None:
    state = tick(0)
    assert state.time == 0
    assert state.phase == 0
    assert state.contract_progress == 0
    assert state.scale_factor == 1
    assert state.gap_angle == 0
    assert state.arc_start == 0
    assert state.arc_end == pytest.approx(2 * math.pi)


def test_tick_is_deterministic() -> None:
    for frame_index in (0, 1, 57, 188, 300, 10_000):
        assert tick(frame_index) == tick(frame_index)


def test_time_advances_by_fixed_step() -> None:
    assert tick(30).time == pytest.approx(30 * constants.TIME_STEP)


@pytest.mark.parametrize("frame_index", range(0, 1200, 7))
def test_derived_quantities_stay_in_range(frame_index) -> None:
    state = tick(frame_index)
    assert 0.0 <= state.contract_progress <= 1.0
    assert 0.7 - 1e-12 <= state.scale_factor <= 1.0
    assert 0.0 <= state.gap_angle <= constants.MAX_GAP_ANGLE + 1e-12
    assert 0.0 <= state.arc_start < 2 * math.pi
    assert state.arc_end - state.arc_start == pytest.approx(2 * math.pi - state.gap_angle)


@pytest.mark.parametrize("time", [0.0, 0.5, 2.0, 3.5, 4.7, 6.0])
def test_contraction_is_periodic(time) -> None:
    period = 2 * math.pi / constants.CYCLE_SPEED
    assert state_at_time(time + period).contract_progress == pytest.approx(
        state_at_time(time).contract_progress, abs=1e-9
    )


def test_contraction_only_in_negative_half_cycle() -> None:
    assert state_at_time(math.pi / 2).contract_progress == 0
    assert state_at_time(3 * math.pi / 2).contract_progress == pytest.approx(1.0)
    assert state_at_time(3 * math.pi / 2).scale_factor == pytest.approx(0.7)
    assert state_at_time(3 * math.pi / 2).gap_angle == pytest.approx(math.pi / 18)


def test_cycle_length_in_frames() -> None:
    assert CYCLE_FRAMES == pytest.approx(2 * math.pi / constants.TIME_STEP)
