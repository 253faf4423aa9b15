# animation_clock.py

"""
Animation Clock

Derives every time-varying quantity of a frame from the frame counter alone.
Nothing accumulates between frames, so any frame can be replayed in isolation.
"""

import math
from collections import namedtuple

import constants

AnimationState = namedtuple('AnimationState', [
    'time', 'phase', 'contract_progress', 'scale_factor',
    'gap_angle', 'arc_start', 'arc_end',
])

TWO_PI = 2 * math.pi

# Length of one contraction cycle, in frames.
CYCLE_FRAMES = TWO_PI / (constants.CYCLE_SPEED * constants.TIME_STEP)


def state_at_time(time: float) -> AnimationState:
    """
    Computes the animation state for a continuous time value.

    - contract_progress is active only during the negative half of the sine,
      giving one contraction pulse per cycle.
    - The arc pair is one revolution minus a gap that opens with contraction.
    """
    phase = math.sin(time * constants.CYCLE_SPEED)
    contract_progress = max(0.0, -phase)
    scale_factor = 1 - contract_progress * constants.MAX_CONTRACTION
    gap_angle = contract_progress * constants.MAX_GAP_ANGLE
    rotation = time * constants.ROTATION_SPEED
    arc_start = math.fmod(rotation, TWO_PI)
    arc_end = arc_start + TWO_PI - gap_angle
    return AnimationState(
        time=time,
        phase=phase,
        contract_progress=contract_progress,
        scale_factor=scale_factor,
        gap_angle=gap_angle,
        arc_start=arc_start,
        arc_end=arc_end,
    )


def tick(frame_index: int) -> AnimationState:
    """Pure function of the frame index: time = frame_index * TIME_STEP."""
    return state_at_time(frame_index * constants.TIME_STEP)
