"""Swipe classification from a single gesture-state record.

Every function here is a pure function of (GestureState, SwipeConfig).

Horizontal is always tested before vertical: a diagonal drag that clears
both axis thresholds resolves to Left/Right. When the horizontal direction
is disabled the vertical axis is not re-evaluated, so the gesture yields
no swipe at all.
"""

from __future__ import annotations

from typing import Optional

from swipe_gestures.config import SwipeConfig
from swipe_gestures.state import GestureState, SwipeDirection

# Displacement (per axis) below which a gesture is a tap, not a drag
CLICK_DISTANCE = 5


def is_valid_swipe(
    velocity: float,
    velocity_threshold: float,
    directional_offset: float,
    directional_offset_threshold: float,
) -> bool:
    """Fast enough along the swipe axis and straight enough across it."""
    return (
        abs(velocity) > velocity_threshold
        and abs(directional_offset) < directional_offset_threshold
    )


def gesture_is_click(state: GestureState) -> bool:
    return abs(state.dx) < CLICK_DISTANCE and abs(state.dy) < CLICK_DISTANCE


def is_valid_horizontal_swipe(state: GestureState, config: SwipeConfig) -> bool:
    return is_valid_swipe(
        state.vx, config.velocity_threshold,
        state.dy, config.directional_offset_threshold,
    )


def is_valid_vertical_swipe(state: GestureState, config: SwipeConfig) -> bool:
    return is_valid_swipe(
        state.vy, config.velocity_threshold,
        state.dx, config.directional_offset_threshold,
    )


def get_swipe_direction(state: GestureState, config: SwipeConfig) -> Optional[SwipeDirection]:
    """Direction implied by the motion alone, ignoring the detect flags."""
    if is_valid_horizontal_swipe(state, config):
        return SwipeDirection.RIGHT if state.dx > 0 else SwipeDirection.LEFT
    elif is_valid_vertical_swipe(state, config):
        return SwipeDirection.DOWN if state.dy > 0 else SwipeDirection.UP
    return None


def is_direction_enabled(direction: SwipeDirection, config: SwipeConfig) -> bool:
    return {
        SwipeDirection.UP: config.detect_swipe_up,
        SwipeDirection.DOWN: config.detect_swipe_down,
        SwipeDirection.LEFT: config.detect_swipe_left,
        SwipeDirection.RIGHT: config.detect_swipe_right,
    }[direction]


def classify(state: GestureState, config: SwipeConfig) -> Optional[SwipeDirection]:
    """Return the swipe direction of a gesture, or None.

    A direction whose detect flag is off is reported as None.
    """
    direction = get_swipe_direction(state, config)
    if direction is None or not is_direction_enabled(direction, config):
        return None
    return direction


def should_claim(state: GestureState, config: SwipeConfig) -> bool:
    """Whether an in-progress drag should be taken over as a swipe.

    Requires exactly one touch, more than a tap's worth of movement, and a
    currently enabled swipe direction.
    """
    return (
        state.touch_count == 1
        and not gesture_is_click(state)
        and classify(state, config) is not None
    )
