"""Fan-out of a classified swipe to caller callbacks.

The generic handler and the direction-specific handler both fire for the
same gesture, generic first. Exceptions raised by a handler propagate to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from swipe_gestures.state import GestureState, SwipeDirection

SwipeCallback = Callable[[SwipeDirection, GestureState], None]
DirectionCallback = Callable[[GestureState], None]


@dataclass
class SwipeHandlers:
    """Caller-owned callbacks. Every handler is optional."""
    on_swipe: Optional[SwipeCallback] = None
    on_swipe_up: Optional[DirectionCallback] = None
    on_swipe_down: Optional[DirectionCallback] = None
    on_swipe_left: Optional[DirectionCallback] = None
    on_swipe_right: Optional[DirectionCallback] = None

    def for_direction(self, direction: SwipeDirection) -> Optional[DirectionCallback]:
        return {
            SwipeDirection.UP: self.on_swipe_up,
            SwipeDirection.DOWN: self.on_swipe_down,
            SwipeDirection.LEFT: self.on_swipe_left,
            SwipeDirection.RIGHT: self.on_swipe_right,
        }[direction]


def dispatch(
    direction: Optional[SwipeDirection],
    state: GestureState,
    handlers: SwipeHandlers,
) -> None:
    """Invoke the handlers registered for a direction. None invokes nothing."""
    if direction is None:
        return

    if handlers.on_swipe is not None:
        handlers.on_swipe(direction, state)

    specific = handlers.for_direction(direction)
    if specific is not None:
        specific(state)
