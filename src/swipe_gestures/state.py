"""Gesture-state records handed to the recognizer by the capture mechanism."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence


class SwipeDirection(Enum):
    """Cardinal swipe directions. "No swipe" is represented by None."""
    UP = "SWIPE_UP"
    DOWN = "SWIPE_DOWN"
    LEFT = "SWIPE_LEFT"
    RIGHT = "SWIPE_RIGHT"


class GestureStateError(ValueError):
    """Raised when a gesture-state mapping is missing a field or holds a non-number."""


@dataclass(frozen=True)
class GestureState:
    """Summary of an in-progress or completed drag.

    dx/dy are the cumulative displacement since the touch started,
    vx/vy the instantaneous velocity on each axis.
    """

    dx: float
    dy: float
    vx: float
    vy: float
    touch_count: int = 1

    # Accepted spellings for the touch count, in lookup order
    _TOUCH_COUNT_KEYS = ("touch_count", "touchCount", "numberActiveTouches")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GestureState:
        """Build a state from a capture-mechanism mapping.

        The four motion fields are required. The touch count is optional and
        defaults to a single touch.
        """
        values = {}
        for name in ("dx", "dy", "vx", "vy"):
            if data.get(name) is None:
                raise GestureStateError(f"gesture state missing field '{name}'")
            values[name] = _to_float(name, data[name])

        touch_count = 1
        for key in cls._TOUCH_COUNT_KEYS:
            if data.get(key) is not None:
                try:
                    touch_count = int(data[key])
                except (TypeError, ValueError) as e:
                    raise GestureStateError(f"invalid touch count {data[key]!r}") from e
                break

        return cls(touch_count=touch_count, **values)

    def to_dict(self) -> dict:
        return {
            "dx": self.dx,
            "dy": self.dy,
            "vx": self.vx,
            "vy": self.vy,
            "touch_count": self.touch_count,
        }


def _to_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise GestureStateError(f"gesture state field '{name}' is not a number: {value!r}") from e


@dataclass
class TouchEvent:
    """Raw touch event passed to the should-claim callbacks.

    Only the number of active touches is read.
    """
    touches: Sequence[Any] = field(default_factory=list)

    @property
    def touch_count(self) -> int:
        return len(self.touches)
