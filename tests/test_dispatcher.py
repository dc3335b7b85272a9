"""Tests for swipe callback fan-out."""

import pytest

from swipe_gestures.dispatcher import SwipeHandlers, dispatch
from swipe_gestures.state import GestureState, SwipeDirection

STATE = GestureState(dx=-20, dy=2, vx=-0.8, vy=0.05)


def recording_handlers(calls):
    return SwipeHandlers(
        on_swipe=lambda direction, state: calls.append(("any", direction, state)),
        on_swipe_up=lambda state: calls.append(("up", state)),
        on_swipe_down=lambda state: calls.append(("down", state)),
        on_swipe_left=lambda state: calls.append(("left", state)),
        on_swipe_right=lambda state: calls.append(("right", state)),
    )


class TestDispatch:
    def test_generic_then_specific(self):
        calls = []
        dispatch(SwipeDirection.LEFT, STATE, recording_handlers(calls))
        assert calls == [("any", SwipeDirection.LEFT, STATE), ("left", STATE)]

    @pytest.mark.parametrize("direction,name", [
        (SwipeDirection.UP, "up"),
        (SwipeDirection.DOWN, "down"),
        (SwipeDirection.LEFT, "left"),
        (SwipeDirection.RIGHT, "right"),
    ])
    def test_only_matching_specific_handler(self, direction, name):
        calls = []
        dispatch(direction, STATE, recording_handlers(calls))
        assert [c[0] for c in calls] == ["any", name]

    def test_none_invokes_nothing(self):
        calls = []
        dispatch(None, STATE, recording_handlers(calls))
        assert calls == []

    def test_generic_only(self):
        calls = []
        handlers = SwipeHandlers(on_swipe=lambda d, s: calls.append(d))
        dispatch(SwipeDirection.UP, STATE, handlers)
        assert calls == [SwipeDirection.UP]

    def test_specific_only(self):
        calls = []
        handlers = SwipeHandlers(on_swipe_right=lambda s: calls.append(s))
        dispatch(SwipeDirection.RIGHT, STATE, handlers)
        dispatch(SwipeDirection.LEFT, STATE, handlers)
        assert calls == [STATE]

    def test_no_handlers(self):
        dispatch(SwipeDirection.DOWN, STATE, SwipeHandlers())

    def test_callback_errors_propagate(self):
        def boom(direction, state):
            raise RuntimeError("boom")

        calls = []
        handlers = SwipeHandlers(on_swipe=boom, on_swipe_left=calls.append)
        with pytest.raises(RuntimeError, match="boom"):
            dispatch(SwipeDirection.LEFT, STATE, handlers)
        assert calls == []


class TestSwipeHandlers:
    def test_for_direction(self):
        def up(state):
            pass

        handlers = SwipeHandlers(on_swipe_up=up)
        assert handlers.for_direction(SwipeDirection.UP) is up
        assert handlers.for_direction(SwipeDirection.DOWN) is None

    def test_falsy_callables_still_fire(self):
        class Recorder:
            def __init__(self):
                self.calls = []

            def __len__(self):
                return 0

            def __call__(self, *args):
                self.calls.append(args)

        generic, left = Recorder(), Recorder()
        dispatch(SwipeDirection.LEFT, STATE, SwipeHandlers(on_swipe=generic, on_swipe_left=left))
        assert generic.calls == [(SwipeDirection.LEFT, STATE)]
        assert left.calls == [(STATE,)]
