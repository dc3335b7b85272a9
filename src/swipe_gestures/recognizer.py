"""Swipe recognizer component wired to an external pan-gesture responder.

The capture mechanism (touch tracking, responder negotiation) lives outside
this package. It is handed four callbacks through `PanHandlers`:

    recognizer = GestureRecognizer(
        config={"velocityThreshold": 0.5},
        on_swipe=lambda direction, state: print(direction),
        on_swipe_left=go_back,
    )
    responder.attach(recognizer.pan_handlers)

Both should-set callbacks answer the claim question on every start/move;
release and terminate both classify the gesture and dispatch callbacks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional

from swipe_gestures import classifier
from swipe_gestures.config import SwipeConfig, resolve_config
from swipe_gestures.dispatcher import (
    DirectionCallback,
    SwipeCallback,
    SwipeHandlers,
    dispatch,
)
from swipe_gestures.metrics import SwipeMetrics
from swipe_gestures.state import GestureState, SwipeDirection, TouchEvent

logger = logging.getLogger("swipe_gestures.recognizer")


@dataclass(frozen=True)
class PanHandlers:
    """Callbacks registered with the capture mechanism.

    Each takes (event, gesture_state).
    """
    on_start_should_set_responder: Callable[[Optional[TouchEvent], GestureState], bool]
    on_move_should_set_responder: Callable[[Optional[TouchEvent], GestureState], bool]
    on_responder_release: Callable[[Optional[TouchEvent], GestureState], Optional[SwipeDirection]]
    on_responder_terminate: Callable[[Optional[TouchEvent], GestureState], Optional[SwipeDirection]]


class GestureRecognizer:
    """Classifies single-touch drags into swipes and dispatches callbacks.

    Holds one effective SwipeConfig snapshot. `update_config` swaps in a
    freshly resolved snapshot; the old one is never modified, so a claim
    check in progress always reads one consistent configuration.
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        on_swipe: Optional[SwipeCallback] = None,
        on_swipe_up: Optional[DirectionCallback] = None,
        on_swipe_down: Optional[DirectionCallback] = None,
        on_swipe_left: Optional[DirectionCallback] = None,
        on_swipe_right: Optional[DirectionCallback] = None,
        metrics: Optional[SwipeMetrics] = None,
    ):
        self._config: SwipeConfig = resolve_config(config)
        self.handlers = SwipeHandlers(
            on_swipe=on_swipe,
            on_swipe_up=on_swipe_up,
            on_swipe_down=on_swipe_down,
            on_swipe_left=on_swipe_left,
            on_swipe_right=on_swipe_right,
        )
        self.metrics = metrics
        self._pan_handlers = PanHandlers(
            on_start_should_set_responder=self.handle_should_set_responder,
            on_move_should_set_responder=self.handle_should_set_responder,
            on_responder_release=self.handle_responder_end,
            on_responder_terminate=self.handle_responder_end,
        )

    @property
    def swipe_config(self) -> SwipeConfig:
        return self._config

    def update_config(self, overrides: Optional[Mapping[str, Any]] = None) -> SwipeConfig:
        """Re-resolve the configuration from the defaults plus new overrides."""
        config = resolve_config(overrides)
        self._config = config
        logger.info("Swipe config updated: %s", config.overrides() or "defaults")
        return config

    def set_handlers(self, **callbacks: Optional[Callable]):
        """Replace some or all callbacks, e.g. set_handlers(on_swipe_up=fn)."""
        self.handlers = replace(self.handlers, **callbacks)

    @property
    def pan_handlers(self) -> PanHandlers:
        return self._pan_handlers

    def handle_should_set_responder(
        self, event: Optional[TouchEvent], state: GestureState
    ) -> bool:
        """Claim check, run on touch start and on every move."""
        if event is not None:
            state = replace(state, touch_count=event.touch_count)

        claimed = classifier.should_claim(state, self._config)
        logger.debug(
            "Claim %s (touches=%d dx=%.1f dy=%.1f vx=%.3f vy=%.3f)",
            "granted" if claimed else "rejected",
            state.touch_count, state.dx, state.dy, state.vx, state.vy,
        )
        if self.metrics:
            self.metrics.record_claim(claimed)
        return claimed

    def handle_responder_end(
        self, event: Optional[TouchEvent], state: GestureState
    ) -> Optional[SwipeDirection]:
        """Classify a released or terminated gesture and run the callbacks."""
        config = self._config
        direction = classifier.classify(state, config)
        if direction is None:
            logger.debug("Gesture released without a swipe")
        else:
            logger.debug("Swipe %s", direction.value)

        if self.metrics:
            self.metrics.record_release(direction, state)

        dispatch(direction, state, self.handlers)
        return direction
