"""swipe-gestures - Swipe classification and dispatch for pan gestures."""

__version__ = "0.1.0"

from swipe_gestures.state import GestureState, GestureStateError, SwipeDirection, TouchEvent
from swipe_gestures.config import (
    DEFAULT_SWIPE_CONFIG,
    ConfigError,
    SwipeConfig,
    load_config,
    resolve_config,
    save_config,
)
from swipe_gestures.classifier import classify, should_claim
from swipe_gestures.dispatcher import SwipeHandlers, dispatch
from swipe_gestures.recognizer import GestureRecognizer, PanHandlers
from swipe_gestures.metrics import SwipeMetrics
