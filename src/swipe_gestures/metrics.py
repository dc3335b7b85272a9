"""Prometheus-compatible counters for swipe recognition.

Generates the text exposition format directly, no client library needed.

Tracked metrics:
- swipe_gestures_claims_total (counter, by result: granted/rejected)
- swipe_gestures_swipes_total (counter, by direction)
- swipe_gestures_unrecognized_total (counter)
- swipe_gestures_release_speed (histogram of max(|vx|, |vy|) at release)
"""

from __future__ import annotations

import threading
import time
from collections import Counter
from typing import Optional

from swipe_gestures.state import GestureState, SwipeDirection


class _Histogram:
    """Simple histogram with configurable buckets."""

    def __init__(self, buckets: list[float]):
        self.buckets = sorted(buckets)
        self.bucket_counts = [0] * len(self.buckets)
        self.count = 0
        self.sum = 0.0
        self._lock = threading.Lock()

    def observe(self, value: float):
        with self._lock:
            self.count += 1
            self.sum += value
            for i, b in enumerate(self.buckets):
                if value <= b:
                    self.bucket_counts[i] += 1
                    break

    def render(self, name: str, help_text: str) -> str:
        lines = [
            f"# HELP {name} {help_text}",
            f"# TYPE {name} histogram",
        ]
        with self._lock:
            cumulative = 0
            for i, b in enumerate(self.buckets):
                cumulative += self.bucket_counts[i]
                lines.append(f'{name}_bucket{{le="{b}"}} {cumulative}')
            lines.append(f'{name}_bucket{{le="+Inf"}} {self.count}')
            lines.append(f"{name}_sum {self.sum:.6f}")
            lines.append(f"{name}_count {self.count}")
        return "\n".join(lines)


class SwipeMetrics:
    """Collects claim and swipe counts from a GestureRecognizer."""

    def __init__(self):
        self._claims: Counter = Counter()
        self._swipes: Counter = Counter()
        self._unrecognized = 0
        self._lock = threading.Lock()

        # Release speed in points per millisecond
        self._release_speed = _Histogram([0.1, 0.3, 0.5, 1.0, 2.0, 5.0])

        self._start_time = time.time()

    def record_claim(self, granted: bool):
        with self._lock:
            self._claims["granted" if granted else "rejected"] += 1

    def record_release(self, direction: Optional[SwipeDirection], state: GestureState):
        with self._lock:
            if direction is None:
                self._unrecognized += 1
            else:
                self._swipes[direction.value] += 1
        self._release_speed.observe(max(abs(state.vx), abs(state.vy)))

    def render(self) -> str:
        """Render all metrics in Prometheus text exposition format."""
        lines: list[str] = []

        uptime = time.time() - self._start_time
        lines.append("# HELP swipe_gestures_uptime_seconds Time since collector creation")
        lines.append("# TYPE swipe_gestures_uptime_seconds gauge")
        lines.append(f"swipe_gestures_uptime_seconds {uptime:.1f}")
        lines.append("")

        lines.append("# HELP swipe_gestures_claims_total Claim decisions by result")
        lines.append("# TYPE swipe_gestures_claims_total counter")
        with self._lock:
            for result, count in sorted(self._claims.items()):
                lines.append(f'swipe_gestures_claims_total{{result="{result}"}} {count}')
        lines.append("")

        lines.append("# HELP swipe_gestures_swipes_total Recognized swipes by direction")
        lines.append("# TYPE swipe_gestures_swipes_total counter")
        with self._lock:
            for direction, count in sorted(self._swipes.items()):
                lines.append(f'swipe_gestures_swipes_total{{direction="{direction}"}} {count}')
        lines.append("")

        lines.append("# HELP swipe_gestures_unrecognized_total Releases that matched no swipe")
        lines.append("# TYPE swipe_gestures_unrecognized_total counter")
        with self._lock:
            unrecognized = self._unrecognized
        lines.append(f"swipe_gestures_unrecognized_total {unrecognized}")
        lines.append("")

        lines.append(self._release_speed.render(
            "swipe_gestures_release_speed",
            "Dominant-axis velocity at release",
        ))
        lines.append("")

        return "\n".join(lines) + "\n"

    @property
    def swipe_counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._swipes)

    @property
    def claim_counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._claims)

    @property
    def unrecognized(self) -> int:
        with self._lock:
            return self._unrecognized
