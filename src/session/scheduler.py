# ============================================================
# Live analysis scheduler (debounce)
# ------------------------------------------------------------
# Each qualifying keystroke bumps a generation counter, cancels the
# outstanding timer and schedules a new one. A timer only evaluates if
# its token still equals the current generation when it fires, so a
# cancelled timer that races its own cancel() is a no-op.
# ============================================================

from __future__ import annotations
import threading
from typing import Callable, Optional, Protocol

from src.intent import classify
from src.intent.types import ClassificationResult
from src.logs import get_logger

from .view import ChatView

logger = get_logger("live_analysis")

ANALYZING_THRESHOLD = 0.6


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingClock:
    """Wall-clock timers backed by threading.Timer."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        t = threading.Timer(delay_ms / 1000.0, callback)
        t.daemon = True
        t.start()
        return t


class LiveAnalysisScheduler:
    def __init__(
        self,
        view: ChatView,
        clock: Optional[Clock] = None,
        delay_ms: int = 500,
        min_chars: int = 3,
        classifier: Callable[[str], ClassificationResult] = classify,
    ):
        self.view = view
        self.clock = clock or ThreadingClock()
        self.delay_ms = delay_ms
        self.min_chars = min_chars
        self.classifier = classifier

        self._lock = threading.Lock()
        self._generation = 0
        self._timer: Optional[TimerHandle] = None
        self._text = ""
        self.last_result: Optional[ClassificationResult] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def on_input(self, text: str) -> None:
        if len(text) < self.min_chars:
            return
        with self._lock:
            self._generation += 1
            token = self._generation
            self._text = text
            if self._timer is not None:
                self._timer.cancel()
            self._timer = self.clock.call_later(self.delay_ms, lambda: self._fire(token))

    def cancel(self) -> None:
        """Drop any pending evaluation."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _fire(self, token: int) -> None:
        with self._lock:
            if token != self._generation:
                logger.debug("stale live-analysis token %d dropped", token)
                return
            self._timer = None
            text = self._text

        result = self.classifier(text)
        self.last_result = result
        # instant replies carry no confidence and never show the indicator
        if getattr(result, "confidence", 0.0) <= ANALYZING_THRESHOLD:
            return
        with self._lock:
            # cancelled while classifying: a submit may already have hidden the indicator
            if token != self._generation:
                return
            self.view.show_analyzing_indicator()
