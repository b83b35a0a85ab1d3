# Shared fakes: a manual clock, a recording view and a scripted service.
import sys
import threading
from pathlib import Path
from typing import Callable, List, Optional

import pytest

# Make project root importable (so `src` is on sys.path)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.session.errors import GenerationServiceFailure
from src.session.types import Attachment, GenerationRequest


class FakeTimer:
    def __init__(self, due: int, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeClock:
    """Timers only fire when the test calls advance()."""

    def __init__(self):
        self.now = 0
        self.timers: List[FakeTimer] = []

    def call_later(self, delay_ms, callback):
        t = FakeTimer(self.now + delay_ms, callback)
        self.timers.append(t)
        return t

    def advance(self, ms: int) -> None:
        self.now += ms
        due = [t for t in self.timers if t.due <= self.now and not t.cancelled]
        self.timers = [t for t in self.timers if t not in due and not t.cancelled]
        for t in due:
            t.callback()


class RecordingView:
    def __init__(self, query: str = ""):
        self.query = query
        self.events: List[tuple] = []
        self.user_messages: List[str] = []
        self.bot_messages = []
        self.file_lists = []
        self.busy = False
        self.analyzing = 0

    def render_user_message(self, text):
        self.events.append(("user", text))
        self.user_messages.append(text)

    def render_bot_message(self, message):
        self.events.append(("bot", message))
        self.bot_messages.append(message)

    def render_file_list(self, attachments):
        self.events.append(("files", tuple(attachments)))
        self.file_lists.append(tuple(attachments))

    def set_busy(self, busy):
        self.events.append(("busy", busy))
        self.busy = busy

    def show_analyzing_indicator(self):
        self.events.append(("analyzing", True))
        self.analyzing += 1

    def hide_analyzing_indicator(self):
        self.events.append(("analyzing", False))

    def get_current_query_text(self):
        return self.query

    def clear_query_text(self):
        self.query = ""


class FakeService:
    """Returns `code`, or raises `failure`; optionally blocks until released."""

    def __init__(self, code: str = "X", failure: Optional[GenerationServiceFailure] = None, block: bool = False):
        self.code = code
        self.failure = failure
        self.calls: List[GenerationRequest] = []
        self.started = threading.Event()
        self.release = threading.Event()
        if not block:
            self.release.set()

    def generate(self, request):
        self.calls.append(request)
        self.started.set()
        self.release.wait(timeout=5)
        if self.failure is not None:
            raise self.failure
        return self.code


def make_file(name: str, content: bytes = b"{}") -> Attachment:
    return Attachment.from_bytes(name, content)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def service():
    return FakeService()
