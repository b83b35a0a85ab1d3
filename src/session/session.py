# ChatSession: one user's staging area, request state and live analysis,
# driven through four commands instead of ad-hoc UI callbacks.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from src.logs import get_logger
from src.settings import Settings, settings as default_settings

from .orchestrator import RequestOrchestrator
from .scheduler import Clock, LiveAnalysisScheduler
from .service import GenerationService
from .staging import AttachmentStaging
from .types import Attachment, BotMessage, SubmitOutcome
from .view import ChatView

logger = get_logger("session")

WELCOME_MESSAGE = (
    "🚀 Welcome to FramerBot!\n"
    "I'm analyzing your questions instantly. Try:\n"
    '• "responsive navbar"\n'
    '• "hero section animation"\n'
    "• Upload Framer files for analysis"
)


@dataclass(frozen=True)
class InputChanged:
    text: str


@dataclass(frozen=True)
class SubmitQuery:
    text: Optional[str] = None  # None: read from the view


@dataclass(frozen=True)
class FilesSelected:
    files: Tuple[Attachment, ...]


@dataclass(frozen=True)
class FileRemoved:
    index: int


Command = Union[InputChanged, SubmitQuery, FilesSelected, FileRemoved]


class ChatSession:
    def __init__(
        self,
        view: ChatView,
        service: GenerationService,
        clock: Optional[Clock] = None,
        config: Optional[Settings] = None,
        welcome: bool = True,
    ):
        cfg = config or default_settings
        self.view = view
        self.staging = AttachmentStaging(max_files=cfg.MAX_STAGED_FILES)
        self.scheduler = LiveAnalysisScheduler(
            view,
            clock=clock,
            delay_ms=cfg.DEBOUNCE_MS,
            min_chars=cfg.LIVE_MIN_CHARS,
        )
        self.orchestrator = RequestOrchestrator(
            view,
            self.staging,
            service,
            max_context_files=cfg.MAX_CONTEXT_FILES,
            on_dispatch=self.scheduler.cancel,
        )
        if welcome:
            view.render_bot_message(BotMessage(text=WELCOME_MESSAGE))

    # -------------------------
    # Command handlers
    # -------------------------
    def on_input(self, text: str) -> None:
        self.scheduler.on_input(text)

    def on_submit(self, text: Optional[str] = None) -> SubmitOutcome:
        query = self.view.get_current_query_text() if text is None else text
        return self.orchestrator.submit(query)

    def on_files_selected(self, files: Sequence[Attachment]) -> Tuple[Attachment, ...]:
        accepted = self.staging.add(files)
        skipped = len(files) - len(accepted)
        if skipped:
            logger.info("ignored %d file(s) outside the allow-list or limit", skipped)
        self.view.render_file_list(accepted)
        self.view.render_bot_message(
            BotMessage(text=f"📁 {len(accepted)} Framer-compatible file(s) loaded for analysis!")
        )
        return accepted

    def on_file_removed(self, index: int) -> Attachment:
        removed = self.staging.remove(index)
        self.view.render_file_list(self.staging.list())
        return removed

    def dispatch(self, command: Command):
        if isinstance(command, InputChanged):
            return self.on_input(command.text)
        if isinstance(command, SubmitQuery):
            return self.on_submit(command.text)
        if isinstance(command, FilesSelected):
            return self.on_files_selected(command.files)
        if isinstance(command, FileRemoved):
            return self.on_file_removed(command.index)
        raise TypeError(f"unknown command: {command!r}")
