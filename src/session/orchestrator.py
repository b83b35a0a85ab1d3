# ============================================================
# Request orchestrator
# ------------------------------------------------------------
# Owns the single-flight generation request:
#   classify -> (instant reply | guard | build request)
#   -> Idle->InFlight -> service call -> render outcome
#   -> always restore the view, always return to Idle.
# Staged files are cleared on success only, so a failed request
# can be retried with the same attachments.
# ============================================================

from __future__ import annotations
import threading
from typing import Callable, Optional

from src.intent import augment, classify
from src.intent.types import ClassificationResult, InstantReply
from src.logs import get_logger

from .errors import GenerationServiceFailure, RequestInFlightRejected
from .service import GenerationService
from .staging import AttachmentStaging
from .types import (
    IDLE,
    BotMessage,
    GenerationRequest,
    RequestPhase,
    RequestState,
    SubmitOutcome,
)
from .view import ChatView

logger = get_logger("orchestrator")

SUCCESS_HEADLINE = "✅ Perfect Framer Code Generated:"
FAILURE_MESSAGE = "❌ Error: Failed to generate code. Please check your OpenAI key and try again."
UNEXPECTED_ERROR = "unexpected"


class RequestOrchestrator:
    def __init__(
        self,
        view: ChatView,
        staging: AttachmentStaging,
        service: GenerationService,
        classifier: Callable[[str], ClassificationResult] = classify,
        max_context_files: int = 3,
        on_dispatch: Optional[Callable[[], None]] = None,
    ):
        self.view = view
        self.staging = staging
        self.service = service
        self.classifier = classifier
        self.max_context_files = max_context_files
        # called right before the request goes out (e.g. to drop pending live analysis)
        self.on_dispatch = on_dispatch

        self._lock = threading.Lock()
        self._state: RequestState = IDLE
        self.last_state: RequestState = IDLE

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._state.phase is RequestPhase.IN_FLIGHT

    def build_request(self, raw_query: str, classification: ClassificationResult) -> GenerationRequest:
        attachments = self.staging.list()
        prompt = augment(raw_query, classification, attachments, self.max_context_files)
        return GenerationRequest(final_prompt=prompt, attachments=attachments)

    def _enter_flight(self) -> None:
        with self._lock:
            if self._state.phase is RequestPhase.IN_FLIGHT:
                raise RequestInFlightRejected()
            self._state = RequestState(phase=RequestPhase.IN_FLIGHT)

    def _finish(self, state: RequestState) -> None:
        with self._lock:
            self.last_state = state
            self._state = IDLE

    def submit(self, raw_query: str) -> SubmitOutcome:
        classification = self.classifier(raw_query or "")

        if isinstance(classification, InstantReply):
            self.view.render_bot_message(BotMessage(text=classification.response_text))
            self.view.render_bot_message(BotMessage(text=classification.suggestion_text, kind="hint"))
            return SubmitOutcome(status="instant")

        if self.in_flight:
            logger.warning("submit rejected: request already in flight")
            raise RequestInFlightRejected()

        request = self.build_request(raw_query, classification)
        if not request.final_prompt:
            return SubmitOutcome(status="empty")

        self._enter_flight()
        final_state = RequestState(phase=RequestPhase.FAILED, error_kind="aborted")
        try:
            if self.on_dispatch is not None:
                self.on_dispatch()
            self.view.hide_analyzing_indicator()
            self.view.set_busy(True)
            self.view.render_user_message(request.final_prompt)
            self.view.clear_query_text()

            logger.info("dispatching request: %d chars, %d file(s)", len(request.final_prompt), len(request.attachments))
            try:
                code = self.service.generate(request)
            except GenerationServiceFailure as e:
                logger.error("generation failed: %s", e)
                self.view.render_bot_message(BotMessage(text=FAILURE_MESSAGE, kind="error"))
                final_state = RequestState(phase=RequestPhase.FAILED, error_kind=e.kind)
                return SubmitOutcome(status="failed", error_kind=e.kind, request=request)
            except Exception:
                logger.exception("generation service raised an unexpected error")
                self.view.render_bot_message(BotMessage(text=FAILURE_MESSAGE, kind="error"))
                final_state = RequestState(phase=RequestPhase.FAILED, error_kind=UNEXPECTED_ERROR)
                return SubmitOutcome(status="failed", error_kind=UNEXPECTED_ERROR, request=request)

            self.view.render_bot_message(BotMessage(text=SUCCESS_HEADLINE, code=code, copyable=True, kind="code"))
            self.staging.clear()
            self.view.render_file_list(self.staging.list())
            final_state = RequestState(phase=RequestPhase.SUCCEEDED, code=code)
            return SubmitOutcome(status="succeeded", code=code, request=request)
        finally:
            self.view.set_busy(False)
            self._finish(final_state)
