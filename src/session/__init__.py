# Session package
# Staging, live analysis, request orchestration and the session that ties them together.

from .errors import (
    AttachmentIndexOutOfRange,
    FramerBotError,
    GenerationServiceFailure,
    RequestInFlightRejected,
)
from .orchestrator import RequestOrchestrator
from .scheduler import LiveAnalysisScheduler, ThreadingClock
from .service import HttpGenerationService, LocalGenerationService
from .session import ChatSession, FileRemoved, FilesSelected, InputChanged, SubmitQuery
from .staging import AttachmentStaging
from .types import Attachment, BotMessage, GenerationRequest, RequestPhase, RequestState, SubmitOutcome

__all__ = [
    "AttachmentIndexOutOfRange",
    "FramerBotError",
    "GenerationServiceFailure",
    "RequestInFlightRejected",
    "RequestOrchestrator",
    "LiveAnalysisScheduler",
    "ThreadingClock",
    "HttpGenerationService",
    "LocalGenerationService",
    "ChatSession",
    "FileRemoved",
    "FilesSelected",
    "InputChanged",
    "SubmitQuery",
    "AttachmentStaging",
    "Attachment",
    "BotMessage",
    "GenerationRequest",
    "RequestPhase",
    "RequestState",
    "SubmitOutcome",
]
