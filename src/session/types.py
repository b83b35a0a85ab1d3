# Shared dataclasses for the session layer.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Attachment:
    """A staged file: original name, size and raw bytes."""
    name: str
    size_bytes: int
    content: bytes = field(default=b"", repr=False)

    @classmethod
    def from_bytes(cls, name: str, content: bytes) -> "Attachment":
        return cls(name=name, size_bytes=len(content), content=content)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Attachment":
        p = Path(path)
        return cls.from_bytes(p.name, p.read_bytes())


@dataclass(frozen=True)
class GenerationRequest:
    final_prompt: str
    attachments: Tuple[Attachment, ...] = ()


@dataclass(frozen=True)
class BotMessage:
    """Structured bot output handed to the view; never markup."""
    text: str
    code: Optional[str] = None
    copyable: bool = False
    kind: str = "info"  # info | hint | code | error


class RequestPhase(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestState:
    phase: RequestPhase = RequestPhase.IDLE
    code: Optional[str] = None
    error_kind: Optional[str] = None


IDLE = RequestState()


@dataclass(frozen=True)
class SubmitOutcome:
    """What happened to one submit() call."""
    status: str  # instant | empty | succeeded | failed
    code: Optional[str] = None
    error_kind: Optional[str] = None
    request: Optional[GenerationRequest] = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"
