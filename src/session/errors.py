# Exceptions raised by the session layer.

from __future__ import annotations


class FramerBotError(Exception):
    """Base class for session errors."""


class AttachmentIndexOutOfRange(FramerBotError, IndexError):
    def __init__(self, index: int, length: int):
        super().__init__(f"attachment index {index} out of range [0, {length})")
        self.index = index
        self.length = length


class RequestInFlightRejected(FramerBotError):
    def __init__(self):
        super().__init__("a generation request is already in flight")


class GenerationServiceFailure(FramerBotError):
    """
    Any failure of the generation service: transport, non-2xx status or malformed body.
    `detail` is for logs only; users see a generic message.
    """

    TRANSPORT = "transport"
    STATUS = "status"
    MALFORMED = "malformed"

    def __init__(self, kind: str, detail: str = ""):
        super().__init__(f"generation failed ({kind}): {detail}" if detail else f"generation failed ({kind})")
        self.kind = kind
        self.detail = detail
