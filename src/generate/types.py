# Typed dataclasses shared across the generator and its model clients.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass
class CodeResponse:
    """Generated component code plus the raw reply and engine metadata."""
    code: str
    raw: str
    meta: Dict[str, Any] = field(default_factory=dict)
