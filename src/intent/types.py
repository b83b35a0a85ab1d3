# Data models for the intent layer.
# Every classification produces exactly one of CategoryMatch, InstantReply, Uncertain.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

MATCH_CONFIDENCE = 0.8
UNCERTAIN_CONFIDENCE = 0.3


class IntentCategory(str, Enum):
    """Kinds of Framer component a query can ask for, in catalog order."""
    NAVBAR = "navbar"
    HERO = "hero"
    PRICING = "pricing"
    TESTIMONIAL = "testimonial"
    FORM = "form"
    BUTTON = "button"
    CARD = "card"
    ANIMATION = "animation"
    RESPONSIVE = "responsive"


@dataclass(frozen=True)
class CategoryMatch:
    category: IntentCategory
    confidence: float
    suggestion: str = ""


@dataclass(frozen=True)
class InstantReply:
    """Canned answer rendered without calling the generation service."""
    response_text: str
    suggestion_text: str


@dataclass(frozen=True)
class Uncertain:
    confidence: float = UNCERTAIN_CONFIDENCE


ClassificationResult = Union[CategoryMatch, InstantReply, Uncertain]

# (category, keywords) pairs; order is the tie-break
Catalog = Tuple[Tuple[IntentCategory, Tuple[str, ...]], ...]
