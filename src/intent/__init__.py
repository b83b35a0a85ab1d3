# Intent package
# Exposes the classifier, the prompt augmenter and their result types.

from .classifier import classify, FRAMER_PATTERNS
from .prompts import augment
from .types import CategoryMatch, ClassificationResult, InstantReply, IntentCategory, Uncertain

__all__ = [
    "classify",
    "augment",
    "FRAMER_PATTERNS",
    "CategoryMatch",
    "ClassificationResult",
    "InstantReply",
    "IntentCategory",
    "Uncertain",
]
