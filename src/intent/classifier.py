# ============================================================
# Intent classifier
# ------------------------------------------------------------
# Keyword-based, first-match-wins:
#   1) help / how-to        -> InstantReply
#   2) examples / samples   -> InstantReply
#   3) component catalog    -> CategoryMatch (0.8)
#   4) nothing              -> Uncertain (0.3)
# Pure: no I/O, no state.
# ============================================================

from __future__ import annotations
from typing import Optional, Tuple

from .types import (
    Catalog,
    CategoryMatch,
    ClassificationResult,
    InstantReply,
    IntentCategory,
    MATCH_CONFIDENCE,
    UNCERTAIN_CONFIDENCE,
    Uncertain,
)

FRAMER_PATTERNS: Catalog = (
    (IntentCategory.NAVBAR, ("nav", "navbar", "menu", "header", "navigation")),
    (IntentCategory.HERO, ("hero", "landing", "banner", "header section", "main section")),
    (IntentCategory.PRICING, ("price", "pricing", "plan", "subscription")),
    (IntentCategory.TESTIMONIAL, ("testimonial", "review", "customer", "feedback")),
    (IntentCategory.FORM, ("form", "contact", "signup", "login")),
    (IntentCategory.BUTTON, ("button", "cta", "call to action")),
    (IntentCategory.CARD, ("card", "product", "feature")),
    (IntentCategory.ANIMATION, ("animate", "animation", "motion", "transition")),
    (IntentCategory.RESPONSIVE, ("responsive", "mobile", "tablet", "adaptive")),
)

HELP_TRIGGERS: Tuple[str, ...] = ("help", "how")
EXAMPLE_TRIGGERS: Tuple[str, ...] = ("example", "sample")

HELP_REPLY = InstantReply(
    response_text=(
        "I'm ready to generate perfect Framer code! Ask me to create navbars, heroes, "
        "pricing tables, or upload your Framer files for analysis."
    ),
    suggestion_text="Try: 'Create responsive navbar' or upload your project files!",
)

EXAMPLES_REPLY = InstantReply(
    response_text=(
        "Here are popular Framer components I can create:\n"
        "• Responsive Navbar\n"
        "• Hero Section\n"
        "• Pricing Cards\n"
        "• Testimonial Carousel\n"
        "• Contact Forms"
    ),
    suggestion_text="Pick one or describe your component!",
)


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def match_category(text: str, catalog: Catalog = FRAMER_PATTERNS) -> Optional[IntentCategory]:
    """First category (catalog order) with any keyword as a substring of `text`."""
    for category, keywords in catalog:
        if _contains_any(text, keywords):
            return category
    return None


def classify(text: str, catalog: Catalog = FRAMER_PATTERNS) -> ClassificationResult:
    query = (text or "").strip().lower()

    if _contains_any(query, HELP_TRIGGERS):
        return HELP_REPLY
    if _contains_any(query, EXAMPLE_TRIGGERS):
        return EXAMPLES_REPLY

    category = match_category(query, catalog)
    if category is not None:
        return CategoryMatch(
            category=category,
            confidence=MATCH_CONFIDENCE,
            suggestion=(
                f"Detected {category.value} component request. "
                f"Generating optimized Framer {category.value}..."
            ),
        )
    return Uncertain(confidence=UNCERTAIN_CONFIDENCE)
