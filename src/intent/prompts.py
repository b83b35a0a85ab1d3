# Prompt fragments and the augmenter that turns a raw query into the
# final generation prompt.

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from .types import CategoryMatch, ClassificationResult, InstantReply

if TYPE_CHECKING:
    from src.session.types import Attachment

MAX_CONTEXT_FILES = 3

FILE_CONTEXT_TEMPLATE = """\

CONTEXT: Analyze these Framer files: {names}
Generate compatible code components."""

COMPONENT_TEMPLATE = """\
Create a professional Framer {category} component. {query}
Include: PropertyControls, responsive design, smooth animations, best practices."""


def build_file_context(names: Sequence[str], limit: int = MAX_CONTEXT_FILES) -> str:
    return FILE_CONTEXT_TEMPLATE.format(names=", ".join(names[:limit]))


def augment(
    raw_query: str,
    classification: ClassificationResult,
    attachments: Sequence["Attachment"] = (),
    max_context_files: int = MAX_CONTEXT_FILES,
) -> str:
    """
    Final prompt for the generation service.
    Returns "" when nothing should be submitted: instant replies and blank queries.
    """
    if isinstance(classification, InstantReply):
        return ""

    query = (raw_query or "").strip()
    if not query:
        return ""

    if attachments:
        query = query + "\n" + build_file_context([a.name for a in attachments], max_context_files)

    if isinstance(classification, CategoryMatch):
        query = COMPONENT_TEMPLATE.format(category=classification.category.value, query=query)

    return query
