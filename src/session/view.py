# The view collaborator: everything the core asks the UI to do.
# Implementations live outside the core (browser shell, ConsoleView, test fakes).

from __future__ import annotations
from typing import Protocol, Sequence

from .types import Attachment, BotMessage


class ChatView(Protocol):
    def render_user_message(self, text: str) -> None: ...

    def render_bot_message(self, message: BotMessage) -> None: ...

    def render_file_list(self, attachments: Sequence[Attachment]) -> None: ...

    def set_busy(self, busy: bool) -> None: ...

    def show_analyzing_indicator(self) -> None: ...

    def hide_analyzing_indicator(self) -> None: ...

    def get_current_query_text(self) -> str: ...

    def clear_query_text(self) -> None: ...
