# cli.py
# ============================================================
# Terminal front-end for FramerBot.
#   python -m src.cli "responsive navbar" --file site.framer
#   python -m src.cli "pricing table" --local        (no server, in-process generator)
# Prints the conversation to stdout; exits 1 when generation fails.
# ============================================================

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from src.settings import settings
from src.session import (
    Attachment,
    BotMessage,
    ChatSession,
    FilesSelected,
    HttpGenerationService,
    LocalGenerationService,
    SubmitQuery,
)


class ConsoleView:
    """View collaborator that writes plain text to a stream."""

    def __init__(self, out: Optional[TextIO] = None, query: str = ""):
        self.out = out
        self.query = query
        self.busy = False

    def _print(self, line: str = "") -> None:
        print(line, file=self.out or sys.stdout)

    def render_user_message(self, text: str) -> None:
        self._print(f"You: {text}")

    def render_bot_message(self, message: BotMessage) -> None:
        prefix = "💡 " if message.kind == "hint" else ""
        self._print(f"Bot: {prefix}{message.text}")
        if message.code is not None:
            self._print(message.code)

    def render_file_list(self, attachments: Sequence[Attachment]) -> None:
        for a in attachments:
            self._print(f"  📄 {a.name} ({a.size_bytes / 1024:.1f}KB)")

    def set_busy(self, busy: bool) -> None:
        self.busy = busy
        if busy:
            self._print("… Generating Perfect Framer Code...")

    def show_analyzing_indicator(self) -> None:
        self._print("… Analyzing your Framer request...")

    def hide_analyzing_indicator(self) -> None:
        pass

    def get_current_query_text(self) -> str:
        return self.query

    def clear_query_text(self) -> None:
        self.query = ""


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a Framer component from a text request.")
    parser.add_argument("query", help="What to build, e.g. 'responsive navbar'.")
    parser.add_argument("--file", dest="files", action="append", default=[], help="Attach a file (repeatable).")
    parser.add_argument("--server", default=settings.SERVICE_URL, help="FramerBot backend base URL.")
    parser.add_argument("--local", action="store_true", help="Generate in process instead of calling the backend.")
    args = parser.parse_args(argv)

    if args.local:
        from src.generate import CodeGenerator, select_model_client
        service = LocalGenerationService(CodeGenerator(model_client=select_model_client(settings)))
    else:
        service = HttpGenerationService(args.server, timeout=settings.REQUEST_TIMEOUT_S)

    try:
        files = tuple(Attachment.from_path(Path(p)) for p in args.files)
    except OSError as e:
        parser.error(f"cannot read attachment {e.filename}: {e.strerror}")

    view = ConsoleView(query=args.query)
    session = ChatSession(view, service)
    if files:
        session.dispatch(FilesSelected(files))

    outcome = session.dispatch(SubmitQuery())
    return 0 if outcome.ok else 1


if __name__ == "__main__":
    sys.exit(main())
