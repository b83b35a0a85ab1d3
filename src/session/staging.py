# Attachment staging: the files waiting to go out with the next request.
#
# add() REPLACES the staged set with the accepted part of the new batch,
# matching how a fresh file selection or drop behaves in the browser.

from __future__ import annotations
import threading
from typing import Iterable, List, Tuple

from .errors import AttachmentIndexOutOfRange
from .types import Attachment

ALLOWED_EXTENSIONS: Tuple[str, ...] = (".framer", ".json", ".zip", ".txt", ".js", ".jsx", ".ts", ".tsx")


def is_allowed(name: str, extensions: Tuple[str, ...] = ALLOWED_EXTENSIONS) -> bool:
    return name.lower().endswith(extensions)


class AttachmentStaging:
    def __init__(self, max_files: int = 20, extensions: Tuple[str, ...] = ALLOWED_EXTENSIONS):
        self.max_files = max_files
        self.extensions = extensions
        self._files: List[Attachment] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)

    def add(self, files: Iterable[Attachment]) -> Tuple[Attachment, ...]:
        """Replace staging with the allow-listed files of `files`, in order."""
        accepted = [f for f in files if is_allowed(f.name, self.extensions)][: self.max_files]
        with self._lock:
            self._files = accepted
            return tuple(accepted)

    def remove(self, index: int) -> Attachment:
        with self._lock:
            if not 0 <= index < len(self._files):
                raise AttachmentIndexOutOfRange(index, len(self._files))
            return self._files.pop(index)

    def clear(self) -> None:
        with self._lock:
            self._files = []

    def list(self) -> Tuple[Attachment, ...]:
        with self._lock:
            return tuple(self._files)

    def names(self) -> List[str]:
        return [f.name for f in self.list()]

