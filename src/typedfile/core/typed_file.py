from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Iterable, Iterator, List

from .model import NotFoundError
from ..io.local import LocalByteCursor, LocalByteSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TypedFile:
    """A path bound to one element kind.

    The handle holds no open resources; every accessor below returns a fresh
    context manager that releases the file when the ``with`` block exits.
    """
    path: Path
    element_kind: Any

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))

    def __str__(self) -> str:
        return str(self.path)

    def exists(self) -> bool:
        return self.path.is_file()

    # --- scoped access ---
    def open_for_read(self) -> LocalByteCursor:
        try:
            return LocalByteCursor(self.path)
        except FileNotFoundError as e:
            raise NotFoundError(f"File doesn't exist: {self.path}") from e

    def open_for_write(self) -> LocalByteSink:
        return LocalByteSink(self.path)

    def open_for_append(self) -> LocalByteSink:
        return LocalByteSink(self.path, append=True)

    def raw_stream(self) -> BinaryIO:
        """Seekable read/write stream over the existing file, used for truncation."""
        try:
            return open(self.path, "r+b")
        except FileNotFoundError as e:
            raise NotFoundError(f"File doesn't exist: {self.path}") from e

    def delete(self) -> bool:
        """Remove the backing file. Returns False when there was nothing to remove."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        logger.debug("deleted %s", self.path)
        return True

    # --- operations ---
    def read(self) -> Iterator[Any]:
        from .ops import read
        return read(self)

    def read_all(self) -> List[Any]:
        from .ops import read_all
        return read_all(self)

    def write(self, elements: Iterable[Any]) -> int:
        from .ops import write
        return write(self, elements)

    def append(self, elements: Iterable[Any]) -> int:
        from .ops import append
        return append(self, elements)

    def truncate(self, count: int) -> None:
        from .ops import truncate
        truncate(self, count)

    def count(self) -> int:
        from .ops import count
        return count(self)
