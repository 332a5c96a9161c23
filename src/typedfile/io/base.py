"""Base protocols and shared constants for the I/O layer."""

from typing import Protocol, runtime_checkable


BYTE_ORDER = "<"                 # struct prefix for every fixed-width kind
MAX_TEXT_BYTES = 2**31 - 1       # largest text payload a length prefix may announce
VARINT_MAX_BYTES = 5             # 7-bit groups needed to hold MAX_TEXT_BYTES


@runtime_checkable
class ByteCursor(Protocol):
    """Protocol for forward-only byte cursors handed to decoders."""

    position: int  # absolute offset of the next unread byte

    def peek(self, length: int = 1) -> bytes:
        """Return up to `length` upcoming bytes without advancing.
        An empty result means the cursor is exhausted.
        """
        ...

    def read_exact(self, length: int) -> bytes:
        """Return exactly `length` bytes and advance past them.
        If fewer remain → raise FormatError.
        """
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Protocol for append-only byte sinks handed to encoders."""

    bytes_written: int  # running total for this sink

    def write(self, data: bytes) -> None:
        ...
