"""I/O layer for typedfile - byte cursors for decoders, byte sinks for encoders."""

# Re-export these for import convenience
from .base import ByteCursor, ByteSink, BYTE_ORDER, MAX_TEXT_BYTES, VARINT_MAX_BYTES
from .local import LocalByteCursor, LocalByteSink, open_local_cursor, open_local_sink

__all__ = [
    "ByteCursor", "ByteSink", "BYTE_ORDER", "MAX_TEXT_BYTES", "VARINT_MAX_BYTES",
    "LocalByteCursor", "LocalByteSink", "open_local_cursor", "open_local_sink",
]
