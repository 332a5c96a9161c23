"""Local file cursors (mmap-backed) and sinks."""

import io
import logging
import mmap
from pathlib import Path
from typing import BinaryIO, Union

from ..core.model import FormatError

logger = logging.getLogger(__name__)


class LocalByteCursor:
    """Forward-only cursor over a local file using mmap."""

    def __init__(self, source: Union[Path, str, BinaryIO]):
        self.position = 0
        self.bytes_read = 0
        self._file = None
        self._mmap = None
        self._data = None  # For in-memory sources and empty files
        self._should_close_file = False
        self._closed = False

        if hasattr(source, 'read'):
            # BinaryIO object
            self._file = source
            if isinstance(source, io.BytesIO):
                self._data = source.getvalue()
        else:
            # Path or str
            self._file = open(source, 'rb')
            self._should_close_file = True
            logger.debug("opened %s for reading", source)

    def _ensure_buffer(self):
        """Create mmap on first access."""
        if self._mmap is not None or self._data is not None:
            return
        if not self._file.seekable():
            self._data = self._file.read()
            return
        self._file.seek(0, 2)  # Seek to end
        file_size = self._file.tell()
        self._file.seek(0)
        if file_size == 0:
            # mmap refuses zero-length files
            self._data = b""
            return
        try:
            self._mmap = mmap.mmap(self._file.fileno(), 0, access=mmap.ACCESS_READ)
        except (io.UnsupportedOperation, OSError):
            # Fallback for objects without a usable fileno()
            self._data = self._file.read()

    @property
    def _buffer(self):
        self._ensure_buffer()
        return self._mmap if self._mmap is not None else self._data

    @property
    def size(self) -> int:
        """Return the total size of the source in bytes."""
        return len(self._buffer)

    @property
    def remaining(self) -> int:
        return self.size - self.position

    def peek(self, length: int = 1) -> bytes:
        """Return up to `length` bytes at the current position without advancing."""
        if length < 0:
            raise ValueError("Length cannot be negative")
        return bytes(self._buffer[self.position:self.position + length])

    def read_exact(self, length: int) -> bytes:
        """Return exactly `length` bytes and advance past them."""
        if length < 0:
            raise ValueError("Length cannot be negative")
        buf = self._buffer
        if self.position + length > len(buf):
            raise FormatError(f"Not enough data: needed {length} bytes at offset {self.position}, "
                              f"but file only has {len(buf)} bytes")
        data = bytes(buf[self.position:self.position + length])
        self.position += length
        self.bytes_read += length
        return data

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close mmap and file if we opened it."""
        self._closed = True
        if self._mmap is not None:
            self._mmap.close()
            self._mmap = None
        if self._should_close_file and self._file is not None:
            logger.debug("closed %s after %d bytes", getattr(self._file, 'name', self._file), self.bytes_read)
            self._file.close()
            self._file = None

    @property
    def closed(self) -> bool:
        return self._closed


class LocalByteSink:
    """Write-only sink over a local file, in overwrite or append mode."""

    def __init__(self, source: Union[Path, str, BinaryIO], *, append: bool = False):
        self.bytes_written = 0
        self._should_close_file = False

        if hasattr(source, 'write'):
            self._file = source
        else:
            self._file = open(source, 'ab' if append else 'wb')
            self._should_close_file = True
            logger.debug("opened %s for %s", source, "append" if append else "overwrite")

    def write(self, data: bytes) -> None:
        self._file.write(data)
        self.bytes_written += len(data)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Flush and close the file if we opened it."""
        if self._file is None:
            return
        if self._should_close_file:
            logger.debug("closed %s after %d bytes", getattr(self._file, 'name', self._file), self.bytes_written)
            self._file.close()
        else:
            self._file.flush()
        self._file = None

    @property
    def closed(self) -> bool:
        return self._file is None


def open_local_cursor(source: Union[Path, str, BinaryIO]) -> LocalByteCursor:
    """Create a byte cursor over a local file or binary stream."""
    return LocalByteCursor(source)


def open_local_sink(source: Union[Path, str, BinaryIO], *, append: bool = False) -> LocalByteSink:
    """Create a byte sink over a local file or binary stream."""
    return LocalByteSink(source, append=append)
