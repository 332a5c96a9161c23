"""Variable-width text: a 7-bit encoded byte count followed by UTF-8 payload.

Each byte of the count carries seven bits of the value, least significant group
first; the high bit is set on every byte except the last.  A count never needs
more than VARINT_MAX_BYTES bytes and never exceeds MAX_TEXT_BYTES.
"""

from __future__ import annotations
from typing import ClassVar

from ..core.codec_base import ElementCodec
from ..core.model import ElementKind, FormatError
from ..io.base import MAX_TEXT_BYTES, VARINT_MAX_BYTES


def encode_length(n: int) -> bytes:
    if n < 0 or n > MAX_TEXT_BYTES:
        raise FormatError(f"Text length {n} outside 0..{MAX_TEXT_BYTES}")
    out = bytearray()
    while n >= 0x80:
        out.append((n & 0x7F) | 0x80)
        n >>= 7
    out.append(n)
    return bytes(out)


def decode_length(cursor) -> int:
    n = 0
    for i in range(VARINT_MAX_BYTES):
        b = cursor.read_exact(1)[0]
        n |= (b & 0x7F) << (7 * i)
        if not b & 0x80:
            if n > MAX_TEXT_BYTES:
                raise FormatError(f"Text length {n} exceeds {MAX_TEXT_BYTES}")
            return n
    raise FormatError(f"Text length prefix longer than {VARINT_MAX_BYTES} bytes")


class TextCodec(ElementCodec):
    kind: ClassVar[ElementKind] = ElementKind.TEXT
    width: ClassVar[None] = None

    @classmethod
    def decode(cls, cursor) -> str:
        length = decode_length(cursor)
        payload = cursor.read_exact(length)
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"Invalid UTF-8 in text element: {e}") from e

    @classmethod
    def encode(cls, value: str, sink) -> None:
        if not isinstance(value, str):
            raise FormatError(f"Cannot encode {value!r} as text")
        try:
            payload = value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FormatError(f"Cannot encode {value!r} as text: {e}") from e
        sink.write(encode_length(len(payload)) + payload)
