from __future__ import annotations
from typing import ClassVar

from ..core.codec_base import ElementCodec
from ..core.model import ElementKind, FormatError

_TRUE = b"\x01"
_FALSE = b"\x00"


class BoolCodec(ElementCodec):
    kind: ClassVar[ElementKind] = ElementKind.BOOL
    width: ClassVar[int] = 1

    @classmethod
    def decode(cls, cursor) -> bool:
        # any non-zero byte reads as true
        return cursor.read_exact(cls.width) != _FALSE

    @classmethod
    def encode(cls, value: bool, sink) -> None:
        if not isinstance(value, int):
            raise FormatError(f"Cannot encode {value!r} as bool")
        sink.write(_TRUE if value else _FALSE)
