from __future__ import annotations
import struct
from typing import ClassVar

from ..core.codec_base import ElementCodec
from ..core.model import ElementKind, FormatError
from ..io.base import BYTE_ORDER

_CODE_UNIT = struct.Struct(BYTE_ORDER + "H")


class CharCodec(ElementCodec):
    """One UTF-16 code unit per element (U+0000 .. U+FFFF)."""
    kind: ClassVar[ElementKind] = ElementKind.CHAR
    width: ClassVar[int] = _CODE_UNIT.size

    @classmethod
    def decode(cls, cursor) -> str:
        (unit,) = _CODE_UNIT.unpack(cursor.read_exact(cls.width))
        return chr(unit)

    @classmethod
    def encode(cls, value: str, sink) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise FormatError(f"Cannot encode {value!r} as char: expected a single character")
        unit = ord(value)
        if unit > 0xFFFF:
            raise FormatError(f"Cannot encode {value!r} as char: outside the 16-bit range")
        sink.write(_CODE_UNIT.pack(unit))
