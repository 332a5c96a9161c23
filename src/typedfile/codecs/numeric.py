from __future__ import annotations
import struct
from typing import Any, ClassVar

from ..core.codec_base import ElementCodec
from ..core.model import ElementKind, FormatError
from ..io.base import BYTE_ORDER


class StructCodec(ElementCodec, register=False):
    """Fixed-width codec backed by a single struct format character."""
    fmt: ClassVar[str]

    _struct: ClassVar[struct.Struct]

    def __init_subclass__(cls, **kw):
        if "fmt" in cls.__dict__:
            cls._struct = struct.Struct(BYTE_ORDER + cls.fmt)
            cls.width = cls._struct.size
        super().__init_subclass__(**kw)

    @classmethod
    def decode(cls, cursor) -> Any:
        (value,) = cls._struct.unpack(cursor.read_exact(cls.width))
        return value

    @classmethod
    def encode(cls, value: Any, sink) -> None:
        try:
            data = cls._struct.pack(value)
        except struct.error as e:
            raise FormatError(f"Cannot encode {value!r} as {cls.kind}: {e}") from e
        sink.write(data)


class ByteCodec(StructCodec):
    kind = ElementKind.BYTE
    fmt = "B"


class Int16Codec(StructCodec):
    kind = ElementKind.INT16
    fmt = "h"


class Int32Codec(StructCodec):
    kind = ElementKind.INT32
    fmt = "i"


class Int64Codec(StructCodec):
    kind = ElementKind.INT64
    fmt = "q"


class Float64Codec(StructCodec):
    kind = ElementKind.FLOAT64
    fmt = "d"
