"""typedfile - read, write, append and truncate files of fixed-kind binary elements."""

from .core.model import (                                              # re-export
    ElementKind, TypedFileError, NotFoundError, UnsupportedTypeError, FormatError, LengthError,
)
from .core.registry import _REGISTRY, CodecRegistry                   # singleton
from .core.typed_file import TypedFile
from .core.ops import read, read_all, write, append, truncate, count

# Import codecs to trigger registration
from .codecs import numeric, char, boolean, text  # noqa: F401


__all__ = [
    "TypedFile", "ElementKind", "CodecRegistry",
    "read", "read_all", "write", "append", "truncate", "count",
    "TypedFileError", "NotFoundError", "UnsupportedTypeError", "FormatError", "LengthError",
]
