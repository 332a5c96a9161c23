from __future__ import annotations
from enum import Enum


class ElementKind(str, Enum):
    INT32 = "int32"
    FLOAT64 = "float64"
    BYTE = "byte"
    CHAR = "char"
    INT16 = "int16"
    INT64 = "int64"
    BOOL = "bool"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


class TypedFileError(RuntimeError):
    """Base class for every failure raised by typedfile."""
    pass


class NotFoundError(TypedFileError, FileNotFoundError):
    """Raised when reading or truncating a file that does not exist."""
    pass


class UnsupportedTypeError(TypedFileError, TypeError):
    """Raised when no codec is registered for the requested element kind."""
    pass


class FormatError(TypedFileError, ValueError):
    """Raised when bytes on disk (or a value to be written) do not fit the element format."""
    pass


class LengthError(TypedFileError, ValueError):
    """Raised when a truncation asks for more elements than the file holds."""
    pass
