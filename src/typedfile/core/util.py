from __future__ import annotations
from typing import Any, Dict, Iterable, Iterator
from .model import ElementKind

# Python types accepted in place of an ElementKind
_PY_TYPE_MAP: Dict[type, ElementKind] = {
    int: ElementKind.INT32,
    float: ElementKind.FLOAT64,
    bool: ElementKind.BOOL,
    str: ElementKind.TEXT,
}

_TRUE_WORDS = {"true", "1", "yes", "y"}
_FALSE_WORDS = {"false", "0", "no", "n"}


def resolve_kind(kind: Any) -> ElementKind | None:
    """Normalise an ElementKind, its name, or a Python type; None if unknown."""
    if isinstance(kind, ElementKind):
        return kind
    if isinstance(kind, str):
        try:
            return ElementKind(kind.strip().lower())
        except ValueError:
            return None
    if isinstance(kind, type):
        return _PY_TYPE_MAP.get(kind)
    return None


def value_range(begin: int, end: int | None = None) -> Iterator[int]:
    """Yield integers from begin to end (excluded), counting down when begin > end.

    With a single argument, yields 0 .. begin-1.
    """
    if end is None:
        begin, end = 0, begin
    step = 1 if begin < end else -1
    i = begin
    while i != end:
        yield i
        i += step


def join_values(values: Iterable[Any], sep: str = " ") -> str:
    """Render a sequence the way the console printer does (separator after every element)."""
    return "".join(f"{v}{sep}" for v in values)


def parse_value(kind: ElementKind, text: str) -> Any:
    """Parse console text into a value of the given kind. Raises ValueError on bad input."""
    resolved = resolve_kind(kind)
    if resolved is None:
        raise ValueError(f"Unknown element kind {kind!r}")
    kind = resolved
    if kind in (ElementKind.INT32, ElementKind.INT16, ElementKind.INT64, ElementKind.BYTE):
        return int(text.strip())
    if kind is ElementKind.FLOAT64:
        return float(text.strip())
    if kind is ElementKind.BOOL:
        word = text.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"Not a boolean: {text!r}")
    if kind is ElementKind.CHAR:
        if len(text) != 1:
            raise ValueError(f"Expected a single character, got {text!r}")
        return text
    return text
