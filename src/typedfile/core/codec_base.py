from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .model import ElementKind


class ElementCodec(ABC):
    # --- required by subclasses ---
    kind: ClassVar[ElementKind]
    width: ClassVar[int | None]              # bytes per element, None = variable

    @classmethod
    @abstractmethod
    def decode(cls, cursor) -> Any:
        """Read exactly one element from a ByteCursor and advance past it."""
        ...

    @classmethod
    @abstractmethod
    def encode(cls, value: Any, sink) -> None:
        """Write one element to a ByteSink using the layout decode() consumes."""
        ...

    @classmethod
    def fixed_width(cls) -> bool:
        return cls.width is not None

    # --- registry hook ---
    def __init_subclass__(cls, register: bool = True, **kw):
        super().__init_subclass__(**kw)
        if register and "kind" in cls.__dict__:
            from .registry import _REGISTRY
            _REGISTRY.register(cls)           # noqa: E402
