from __future__ import annotations
import warnings
from typing import Any, Dict, List, Type

from .codec_base import ElementCodec
from .model import ElementKind, UnsupportedTypeError
from .util import resolve_kind


class CodecRegistry:
    def __init__(self) -> None:
        self._codecs: Dict[ElementKind, Type[ElementCodec]] = {}

    # called from ElementCodec.__init_subclass__
    def register(self, codec_cls: Type[ElementCodec]) -> None:
        kind = codec_cls.kind
        previous = self._codecs.get(kind)
        if previous is not None and previous is not codec_cls:
            warnings.warn(f"{codec_cls.__name__} replaces {previous.__name__} for {kind}")
        self._codecs[kind] = codec_cls

    def unregister(self, kind: Any) -> None:
        resolved = resolve_kind(kind)
        if resolved is not None:
            self._codecs.pop(resolved, None)

    def kinds(self) -> List[ElementKind]:
        return sorted(self._codecs, key=lambda k: k.value)

    # --- lookup helpers ---
    def lookup(self, kind: Any) -> Type[ElementCodec] | None:
        """Return the codec for `kind`, or None when the kind is not registered."""
        resolved = resolve_kind(kind)
        if resolved is None:
            return None
        return self._codecs.get(resolved)

    def require(self, kind: Any, *, fixed_width: bool = False) -> Type[ElementCodec]:
        codec = self.lookup(kind)
        if codec is None:
            raise UnsupportedTypeError(f"No codec for element kind {kind!r}")
        if fixed_width and not codec.fixed_width():
            raise UnsupportedTypeError(f"Element kind {codec.kind} has no fixed width")
        return codec

    def __contains__(self, kind: Any) -> bool:
        return self.lookup(kind) is not None


# singleton used project-wide
_REGISTRY = CodecRegistry()
