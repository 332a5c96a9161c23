"""Read, write, append and truncate for TypedFile handles.

Every operation resolves the element codec before touching storage, so an
unsupported kind never creates, truncates or opens a file.
"""

from __future__ import annotations
import logging
import operator
import os
from typing import Any, Iterable, Iterator, List, Type

from .codec_base import ElementCodec
from .model import FormatError, LengthError, NotFoundError
from .registry import CodecRegistry, _REGISTRY
from .typed_file import TypedFile

logger = logging.getLogger(__name__)


def _codec_for(file: TypedFile, registry: CodecRegistry | None, *, fixed_width: bool = False) -> Type[ElementCodec]:
    return (registry or _REGISTRY).require(file.element_kind, fixed_width=fixed_width)


def _iter_elements(file: TypedFile, codec: Type[ElementCodec]) -> Iterator[Any]:
    with file.open_for_read() as cursor:
        # lookahead only asks whether another byte exists; its value is irrelevant
        while cursor.peek(1):
            yield codec.decode(cursor)


def read(file: TypedFile, *, registry: CodecRegistry | None = None) -> Iterator[Any]:
    """Lazily decode every element of `file`.

    The file is opened on the first advance and closed when the iterator is
    exhausted, closed, or garbage collected.  A trailing partial element raises
    FormatError instead of being dropped.
    """
    codec = _codec_for(file, registry)
    if not file.exists():
        raise NotFoundError(f"File doesn't exist: {file.path}")
    return _iter_elements(file, codec)


def read_all(file: TypedFile, *, registry: CodecRegistry | None = None) -> List[Any]:
    return list(read(file, registry=registry))


def _encode_all(sink_cm, codec: Type[ElementCodec], elements: Iterable[Any]) -> int:
    written = 0
    with sink_cm as sink:
        for value in elements:
            codec.encode(value, sink)
            written += 1
        logger.debug("encoded %d %s elements (%d bytes)", written, codec.kind, sink.bytes_written)
    return written


def write(file: TypedFile, elements: Iterable[Any], *, registry: CodecRegistry | None = None) -> int:
    """Replace the contents of `file` with `elements`. Returns the number written."""
    codec = _codec_for(file, registry)
    return _encode_all(file.open_for_write(), codec, elements)


def append(file: TypedFile, elements: Iterable[Any], *, registry: CodecRegistry | None = None) -> int:
    """Add `elements` after the last existing byte, creating the file if needed."""
    codec = _codec_for(file, registry)
    return _encode_all(file.open_for_append(), codec, elements)


def truncate(file: TypedFile, count: int, *, registry: CodecRegistry | None = None) -> None:
    """Shrink `file` to its first `count` elements. Never grows a file."""
    codec = _codec_for(file, registry, fixed_width=True)
    count = operator.index(count)
    if count < 0:
        raise LengthError(f"Element count cannot be negative: {count}")
    target = count * codec.width

    with file.raw_stream() as stream:
        current = stream.seek(0, os.SEEK_END)
        if current < target:
            raise LengthError(f"File is too short: {file.path} has {current} bytes, "
                              f"{count} {codec.kind} elements need {target}")
        if current > target:
            stream.seek(target)
            stream.truncate()
    logger.debug("truncated %s from %d to %d bytes", file.path, current, target)


def count(file: TypedFile, *, registry: CodecRegistry | None = None) -> int:
    """Number of elements stored in `file`."""
    codec = _codec_for(file, registry)
    if not codec.fixed_width():
        return sum(1 for _ in read(file, registry=registry))
    try:
        size = file.path.stat().st_size
    except FileNotFoundError as e:
        raise NotFoundError(f"File doesn't exist: {file.path}") from e
    if size % codec.width:
        raise FormatError(f"{file.path} holds {size} bytes, not a multiple of the {codec.kind} width {codec.width}")
    return size // codec.width
