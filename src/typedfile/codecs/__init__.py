"""Element codecs for typedfile."""

from .numeric import ByteCodec, Int16Codec, Int32Codec, Int64Codec, Float64Codec
from .char import CharCodec
from .boolean import BoolCodec
from .text import TextCodec
