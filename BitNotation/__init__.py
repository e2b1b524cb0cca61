"""
BitNotation - Fixed-Bit Binary to Text Notation Library

Encodes binary data as text using any alphabet of 2 to 256 symbols
with a fixed number of bits per symbol, covering base16, base32 and
base64 style notations in one parameterized codec.
"""

from BitNotation.version import __version__

from BitNotation.encoding.codec import Codec
from BitNotation.encoding.config import CodecConfig
from BitNotation.encoding.batch import encode_batch, decode_batch
from BitNotation.encoding.constants import DEFAULT_ALPHABET, DEFAULT_PAD_SYMBOL

from BitNotation import encoding
from BitNotation import utils
from BitNotation.encoding import presets

__all__ = [
    "__version__",
    "Codec",
    "CodecConfig",
    "encode_batch",
    "decode_batch",
    "DEFAULT_ALPHABET",
    "DEFAULT_PAD_SYMBOL",
    "encoding",
    "utils",
    "presets",
]
