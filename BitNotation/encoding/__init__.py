"""
Fixed-bit encoding and decoding for BitNotation.

Handles conversion between binary data and text notations.
"""

from BitNotation.encoding.codec import Codec
from BitNotation.encoding.config import CodecConfig
from BitNotation.encoding.charmap import SymbolIndex
from BitNotation.encoding.batch import encode_batch, decode_batch
from BitNotation.encoding.bits import (
    bytes_per_group,
    group_pad_count,
    encoded_length,
    unpack_bits,
    pack_bits,
    group_values,
)
from BitNotation.encoding.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_PAD_SYMBOL,
    MAX_BITS_PER_CHARACTER,
)
from BitNotation.encoding import presets

__all__ = [
    "Codec",
    "CodecConfig",
    "SymbolIndex",
    "encode_batch",
    "decode_batch",
    "bytes_per_group",
    "group_pad_count",
    "encoded_length",
    "unpack_bits",
    "pack_bits",
    "group_values",
    "DEFAULT_ALPHABET",
    "DEFAULT_PAD_SYMBOL",
    "MAX_BITS_PER_CHARACTER",
    "presets",
]
