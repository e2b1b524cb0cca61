"""
Batch encoding and decoding of many buffers with one codec.
"""

import numpy as np
from typing import List, Optional, Sequence

from BitNotation.encoding.bits import group_pad_count, group_values
from BitNotation.encoding.codec import Codec, BytesLike


def _check_codec(codec: Codec) -> None:
    if not isinstance(codec, Codec):
        raise TypeError(f"Expected a Codec, got {type(codec).__name__}")

def encode_batch(
    codec: Codec,
    buffers: Sequence[BytesLike],
) -> List[str]:
    """
    Encodes a batch of buffers.

    Symbol values are computed on the numpy bit view of each buffer
    and mapped through the alphabet as an array.

    Args:
        codec: Configured codec
        buffers: Raw byte buffers; str items are encoded as UTF-8

    Returns:
        List of encoded texts, equal to codec.encode per item
    """
    _check_codec(codec)

    config = codec.config
    symbols = np.array(list(config.symbols))

    texts = []
    for data in buffers:
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Cannot encode object of type {type(data).__name__}")

        values = group_values(data, config.bits_per_character, config.right_pad_final_bits)
        text = "".join(symbols[values].tolist())
        if config.pad_final_group:
            text += config.pad_symbol * group_pad_count(len(bytes(data)), config.bits_per_character)
        texts.append(text)
    
    return texts

def decode_batch(
    codec: Codec,
    texts: Sequence[str],
    case_sensitive: bool = True,
    strict: bool = False,
) -> List[Optional[bytes]]:
    """
    Decodes a batch of texts.
    
    Args:
        codec: Configured codec
        texts: Encoded texts
        case_sensitive: Passed to codec.decode
        strict: Passed to codec.decode; failed items are None
    
    Returns:
        List of decoded buffers
    """
    _check_codec(codec)

    return [codec.decode(text, case_sensitive=case_sensitive, strict=strict) for text in texts]
