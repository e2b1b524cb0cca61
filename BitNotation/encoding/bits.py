"""
Bit-group arithmetic and numpy bit views for fixed-bit notations.
"""

import math
import numpy as np
from typing import Union

from BitNotation.encoding.constants import BITS_PER_BYTE


def bytes_per_group(bits_per_character: int) -> int:
    """
    Smallest number of raw bytes that encodes to whole symbols.

    Args:
        bits_per_character: Bits encoded by one symbol

    Returns:
        lcm(bits_per_character, 8) // 8
    """
    gcd = math.gcd(bits_per_character, BITS_PER_BYTE)
    return bits_per_character // gcd

def symbols_per_group(bits_per_character: int) -> int:
    """Number of symbols produced by one full byte group."""
    return bytes_per_group(bits_per_character) * BITS_PER_BYTE // bits_per_character

def symbol_count(byte_length: int, bits_per_character: int) -> int:
    """Number of data symbols for byte_length bytes, ceil(n * 8 / k)."""
    return -(-byte_length * BITS_PER_BYTE // bits_per_character)

def group_pad_count(byte_length: int, bits_per_character: int) -> int:
    """
    Number of pad symbols that complete the final byte group.

    Args:
        byte_length: Length of the raw input in bytes
        bits_per_character: Bits encoded by one symbol

    Returns:
        0 when byte_length is a whole number of groups, else the
        symbols missing from the last group
    """
    remainder = byte_length % bytes_per_group(bits_per_character)
    if remainder == 0:
        return 0
    return symbols_per_group(bits_per_character) - symbol_count(remainder, bits_per_character)

def encoded_length(byte_length: int, bits_per_character: int, pad_final_group: bool = False) -> int:
    """Length of the encoded text for byte_length bytes."""
    length = symbol_count(byte_length, bits_per_character)
    if pad_final_group:
        length += group_pad_count(byte_length, bits_per_character)
    return length

def unpack_bits(data: Union[bytes, bytearray, memoryview]) -> np.ndarray:
    """
    Unpacks bytes into a flat bit array, most significant bit first.

    Args:
        data: Raw bytes

    Returns:
        uint8 array of 0/1 values with len(data) * 8 entries
    """
    return np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8))

def pack_bits(bits: np.ndarray) -> bytes:
    """Packs a 0/1 array back into bytes; a trailing partial byte is zero-filled."""
    return np.packbits(np.asarray(bits, dtype=np.uint8)).tobytes()

def group_values(
    data: Union[bytes, bytearray, memoryview],
    bits_per_character: int,
    right_pad_final_bits: bool = False,
) -> np.ndarray:
    """
    Splits the bit stream of data into bit groups and returns their values.

    The final partial group is left-justified when right_pad_final_bits
    is set, otherwise its bits keep their low positions.

    Args:
        data: Raw bytes
        bits_per_character: Bits per group
        right_pad_final_bits: Final-bit padding policy

    Returns:
        int64 array with one value per encoded symbol
    """
    bits = unpack_bits(data)
    total = bits.size
    if total == 0:
        return np.zeros(0, dtype=np.int64)

    leftover = total % bits_per_character
    if leftover:
        filler = np.zeros(bits_per_character - leftover, dtype=np.uint8)
        if right_pad_final_bits:
            bits = np.concatenate([bits, filler])
        else:
            cut = total - leftover
            bits = np.concatenate([bits[:cut], filler, bits[cut:]])

    weights = 1 << np.arange(bits_per_character - 1, -1, -1, dtype=np.int64)
    return bits.reshape(-1, bits_per_character).astype(np.int64) @ weights
