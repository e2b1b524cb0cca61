"""
Factories for well-known fixed-bit notations.
"""

from BitNotation.encoding.codec import Codec
from BitNotation.encoding.constants import (
    DEFAULT_ALPHABET,
    BASE16_ALPHABET,
    BASE32_ALPHABET,
    BASE32HEX_ALPHABET,
    ZBASE32_ALPHABET,
    BASE64_ALPHABET,
    BASE64URL_ALPHABET,
)


def base16() -> Codec:
    """RFC 4648 base16, upper-case hex."""
    return Codec(4, BASE16_ALPHABET, right_pad_final_bits=True)

def base32(pad: bool = True) -> Codec:
    """RFC 4648 base32, as used for OTP shared secrets."""
    return Codec(5, BASE32_ALPHABET, right_pad_final_bits=True, pad_final_group=pad)

def base32hex(pad: bool = True) -> Codec:
    """RFC 4648 base32 with the extended hex alphabet."""
    return Codec(5, BASE32HEX_ALPHABET, right_pad_final_bits=True, pad_final_group=pad)

def zbase32() -> Codec:
    """Human-oriented base32, never padded."""
    return Codec(5, ZBASE32_ALPHABET, right_pad_final_bits=True)

def base64(pad: bool = True) -> Codec:
    """RFC 4648 base64."""
    return Codec(6, BASE64_ALPHABET, right_pad_final_bits=True, pad_final_group=pad)

def base64url(pad: bool = True) -> Codec:
    """RFC 4648 base64 with the URL and filename safe alphabet."""
    return Codec(6, BASE64URL_ALPHABET, right_pad_final_bits=True, pad_final_group=pad)

def default() -> Codec:
    """Original 64-symbol notation, 6 bits per symbol."""
    return Codec(6, DEFAULT_ALPHABET)
