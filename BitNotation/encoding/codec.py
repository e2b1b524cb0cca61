"""
Fixed-bit binary to text codec.

Encodes bytes as text using a fixed number of bits per symbol and
decodes such text back into bytes.
"""

from typing import Optional, Union

from BitNotation.encoding.bits import group_pad_count
from BitNotation.encoding.charmap import SymbolIndex
from BitNotation.encoding.config import CodecConfig
from BitNotation.encoding.constants import BITS_PER_BYTE, DEFAULT_PAD_SYMBOL
from BitNotation.utils.logging import get_logger


BytesLike = Union[bytes, bytearray, memoryview, str]


class Codec:
    """
    Binary to text codec for any alphabet of 2 to 256 symbols.

    Covers base16, base32 and base64 style notations as well as
    informal ones, as long as every symbol carries the same number
    of bits.

    Usage:
        codec = Codec(5, "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
                      right_pad_final_bits=True, pad_final_group=True)

        text = codec.encode(b"hello")
        data = codec.decode(text)

        # Unknown symbols are skipped unless strict is set
        codec.decode("NBSWY3DP?", strict=True)  # None
    """

    def __init__(
        self,
        bits_per_character: int,
        alphabet: Optional[str] = None,
        right_pad_final_bits: bool = False,
        pad_final_group: bool = False,
        pad_symbol: str = DEFAULT_PAD_SYMBOL,
    ):
        self.config = CodecConfig.create(
            bits_per_character,
            alphabet=alphabet,
            right_pad_final_bits=right_pad_final_bits,
            pad_final_group=pad_final_group,
            pad_symbol=pad_symbol,
        )
        self.charmap = SymbolIndex(self.config.symbols)

    @classmethod
    def from_config(cls, config: CodecConfig) -> "Codec":
        """Creates a codec from an existing configuration."""
        return cls(**config.to_dict())

    @property
    def bits_per_character(self) -> int:
        return self.config.bits_per_character

    @property
    def radix(self) -> int:
        return self.config.radix

    @property
    def alphabet(self) -> str:
        return self.config.alphabet

    @property
    def pad_symbol(self) -> str:
        return self.config.pad_symbol

    def __repr__(self) -> str:
        return (
            f"Codec(bits_per_character={self.bits_per_character}, "
            f"radix={self.radix}, "
            f"right_pad_final_bits={self.config.right_pad_final_bits}, "
            f"pad_final_group={self.config.pad_final_group}, "
            f"pad_symbol={self.pad_symbol!r})"
        )

    def encode(self, data: BytesLike) -> str:
        """
        Encodes bytes as text.

        The input is read as one bit stream, most significant bit first,
        and cut into groups of bits_per_character bits that may span
        byte boundaries. A final group with fewer bits is left-justified
        when right_pad_final_bits is set.

        Args:
            data: Raw bytes; a str is encoded as UTF-8 first

        Returns:
            Encoded text, followed by pad symbols up to a whole byte
            group when pad_final_group is set
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Cannot encode object of type {type(data).__name__}")

        data = bytes(data)
        if not data:
            return ""

        k = self.config.bits_per_character
        symbols = self.config.symbols
        mask = (1 << k) - 1

        buffer = 0
        buffered_bits = 0
        encoded = []

        for byte in data:
            buffer = (buffer << BITS_PER_BYTE) | byte
            buffered_bits += BITS_PER_BYTE
            while buffered_bits >= k:
                buffered_bits -= k
                encoded.append(symbols[(buffer >> buffered_bits) & mask])
            buffer &= (1 << buffered_bits) - 1

        if buffered_bits:
            final_bits = buffer
            if self.config.right_pad_final_bits:
                final_bits <<= k - buffered_bits
            encoded.append(symbols[final_bits])

            if self.config.pad_final_group:
                encoded.append(self.config.pad_symbol * group_pad_count(len(data), k))

        return "".join(encoded)

    def decode(
        self,
        text: str,
        case_sensitive: bool = True,
        strict: bool = False,
    ) -> Optional[bytes]:
        """
        Decodes text back into bytes.

        Trailing pad symbols are stripped first. Symbols outside the
        alphabet are skipped, or abort decoding when strict is set.

        Args:
            text: Encoded text
            case_sensitive: When False, retry unknown symbols in upper
                and lower case
            strict: Return None on the first unknown symbol

        Returns:
            Decoded bytes, or None in strict mode on an unknown symbol
        """
        if not isinstance(text, str) or not text:
            return b""

        text = text.rstrip(self.config.pad_symbol)
        if not text:
            return b""

        k = self.config.bits_per_character
        right_pad = self.config.right_pad_final_bits
        lookup = self.charmap.lookup if case_sensitive else self.charmap.lookup_folded
        last_position = len(text) - 1

        decoded = bytearray()
        byte = 0
        bits_written = 0

        for position, symbol in enumerate(text):
            value = lookup(symbol)
            if value is None:
                if strict:
                    get_logger().debug(f"Decode | unknown symbol {symbol!r} at {position}, aborting")
                    return None
                continue

            bits_needed = BITS_PER_BYTE - bits_written
            unused_bits = k - bits_needed
            is_last = position == last_position

            if bits_needed > k:
                # Not enough bits to complete the byte
                byte |= value << (bits_needed - k)
                bits_written += k
                if is_last:
                    decoded.append(byte)
                continue

            if is_last and not right_pad:
                decoded.append((byte | value) & 0xFF)
                break

            decoded.append(byte | (value >> unused_bits))
            if is_last:
                break

            # Carry the low bits into the next byte
            bits_written = unused_bits
            byte = (value & ((1 << unused_bits) - 1)) << (BITS_PER_BYTE - unused_bits)

        return bytes(decoded)
