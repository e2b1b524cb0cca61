"""
Codec configuration for BitNotation.
"""

from dataclasses import dataclass
from typing import Optional

from BitNotation.encoding.bits import bytes_per_group, symbols_per_group
from BitNotation.encoding.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_PAD_SYMBOL,
    MIN_BITS_PER_CHARACTER,
    MAX_BITS_PER_CHARACTER,
)
from BitNotation.utils.logging import get_logger


@dataclass(frozen=True)
class CodecConfig:
    """
    Validated configuration of a fixed-bit codec.

    Build instances through CodecConfig.create, which normalizes any
    requested values instead of rejecting them.
    """

    bits_per_character: int = 6
    alphabet: str = DEFAULT_ALPHABET
    right_pad_final_bits: bool = False
    pad_final_group: bool = False
    pad_symbol: str = DEFAULT_PAD_SYMBOL

    @property
    def radix(self) -> int:
        """Gets the number of symbols in use."""
        return 1 << self.bits_per_character

    @property
    def symbols(self) -> str:
        """Gets the significant part of the alphabet."""
        return self.alphabet[:self.radix]

    @property
    def bytes_per_group(self) -> int:
        return bytes_per_group(self.bits_per_character)

    @property
    def symbols_per_group(self) -> int:
        return symbols_per_group(self.bits_per_character)

    @property
    def pad_symbol_is_data(self) -> bool:
        """True when the pad symbol is also a data symbol."""
        return self.pad_symbol in self.symbols

    @classmethod
    def create(
        cls,
        bits_per_character: int,
        alphabet: Optional[str] = None,
        right_pad_final_bits: bool = False,
        pad_final_group: bool = False,
        pad_symbol: str = DEFAULT_PAD_SYMBOL,
    ) -> "CodecConfig":
        """
        Creates a valid configuration from requested values.

        Args:
            bits_per_character: Requested bits per encoded symbol
            alphabet: Symbol alphabet (default alphabet when missing or
                shorter than 2 symbols)
            right_pad_final_bits: Left-justify the bits of the final group
            pad_final_group: Append pad symbols up to a whole byte group
            pad_symbol: Filler symbol, reduced to its first character

        Returns:
            CodecConfig satisfying 2 ** bits_per_character <= len(alphabet)
        """
        logger = get_logger()

        if not isinstance(alphabet, str) or len(alphabet) < 2:
            if alphabet is not None:
                logger.normalized("alphabet", alphabet, DEFAULT_ALPHABET, "fewer than 2 symbols")
            alphabet = DEFAULT_ALPHABET
        alphabet_length = len(alphabet)

        requested = bits_per_character
        try:
            bits_per_character = int(bits_per_character)
        except OverflowError:
            bits_per_character = MAX_BITS_PER_CHARACTER if requested > 0 else MIN_BITS_PER_CHARACTER
            logger.normalized("bits_per_character", requested, bits_per_character, "not finite")
        except (TypeError, ValueError):
            bits_per_character = MIN_BITS_PER_CHARACTER
            logger.normalized("bits_per_character", requested, bits_per_character, "not a number")

        if bits_per_character < MIN_BITS_PER_CHARACTER:
            bits_per_character = MIN_BITS_PER_CHARACTER
            reason = "below minimum"
        elif alphabet_length < 1 << min(bits_per_character, MAX_BITS_PER_CHARACTER + 1):
            bits_per_character = MIN_BITS_PER_CHARACTER
            while (
                bits_per_character < MAX_BITS_PER_CHARACTER
                and alphabet_length >= 1 << (bits_per_character + 1)
            ):
                bits_per_character += 1
            reason = f"alphabet has only {alphabet_length} symbols"
        elif bits_per_character > MAX_BITS_PER_CHARACTER:
            bits_per_character = MAX_BITS_PER_CHARACTER
            reason = "above maximum"
        else:
            reason = None

        if reason is not None:
            logger.normalized("bits_per_character", requested, bits_per_character, reason)

        if not isinstance(pad_symbol, str) or not pad_symbol:
            logger.normalized("pad_symbol", pad_symbol, DEFAULT_PAD_SYMBOL, "not a symbol")
            pad_symbol = DEFAULT_PAD_SYMBOL
        elif len(pad_symbol) > 1:
            logger.normalized("pad_symbol", pad_symbol, pad_symbol[0], "first character kept")
            pad_symbol = pad_symbol[0]

        config = cls(
            bits_per_character=bits_per_character,
            alphabet=alphabet,
            right_pad_final_bits=bool(right_pad_final_bits),
            pad_final_group=bool(pad_final_group),
            pad_symbol=pad_symbol,
        )

        if config.pad_symbol_is_data:
            logger.warning(
                f"Pad symbol {pad_symbol!r} is also a data symbol; "
                f"trailing {pad_symbol!r} symbols are stripped before decoding"
            )

        return config

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CodecConfig":
        """Creates a CodecConfig from a dictionary, normalizing its values."""
        fields = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        return cls.create(
            fields.pop("bits_per_character", cls.bits_per_character),
            **fields,
        )
