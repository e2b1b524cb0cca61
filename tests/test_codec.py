"""Tests for fixed-bit encoding and decoding."""

import base64

import pytest

from BitNotation.encoding.bits import encoded_length, symbol_count
from BitNotation.encoding.codec import Codec
from BitNotation.encoding.config import CodecConfig
from BitNotation.encoding.constants import (
    BASE16_ALPHABET,
    BASE32_ALPHABET,
    BASE64_ALPHABET,
    DEFAULT_ALPHABET,
)

from conftest import WIDE_ALPHABET


# =============================================================================
# Round trips and lengths
# =============================================================================

class TestRoundTrip:
    """decode(encode(data)) restores data for every bit width."""

    @pytest.mark.parametrize("bits", range(1, 9))
    @pytest.mark.parametrize("right_pad", [False, True])
    def test_round_trip(self, bits, right_pad, random_buffers):
        codec = Codec(bits, WIDE_ALPHABET, right_pad_final_bits=right_pad)
        for data in random_buffers:
            assert codec.decode(codec.encode(data)) == data

    @pytest.mark.parametrize("bits", range(1, 9))
    @pytest.mark.parametrize("right_pad", [False, True])
    def test_round_trip_with_group_padding(self, bits, right_pad, random_buffers):
        codec = Codec(bits, WIDE_ALPHABET, right_pad_final_bits=right_pad, pad_final_group=True)
        for data in random_buffers:
            assert codec.decode(codec.encode(data)) == data

    def test_all_byte_values(self):
        data = bytes(range(256))
        for bits in range(1, 9):
            codec = Codec(bits, WIDE_ALPHABET)
            assert codec.decode(codec.encode(data)) == data

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_length_law(self, bits, random_buffers):
        plain = Codec(bits, WIDE_ALPHABET)
        padded = Codec(bits, WIDE_ALPHABET, pad_final_group=True)
        for data in random_buffers:
            assert len(plain.encode(data)) == symbol_count(len(data), bits)
            assert len(padded.encode(data)) == encoded_length(len(data), bits, True)

    def test_output_uses_only_significant_symbols(self, random_buffers):
        codec = Codec(4, BASE32_ALPHABET)
        for data in random_buffers:
            assert set(codec.encode(data)) <= set(BASE32_ALPHABET[:16])


# =============================================================================
# Encoder
# =============================================================================

class TestEncode:

    def test_empty_input(self):
        assert Codec(5, BASE32_ALPHABET, True, True).encode(b"") == ""

    def test_single_byte_base32(self):
        codec = Codec(5, BASE32_ALPHABET)
        assert codec.encode(b"\xF8") == "7A"

    def test_final_bits_left_justified(self):
        assert Codec(5, BASE32_ALPHABET, right_pad_final_bits=True).encode(b"\xFF") == "74"
        assert Codec(5, BASE32_ALPHABET, right_pad_final_bits=False).encode(b"\xFF") == "7H"

    def test_group_padding(self):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True, pad_final_group=True)
        assert codec.encode(b"f") == "MY======"
        assert codec.encode(b"fooba") == "MZXW6YTB"

    def test_custom_pad_symbol(self):
        codec = Codec(6, BASE64_ALPHABET, True, True, pad_symbol="*")
        assert codec.encode(b"f") == "Zg**"

    def test_no_padding_without_partial_group(self):
        codec = Codec(4, BASE16_ALPHABET, pad_final_group=True)
        assert codec.encode(b"\xAB\xCD") == "ABCD"

    def test_matches_standard_base64(self, random_buffers):
        codec = Codec(6, BASE64_ALPHABET, right_pad_final_bits=True, pad_final_group=True)
        for data in random_buffers:
            assert codec.encode(data) == base64.b64encode(data).decode("ascii")

    def test_matches_standard_base32(self, random_buffers):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True, pad_final_group=True)
        for data in random_buffers:
            assert codec.encode(data) == base64.b32encode(data).decode("ascii")

    @pytest.mark.parametrize("data", [bytearray(b"hello"), memoryview(b"hello"), "hello"])
    def test_bytes_like_input(self, data):
        codec = Codec(6, BASE64_ALPHABET, True, True)
        assert codec.encode(data) == "aGVsbG8="

    @pytest.mark.parametrize("data", [None, 42, [1, 2, 3]])
    def test_unsupported_input_type(self, data):
        with pytest.raises(TypeError):
            Codec(5, BASE32_ALPHABET).encode(data)


# =============================================================================
# Decoder
# =============================================================================

class TestDecode:

    def test_empty_input(self):
        assert Codec(5, BASE32_ALPHABET).decode("") == b""

    @pytest.mark.parametrize("text", [None, 42, b"MZXW6"])
    def test_non_text_input(self, text):
        assert Codec(5, BASE32_ALPHABET).decode(text) == b""

    def test_only_padding(self):
        assert Codec(5, BASE32_ALPHABET, True, True).decode("========") == b""

    @pytest.mark.parametrize("right_pad", [False, True])
    def test_single_byte_32_symbols(self, right_pad):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=right_pad)
        encoded = codec.encode(b"\xF8")
        assert len(encoded) == 2
        assert codec.decode(encoded) == b"\xF8"

    @pytest.mark.parametrize("pads", range(0, 6))
    def test_any_number_of_trailing_pads(self, pads):
        codec = Codec(5, BASE32_ALPHABET, True, True)
        assert codec.decode("MZXW6YQ" + "=" * pads) == b"foob"

    def test_matches_standard_base32_decode(self, random_buffers):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True, pad_final_group=True)
        for data in random_buffers:
            text = base64.b32encode(data).decode("ascii")
            assert codec.decode(text) == base64.b32decode(text)

    def test_otp_secret(self):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True)
        secret = "XVQ2UIGO75XRUKJO"
        assert codec.decode(secret) == base64.b32decode(secret)
        assert codec.decode(secret.lower(), case_sensitive=False) == base64.b32decode(secret)

    def test_odd_length_hex_emits_partial_byte(self):
        codec = Codec(4, BASE16_ALPHABET, right_pad_final_bits=True)
        assert codec.decode("6") == b"\x60"
        assert codec.decode("666") == b"f\x60"


class TestCaseHandling:

    def test_case_insensitive_upper_against_lower_alphabet(self, lower_base32_alphabet, random_buffers):
        codec = Codec(5, lower_base32_alphabet, right_pad_final_bits=True)
        for data in random_buffers:
            text = codec.encode(data)
            assert codec.decode(text.upper(), case_sensitive=False) == codec.decode(text)

    def test_case_insensitive_lower_against_upper_alphabet(self, random_buffers):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True)
        for data in random_buffers:
            text = codec.encode(data)
            assert codec.decode(text.lower(), case_sensitive=False) == data

    def test_case_sensitive_skips_other_case(self):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True)
        assert codec.decode("mzxw6", strict=True) is None
        assert codec.decode("mzxw6") == b""

    def test_case_insensitive_is_repeatable(self):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True)
        first = codec.decode("mzxw6", case_sensitive=False)
        second = codec.decode("mzxw6", case_sensitive=False)
        assert first == second == b"foo"
        assert codec.decode("mzxw6") == b""

    def test_mixed_case_alphabet_prefers_exact_symbol(self):
        codec = Codec(6, DEFAULT_ALPHABET)
        data = b"\x00\xff\x10\x80"
        text = codec.encode(data)
        assert codec.decode(text, case_sensitive=False) == data


class TestStrictMode:

    def test_strict_unknown_symbol_is_none(self):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True)
        assert codec.decode(codec.encode(b"hi") + "?", strict=True) is None

    def test_lenient_skips_unknown_symbol(self):
        codec = Codec(5, BASE32_ALPHABET, right_pad_final_bits=True)
        text = codec.encode(b"hi")
        assert codec.decode(text + "?") == b"hi"
        assert codec.decode(text[:2] + "?!" + text[2:]) == b"hi"

    def test_strict_valid_input(self):
        codec = Codec(5, BASE32_ALPHABET, True, True)
        assert codec.decode("MZXW6YTBOI======", strict=True) == b"foobar"

    def test_whitespace_is_not_data(self):
        codec = Codec(6, BASE64_ALPHABET, True, True)
        assert codec.decode("Zm9v\nYmFy") == b"foobar"
        assert codec.decode("Zm9v\nYmFy", strict=True) is None


# =============================================================================
# Construction
# =============================================================================

class TestConstruction:

    def test_clamped_configuration(self):
        codec = Codec(10, BASE16_ALPHABET)
        assert codec.bits_per_character == 4
        assert codec.radix == 16
        assert codec.encode(b"\xAB") == "AB"

    def test_default_alphabet(self):
        codec = Codec(6)
        assert codec.alphabet == DEFAULT_ALPHABET
        assert codec.encode(b"\x00\x00\x00") == "0000"

    def test_charmap_covers_significant_symbols(self):
        codec = Codec(4, BASE32_ALPHABET)
        assert len(codec.charmap) == 16
        assert "Q" not in codec.charmap

    def test_from_config(self):
        config = CodecConfig.create(5, BASE32_ALPHABET, True, True)
        codec = Codec.from_config(config)
        assert codec.config == config
        assert codec.encode(b"f") == "MY======"

    def test_repr(self):
        assert "bits_per_character=5" in repr(Codec(5, BASE32_ALPHABET))

    def test_pad_symbol_in_alphabet_strips_trailing_data(self):
        codec = Codec(5, BASE32_ALPHABET, pad_symbol="A")
        assert codec.config.pad_symbol_is_data
        assert codec.encode(b"\x00") == "AA"
        assert codec.decode("AA") == b""
