import numpy as np
import pytest

from BitNotation.encoding.constants import BASE32_ALPHABET


# Wide alphabet with no '=' so every bit width is available
WIDE_ALPHABET = "".join(chr(0x100 + i) for i in range(256))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)

@pytest.fixture
def random_buffers(rng):
    lengths = list(range(0, 17)) + [31, 64, 100]
    return [rng.integers(0, 256, size=n, dtype=np.uint8).tobytes() for n in lengths]

@pytest.fixture
def lower_base32_alphabet():
    return BASE32_ALPHABET.lower()
