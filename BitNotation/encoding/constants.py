DEFAULT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-,"
DEFAULT_PAD_SYMBOL = "="

MIN_BITS_PER_CHARACTER = 1
MAX_BITS_PER_CHARACTER = 8
BITS_PER_BYTE = 8

BASE16_ALPHABET = "0123456789ABCDEF"
BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32HEX_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
ZBASE32_ALPHABET = "ybndrfg8ejkmcpqxot1uwisza345h769"
BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
