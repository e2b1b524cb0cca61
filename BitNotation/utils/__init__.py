from BitNotation.utils.logging import get_logger, BitNotationLogger

__all__ = [
    "get_logger",
    "BitNotationLogger",
]
