import logging
import sys
from typing import Optional

class BitNotationLogger:
    def __init__(self, name: str = "BitNotation", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)
        
        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)
    
    def warning(self, msg: str) -> None:
        self.logger.warning(msg)
    
    def normalized(self, field: str, requested, effective, reason: str) -> None:
        msg = f"Config | {field}: {requested!r} -> {effective!r} | {reason}"
        self.debug(msg)


_logger: Optional[BitNotationLogger] = None

def get_logger() -> BitNotationLogger:
    global _logger
    if _logger is None:
        _logger = BitNotationLogger()
    return _logger
