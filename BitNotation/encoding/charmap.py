"""
Reverse symbol lookup for BitNotation codecs.
"""

import threading
from types import MappingProxyType
from typing import Dict, Iterable, Optional


class SymbolIndex:
    """
    Maps each symbol to its bit-group value.

    The base mapping is built once and never changes. Case-folded
    lookups memoize the symbol they resolved to, which only saves
    repeated case conversions.
    """

    def __init__(self, symbols: Iterable[str]):
        self.symbols = "".join(symbols)
        self._index = MappingProxyType({symbol: value for value, symbol in enumerate(self.symbols)})
        self._aliases: Dict[str, int] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._index

    def lookup(self, symbol: str) -> Optional[int]:
        """Gets the value of symbol, or None when it is not a data symbol."""
        return self._index.get(symbol)

    def lookup_folded(self, symbol: str) -> Optional[int]:
        """
        Gets the value of symbol, retrying its upper and lower case forms.

        Args:
            symbol: Encoded symbol

        Returns:
            Symbol value, or None when no case variant is indexed
        """
        value = self._index.get(symbol)
        if value is not None:
            return value

        value = self._aliases.get(symbol)
        if value is not None:
            return value

        for variant in (symbol.upper(), symbol.lower()):
            value = self._index.get(variant)
            if value is not None:
                with self._lock:
                    self._aliases.setdefault(symbol, value)
                return value

        return None

    def as_dict(self) -> Dict[str, int]:
        """Gets a copy of the base mapping."""
        return dict(self._index)
