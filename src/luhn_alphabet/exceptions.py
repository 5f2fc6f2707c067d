"""
Exceptions raised by the Luhn engine
"""

from typing import Any, Hashable

from .settings import MIN_ALPHABET_LENGTH


class LuhnError(ValueError):
    """Base class for all alphabet and input errors"""


class AlphabetTooShort(LuhnError):
    """The alphabet has fewer than two symbols"""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"alphabet must have at least {MIN_ALPHABET_LENGTH} symbols, got {length}")


class DuplicateSymbol(LuhnError):
    """The alphabet contains a repeated symbol"""

    def __init__(self, symbol: Hashable):
        self.symbol = symbol
        super().__init__(f"alphabet contains duplicate symbol {symbol!r}")


class SymbolNotInAlphabet(LuhnError):
    """An input sequence contains a symbol outside the alphabet"""

    def __init__(self, symbol: Any, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"symbol {symbol!r} at position {position} is not in the alphabet")


class SequenceTooShort(LuhnError):
    """validate() was given an empty sequence, so there is no check symbol"""

    def __init__(self):
        super().__init__("sequence must contain at least the check symbol")
