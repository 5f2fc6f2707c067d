"""
Luhn mod N Checksum Algorithm
Generates and validates check symbols over an arbitrary alphabet
"""

from typing import Any, Dict, Hashable, Iterable, List, Sequence, Tuple, Union

from loguru import logger

from .exceptions import AlphabetTooShort, DuplicateSymbol, SequenceTooShort, SymbolNotInAlphabet
from .settings import MIN_ALPHABET_LENGTH


class Luhn:
    """
    Implementation of the Luhn mod N checksum algorithm

    The alphabet fixes both the symbol values (their positions) and the
    modulus (its length). With the decimal alphabet this is the classic
    credit-card Luhn check.

    Usage:
        luhn = Luhn("0123456789")
        luhn.generate("7992739871")   # '3'
        luhn.validate("79927398713")  # True

    Instances are immutable and safe to share between threads.
    """

    __slots__ = ("_alphabet", "_index")

    def __init__(self, alphabet: Iterable[Hashable]):
        """
        Initialize the engine

        Args:
            alphabet: Ordered, duplicate-free symbols (a string is split into characters)

        Raises:
            DuplicateSymbol: A symbol appears more than once
            AlphabetTooShort: Fewer than 2 symbols were given
            TypeError: A symbol is unhashable
        """
        symbols = tuple(alphabet)

        index: Dict[Hashable, int] = {}
        for position, symbol in enumerate(symbols):
            if symbol in index:
                logger.debug("Rejected alphabet: duplicate symbol {!r} at {}", symbol, position)
                raise DuplicateSymbol(symbol)
            index[symbol] = position

        if len(symbols) < MIN_ALPHABET_LENGTH:
            logger.debug("Rejected alphabet: only {} symbol(s)", len(symbols))
            raise AlphabetTooShort(len(symbols))

        object.__setattr__(self, "_alphabet", symbols)
        object.__setattr__(self, "_index", index)
        logger.debug("Luhn engine ready, modulus {}", len(symbols))

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._alphabet,))

    def __repr__(self) -> str:
        if all(isinstance(s, str) for s in self._alphabet):
            return f"Luhn({''.join(self._alphabet)!r})"
        return f"Luhn({self._alphabet!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Luhn):
            return NotImplemented
        return self._alphabet == other._alphabet

    def __hash__(self) -> int:
        return hash(self._alphabet)

    def __len__(self) -> int:
        return len(self._alphabet)

    def __contains__(self, symbol: object) -> bool:
        try:
            return symbol in self._index
        except TypeError:
            # unhashable, so it can't be an alphabet symbol
            return False

    @property
    def alphabet(self) -> Tuple[Hashable, ...]:
        """The alphabet symbols, in position order"""
        return self._alphabet

    def position(self, symbol: Hashable) -> int:
        """
        Get the numeric value of a symbol

        Raises:
            SymbolNotInAlphabet: The symbol is unknown (reported at position 0)
        """
        return self._codepoints((symbol,))[0]

    def _codepoints(self, symbols: Iterable[Hashable]) -> List[int]:
        codepoints = []
        for i, symbol in enumerate(symbols):
            try:
                codepoints.append(self._index[symbol])
            except (KeyError, TypeError):
                logger.debug("Rejected input: {!r} at position {} not in alphabet", symbol, i)
                raise SymbolNotInAlphabet(symbol, i) from None
        return codepoints

    def _check_value(self, codepoints: Sequence[int]) -> int:
        n = len(self._alphabet)
        total = 0

        # Double every second value, starting with the one next to the check symbol
        for i, value in enumerate(reversed(codepoints)):
            if i % 2 == 0:
                value *= 2
                if value >= n:
                    # sum of the two base-N digits of the doubled value
                    value -= n - 1
            total += value

        return (n - total % n) % n

    def generate(self, sequence: Iterable[Hashable]) -> Hashable:
        """
        Calculate the check symbol for a sequence

        Args:
            sequence: Data symbols, without a check symbol. May be empty.

        Returns:
            The alphabet symbol that makes the sequence valid

        Raises:
            SymbolNotInAlphabet: The sequence contains an unknown symbol
        """
        return self._alphabet[self._check_value(self._codepoints(sequence))]

    def validate(self, sequence: Iterable[Hashable]) -> bool:
        """
        Validate a sequence whose last symbol is its check symbol

        Args:
            sequence: Data symbols followed by the check symbol

        Returns:
            True if the check symbol matches, False otherwise

        Raises:
            SequenceTooShort: The sequence is empty
            SymbolNotInAlphabet: The sequence contains an unknown symbol
        """
        codepoints = self._codepoints(sequence)
        if not codepoints:
            raise SequenceTooShort()

        return self._check_value(codepoints[:-1]) == codepoints[-1]

    def append(self, sequence: Iterable[Hashable]) -> Union[str, Tuple[Hashable, ...], List[Hashable]]:
        """
        Add the check symbol to the end of a sequence

        Returns:
            A str for str input, a tuple for tuple input, a list otherwise
        """
        if isinstance(sequence, str):
            return sequence + self.generate(sequence)
        if isinstance(sequence, tuple):
            return sequence + (self.generate(sequence),)

        symbols = list(sequence)
        symbols.append(self.generate(symbols))
        return symbols
