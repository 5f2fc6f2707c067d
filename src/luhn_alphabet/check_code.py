"""
Check Code Generator for fixed-format identifiers
"""

from typing import Hashable, Iterable, List, Optional, Tuple, Union

from .luhn import Luhn


class CheckCodeGenerator:
    """
    Generates and validates codes that end in a Luhn check symbol

    Code Format:
    - Payload: length - 1 symbols from the alphabet
    - Check: 1 symbol (Luhn mod N over the payload)

    Usage:
        codes = CheckCodeGenerator(BASE36, length=8, case_insensitive=True)
        code = codes.generate("a3nfzt1")   # 'A3NFZT1' + check symbol
        codes.validate(code)               # True
        codes.validate("short")            # False
    """

    def __init__(
        self,
        alphabet: Union[Luhn, Iterable[Hashable]],
        length: Optional[int] = None,
        case_insensitive: bool = False
    ):
        """
        Initialize Check Code Generator

        Args:
            alphabet: A Luhn engine, or the alphabet to build one from
            length: Total code length including the check symbol (default: any length)
            case_insensitive: Upper-case payloads and codes before checking them
        """
        self.luhn = alphabet if isinstance(alphabet, Luhn) else Luhn(alphabet)

        if length is not None and length < 1:
            raise ValueError(f"length must be at least 1, got {length}")

        if case_insensitive:
            symbols = self.luhn.alphabet
            if not all(isinstance(s, str) for s in symbols):
                raise ValueError("case_insensitive requires an alphabet of strings")
            if any(s != s.upper() for s in symbols):
                raise ValueError("case_insensitive requires an upper-case alphabet")

        self.length = length
        self.case_insensitive = case_insensitive

    def _normalize(self, value):
        if self.case_insensitive and isinstance(value, str):
            upper = value.upper()
            # e.g. 'ß' -> 'SS'
            if len(upper) != len(value):
                raise ValueError(f"{value!r} changes length when upper-cased")
            return upper
        return value

    def check_symbol(self, payload) -> Hashable:
        """
        Calculate the check symbol for a payload

        Args:
            payload: Code without its check symbol

        Returns:
            Check symbol
        """
        return self.luhn.generate(self._normalize(payload))

    def generate(self, payload) -> Union[str, Tuple[Hashable, ...], List[Hashable]]:
        """
        Generate a complete code

        Args:
            payload: Code without its check symbol

        Returns:
            Normalized payload followed by its check symbol. Same type rules
            as Luhn.append: str for str, tuple for tuple, list otherwise.

        Raises:
            ValueError: Payload has the wrong length, or changes length when upper-cased
            SymbolNotInAlphabet: Payload contains an unknown symbol
        """
        payload = self._normalize(payload)

        if self.length is not None and len(payload) != self.length - 1:
            raise ValueError(f"payload must be {self.length - 1} symbols, got {len(payload)}")

        return self.luhn.append(payload)

    def validate(self, code) -> bool:
        """
        Validate a code

        Args:
            code: Complete code including check symbol

        Returns:
            True if valid, False otherwise (including codes that are not sequences)
        """
        try:
            code = self._normalize(code)

            if not code:
                return False

            if self.length is not None and len(code) != self.length:
                return False

            return self.luhn.validate(code)
        except (ValueError, TypeError):
            # LuhnError is a ValueError
            return False
