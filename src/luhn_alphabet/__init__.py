"""
luhn_alphabet - Luhn mod N check symbols over any alphabet

Usage:
    from luhn_alphabet import Luhn, CheckCodeGenerator, BASE36

    # Classic credit-card check digit
    luhn = Luhn("0123456789")
    luhn.generate("7992739871")      # '3'
    luhn.validate("79927398713")     # True

    # Fixed-length codes over a custom alphabet
    codes = CheckCodeGenerator(BASE36, length=8)
    code = codes.generate("A3NFZT1")
    codes.validate(code)             # True

Logging goes through loguru and is off by default; call
``logger.enable("luhn_alphabet")`` to see it.
"""

from loguru import logger

from .luhn import Luhn
from .check_code import CheckCodeGenerator
from .exceptions import (
    LuhnError,
    AlphabetTooShort,
    DuplicateSymbol,
    SymbolNotInAlphabet,
    SequenceTooShort
)
from .settings import (
    DECIMAL,
    HEXADECIMAL,
    BASE32_CROCKFORD,
    BASE36,
    ALPHANUMERIC
)

logger.disable(__name__)

__version__ = "1.0.0"
__all__ = [
    "Luhn",
    "CheckCodeGenerator",
    "LuhnError",
    "AlphabetTooShort",
    "DuplicateSymbol",
    "SymbolNotInAlphabet",
    "SequenceTooShort",
    "DECIMAL",
    "HEXADECIMAL",
    "BASE32_CROCKFORD",
    "BASE36",
    "ALPHANUMERIC"
]
