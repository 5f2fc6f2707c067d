"""
Preset alphabets for common check-symbol schemes
"""

# Smallest alphabet that still gives a meaningful modulus
MIN_ALPHABET_LENGTH = 2

# Classic credit-card Luhn
DECIMAL = "0123456789"

HEXADECIMAL = "0123456789ABCDEF"

# Crockford's Base32 (no I, L, O, U)
BASE32_CROCKFORD = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

# 0-9 then A-Z, same ordering as base-36 numerals
BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

ALPHANUMERIC = BASE36 + "abcdefghijklmnopqrstuvwxyz"
