"""Core arithmetic: character classes, MOD 97-10 and national check digits."""

from ibangen.core.charclass import CharClass
from ibangen.core.checksums import ALGORITHMS, resolve_algorithm, weighted_mod11_digit
from ibangen.core.mod97 import (
    compute_check_digits,
    expand_letters,
    iban_checksum,
    is_valid_checksum,
    mod97,
)

__all__ = [
    "ALGORITHMS",
    "CharClass",
    "compute_check_digits",
    "expand_letters",
    "iban_checksum",
    "is_valid_checksum",
    "mod97",
    "resolve_algorithm",
    "weighted_mod11_digit",
]
