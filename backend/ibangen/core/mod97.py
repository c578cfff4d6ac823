"""ISO 7064 MOD 97-10 over letter/digit strings.

Letters expand to two digits (A=10 ... Z=35) and the resulting digit string
is reduced chunk by chunk, so no intermediate value grows past
``MOD97_CHUNK + 2`` digits regardless of input length.
"""

from __future__ import annotations

from ibangen.config import LETTER_OFFSET, MOD97_CHUNK
from ibangen.errors import InvalidFormat


def expand_letters(value: str) -> str:
    """Map each letter to ``ord(upper) - 55`` and keep digits as they are."""
    out = []
    for ch in value:
        if "0" <= ch <= "9":
            out.append(ch)
        elif ch.isascii() and ch.isalpha():
            out.append(str(ord(ch.upper()) - LETTER_OFFSET))
        else:
            raise InvalidFormat("value", "letters and digits only", value)
    return "".join(out)


def mod97(digits: str) -> int:
    """Remainder of the decimal number *digits* modulo 97."""
    if not digits.isdigit() or not digits.isascii():
        raise InvalidFormat("digits", "a non-empty string of decimal digits", digits)

    remainder = 0
    for start in range(0, len(digits), MOD97_CHUNK):
        chunk = digits[start:start + MOD97_CHUNK]
        remainder = (remainder * 10 ** len(chunk) + int(chunk)) % 97
    return remainder


def iban_checksum(country_code: str, check_digits: str, bban: str) -> int:
    """Remainder of the rearranged IBAN ``BBAN + country + check digits``."""
    rearranged = f"{bban}{country_code}{check_digits}".upper()
    return mod97(expand_letters(rearranged))


def is_valid_checksum(country_code: str, check_digits: str, bban: str) -> bool:
    return iban_checksum(country_code, check_digits, bban) == 1


def compute_check_digits(country_code: str, bban: str) -> str:
    """IBAN check digits for *bban*: ``98 - checksum`` with ``"00"`` placeholders."""
    checksum = iban_checksum(country_code, "00", bban)
    return f"{98 - checksum:02d}"
