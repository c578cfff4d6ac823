"""IBAN value object (ISO 13616) with MOD 97-10 validation.

Three ways in, all validated:

- ``Iban.from_string("ES68 3841 2436 1161 8319 1503")``: strips print
  noise, dispatches the BBAN to its country format, checks MOD 97.
- ``Iban.construct("es", "68", bban)`` (or ``Iban("es", "68", bban)``):
  explicit parts; the country code is upper-cased.
- ``Iban.from_bban_and_country(bban, "ES")``: derives the check digits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ibangen.bban import Bban
from ibangen.config import (
    CHECK_DIGITS_PATTERN,
    COUNTRY_CODE_PATTERN,
    IBAN_MAX_LENGTH,
    IBAN_MIN_LENGTH,
    NOISE_PATTERN,
    PRINT_GROUP_WIDTH,
)
from ibangen.core.mod97 import compute_check_digits, iban_checksum
from ibangen.countries import resolve_format
from ibangen.errors import IbanError, InvalidChecksum, InvalidFormat, InvalidLength

_log = logging.getLogger(__name__)


def _validate_country_code(country_code: str) -> None:
    if not COUNTRY_CODE_PATTERN.fullmatch(country_code):
        raise InvalidFormat("country_code", "2 letters", country_code)


@dataclass(frozen=True)
class Iban:
    """Immutable IBAN: country code, IBAN check digits and an owned ``Bban``."""

    country_code: str
    check_digits: str
    bban: Bban

    def __post_init__(self) -> None:
        country_code = str(self.country_code).upper()
        _validate_country_code(country_code)
        if not isinstance(self.check_digits, str) or not CHECK_DIGITS_PATTERN.fullmatch(self.check_digits):
            raise InvalidFormat("check_digits", "2 numeric characters", str(self.check_digits))
        if not isinstance(self.bban, Bban):
            raise TypeError(f"bban must be a Bban, got {type(self.bban).__name__}")
        if self.bban.country_code != country_code:
            raise InvalidFormat(
                "country_code", f"the BBAN country {self.bban.country_code}", country_code
            )

        checksum = iban_checksum(country_code, self.check_digits, str(self.bban))
        if checksum != 1:
            _log.debug(
                "%s IBAN checksum failed: check digits %s give remainder %d",
                country_code, self.check_digits, checksum,
            )
            raise InvalidChecksum(
                "The IBAN checksum digits are not valid",
                kind="iban",
                expected=compute_check_digits(country_code, str(self.bban)),
            )

        object.__setattr__(self, "country_code", country_code)

    # ---------- construction ----------
    @classmethod
    def construct(cls, country_code: str, check_digits: str, bban: Bban) -> Iban:
        return cls(country_code, check_digits, bban)

    @classmethod
    def from_string(cls, iban: str) -> Iban:
        cleaned = NOISE_PATTERN.sub("", str(iban))
        if not IBAN_MIN_LENGTH <= len(cleaned) <= IBAN_MAX_LENGTH:
            raise InvalidLength(
                f"Iban should be between {IBAN_MIN_LENGTH} and {IBAN_MAX_LENGTH} characters,"
                f" got {len(cleaned)}",
                actual=len(cleaned),
                expected=f"{IBAN_MIN_LENGTH}..{IBAN_MAX_LENGTH}",
            )

        country_code = cleaned[:2].upper()
        check_digits = cleaned[2:4].upper()
        fmt = resolve_format(country_code)
        bban = Bban.from_string(cleaned[4:].upper(), fmt.country_code)
        return cls(country_code, check_digits, bban)

    @classmethod
    def from_bban_and_country(cls, bban: Bban, country_code: str) -> Iban:
        """Compose an IBAN from a validated BBAN, computing its check digits."""
        country_code = str(country_code).upper()
        _validate_country_code(country_code)
        fmt = resolve_format(country_code)
        check_digits = compute_check_digits(fmt.country_code, str(bban))
        return cls(fmt.country_code, check_digits, bban)

    # ---------- accessors ----------
    @property
    def iban_check_digits(self) -> str:
        return self.check_digits

    @property
    def bank_code(self) -> str:
        return self.bban.bank_code

    @property
    def branch_code(self) -> str:
        return self.bban.branch_code

    @property
    def country_check_digits(self) -> str:
        return self.bban.check_digits

    @property
    def account_type(self) -> str:
        return self.bban.account_type

    @property
    def account_number(self) -> str:
        return self.bban.account_number

    def formatted(self) -> str:
        """Print form in groups of four: ``ES68 3841 2436 1161 8319 1503``."""
        s = str(self)
        return " ".join(s[i:i + PRINT_GROUP_WIDTH] for i in range(0, len(s), PRINT_GROUP_WIDTH))

    def __str__(self) -> str:
        return f"{self.country_code}{self.check_digits}{self.bban}"


def is_valid_iban(value: str) -> bool:
    """True when *value* parses as a supported, checksum-valid IBAN."""
    try:
        Iban.from_string(value)
    except IbanError:
        return False
    return True
