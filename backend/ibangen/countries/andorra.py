"""Andorra BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, FieldSpec

FORMAT = BbanFormat(
    country_code="AD",
    label="Andorra",
    fields=(
        FieldSpec("bank_code",      4,  CharClass.DIGITS),
        FieldSpec("branch_code",    4,  CharClass.DIGITS),
        FieldSpec("account_number", 12, CharClass.DIGITS),
    ),
)
