"""Netherlands BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, FieldSpec

FORMAT = BbanFormat(
    country_code="NL",
    label="Netherlands",
    fields=(
        FieldSpec("bank_code",      4,  CharClass.UPPER_ALPHA),
        FieldSpec("account_number", 10, CharClass.DIGITS),
    ),
)
