"""Austria BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, FieldSpec

FORMAT = BbanFormat(
    country_code="AT",
    label="Austria",
    fields=(
        FieldSpec("bank_code",      5,  CharClass.DIGITS),        # Bankleitzahl
        FieldSpec("account_number", 11, CharClass.DIGITS),
    ),
)
