"""Germany BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, FieldSpec

FORMAT = BbanFormat(
    country_code="DE",
    label="Germany",
    fields=(
        FieldSpec("bank_code",      8,  CharClass.DIGITS),        # BLZ
        FieldSpec("account_number", 10, CharClass.DIGITS),
    ),
)
