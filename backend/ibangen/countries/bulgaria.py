"""Bulgaria BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, FieldSpec

FORMAT = BbanFormat(
    country_code="BG",
    label="Bulgaria",
    fields=(
        FieldSpec("bank_code",      4, CharClass.UPPER_ALPHA),    # BIC bank prefix
        FieldSpec("branch_code",    4, CharClass.DIGITS),
        FieldSpec("account_type",   2, CharClass.DIGITS),
        FieldSpec("account_number", 8, CharClass.ALPHANUMERIC),
    ),
)
