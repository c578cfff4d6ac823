"""Belgium BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, ChecksumRule, FieldSpec

FORMAT = BbanFormat(
    country_code="BE",
    label="Belgium",
    fields=(
        FieldSpec("bank_code",      3, CharClass.DIGITS),
        FieldSpec("account_number", 7, CharClass.DIGITS),
        FieldSpec("check_digits",   2, CharClass.DIGITS),
    ),
    checksum=ChecksumRule(
        algorithm="be-mod97",
        fields=("bank_code", "account_number"),
        check_field="check_digits",
    ),
)
