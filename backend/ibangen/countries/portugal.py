"""Portugal BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, ChecksumRule, FieldSpec

FORMAT = BbanFormat(
    country_code="PT",
    label="Portugal",
    fields=(
        FieldSpec("bank_code",      4,  CharClass.DIGITS),
        FieldSpec("branch_code",    4,  CharClass.DIGITS),
        FieldSpec("account_number", 11, CharClass.DIGITS),
        FieldSpec("check_digits",   2,  CharClass.DIGITS),
    ),
    checksum=ChecksumRule(
        algorithm="pt-mod97",
        fields=("bank_code", "branch_code", "account_number"),
        check_field="check_digits",
    ),
)
