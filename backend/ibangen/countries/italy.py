"""Italy BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, ChecksumRule, FieldSpec

FORMAT = BbanFormat(
    country_code="IT",
    label="Italy",
    fields=(
        FieldSpec("check_digits",   1,  CharClass.UPPER_ALPHA),   # CIN
        FieldSpec("bank_code",      5,  CharClass.DIGITS),        # ABI
        FieldSpec("branch_code",    5,  CharClass.DIGITS),        # CAB
        FieldSpec("account_number", 12, CharClass.ALPHANUMERIC),
    ),
    checksum=ChecksumRule(
        algorithm="it-cin",
        fields=("bank_code", "branch_code", "account_number"),
        check_field="check_digits",
    ),
)
