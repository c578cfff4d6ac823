"""France BBAN format."""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, ChecksumRule, FieldSpec

FORMAT = BbanFormat(
    country_code="FR",
    label="France",
    fields=(
        FieldSpec("bank_code",      5,  CharClass.DIGITS),        # code banque
        FieldSpec("branch_code",    5,  CharClass.DIGITS),        # code guichet
        FieldSpec("account_number", 11, CharClass.ALPHANUMERIC),
        FieldSpec("check_digits",   2,  CharClass.DIGITS),        # clé RIB
    ),
    checksum=ChecksumRule(
        algorithm="fr-rib",
        fields=("bank_code", "branch_code", "account_number"),
        check_field="check_digits",
    ),
)
