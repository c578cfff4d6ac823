"""Spain BBAN format.

EEEE OOOO DC CCCCCCCCCC
"""

from __future__ import annotations

from ibangen.core.charclass import CharClass
from ibangen.countries._base import BbanFormat, ChecksumRule, FieldSpec

FORMAT = BbanFormat(
    country_code="ES",
    label="Spain",
    fields=(
        FieldSpec("bank_code",      4,  CharClass.DIGITS),        # entidad
        FieldSpec("branch_code",    4,  CharClass.DIGITS),        # oficina
        FieldSpec("check_digits",   2,  CharClass.DIGITS),        # DC
        FieldSpec("account_number", 10, CharClass.DIGITS),
    ),
    checksum=ChecksumRule(
        algorithm="es-mod11",
        fields=("bank_code", "branch_code", "account_number"),
        check_field="check_digits",
    ),
)
