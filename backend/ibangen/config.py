"""Domain constants shared by the BBAN/IBAN validators."""

from __future__ import annotations

import re

# ISO 13616: shortest and longest IBAN accepted at the string boundary.
IBAN_MIN_LENGTH = 16
IBAN_MAX_LENGTH = 34

# Spaces, hyphens, dots... anything that is not [0-9A-Za-z] is print noise.
NOISE_PATTERN = re.compile(r"[^0-9A-Za-z]+")

COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{2}")
CHECK_DIGITS_PATTERN = re.compile(r"[0-9]{2}")

# A -> 10 ... Z -> 35
LETTER_OFFSET = 55

# Digits folded per step when reducing mod 97 (9 digits + remainder < 2**63).
MOD97_CHUNK = 9

# Print form: "ES68 3841 2436 1161 8319 1503"
PRINT_GROUP_WIDTH = 4

# Result columns appended by ibangen.io.bulk
BULK_RESULT_COLUMNS = ("input", "canonical", "valid", "country_code", "error", "detail")
BULK_COLUMN_PREFIX = "iban_"
