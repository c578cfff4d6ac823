"""Shared pytest fixtures for the BBAN/IBAN tests.

Provides:
- known_ibans: one checksum-valid printed IBAN per registered country
- spanish_ibans: (country, iban check, bank, branch, DC, account) tuples
- es_bban: a validated Spanish Bban (ES68 3841 2436 11 6183191503)
"""

from __future__ import annotations

import pytest

from ibangen.variants import spain_bban


KNOWN_IBANS = {
    "AD": "AD1200012030200359100100",
    "AT": "AT611904300234573201",
    "BE": "BE68539007547034",
    "BG": "BG80BNBG96611020345678",
    "DE": "DE89370400440532013000",
    "ES": "ES6838412436116183191503",
    "FR": "FR7630006000011234567890189",
    "IT": "IT60X0542811101000000123456",
    "NL": "NL91ABNA0417164300",
    "PT": "PT50000201231234567890154",
}

# (country, IBAN check digits, bank, branch, DC, account)
SPANISH_IBANS = [
    ("ES", "68", "3841", "2436", "11", "6183191503"),
    ("ES", "78", "0989", "5990", "44", "6462241825"),
    ("ES", "72", "0081", "0052", "00", "0004400044"),
    ("ES", "31", "0049", "1806", "95", "2811869099"),
    ("ES", "18", "2080", "0769", "75", "3040000478"),
    ("ES", "09", "0182", "6035", "49", "0000748708"),
    ("ES", "83", "2048", "0000", "27", "3400106773"),
    ("ES", "24", "2038", "0603", "29", "6005700064"),
    ("ES", "09", "2103", "2034", "25", "0030003000"),
    ("ES", "57", "2100", "3063", "99", "2200110010"),
    ("ES", "53", "1491", "0001", "28", "1008158220"),
    ("ES", "27", "2095", "0264", "60", "9105878176"),
]


@pytest.fixture()
def known_ibans() -> dict[str, str]:
    return dict(KNOWN_IBANS)


@pytest.fixture()
def spanish_ibans() -> list[tuple[str, ...]]:
    return list(SPANISH_IBANS)


@pytest.fixture()
def es_bban():
    return spain_bban("3841", "2436", "11", "6183191503")
