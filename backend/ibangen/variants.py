"""Per-country BBAN constructors with explicit field signatures.

Thin wrappers over ``Bban.construct``; arguments follow each country's
printed field order.
"""

from __future__ import annotations

from ibangen.bban import Bban


def spain_bban(bank_code: str, branch_code: str, check_digits: str, account_number: str) -> Bban:
    return Bban.construct("ES", bank_code, branch_code, check_digits, account_number)


def andorra_bban(bank_code: str, branch_code: str, account_number: str) -> Bban:
    return Bban.construct("AD", bank_code, branch_code, account_number)


def austria_bban(bank_code: str, account_number: str) -> Bban:
    return Bban.construct("AT", bank_code, account_number)


def belgium_bban(bank_code: str, account_number: str, check_digits: str) -> Bban:
    return Bban.construct("BE", bank_code, account_number, check_digits)


def bulgaria_bban(bank_code: str, branch_code: str, account_type: str, account_number: str) -> Bban:
    return Bban.construct("BG", bank_code, branch_code, account_type, account_number)


def germany_bban(bank_code: str, account_number: str) -> Bban:
    return Bban.construct("DE", bank_code, account_number)


def france_bban(bank_code: str, branch_code: str, account_number: str, check_digits: str) -> Bban:
    return Bban.construct("FR", bank_code, branch_code, account_number, check_digits)


def italy_bban(check_digits: str, bank_code: str, branch_code: str, account_number: str) -> Bban:
    return Bban.construct("IT", check_digits, bank_code, branch_code, account_number)


def portugal_bban(bank_code: str, branch_code: str, account_number: str, check_digits: str) -> Bban:
    return Bban.construct("PT", bank_code, branch_code, account_number, check_digits)


def netherlands_bban(bank_code: str, account_number: str) -> Bban:
    return Bban.construct("NL", bank_code, account_number)
