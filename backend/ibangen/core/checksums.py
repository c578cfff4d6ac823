"""National (BBAN-level) check-digit algorithms.

Each algorithm takes the field values named by a format's ``ChecksumRule``
(in rule order) and returns the check string the format expects in its
``check_field``. Formats refer to algorithms by tag, see ``ALGORITHMS``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Sequence

from ibangen.core.mod97 import mod97

# Spanish CCC weights, applied from the rightmost digit leftwards.
SPAIN_WEIGHTS = (6, 3, 7, 9, 10, 5, 8, 4, 2, 1)


def weighted_mod11_digit(digits: str, weights: Sequence[int] = SPAIN_WEIGHTS) -> int:
    """One weighted mod-11 check digit; 11 maps to 0 and 10 maps to 1."""
    n = len(digits)
    total = sum(weights[i] * int(digits[n - i - 1]) for i in range(n))
    digit = 11 - total % 11
    if digit == 11:
        return 0
    if digit == 10:
        return 1
    return digit


def spain_check_digits(bank_code: str, branch_code: str, account_number: str) -> str:
    """Two-digit DC: first over entity+office, second over the account."""
    first = weighted_mod11_digit(bank_code + branch_code)
    second = weighted_mod11_digit(account_number)
    return f"{first}{second}"


def belgium_check_digits(bank_code: str, account_number: str) -> str:
    return f"{mod97(bank_code + account_number):02d}"


def portugal_check_digits(bank_code: str, branch_code: str, account_number: str) -> str:
    """NIB control: ISO 7064 MOD 97-10 over the 19 leading digits."""
    return f"{98 - mod97(bank_code + branch_code + account_number + '00'):02d}"


# ── France: clé RIB ─────────────────────────────────────────────────────────

def _rib_digit(ch: str) -> str:
    if ch.isdigit():
        return ch
    if "A" <= ch <= "I":
        return str(ord(ch) - ord("A") + 1)
    if "J" <= ch <= "R":
        return str(ord(ch) - ord("J") + 1)
    return str(ord(ch) - ord("S") + 2)


def france_rib_key(bank_code: str, branch_code: str, account_number: str) -> str:
    account = "".join(_rib_digit(ch) for ch in account_number)
    weighted = 89 * mod97(bank_code) + 15 * mod97(branch_code) + 3 * mod97(account)
    return f"{97 - weighted % 97:02d}"


# ── Italy: CIN ──────────────────────────────────────────────────────────────

_CIN_ODD = dict(zip(
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    (1, 0, 5, 7, 9, 13, 15, 17, 19, 21,
     1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18, 20, 11, 3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23),
))
_CIN_EVEN = {
    **{str(d): d for d in range(10)},
    **{chr(ord("A") + i): i for i in range(26)},
}
_CIN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def italy_cin(bank_code: str, branch_code: str, account_number: str) -> str:
    """Single-letter CIN over ABI + CAB + account (odd positions 1-based)."""
    code = bank_code + branch_code + account_number
    total = sum(
        _CIN_ODD[ch] if i % 2 == 0 else _CIN_EVEN[ch]
        for i, ch in enumerate(code)
    )
    return _CIN_LETTERS[total % 26]


ALGORITHMS: MappingProxyType[str, Callable[..., str]] = MappingProxyType({
    "es-mod11": spain_check_digits,
    "be-mod97": belgium_check_digits,
    "pt-mod97": portugal_check_digits,
    "fr-rib": france_rib_key,
    "it-cin": italy_cin,
})


def resolve_algorithm(tag: str) -> Callable[..., str]:
    """Return the algorithm registered under *tag*; raises ``KeyError`` on unknown tags."""
    try:
        return ALGORITHMS[tag]
    except KeyError:
        raise KeyError(
            f"Unknown checksum algorithm: '{tag}'. Available: {sorted(ALGORITHMS)}"
        ) from None
