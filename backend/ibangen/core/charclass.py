from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache


class CharClass(Enum):
    """Character class allowed in a BBAN field."""

    DIGITS = ("[0-9]", "numeric")
    UPPER_ALPHA = ("[A-Z]", "alphabetic")
    ALPHANUMERIC = ("[A-Z0-9]", "alphanumeric")

    def __init__(self, atom: str, noun: str) -> None:
        self.atom = atom
        self.noun = noun

    def pattern(self, length: int) -> re.Pattern[str]:
        return _compile(self.atom, length)

    def matches(self, value: str, length: int) -> bool:
        return self.pattern(length).fullmatch(value) is not None

    def describe(self, length: int) -> str:
        """Human form used in error messages, e.g. '4 numeric characters'."""
        return f"{length} {self.noun} characters"


@lru_cache(maxsize=None)
def _compile(atom: str, length: int) -> re.Pattern[str]:
    return re.compile(f"{atom}{{{length}}}")
