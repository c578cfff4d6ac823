"""Batch helpers over pandas objects."""

from ibangen.io.bulk import summarize, validate_iban_column, validate_ibans

__all__ = [
    "summarize",
    "validate_iban_column",
    "validate_ibans",
]
