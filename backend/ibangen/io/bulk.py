"""Bulk IBAN validation over pandas data.

Validates every cell independently: an invalid row never aborts the batch,
it is reported in the result frame with the error class and message.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import pandas as pd

from ibangen.config import BULK_COLUMN_PREFIX, BULK_RESULT_COLUMNS
from ibangen.errors import IbanError, InvalidLength
from ibangen.iban import Iban

_log = logging.getLogger(__name__)

# Invalid rows echoed to the debug log per batch.
_DEBUG_SAMPLE = 5


def _norm_cell(value: Any) -> str | None:
    """Cell value as a stripped string, or None if blank/NaN."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    s = str(value).strip()
    return s if s else None


def _validate_one(value: Any) -> dict[str, Any]:
    raw = _norm_cell(value)
    row: dict[str, Any] = {
        "input": raw,
        "canonical": None,
        "valid": False,
        "country_code": None,
        "error": None,
        "detail": None,
    }
    if raw is None:
        row["error"] = InvalidLength.__name__
        row["detail"] = "empty value"
        return row

    try:
        iban = Iban.from_string(raw)
    except IbanError as exc:
        row["error"] = type(exc).__name__
        row["detail"] = str(exc)
        return row

    row["canonical"] = str(iban)
    row["valid"] = True
    row["country_code"] = iban.country_code
    return row


def validate_ibans(values: Iterable[Any]) -> pd.DataFrame:
    """Validate each value; one result row per input, in input order."""
    rows = [_validate_one(v) for v in values]
    # object dtype keeps absent cells as None (no NaN / string inference)
    out = pd.DataFrame(rows, columns=list(BULK_RESULT_COLUMNS), dtype=object)
    out = out.where(out.notna(), None)
    out["valid"] = out["valid"].astype(bool)

    n_invalid = int((~out["valid"]).sum())
    _log.info("Validated %d IBANs: %d valid, %d invalid", len(out), len(out) - n_invalid, n_invalid)
    if n_invalid:
        sample = out.loc[~out["valid"], ["input", "error"]].head(_DEBUG_SAMPLE)
        _log.debug("Invalid IBAN sample:\n%s", sample.to_string(index=False))
    return out


def validate_iban_column(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """Return a copy of *df* with ``iban_*`` result columns for *column* appended."""
    if column not in df.columns:
        raise ValueError(f"Missing required column: {column!r}. Available: {list(df.columns)}")

    results = validate_ibans(df[column].tolist())
    results = results.drop(columns=["input"]).add_prefix(BULK_COLUMN_PREFIX)
    results.index = df.index

    out = df.copy()
    for col in results.columns:
        out[col] = results[col]
    return out


def summarize(results: pd.DataFrame, *, prefix: str = "") -> pd.DataFrame:
    """Counts per country (valid rows) and per error class (invalid rows).

    Pass ``prefix=BULK_COLUMN_PREFIX`` for frames from ``validate_iban_column``.
    """
    valid = results[f"{prefix}valid"].astype(bool)
    country_col = f"{prefix}country_code"
    error_col = f"{prefix}error"

    by_country = (
        results.loc[valid, country_col]
        .value_counts()
        .rename_axis("key")
        .reset_index(name="count")
        .assign(kind="country")
    )
    by_error = (
        results.loc[~valid, error_col]
        .value_counts()
        .rename_axis("key")
        .reset_index(name="count")
        .assign(kind="error")
    )
    return (
        pd.concat([by_country, by_error], ignore_index=True)[["kind", "key", "count"]]
        .sort_values(["kind", "count", "key"], ascending=[True, False, True], ignore_index=True)
    )
