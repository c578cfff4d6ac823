"""Bulk validation over pandas Series/DataFrames."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from ibangen.config import BULK_COLUMN_PREFIX, BULK_RESULT_COLUMNS
from ibangen.io.bulk import summarize, validate_iban_column, validate_ibans


_MIXED = [
    "ES68 3841 2436 1161 8319 1503",   # valid
    "GB82WEST12345698765432",          # unsupported
    "ES6738412436116183191503",        # iban checksum
    "",                                # blank
    None,                              # missing
    "be68539007547034",                # valid, lower case
]


class TestValidateIbans:
    def test_one_row_per_input_in_order(self):
        out = validate_ibans(_MIXED)
        assert list(out.columns) == list(BULK_RESULT_COLUMNS)
        assert len(out) == len(_MIXED)
        assert out["valid"].tolist() == [True, False, False, False, False, True]

    def test_valid_rows_carry_canonical_form(self):
        out = validate_ibans(_MIXED)
        assert out.loc[0, "canonical"] == "ES6838412436116183191503"
        assert out.loc[5, "canonical"] == "BE68539007547034"
        assert out.loc[5, "country_code"] == "BE"
        assert out.loc[0, "error"] is None

    def test_invalid_rows_carry_error_class(self):
        out = validate_ibans(_MIXED)
        assert out["error"].tolist()[1:5] == [
            "UnsupportedCountry",
            "InvalidChecksum",
            "InvalidLength",
            "InvalidLength",
        ]
        assert "not supported" in out.loc[1, "detail"]

    def test_nan_cells_are_blank(self):
        out = validate_ibans(pd.Series(["DE89370400440532013000", np.nan]))
        assert out["valid"].tolist() == [True, False]
        assert out.loc[1, "input"] is None

    def test_absent_cells_are_none(self):
        out = validate_ibans(_MIXED)
        for col in ("input", "canonical", "country_code", "error", "detail"):
            assert out[col].dtype == object
        assert out.loc[4, "input"] is None
        assert out.loc[1, "canonical"] is None
        assert out.loc[2, "country_code"] is None
        assert out.loc[5, "detail"] is None

    def test_empty_input(self):
        out = validate_ibans([])
        assert out.empty
        assert list(out.columns) == list(BULK_RESULT_COLUMNS)

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="ibangen.io.bulk"):
            validate_ibans(_MIXED)
        assert "2 valid, 4 invalid" in caplog.text


class TestValidateIbanColumn:
    def test_appends_prefixed_columns(self):
        df = pd.DataFrame(
            {"holder": ["a", "b"], "account": ["NL91ABNA0417164300", "NL91ABNA0417164301"]},
            index=[10, 20],
        )
        out = validate_iban_column(df, "account")

        assert list(df.columns) == ["holder", "account"]       # input untouched
        assert list(out.index) == [10, 20]
        expected_cols = [f"{BULK_COLUMN_PREFIX}{c}" for c in BULK_RESULT_COLUMNS if c != "input"]
        assert list(out.columns) == ["holder", "account", *expected_cols]
        assert out[f"{BULK_COLUMN_PREFIX}valid"].tolist() == [True, False]
        assert out.loc[20, f"{BULK_COLUMN_PREFIX}error"] == "InvalidChecksum"

    def test_missing_column(self):
        with pytest.raises(ValueError, match="Missing required column"):
            validate_iban_column(pd.DataFrame({"x": []}), "iban")


class TestSummarize:
    def test_counts_by_country_and_error(self):
        out = summarize(validate_ibans(_MIXED))
        rows = {(kind, key): count for kind, key, count in zip(out["kind"], out["key"], out["count"])}
        assert rows == {
            ("country", "ES"): 1,
            ("country", "BE"): 1,
            ("error", "InvalidLength"): 2,
            ("error", "UnsupportedCountry"): 1,
            ("error", "InvalidChecksum"): 1,
        }
        assert out.loc[out["kind"] == "error", "key"].iloc[0] == "InvalidLength"

    def test_prefixed_frame(self):
        df = pd.DataFrame({"iban": ["AT611904300234573201", "XX00"]})
        out = summarize(validate_iban_column(df, "iban"), prefix=BULK_COLUMN_PREFIX)
        assert set(zip(out["kind"], out["key"])) == {("country", "AT"), ("error", "InvalidLength")}
