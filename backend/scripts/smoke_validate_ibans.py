from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

_PROJECT_ROOT = Path(__file__).resolve().parents[1]   # backend/
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

import pandas as pd

from ibangen.config import BULK_COLUMN_PREFIX
from ibangen.io.bulk import summarize, validate_iban_column


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Smoke test: validate an IBAN column of a CSV file."
    )
    parser.add_argument("--path", required=True, help="CSV file path.")
    parser.add_argument("--column", default="iban", help="Column holding the IBANs. Default: iban.")
    parser.add_argument("--sep", default=",", help="CSV separator. Default: ','.")
    parser.add_argument(
        "--head",
        type=int,
        default=10,
        help="Invalid rows to print. Default: 10.",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    df = pd.read_csv(args.path, sep=args.sep, dtype=str, keep_default_na=False)
    checked = validate_iban_column(df, args.column)

    print("\n=== Summary ===")
    print(summarize(checked, prefix=BULK_COLUMN_PREFIX).to_string(index=False))

    invalid = checked.loc[~checked[f"{BULK_COLUMN_PREFIX}valid"]]
    if not invalid.empty:
        print(f"\n=== Invalid rows (first {args.head}) ===")
        cols = [args.column, f"{BULK_COLUMN_PREFIX}error", f"{BULK_COLUMN_PREFIX}detail"]
        print(invalid[cols].head(args.head).to_string(index=False))


if __name__ == "__main__":
    main()
