"""
Command line entry point.

Usage:
  dqprofile <input.csv>
  dqprofile <input.csv> --date-column week_date --max-samples 3 --row-limit 100
  dqprofile <input.csv> --json
  dqprofile <input.csv> --output report.csv
"""
import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from .config import ProfilerConfig
from .errors import ProfilerError
from .report import format_report, profile_table
from .table import read_table

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("dqprofile")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Profile column completeness, samples and date range of a table")
    parser.add_argument("input_path", help="Path to input CSV / TSV / JSON / JSONL file")
    parser.add_argument("--entity", dest="entity_name", help="Entity name (defaults to DQPROFILE_ENTITY_NAME)")
    parser.add_argument("--table-name", help="Label for the TableName column (defaults to the entity name)")
    parser.add_argument("--date-column", dest="date_column_name", help="Date column for the range rows, '' to disable")
    parser.add_argument("--max-samples", dest="max_sample_values", type=int, help="Max number of samples per column")
    parser.add_argument("--row-limit", type=int, help="-1 for all rows, N for the first N rows")
    parser.add_argument("--columns", nargs="+", help="Only profile these columns")
    parser.add_argument("--output", help="Write the report to this CSV file")
    parser.add_argument("--json", action="store_true", help="Output the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _report_json(report: pd.DataFrame) -> str:
    return report.to_json(orient="records", date_format="iso", indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT, stream=sys.stderr)

    try:
        config = ProfilerConfig.from_env().with_overrides(
            entity_name=args.entity_name,
            table_name=args.table_name,
            date_column_name=args.date_column_name,
            max_sample_values=args.max_sample_values,
            row_limit=args.row_limit,
        )
        df = read_table(args.input_path)
        report = profile_table(df, config, column_names=args.columns)
    except (ProfilerError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        report.to_csv(args.output, index=False)
        logger.info("Wrote report to %s", args.output)

    if args.json:
        print(_report_json(report))
    else:
        print(format_report(report).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
