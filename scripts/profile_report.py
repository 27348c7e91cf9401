#!/usr/bin/env python3
"""
Column profiling report for a CSV / JSON file.
Usage:
  python scripts/profile_report.py <input.csv>
  python scripts/profile_report.py <input.csv> --json
  python scripts/profile_report.py <input.csv> --date-column week_date --output report.csv
"""
import sys
from pathlib import Path

# Add src/ to path so the script runs from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dqprofile.cli import main


if __name__ == "__main__":
    sys.exit(main())
