"""
Print every staff member's salary, and the total, as of a date.

Usage:
    python -m scripts.salary_report --roster data/roster.json --date 2025-01-01
"""
import argparse
import sys
from pathlib import Path

from backend.db import load_roster, max_depth_from_env
from backend.services.salary import SalaryEngine
from backend.utils.date_utils import parse_query_date


def build_report(engine: SalaryEngine, as_of) -> list:
    """Rows of (id, name, type, salary) in roster order."""
    return [
        (member.id, member.name, member.type.value, engine.compute_salary(member.id, as_of))
        for member in engine.roster
    ]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Staff salary report as of a date')
    parser.add_argument('--roster', type=Path, default=None,
                        help='Path to roster JSON file (default: ROSTER_FILE or built-in staff)')
    parser.add_argument('--date', dest='as_of', default=None,
                        help='Report date YYYY-MM-DD (default: today)')
    args = parser.parse_args(argv)

    if args.roster is not None and not args.roster.exists():
        print(f"Error: Roster file not found at {args.roster}")
        return 1
    try:
        as_of = parse_query_date(args.as_of)
    except ValueError:
        print(f"Error: Invalid date {args.as_of!r}")
        return 1

    engine = SalaryEngine(load_roster(args.roster), max_depth=max_depth_from_env())
    rows = build_report(engine, as_of)

    print("=" * 60)
    print(f"STAFF SALARIES AS OF {as_of.isoformat()}")
    print("=" * 60)
    for staff_id, name, staff_type, salary in rows:
        print(f"{staff_id:>6}  {name:<24} {staff_type:<9} {salary:>12}")
    print("-" * 60)
    print(f"{'TOTAL':<41} {engine.compute_total_salary(as_of):>12}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
