#!/usr/bin/env python3
"""
Run the portal's global search over exported record files.

Usage:
    python scripts/global_search.py "park ave" --contacts contacts.json --deals deals.json
    python scripts/global_search.py "leasing" --grouped
    python scripts/global_search.py "smith" --team team_members.json --limit 5
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matching.search import GlobalSearch
from matching.models import load_records


def main():
    parser = argparse.ArgumentParser(description="Search portal records")
    parser.add_argument("query", help="Search text")
    parser.add_argument("--team", type=Path, help="Team members JSON file")
    parser.add_argument("--contacts", type=Path, help="CRM contacts JSON file")
    parser.add_argument("--deals", type=Path, help="CRM deals JSON file")
    parser.add_argument("--templates", type=Path, help="Contract templates JSON file")
    parser.add_argument("--limit", type=int, help="Maximum results")
    parser.add_argument(
        "--grouped",
        action="store_true",
        help="Group results by category",
    )

    args = parser.parse_args()

    global_search = GlobalSearch(
        team_members=load_records(args.team) if args.team else None,
        contacts=load_records(args.contacts) if args.contacts else None,
        deals=load_records(args.deals) if args.deals else None,
        templates=load_records(args.templates) if args.templates else None,
        limit=args.limit,
    )

    if args.grouped:
        grouped = global_search.search_grouped(args.query)
        if not grouped:
            print("No results.")
        for category, results in grouped.items():
            print(f"\n{category.value.upper()}")
            for result in results:
                print(f"  {result.title:<40} {result.subtitle or '':<30} {result.path}")
        return

    results = global_search.search(args.query)
    if not results:
        print("No results.")
    for i, result in enumerate(results, 1):
        print(
            f"{i:<3} [{result.category.value:<8}] {result.title:<40} "
            f"{result.subtitle or '':<30} {result.path}"
        )


if __name__ == "__main__":
    main()
