#!/usr/bin/env python3
"""
Match free-text agent names to team member records.

Usage:
    python scripts/match_agents.py --team team_members.json "Jane Doe, John Smith"
    python scripts/match_agents.py --team team_members.json --transactions transactions.json
    python scripts/match_agents.py --team contacts.json --name-field full_name "Jane Doe"
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.logging import logger
from matching.entity_resolution import AgentResolver, ResolverConfig
from matching.models import field_value, load_records


def print_results(results, name_field: str):
    for result in results:
        if result.is_match:
            line = (
                f"  {result.segment:<30} -> {field_value(result.record, name_field):<30} "
                f"[{result.tier.value}]"
            )
            if result.details.get("ambiguous"):
                line += f"  (also: {', '.join(result.details['alternatives'])})"
        else:
            line = f"  {result.segment:<30} -> (no match)"
            suggestions = result.details.get("suggestions")
            if suggestions:
                line += "  did you mean: " + ", ".join(
                    f"{name} ({score:.0f})" for name, score in suggestions
                )
        print(line)


def main():
    parser = argparse.ArgumentParser(
        description="Resolve agent names against team member records"
    )
    parser.add_argument("names", nargs="?", help="Comma-separated agent names")
    parser.add_argument(
        "--team",
        type=Path,
        required=True,
        help="JSON file with candidate records",
    )
    parser.add_argument(
        "--transactions",
        type=Path,
        help="JSON file with transactions whose agent_name should be resolved",
    )
    parser.add_argument(
        "--name-field",
        default="name",
        help="Candidate field holding the display name (default: name)",
    )

    args = parser.parse_args()
    if not args.names and not args.transactions:
        parser.error("provide names or --transactions")

    candidates = load_records(args.team)
    resolver = AgentResolver(ResolverConfig(name_field=args.name_field))
    logger.debug(f"Loaded {len(candidates)} candidates from {args.team}")

    if args.names:
        print_results(resolver.resolve(args.names, candidates), args.name_field)

    if args.transactions:
        transactions = load_records(args.transactions)
        resolved, stats = resolver.resolve_transactions(transactions, candidates)

        for transaction_id, results in resolved.items():
            print(f"Transaction {transaction_id}:")
            print_results(results, args.name_field)

        print("=" * 60)
        print(f"Transactions: {stats.records}")
        print(f"Agent names:  {stats.segments}")
        for tier, count in stats.tier_counts.items():
            print(f"  {tier:<12} {count}")
        print(f"Ambiguous:    {stats.ambiguous}")
        print(f"Unmatched:    {stats.unmatched}")


if __name__ == "__main__":
    main()
