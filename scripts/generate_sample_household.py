#!/usr/bin/env python3
"""Generate a sample household and print its obligation schedule.

Builds a synthetic household, runs the settlement sweep, prints the
per-account schedule and optionally saves the snapshot as JSON files.
"""

import argparse
import sys
from datetime import date, datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kakeibo.config import KakeiboConfig, ScenarioConfig
from kakeibo.engine import (
    get_account_schedule_groups,
    get_monthly_savings_total,
    get_pending_recurring_summary,
    settle_overdue_transactions,
)
from kakeibo.engine.months import format_month
from kakeibo.logging import setup_logging
from kakeibo.models import AccountScheduleGroup
from kakeibo.scenarios import HouseholdScenario
from kakeibo.store import JsonFileStore


def print_schedule(groups: list[AccountScheduleGroup]) -> None:
    """Print schedule groups account by account."""
    for group in groups:
        print(f"\n{group.account_name}  (total ¥{group.total:,})")
        for entry in group.entries:
            when = entry.date.isoformat() if entry.date else "----------"
            if entry.kind == "card":
                month_group = entry.month_group
                names = ", ".join(c.payment_method.name for c in month_group.cards)
                print(f"  {when}  card bill {month_group.month}  [{names}]  ¥{entry.total:,}")
            else:
                names = ", ".join(i.payment.name for i in entry.date_group.items)
                print(f"  {when}  recurring  [{names}]  ¥{entry.total:,}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a sample household schedule")
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date as YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=3,
        help="Number of accounts to generate (default: 3)",
    )
    parser.add_argument(
        "--cards",
        type=int,
        default=2,
        help="Number of payment methods to generate (default: 2)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory to save the snapshot JSON files into",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["standard", "json"],
        default="standard",
        help="Log output format (default: standard)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log records to this file",
    )
    args = parser.parse_args()

    config = KakeiboConfig.from_env()
    setup_logging(level=config.log_level, format_type=args.log_format, log_file=args.log_file)

    today = args.today or date.today()
    now = datetime.combine(today, datetime.min.time())

    scenario = HouseholdScenario(
        config=ScenarioConfig(num_accounts=args.accounts, num_cards=args.cards),
        today=today,
        seed=args.seed,
        locale=config.locale,
    )
    store = scenario.generate()

    result = settle_overdue_transactions(store, now=now)
    print(f"Settled {result.settled_count} transactions ({len(result.failed)} failed)")

    print_schedule(get_account_schedule_groups(store, now=now))

    summary = get_pending_recurring_summary(
        store, days=config.schedule.upcoming_days, today=today
    )
    month = format_month(today.year, today.month)
    print(f"\nUpcoming recurring: expense ¥{summary.expense:,}, income ¥{summary.income:,}")
    print(f"Savings this month ({month}): ¥{get_monthly_savings_total(store, month):,}")

    if args.output:
        counts = JsonFileStore(args.output, pretty=config.storage.pretty_json).save(store)
        print(f"\nSaved {sum(counts.values())} records to {args.output}")


if __name__ == "__main__":
    main()
