"""Even amortization of savings goals across active months.

The per-month share is ``ceil(target / active_months)``, so the sum of
all shares may overshoot the target by up to ``active_months - 1``. The
overshoot is kept as-is; the last month is not trimmed.
"""

from kakeibo.engine.months import compare_months, months_in_range, target_month
from kakeibo.models import SavingsGoal
from kakeibo.store.household import HouseholdDataStore


def get_target_month(goal: SavingsGoal) -> str:
    return target_month(goal.target_date)


def is_month_excluded(goal: SavingsGoal, month: str) -> bool:
    return month in goal.excluded_months


def get_active_months(goal: SavingsGoal, end_month: str | None = None) -> list[str]:
    """Non-excluded months from ``start_month`` through ``end_month``.

    ``end_month`` defaults to the goal's target month.
    """
    end = end_month or get_target_month(goal)
    return [m for m in months_in_range(goal.start_month, end) if not is_month_excluded(goal, m)]


def calculate_monthly_amount(goal: SavingsGoal) -> int:
    """Even per-month share, rounded up.

    A goal with no active months (everything excluded, or start month
    after the target month) saves the whole target at once.
    """
    active = len(get_active_months(goal))
    if active == 0:
        return goal.target_amount
    return -(-goal.target_amount // active)


def get_effective_monthly_amount(goal: SavingsGoal, month: str) -> int:
    """Amount saved in ``month``: the override if present, else the share."""
    overrides = goal.monthly_overrides or {}
    if month in overrides:
        return overrides[month]
    return calculate_monthly_amount(goal)


def calculate_accumulated_amount(goal: SavingsGoal, as_of_month: str) -> int:
    """Total saved over active months through ``min(as_of_month, target)``."""
    target = get_target_month(goal)
    end = as_of_month if compare_months(as_of_month, target) <= 0 else target
    return sum(get_effective_monthly_amount(goal, m) for m in get_active_months(goal, end))


def get_remaining_months_count(goal: SavingsGoal, current_month: str) -> int:
    """Active months left from ``current_month`` through the target month."""
    target = get_target_month(goal)
    if compare_months(current_month, target) > 0:
        return 0
    return sum(1 for m in months_in_range(current_month, target) if not is_month_excluded(goal, m))


def get_monthly_savings_total(store: HouseholdDataStore, month: str) -> int:
    """Sum of every goal's contribution in ``month``."""
    total = 0
    for goal in store.savings_goals.get_all():
        if compare_months(month, goal.start_month) < 0:
            continue
        if compare_months(month, get_target_month(goal)) > 0:
            continue
        if is_month_excluded(goal, month):
            continue
        total += get_effective_monthly_amount(goal, month)
    return total
