"""Billing-cycle and obligation scheduling engine."""

from kakeibo.engine.billing import (
    calculate_payment_date,
    get_actual_payment_date,
    get_billing_period,
    get_pending_amount_by_account,
    get_pending_amount_by_payment_method,
    resolve_payment_month,
)
from kakeibo.engine.grouping import (
    calculate_recurring_total,
    group_recurring_by_category,
    group_recurring_by_member,
    group_recurring_by_payment,
    sort_grouped_entries,
)
from kakeibo.engine.months import (
    compare_months,
    months_in_range,
    next_month,
    prev_month,
)
from kakeibo.engine.recurring import (
    calculate_next_recurring_date,
    get_effective_recurring_amount,
    get_pending_recurring_summary,
    get_recurring_occurrences_in_range,
    get_recurring_payments_for_month,
    get_upcoming_recurring_payments,
)
from kakeibo.engine.savings import (
    calculate_accumulated_amount,
    calculate_monthly_amount,
    get_effective_monthly_amount,
    get_monthly_savings_total,
    get_remaining_months_count,
    is_month_excluded,
)
from kakeibo.engine.schedule import get_account_schedule_groups
from kakeibo.engine.settlement import get_unsettled_transactions, settle_overdue_transactions

__all__ = [
    "calculate_accumulated_amount",
    "calculate_monthly_amount",
    "calculate_next_recurring_date",
    "calculate_payment_date",
    "calculate_recurring_total",
    "compare_months",
    "get_account_schedule_groups",
    "get_actual_payment_date",
    "get_billing_period",
    "get_effective_monthly_amount",
    "get_effective_recurring_amount",
    "get_monthly_savings_total",
    "get_pending_amount_by_account",
    "get_pending_amount_by_payment_method",
    "get_pending_recurring_summary",
    "get_recurring_occurrences_in_range",
    "get_recurring_payments_for_month",
    "get_remaining_months_count",
    "get_unsettled_transactions",
    "get_upcoming_recurring_payments",
    "group_recurring_by_category",
    "group_recurring_by_member",
    "group_recurring_by_payment",
    "is_month_excluded",
    "months_in_range",
    "next_month",
    "prev_month",
    "resolve_payment_month",
    "settle_overdue_transactions",
    "sort_grouped_entries",
]
