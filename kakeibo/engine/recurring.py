"""Occurrence dates and effective amounts of recurring payments."""

import logging
from datetime import date, timedelta

from kakeibo.engine.months import add_months, months_between
from kakeibo.models import (
    PeriodType,
    RecurringOccurrence,
    RecurringPayment,
    RecurringSummary,
    TransactionType,
)
from kakeibo.store.household import HouseholdDataStore

logger = logging.getLogger(__name__)


def get_effective_recurring_amount(rp: RecurringPayment, month: str) -> int:
    """Amount due in ``month``: the override for that month, else the base."""
    overrides = rp.monthly_overrides or {}
    if month in overrides:
        return overrides[month]
    return rp.amount


def get_recurrence_anchor(rp: RecurringPayment) -> date | None:
    """Date the cadence is counted from: ``start_date``, else creation date."""
    if rp.start_date is not None:
        return rp.start_date
    if rp.created_at is not None:
        return rp.created_at.date()
    return None


def calculate_next_recurring_date(rp: RecurringPayment, from_date: date) -> date | None:
    """First occurrence of ``rp`` on or after ``from_date``.

    Monthly cadences are always derived from the anchor
    (``add_months(anchor, k * period_value)``) so an anchor on the 31st
    lands on the last day of short months and returns to the 31st
    afterwards. Inactive payments and structurally invalid ones (unknown
    period type, non-positive cadence, no anchor) never recur.
    """
    if not rp.is_active or rp.period_value is None or rp.period_value < 1:
        return None

    anchor = get_recurrence_anchor(rp)
    if anchor is None:
        return None
    if from_date <= anchor:
        return anchor

    step = rp.period_value
    if rp.period_type == PeriodType.MONTHS:
        cycles = months_between(anchor, from_date) // step
        candidate = add_months(anchor, cycles * step)
        if candidate < from_date:
            candidate = add_months(anchor, (cycles + 1) * step)
        return candidate

    if rp.period_type == PeriodType.DAYS:
        days = (from_date - anchor).days
        cycles = -(-days // step)  # ceil
        return anchor + timedelta(days=cycles * step)

    logger.warning("Recurring payment %s has unknown period type %r", rp.id, rp.period_type)
    return None


def is_recurring_in_month(rp: RecurringPayment, year: int, month: int) -> bool:
    """Whether ``rp`` has at least one occurrence in the given month."""
    first = date(year, month, 1)
    next_date = calculate_next_recurring_date(rp, first)
    return next_date is not None and (next_date.year, next_date.month) == (year, month)


def get_recurring_payments_for_month(
    store: HouseholdDataStore, year: int, month: int
) -> list[RecurringPayment]:
    """Recurring payments with an occurrence in ``year``-``month``."""
    return [
        rp for rp in store.recurring_payments.get_all() if is_recurring_in_month(rp, year, month)
    ]


def get_recurring_occurrences_in_range(
    payments: list[RecurringPayment],
    range_start: date,
    range_end: date,
) -> list[RecurringOccurrence]:
    """Every occurrence of ``payments`` within ``[range_start, range_end]``.

    Results are grouped per payment, in date order within each payment.
    """
    results: list[RecurringOccurrence] = []
    for payment in payments:
        cursor = range_start
        while True:
            next_date = calculate_next_recurring_date(payment, cursor)
            if next_date is None or next_date > range_end:
                break
            results.append(RecurringOccurrence(payment=payment, date=next_date))
            cursor = next_date + timedelta(days=1)
    return results


def get_upcoming_recurring_payments(
    store: HouseholdDataStore,
    days: int = 31,
    today: date | None = None,
) -> list[RecurringPayment]:
    """Recurring payments whose next occurrence is within ``days`` of today."""
    today = today or date.today()
    limit = today + timedelta(days=days)
    upcoming = []
    for rp in store.recurring_payments.get_all():
        next_date = calculate_next_recurring_date(rp, today)
        if next_date is not None and next_date <= limit:
            upcoming.append(rp)
    return upcoming


def get_pending_recurring_summary(
    store: HouseholdDataStore,
    days: int = 31,
    today: date | None = None,
) -> RecurringSummary:
    """Base-amount totals of upcoming recurring expense and income."""
    summary = RecurringSummary()
    for rp in get_upcoming_recurring_payments(store, days=days, today=today):
        if rp.type == TransactionType.EXPENSE:
            summary.expense += rp.amount
        else:
            summary.income += rp.amount
    return summary
