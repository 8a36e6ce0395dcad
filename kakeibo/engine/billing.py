"""Billing cycle resolution for monthly-billed payment methods.

A monthly card's cycle runs from the day after the previous closing day
through the closing day itself. Purchases in that window are paid on
``payment_day`` of the month ``payment_month_offset`` months after the
cycle's closing month. Closing and payment days beyond a month's length
clamp to its last day.
"""

from datetime import date, timedelta

from kakeibo.engine.months import (
    clamp_date,
    parse_month,
    prev_month,
    shift_month,
    to_year_month,
)
from kakeibo.models import BillingPeriod, PaymentMethod
from kakeibo.store.household import HouseholdDataStore


def closing_date(month: str, pm: PaymentMethod) -> date | None:
    """Clamped closing date of ``pm``'s cycle that closes in ``month``."""
    if not pm.is_cycle_configured:
        return None
    year, m = parse_month(month)
    return clamp_date(year, m, pm.closing_day)


def resolve_closing_month(transaction_date: date, pm: PaymentMethod) -> str | None:
    """Month whose closing day ends the cycle containing ``transaction_date``."""
    closing = closing_date(to_year_month(transaction_date), pm)
    if closing is None:
        return None
    month = to_year_month(transaction_date)
    if transaction_date <= closing:
        return month
    return shift_month(month, 1)


def resolve_payment_month(transaction_date: date, pm: PaymentMethod) -> str | None:
    """``yyyy-MM`` in which a purchase on ``transaction_date`` is paid."""
    closing_month = resolve_closing_month(transaction_date, pm)
    if closing_month is None:
        return None
    return shift_month(closing_month, pm.payment_month_offset)


def get_actual_payment_date(payment_month: str, pm: PaymentMethod) -> date | None:
    """Concrete debit date (clamped ``payment_day``) within ``payment_month``."""
    if not pm.is_cycle_configured:
        return None
    year, m = parse_month(payment_month)
    return clamp_date(year, m, pm.payment_day)


def calculate_payment_date(transaction_date: date, pm: PaymentMethod) -> date | None:
    """Date on which a purchase made on ``transaction_date`` is debited.

    Returns None for immediate-billing methods and for monthly methods
    missing any of their cycle fields.

    Examples
    --------
    With closing day 15, payment day 10 and offset 1, a purchase on
    2026-02-20 falls in the 2026-02-16..2026-03-15 cycle and is paid on
    2026-04-10.
    """
    payment_month = resolve_payment_month(transaction_date, pm)
    if payment_month is None:
        return None
    return get_actual_payment_date(payment_month, pm)


def get_billing_period(payment_month: str, pm: PaymentMethod) -> BillingPeriod | None:
    """Purchase window whose total is debited in ``payment_month``."""
    if not pm.is_cycle_configured:
        return None
    closing_month = shift_month(payment_month, -pm.payment_month_offset)
    end = closing_date(closing_month, pm)
    previous_close = closing_date(prev_month(closing_month), pm)
    return BillingPeriod(start=previous_close + timedelta(days=1), end=end)


def get_pending_amount_by_account(store: HouseholdDataStore) -> dict[str, int]:
    """Signed unsettled card totals keyed by the account that will pay them.

    Transactions whose payment method is unknown or unlinked are skipped.
    """
    from kakeibo.engine.settlement import get_unsettled_transactions

    result: dict[str, int] = {}
    for t in get_unsettled_transactions(store):
        pm = store.payment_methods.get_by_id(t.payment_method_id)
        if pm is None or not pm.linked_account_id:
            continue
        result[pm.linked_account_id] = result.get(pm.linked_account_id, 0) + t.signed_amount
    return result


def get_pending_amount_by_payment_method(store: HouseholdDataStore) -> dict[str, int]:
    """Signed unsettled totals keyed by payment method id."""
    from kakeibo.engine.settlement import get_unsettled_transactions

    result: dict[str, int] = {}
    for t in get_unsettled_transactions(store):
        result[t.payment_method_id] = result.get(t.payment_method_id, 0) + t.signed_amount
    return result
