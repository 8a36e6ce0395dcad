"""Per-account schedule of upcoming debits.

Two kinds of obligation are merged for each account:

- card month groups: unsettled purchases and this month's recurring
  payments on monthly payment methods linked to the account, grouped by
  the month their bill is debited;
- recurring date groups: this month's recurring payments charged to the
  account directly (or through an immediate payment method), grouped by
  due date.

Only expense-type recurring payments are scheduled. Card purchase totals
are signed: refunds subtract.
"""

import logging
from datetime import date, datetime

from kakeibo.engine.billing import (
    get_actual_payment_date,
    get_billing_period,
    resolve_payment_month,
)
from kakeibo.engine.months import format_month, shift_month
from kakeibo.engine.recurring import (
    calculate_next_recurring_date,
    get_effective_recurring_amount,
    get_recurring_payments_for_month,
)
from kakeibo.engine.settlement import get_unsettled_transactions
from kakeibo.models import (
    Account,
    AccountScheduleGroup,
    CardMonthEntry,
    CardMonthGroup,
    PaymentMethod,
    RecurringDateGroup,
    RecurringItem,
    RecurringPayment,
    ScheduleEntry,
    TransactionType,
)
from kakeibo.store.household import HouseholdDataStore

logger = logging.getLogger(__name__)

NO_DATE_KEY = "no-date"


def _card_entry(
    month_map: dict[str, dict[str, CardMonthEntry]],
    payment_month: str,
    pm: PaymentMethod,
) -> CardMonthEntry:
    cards = month_map.setdefault(payment_month, {})
    if pm.id not in cards:
        period = get_billing_period(payment_month, pm)
        cards[pm.id] = CardMonthEntry(
            payment_method=pm,
            billing_start=period.start if period else None,
            billing_end=period.end if period else None,
            payment_date=get_actual_payment_date(payment_month, pm),
        )
    return cards[pm.id]


def _card_month_groups(
    monthly_cards: list[PaymentMethod],
    store: HouseholdDataStore,
    this_month: str,
    card_recurring: dict[str, list[RecurringItem]],
) -> list[CardMonthGroup]:
    cards_by_id = {pm.id: pm for pm in monthly_cards}
    month_map: dict[str, dict[str, CardMonthEntry]] = {}

    for t in get_unsettled_transactions(store):
        pm = cards_by_id.get(t.payment_method_id)
        if pm is None:
            continue
        payment_month = resolve_payment_month(t.date, pm)
        if payment_month is None:
            logger.debug("Skipping transaction %s: card %s has no billing cycle", t.id, pm.id)
            continue
        entry = _card_entry(month_map, payment_month, pm)
        entry.transactions.append(t)
        entry.transaction_total += t.signed_amount

    for pm in monthly_cards:
        items = card_recurring.get(pm.id)
        if not items:
            continue
        if pm.payment_month_offset is None:
            logger.debug("Skipping recurring items on card %s: no payment month offset", pm.id)
            continue
        entry = _card_entry(month_map, shift_month(this_month, pm.payment_month_offset), pm)
        for item in items:
            entry.recurring_items.append(item)
            entry.recurring_total += item.amount

    groups = []
    for month in sorted(month_map):
        cards = list(month_map[month].values())
        dates = [c.payment_date for c in cards if c.payment_date is not None]
        groups.append(
            CardMonthGroup(month=month, payment_date=min(dates) if dates else None, cards=cards)
        )
    return groups


def _recurring_date_groups(
    account: Account,
    this_month_recurring: list[RecurringPayment],
    payment_methods: dict[str, PaymentMethod],
    this_month: str,
    month_start: date,
) -> list[RecurringDateGroup]:
    groups: dict[str, RecurringDateGroup] = {}

    for rp in this_month_recurring:
        if rp.account_id != account.id:
            continue
        pm = payment_methods.get(rp.payment_method_id) if rp.payment_method_id else None
        if pm is not None and pm.is_monthly:
            continue

        amount = get_effective_recurring_amount(rp, this_month)
        due = calculate_next_recurring_date(rp, month_start)
        key = due.isoformat() if due else NO_DATE_KEY
        group = groups.setdefault(key, RecurringDateGroup(key=key, date=due))
        group.items.append(RecurringItem(payment=rp, amount=amount))
        group.total += amount

    return list(groups.values())


def _sort_key(entry: ScheduleEntry) -> tuple[bool, date]:
    entry_date = entry.date
    return (entry_date is None, entry_date or date.min)


def get_account_schedule_groups(
    store: HouseholdDataStore,
    now: datetime | date | None = None,
) -> list[AccountScheduleGroup]:
    """Chronological obligations per account, with group and account totals.

    Parameters
    ----------
    store : HouseholdDataStore
        Snapshot source for accounts, payment methods, transactions and
        recurring payments.
    now : datetime | date | None
        Reference time deciding "this month" (default: today).

    Returns
    -------
    list[AccountScheduleGroup]
        One group per account that has at least one entry, in account
        order. Entries are sorted by date; undated entries come last in
        their original relative order.
    """
    today = now.date() if isinstance(now, datetime) else (now or date.today())
    this_month = format_month(today.year, today.month)
    month_start = today.replace(day=1)

    payment_methods = {pm.id: pm for pm in store.payment_methods.get_all()}
    this_month_recurring = [
        rp
        for rp in get_recurring_payments_for_month(store, today.year, today.month)
        if rp.type == TransactionType.EXPENSE
    ]

    card_recurring: dict[str, list[RecurringItem]] = {}
    for rp in this_month_recurring:
        pm = payment_methods.get(rp.payment_method_id) if rp.payment_method_id else None
        if pm is None or not pm.is_monthly:
            continue
        amount = get_effective_recurring_amount(rp, this_month)
        card_recurring.setdefault(pm.id, []).append(RecurringItem(payment=rp, amount=amount))

    accounts = sorted(
        store.accounts.get_all(),
        key=lambda a: (a.order is None, a.order if a.order is not None else 0),
    )

    result: list[AccountScheduleGroup] = []
    for account in accounts:
        monthly_cards = [
            pm
            for pm in payment_methods.values()
            if pm.linked_account_id == account.id and pm.is_monthly
        ]

        card_groups = _card_month_groups(
            monthly_cards, store, this_month, card_recurring
        )
        date_groups = _recurring_date_groups(
            account, this_month_recurring, payment_methods, this_month, month_start
        )

        entries = [ScheduleEntry(kind="card", month_group=g) for g in card_groups]
        entries += [ScheduleEntry(kind="recurring", date_group=g) for g in date_groups]
        if not entries:
            continue
        entries.sort(key=_sort_key)

        result.append(
            AccountScheduleGroup(
                account_id=account.id,
                account_name=account.name,
                account_color=account.color,
                entries=entries,
                total=sum(e.total for e in entries),
            )
        )

    return result
