"""Grouping of recurring payments for list displays."""

from typing import Callable

from kakeibo.engine.recurring import get_effective_recurring_amount
from kakeibo.models import (
    Account,
    PaymentMethod,
    RecurringGroup,
    RecurringPayment,
    TransactionType,
)

UNKNOWN_MEMBER_KEY = "__unknown__"
ACCOUNT_KEY_PREFIX = "__account__"


def _signed_amount(rp: RecurringPayment, month: str | None) -> int:
    amount = get_effective_recurring_amount(rp, month) if month else rp.amount
    return amount if rp.type == TransactionType.EXPENSE else -amount


def group_recurring_by_category(
    payments: list[RecurringPayment],
    month: str | None = None,
    label: Callable[[str], str] | None = None,
) -> dict[str, RecurringGroup]:
    """Group by category id; uncategorized payments are left out.

    ``label`` maps a category id to its display name (default: the id).
    """
    grouped: dict[str, RecurringGroup] = {}
    for rp in payments:
        if not rp.category_id:
            continue
        group = grouped.get(rp.category_id)
        if group is None:
            name = label(rp.category_id) if label else rp.category_id
            group = grouped[rp.category_id] = RecurringGroup(
                key=rp.category_id, name=name, category_id=rp.category_id
            )
        group.items.append(rp)
        group.total_amount += _signed_amount(rp, month)
    return grouped


def group_recurring_by_payment(
    payments: list[RecurringPayment],
    payment_methods: list[PaymentMethod],
    accounts: list[Account],
    month: str | None = None,
) -> dict[str, RecurringGroup]:
    """Group by payment method, or by account when no method is set.

    Account-routed groups are keyed ``__account__<account id>``. Payments
    with neither a method nor an account are left out.
    """
    methods_by_id = {pm.id: pm for pm in payment_methods}
    accounts_by_id = {a.id: a for a in accounts}
    grouped: dict[str, RecurringGroup] = {}

    for rp in payments:
        if rp.payment_method_id:
            key = rp.payment_method_id
            pm = methods_by_id.get(rp.payment_method_id)
            account_id = pm.linked_account_id if pm else None
            name = pm.name if pm else "Cash"
        elif rp.account_id:
            key = f"{ACCOUNT_KEY_PREFIX}{rp.account_id}"
            pm = None
            account_id = rp.account_id
            account = accounts_by_id.get(rp.account_id)
            name = account.name if account else "Account"
        else:
            continue

        group = grouped.get(key)
        if group is None:
            group = grouped[key] = RecurringGroup(
                key=key, name=name, payment_method=pm, account_id=account_id
            )
        group.items.append(rp)
        group.total_amount += _signed_amount(rp, month)

    return grouped


def group_recurring_by_member(
    payments: list[RecurringPayment],
    accounts: list[Account],
    month: str | None = None,
    label: Callable[[str], str] | None = None,
) -> dict[str, RecurringGroup]:
    """Group by the member owning each payment's account.

    Payments without an account are left out; accounts that cannot be
    resolved fall under ``__unknown__``.
    """
    accounts_by_id = {a.id: a for a in accounts}
    grouped: dict[str, RecurringGroup] = {}

    for rp in payments:
        if not rp.account_id:
            continue
        account = accounts_by_id.get(rp.account_id)
        member_id = account.member_id if account and account.member_id else UNKNOWN_MEMBER_KEY

        group = grouped.get(member_id)
        if group is None:
            name = label(member_id) if label else member_id
            group = grouped[member_id] = RecurringGroup(key=member_id, name=name, member_id=member_id)
        group.items.append(rp)
        group.total_amount += _signed_amount(rp, month)

    return grouped


def sort_grouped_entries(
    grouped: dict[str, RecurringGroup],
    ordered_keys: list[str],
) -> list[tuple[str, RecurringGroup]]:
    """Order groups by position in ``ordered_keys``; unknown keys go last."""
    position = {key: i for i, key in enumerate(ordered_keys)}
    return sorted(
        grouped.items(),
        key=lambda item: (item[0] not in position, position.get(item[0], 0)),
    )


def calculate_recurring_total(payments: list[RecurringPayment], month: str | None = None) -> int:
    """Signed total: expenses add, income subtracts."""
    return sum(_signed_amount(rp, month) for rp in payments)


def get_uncategorized_recurring(payments: list[RecurringPayment]) -> list[RecurringPayment]:
    return [rp for rp in payments if not rp.category_id]


def get_unassigned_payment_recurring(payments: list[RecurringPayment]) -> list[RecurringPayment]:
    return [rp for rp in payments if not rp.payment_method_id and not rp.account_id]


def get_unassigned_member_recurring(payments: list[RecurringPayment]) -> list[RecurringPayment]:
    return [rp for rp in payments if not rp.account_id]
