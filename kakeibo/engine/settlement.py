"""Settlement reconciliation for monthly-billed transactions."""

import logging
from datetime import date, datetime

from kakeibo.engine.billing import calculate_payment_date
from kakeibo.exceptions import KakeiboError
from kakeibo.models import SettlementResult, Transaction
from kakeibo.store.household import HouseholdDataStore

logger = logging.getLogger(__name__)


def get_unsettled_transactions(
    store: HouseholdDataStore,
    payment_method_id: str | None = None,
) -> list[Transaction]:
    """Transactions paid with a payment method and not yet settled."""
    return [
        t
        for t in store.transactions.get_all()
        if t.payment_method_id
        and t.settled_at is None
        and (payment_method_id is None or t.payment_method_id == payment_method_id)
    ]


def settle_overdue_transactions(
    store: HouseholdDataStore,
    now: datetime | date | None = None,
) -> SettlementResult:
    """Stamp ``settled_at`` on every transaction whose payment date has come.

    Only transactions on monthly-billed methods linked to a funding account
    are considered; immediate methods settle at creation, and unlinked or
    unresolvable methods are left alone.
    Each transaction is settled independently: a failing update is logged
    and reported in ``SettlementResult.failed`` without stopping the
    sweep. Already-settled rows are never revisited, so running the sweep
    again with the same ``now`` changes nothing.

    Parameters
    ----------
    store : HouseholdDataStore
        Source of transactions and payment methods.
    now : datetime | date | None
        Reconciliation time (default: current time). A plain date means
        midnight of that day.

    Returns
    -------
    SettlementResult
        Ids settled by this call and ids whose update failed.
    """
    if now is None:
        now = datetime.now()
    elif not isinstance(now, datetime):
        now = datetime.combine(now, datetime.min.time())
    today = now.date()
    result = SettlementResult()

    for t in get_unsettled_transactions(store):
        pm = store.payment_methods.get_by_id(t.payment_method_id)
        if pm is None or not pm.is_monthly or not pm.linked_account_id:
            continue

        payment_date = calculate_payment_date(t.date, pm)
        if payment_date is None or payment_date > today:
            continue

        try:
            store.transactions.update(t.id, settled_at=now)
        except KakeiboError as exc:
            logger.error(
                "Failed to settle transaction %s: %s",
                t.id,
                exc,
                extra={"extra": {"transaction_id": t.id}},
            )
            result.failed[t.id] = str(exc)
            continue

        logger.debug(
            "Settled transaction %s due %s",
            t.id,
            payment_date.isoformat(),
            extra={"extra": {"transaction_id": t.id, "payment_date": payment_date}},
        )
        result.settled.append(t.id)

    if result.settled or result.failed:
        logger.info(
            "Settlement sweep at %s: %d settled, %d failed",
            now.isoformat(),
            len(result.settled),
            len(result.failed),
        )
    return result
