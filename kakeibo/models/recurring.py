"""Recurring payment model."""

from dataclasses import dataclass, field
from datetime import date, datetime

from kakeibo.models.enums import PeriodType, TransactionType


@dataclass(frozen=True)
class RecurringPayment:
    """Obligation (subscription, salary, rent...) recurring indefinitely.

    The cadence is every ``period_value`` months or days counted from the
    anchor: ``start_date`` when set, otherwise the creation date.
    ``monthly_overrides`` maps ``yyyy-MM`` to an amount that replaces
    ``amount`` for that month only.
    """

    id: str
    name: str
    type: TransactionType
    amount: int
    period_type: PeriodType
    period_value: int
    category_id: str | None = None
    account_id: str | None = None
    payment_method_id: str | None = None
    monthly_overrides: dict[str, int] = field(default_factory=dict)
    start_date: date | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
