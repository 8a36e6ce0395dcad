"""Transaction model."""

from dataclasses import dataclass
from datetime import date, datetime

from kakeibo.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Income or expense record.

    A transaction paid with a monthly-billed payment method starts with
    ``settled_at`` unset; reconciliation stamps it once the cycle's
    payment date has passed.
    """

    id: str
    type: TransactionType
    amount: int  # positive, whole yen
    date: date
    category_id: str
    account_id: str
    payment_method_id: str | None = None
    memo: str | None = None
    settled_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def signed_amount(self) -> int:
        """Amount owed: expenses count positive, income/refunds negative."""
        return self.amount if self.type == TransactionType.EXPENSE else -self.amount
