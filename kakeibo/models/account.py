"""Account and payment method models."""

from dataclasses import dataclass
from datetime import datetime

from kakeibo.models.enums import AccountType, BillingType, PaymentMethodType


@dataclass(frozen=True)
class Account:
    """Asset account (cash, bank, e-money) that funds transactions.

    The balance is owned by the surrounding application; the scheduling
    engine reads it but never writes it.
    """

    id: str
    name: str
    type: AccountType
    balance: int  # whole yen
    color: str = "#64748b"
    member_id: str = "common"
    order: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PaymentMethod:
    """Card-style payment method.

    ``closing_day``, ``payment_day`` and ``payment_month_offset`` are only
    meaningful for ``BillingType.MONTHLY`` methods, where a billing cycle
    closes on ``closing_day`` and is debited from ``linked_account_id`` on
    ``payment_day`` of the month ``payment_month_offset`` months later.
    """

    id: str
    name: str
    type: PaymentMethodType
    billing_type: BillingType
    linked_account_id: str | None = None
    closing_day: int | None = None  # 1-31, clamped to month length
    payment_day: int | None = None  # 1-31, clamped to month length
    payment_month_offset: int | None = None  # months after closing month
    member_id: str = "common"
    color: str = "#334155"
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_monthly(self) -> bool:
        return self.billing_type == BillingType.MONTHLY

    @property
    def is_cycle_configured(self) -> bool:
        """Whether a monthly method carries all three cycle fields."""
        return (
            self.is_monthly
            and self.closing_day is not None
            and self.payment_day is not None
            and self.payment_month_offset is not None
        )
