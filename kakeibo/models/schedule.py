"""Derived records produced by the scheduling engine."""

from dataclasses import dataclass, field
from datetime import date

from kakeibo.models.account import PaymentMethod
from kakeibo.models.recurring import RecurringPayment
from kakeibo.models.transaction import Transaction


@dataclass(frozen=True)
class BillingPeriod:
    """Inclusive purchase window of one billing cycle."""

    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass
class RecurringItem:
    """A recurring payment with its signed amount for a given month."""

    payment: RecurringPayment
    amount: int


@dataclass
class RecurringOccurrence:
    """One concrete occurrence date of a recurring payment."""

    payment: RecurringPayment
    date: date


@dataclass
class RecurringSummary:
    """Upcoming recurring totals split by direction."""

    expense: int = 0
    income: int = 0


@dataclass
class RecurringDateGroup:
    """Directly debited recurring items sharing one due date."""

    key: str  # yyyy-MM-dd or "no-date"
    date: date | None
    items: list[RecurringItem] = field(default_factory=list)
    total: int = 0


@dataclass
class CardMonthEntry:
    """One monthly payment method's bill within a payment month."""

    payment_method: PaymentMethod
    transactions: list[Transaction] = field(default_factory=list)
    transaction_total: int = 0
    recurring_items: list[RecurringItem] = field(default_factory=list)
    recurring_total: int = 0
    billing_start: date | None = None
    billing_end: date | None = None
    payment_date: date | None = None

    @property
    def total(self) -> int:
        return self.transaction_total + self.recurring_total


@dataclass
class CardMonthGroup:
    """All card bills debited from one account in one payment month."""

    month: str  # yyyy-MM
    payment_date: date | None
    cards: list[CardMonthEntry] = field(default_factory=list)

    @property
    def month_total(self) -> int:
        return sum(card.total for card in self.cards)


@dataclass
class ScheduleEntry:
    """Either a card month group or a recurring date group."""

    kind: str  # "card" or "recurring"
    month_group: CardMonthGroup | None = None
    date_group: RecurringDateGroup | None = None

    @property
    def date(self) -> date | None:
        if self.month_group is not None:
            return self.month_group.payment_date
        if self.date_group is not None:
            return self.date_group.date
        return None

    @property
    def total(self) -> int:
        if self.month_group is not None:
            return self.month_group.month_total
        if self.date_group is not None:
            return self.date_group.total
        return 0


@dataclass
class AccountScheduleGroup:
    """Chronological obligations debited from one account."""

    account_id: str
    account_name: str
    account_color: str
    entries: list[ScheduleEntry] = field(default_factory=list)
    total: int = 0


@dataclass
class SettlementResult:
    """Outcome of one reconciliation sweep."""

    settled: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def settled_count(self) -> int:
        return len(self.settled)


@dataclass
class RecurringGroup:
    """Recurring payments grouped by category, payment route or member."""

    key: str
    name: str
    items: list[RecurringPayment] = field(default_factory=list)
    total_amount: int = 0
    category_id: str | None = None
    member_id: str | None = None
    payment_method: PaymentMethod | None = None
    account_id: str | None = None
