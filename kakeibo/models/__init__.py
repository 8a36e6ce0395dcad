"""Household domain models."""

from kakeibo.models.account import Account, PaymentMethod
from kakeibo.models.enums import (
    AccountType,
    BillingType,
    PaymentMethodType,
    PeriodType,
    TransactionType,
)
from kakeibo.models.recurring import RecurringPayment
from kakeibo.models.savings import SavingsGoal
from kakeibo.models.schedule import (
    AccountScheduleGroup,
    BillingPeriod,
    CardMonthEntry,
    CardMonthGroup,
    RecurringDateGroup,
    RecurringGroup,
    RecurringItem,
    RecurringOccurrence,
    RecurringSummary,
    ScheduleEntry,
    SettlementResult,
)
from kakeibo.models.transaction import Transaction

__all__ = [
    "Account",
    "AccountScheduleGroup",
    "AccountType",
    "BillingPeriod",
    "BillingType",
    "CardMonthEntry",
    "CardMonthGroup",
    "PaymentMethod",
    "PaymentMethodType",
    "PeriodType",
    "RecurringDateGroup",
    "RecurringGroup",
    "RecurringItem",
    "RecurringOccurrence",
    "RecurringPayment",
    "RecurringSummary",
    "SavingsGoal",
    "ScheduleEntry",
    "SettlementResult",
    "Transaction",
    "TransactionType",
]
