"""Household domain generators."""

from kakeibo.generators.household.account import AccountGenerator, PaymentMethodGenerator
from kakeibo.generators.household.recurring import RecurringPaymentGenerator, SavingsGoalGenerator
from kakeibo.generators.household.transaction import TransactionGenerator

__all__ = [
    "AccountGenerator",
    "PaymentMethodGenerator",
    "RecurringPaymentGenerator",
    "SavingsGoalGenerator",
    "TransactionGenerator",
]
