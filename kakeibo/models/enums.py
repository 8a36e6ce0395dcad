"""Enumeration types for household entities."""

from enum import Enum


class AccountType(str, Enum):
    CASH = "cash"
    BANK = "bank"
    EMONEY = "emoney"


class PaymentMethodType(str, Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"


class BillingType(str, Enum):
    IMMEDIATE = "immediate"
    MONTHLY = "monthly"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class PeriodType(str, Enum):
    MONTHS = "months"
    DAYS = "days"
