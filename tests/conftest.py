"""Pytest configuration and fixtures."""

from datetime import date, datetime

import pytest

from kakeibo.models import (
    Account,
    AccountType,
    BillingType,
    PaymentMethod,
    PaymentMethodType,
    PeriodType,
    RecurringPayment,
    Transaction,
    TransactionType,
)
from kakeibo.store import HouseholdDataStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_account_id() -> str:
    """Sample account ID."""
    return "acct-test-001"


@pytest.fixture
def sample_card_id() -> str:
    """Sample monthly card ID."""
    return "card-test-001"


@pytest.fixture
def sample_debit_id() -> str:
    """Sample immediate-billing card ID."""
    return "debit-test-001"


@pytest.fixture
def monthly_card(sample_card_id: str, sample_account_id: str) -> PaymentMethod:
    """Card closing on the 15th, paid on the 10th of the following month."""
    return PaymentMethod(
        id=sample_card_id,
        name="Test Card",
        type=PaymentMethodType.CREDIT_CARD,
        billing_type=BillingType.MONTHLY,
        linked_account_id=sample_account_id,
        closing_day=15,
        payment_day=10,
        payment_month_offset=1,
    )


@pytest.fixture
def debit_card(sample_debit_id: str, sample_account_id: str) -> PaymentMethod:
    """Immediate-billing debit card."""
    return PaymentMethod(
        id=sample_debit_id,
        name="Test Debit",
        type=PaymentMethodType.DEBIT_CARD,
        billing_type=BillingType.IMMEDIATE,
        linked_account_id=sample_account_id,
    )


@pytest.fixture
def store() -> HouseholdDataStore:
    """Create a fresh store for each test."""
    return HouseholdDataStore()


@pytest.fixture
def household(
    store: HouseholdDataStore,
    sample_account_id: str,
    monthly_card: PaymentMethod,
    debit_card: PaymentMethod,
) -> HouseholdDataStore:
    """Store with one bank account, one monthly card and one debit card."""
    store.add_account(
        Account(
            id=sample_account_id,
            name="Main Bank",
            type=AccountType.BANK,
            balance=500000,
            color="#2563eb",
        )
    )
    store.add_payment_method(monthly_card)
    store.add_payment_method(debit_card)
    return store


def make_transaction(
    tx_id: str,
    tx_date: date,
    amount: int = 1000,
    payment_method_id: str | None = "card-test-001",
    tx_type: TransactionType = TransactionType.EXPENSE,
    account_id: str = "acct-test-001",
    settled_at: datetime | None = None,
) -> Transaction:
    """Build a transaction with test defaults."""
    return Transaction(
        id=tx_id,
        type=tx_type,
        amount=amount,
        date=tx_date,
        category_id="food",
        account_id=account_id,
        payment_method_id=payment_method_id,
        settled_at=settled_at,
    )


def make_recurring(
    rp_id: str,
    start_date: date | None,
    amount: int = 1000,
    period_type: PeriodType = PeriodType.MONTHS,
    period_value: int = 1,
    tx_type: TransactionType = TransactionType.EXPENSE,
    **kwargs,
) -> RecurringPayment:
    """Build a recurring payment with test defaults."""
    return RecurringPayment(
        id=rp_id,
        name=rp_id,
        type=tx_type,
        amount=amount,
        period_type=period_type,
        period_value=period_value,
        start_date=start_date,
        **kwargs,
    )
