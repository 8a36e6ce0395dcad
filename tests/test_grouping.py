"""Tests for recurring payment grouping."""

from datetime import date

import pytest
from conftest import make_recurring

from kakeibo.engine.grouping import (
    ACCOUNT_KEY_PREFIX,
    UNKNOWN_MEMBER_KEY,
    calculate_recurring_total,
    get_unassigned_member_recurring,
    get_unassigned_payment_recurring,
    get_uncategorized_recurring,
    group_recurring_by_category,
    group_recurring_by_member,
    group_recurring_by_payment,
    sort_grouped_entries,
)
from kakeibo.models import (
    Account,
    AccountType,
    PaymentMethod,
    RecurringPayment,
    TransactionType,
)

ANCHOR = date(2026, 1, 1)


@pytest.fixture
def accounts() -> list[Account]:
    """Two accounts owned by different members."""
    return [
        Account(id="a1", name="Bank", type=AccountType.BANK, balance=0, member_id="me"),
        Account(id="a2", name="Wallet", type=AccountType.CASH, balance=0, member_id="partner"),
    ]


@pytest.fixture
def payments() -> list[RecurringPayment]:
    """Mixed recurring payments."""
    return [
        make_recurring("rent", ANCHOR, amount=85000, category_id="housing", account_id="a1"),
        make_recurring(
            "video",
            ANCHOR,
            amount=1490,
            category_id="entertainment",
            account_id="a1",
            payment_method_id="card-test-001",
            monthly_overrides={"2026-02": 1990},
        ),
        make_recurring(
            "salary",
            ANCHOR,
            amount=280000,
            tx_type=TransactionType.INCOME,
            category_id="housing",
            account_id="a2",
        ),
        make_recurring("gift", ANCHOR, amount=5000, account_id="ghost"),
        make_recurring("loose", ANCHOR, amount=100),
    ]


class TestGroupByCategory:
    """Tests for category grouping."""

    def test_groups_and_totals(self, payments: list[RecurringPayment]) -> None:
        """Test signed totals per category; uncategorized left out."""
        grouped = group_recurring_by_category(payments)

        assert set(grouped) == {"housing", "entertainment"}
        assert [rp.id for rp in grouped["housing"].items] == ["rent", "salary"]
        assert grouped["housing"].total_amount == 85000 - 280000
        assert grouped["entertainment"].category_id == "entertainment"

    def test_month_applies_overrides(self, payments: list[RecurringPayment]) -> None:
        """Test amounts for a given month honour overrides."""
        grouped = group_recurring_by_category(payments, month="2026-02")
        assert grouped["entertainment"].total_amount == 1990

    def test_label_function(self, payments: list[RecurringPayment]) -> None:
        """Test display names come from the label function."""
        grouped = group_recurring_by_category(payments, label=lambda key: key.upper())
        assert grouped["housing"].name == "HOUSING"


class TestGroupByPayment:
    """Tests for payment route grouping."""

    def test_card_and_account_keys(
        self,
        payments: list[RecurringPayment],
        accounts: list[Account],
        monthly_card: PaymentMethod,
    ) -> None:
        """Test cards key by method id, direct debits by account."""
        grouped = group_recurring_by_payment(payments, [monthly_card], accounts)

        assert set(grouped) == {
            monthly_card.id,
            f"{ACCOUNT_KEY_PREFIX}a1",
            f"{ACCOUNT_KEY_PREFIX}a2",
            f"{ACCOUNT_KEY_PREFIX}ghost",
        }
        card_group = grouped[monthly_card.id]
        assert card_group.name == "Test Card"
        assert card_group.payment_method == monthly_card
        assert card_group.account_id == monthly_card.linked_account_id
        assert grouped[f"{ACCOUNT_KEY_PREFIX}a1"].name == "Bank"
        assert grouped[f"{ACCOUNT_KEY_PREFIX}ghost"].name == "Account"

    def test_unknown_method_name(
        self,
        payments: list[RecurringPayment],
        accounts: list[Account],
    ) -> None:
        """Test a dangling method id still forms a group."""
        grouped = group_recurring_by_payment(payments, [], accounts)
        assert grouped["card-test-001"].name == "Cash"
        assert grouped["card-test-001"].payment_method is None


class TestGroupByMember:
    """Tests for member grouping."""

    def test_members(self, payments: list[RecurringPayment], accounts: list[Account]) -> None:
        """Test payments group by their account's member."""
        grouped = group_recurring_by_member(payments, accounts)

        assert set(grouped) == {"me", "partner", UNKNOWN_MEMBER_KEY}
        assert [rp.id for rp in grouped["me"].items] == ["rent", "video"]
        assert grouped["partner"].total_amount == -280000
        assert [rp.id for rp in grouped[UNKNOWN_MEMBER_KEY].items] == ["gift"]


class TestHelpers:
    """Tests for sorting and filtering helpers."""

    def test_sort_grouped_entries(self, payments: list[RecurringPayment]) -> None:
        """Test groups follow the given key order; unknown keys last."""
        grouped = group_recurring_by_category(payments)
        ordered = sort_grouped_entries(grouped, ["entertainment"])
        assert [key for key, _ in ordered] == ["entertainment", "housing"]

    def test_total(self, payments: list[RecurringPayment]) -> None:
        """Test the signed total across payments."""
        assert calculate_recurring_total(payments) == 85000 + 1490 - 280000 + 5000 + 100
        assert calculate_recurring_total(payments, month="2026-02") == (
            85000 + 1990 - 280000 + 5000 + 100
        )

    def test_unassigned_filters(self, payments: list[RecurringPayment]) -> None:
        """Test the uncategorized and unassigned filters."""
        assert [rp.id for rp in get_uncategorized_recurring(payments)] == ["gift", "loose"]
        assert [rp.id for rp in get_unassigned_payment_recurring(payments)] == ["loose"]
        assert [rp.id for rp in get_unassigned_member_recurring(payments)] == ["loose"]
