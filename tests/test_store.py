"""Tests for HouseholdDataStore and EntityCollection."""

from dataclasses import replace
from datetime import date, datetime

import pytest
from conftest import make_recurring, make_transaction

from kakeibo.exceptions import (
    EntityNotFoundError,
    InvalidEntityStateError,
    ReferentialIntegrityError,
)
from kakeibo.models import (
    Account,
    AccountType,
    BillingType,
    PaymentMethod,
    PaymentMethodType,
    SavingsGoal,
)
from kakeibo.store import EntityCollection, HouseholdDataStore


class TestEntityCollection:
    """Tests for the generic collection."""

    def test_create_assigns_id_and_timestamp(self) -> None:
        """Test missing id and created_at are filled in."""
        collection: EntityCollection[Account] = EntityCollection("accounts")
        account = collection.create(Account(id="", name="Wallet", type=AccountType.CASH, balance=0))

        assert account.id
        assert isinstance(account.created_at, datetime)
        assert collection.get_by_id(account.id) == account
        assert account.id in collection
        assert len(collection) == 1

    def test_create_keeps_given_values(self) -> None:
        """Test explicit id and created_at are preserved."""
        collection: EntityCollection[Account] = EntityCollection("accounts")
        created = datetime(2025, 1, 1)
        account = collection.create(
            Account(id="a1", name="Wallet", type=AccountType.CASH, balance=0, created_at=created)
        )
        assert account.id == "a1"
        assert account.created_at == created

    def test_get_by_id_missing(self) -> None:
        """Test unknown and None ids resolve to None."""
        collection: EntityCollection[Account] = EntityCollection("accounts")
        assert collection.get_by_id("nope") is None
        assert collection.get_by_id(None) is None

    def test_update_merges_fields(self) -> None:
        """Test partial update returns and stores a new record."""
        collection: EntityCollection[Account] = EntityCollection("accounts")
        original = collection.create(Account(id="a1", name="Wallet", type=AccountType.CASH, balance=0))

        updated = collection.update("a1", name="Purse", id="hijack")

        assert updated.name == "Purse"
        assert updated.id == "a1"
        assert updated.balance == original.balance
        assert updated.updated_at is not None
        assert collection.get_by_id("a1") == updated
        assert original.name == "Wallet"

    def test_update_unknown_raises(self) -> None:
        """Test updating an unknown id fails."""
        collection: EntityCollection[Account] = EntityCollection("accounts")
        with pytest.raises(EntityNotFoundError, match="accounts nope not found"):
            collection.update("nope", name="x")

    def test_delete_is_idempotent(self) -> None:
        """Test deleting twice is a no-op the second time."""
        collection: EntityCollection[Account] = EntityCollection("accounts")
        collection.create(Account(id="a1", name="Wallet", type=AccountType.CASH, balance=0))

        assert collection.delete("a1") is True
        assert collection.delete("a1") is False
        assert collection.get_all() == []

    def test_get_all_is_snapshot(self) -> None:
        """Test the returned list is detached from the collection."""
        collection: EntityCollection[Account] = EntityCollection("accounts")
        collection.create(Account(id="a1", name="Wallet", type=AccountType.CASH, balance=0))
        snapshot = collection.get_all()
        collection.delete("a1")
        assert len(snapshot) == 1

    def test_load_replaces_contents(self) -> None:
        """Test loading bypasses validation and replaces records."""
        collection: EntityCollection[Account] = EntityCollection(
            "accounts", validate=lambda r: pytest.fail("validated")
        )
        collection.load([Account(id="a1", name="Wallet", type=AccountType.CASH, balance=0)])
        assert [a.id for a in collection.get_all()] == ["a1"]


class TestHouseholdDataStore:
    """Tests for referential integrity and validation."""

    def test_summary(self, household: HouseholdDataStore) -> None:
        """Test counts per collection."""
        assert household.summary() == {
            "accounts": 1,
            "payment_methods": 2,
            "transactions": 0,
            "recurring_payments": 0,
            "savings_goals": 0,
        }

    def test_payment_method_unknown_account(self, store: HouseholdDataStore) -> None:
        """Test linking a method to an unknown account fails."""
        pm = PaymentMethod(
            id="pm",
            name="Card",
            type=PaymentMethodType.CREDIT_CARD,
            billing_type=BillingType.MONTHLY,
            linked_account_id="ghost",
        )
        with pytest.raises(ReferentialIntegrityError):
            store.add_payment_method(pm)

    @pytest.mark.parametrize(
        "changes",
        [{"closing_day": 0}, {"closing_day": 32}, {"payment_day": 40}, {"payment_month_offset": -1}],
    )
    def test_payment_method_cycle_bounds(
        self,
        household: HouseholdDataStore,
        monthly_card: PaymentMethod,
        changes: dict,
    ) -> None:
        """Test out-of-range cycle fields are rejected."""
        pm = replace(monthly_card, id="bad", **changes)
        with pytest.raises(InvalidEntityStateError):
            household.add_payment_method(pm)

    @pytest.mark.parametrize(
        "changes",
        [{"closing_day": 15}, {"payment_day": 10}, {"payment_month_offset": 1}],
    )
    def test_immediate_method_rejects_cycle_fields(
        self,
        household: HouseholdDataStore,
        debit_card: PaymentMethod,
        changes: dict,
    ) -> None:
        """Test billing cycle fields are only accepted on monthly methods."""
        pm = replace(debit_card, id="debit-with-cycle", **changes)
        with pytest.raises(InvalidEntityStateError, match="monthly"):
            household.add_payment_method(pm)

    def test_transaction_unknown_account(self, household: HouseholdDataStore) -> None:
        """Test transactions must reference an existing account."""
        with pytest.raises(ReferentialIntegrityError, match="Account ghost"):
            household.add_transaction(make_transaction("t1", date(2026, 1, 1), account_id="ghost"))

    def test_transaction_unknown_payment_method(self, household: HouseholdDataStore) -> None:
        """Test transactions must reference an existing payment method."""
        with pytest.raises(ReferentialIntegrityError, match="Payment method ghost"):
            household.add_transaction(
                make_transaction("t1", date(2026, 1, 1), payment_method_id="ghost")
            )

    def test_recurring_references(self, household: HouseholdDataStore) -> None:
        """Test recurring payments check account and method references."""
        with pytest.raises(ReferentialIntegrityError):
            household.add_recurring_payment(make_recurring("r1", None, account_id="ghost"))
        with pytest.raises(ReferentialIntegrityError):
            household.add_recurring_payment(make_recurring("r2", None, payment_method_id="ghost"))

        rp = household.add_recurring_payment(make_recurring("r3", None))
        assert rp.created_at is not None

    def test_referential_error_is_not_found(self) -> None:
        """Test referential errors are also not-found errors."""
        assert issubclass(ReferentialIntegrityError, EntityNotFoundError)

    def test_delete_does_not_cascade(self, household: HouseholdDataStore, sample_card_id: str) -> None:
        """Test deleting a method leaves its transactions in place."""
        household.add_transaction(make_transaction("t1", date(2026, 1, 1)))
        household.payment_methods.delete(sample_card_id)
        assert household.transactions.get_by_id("t1").payment_method_id == sample_card_id

    def test_savings_goal(self, store: HouseholdDataStore) -> None:
        """Test savings goals are stored without references."""
        goal = store.add_savings_goal(
            SavingsGoal(
                id="g1",
                name="Trip",
                target_amount=100000,
                start_month="2026-01",
                target_date=date(2026, 3, 31),
            )
        )
        assert store.savings_goals.get_by_id("g1") == goal
