"""Household data store with referential integrity."""

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Generic, TypeVar

from kakeibo.exceptions import (
    EntityNotFoundError,
    InvalidEntityStateError,
    ReferentialIntegrityError,
)
from kakeibo.models import (
    Account,
    PaymentMethod,
    RecurringPayment,
    SavingsGoal,
    Transaction,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CYCLE_FIELDS = ("closing_day", "payment_day", "payment_month_offset")


class EntityCollection(Generic[T]):
    """Key-value collection for one entity kind.

    Records are frozen dataclasses carrying ``id``, ``created_at`` and
    ``updated_at``; updates build a new instance and replace the stored
    one.

    Parameters
    ----------
    entity_type : str
        Name used in error messages and log lines (e.g. ``"transactions"``).
    validate : Callable[[T], None] | None
        Hook run before a record is created; raises to reject it.
    """

    def __init__(
        self,
        entity_type: str,
        validate: Callable[[T], None] | None = None,
    ) -> None:
        self.entity_type = entity_type
        self._validate = validate
        self._records: dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._records

    def get_all(self) -> list[T]:
        """Return a snapshot of every record."""
        return list(self._records.values())

    def get_by_id(self, entity_id: str | None) -> T | None:
        """Return the record with ``entity_id`` or None."""
        if entity_id is None:
            return None
        return self._records.get(entity_id)

    def create(self, record: T) -> T:
        """Store a new record, assigning an id and creation time if missing."""
        if self._validate is not None:
            self._validate(record)

        changes: dict[str, object] = {}
        if not record.id:
            changes["id"] = uuid.uuid4().hex
        if record.created_at is None:
            changes["created_at"] = datetime.now()
        if changes:
            record = replace(record, **changes)

        self._records[record.id] = record
        logger.debug("Created %s %s", self.entity_type, record.id)
        return record

    def update(self, entity_id: str, **changes: object) -> T:
        """Merge ``changes`` into the record and return the new version."""
        current = self._records.get(entity_id)
        if current is None:
            raise EntityNotFoundError(f"{self.entity_type} {entity_id} not found")

        changes.pop("id", None)
        changes.setdefault("updated_at", datetime.now())
        updated = replace(current, **changes)
        self._records[entity_id] = updated
        return updated

    def delete(self, entity_id: str) -> bool:
        """Remove a record. Deleting an unknown id is a no-op."""
        removed = self._records.pop(entity_id, None)
        if removed is not None:
            logger.debug("Deleted %s %s", self.entity_type, entity_id)
        return removed is not None

    def load(self, records: list[T]) -> None:
        """Replace the collection's contents without validation."""
        self._records = {r.id: r for r in records}


@dataclass
class HouseholdDataStore:
    """In-memory store for household entities.

    Creating a record that references an unknown account or payment
    method raises ``ReferentialIntegrityError``. Deletions never cascade,
    so consumers must tolerate dangling ids.
    """

    accounts: EntityCollection[Account] = field(init=False)
    payment_methods: EntityCollection[PaymentMethod] = field(init=False)
    transactions: EntityCollection[Transaction] = field(init=False)
    recurring_payments: EntityCollection[RecurringPayment] = field(init=False)
    savings_goals: EntityCollection[SavingsGoal] = field(init=False)

    def __post_init__(self) -> None:
        self.accounts = EntityCollection("accounts")
        self.payment_methods = EntityCollection(
            "payment_methods", self._validate_payment_method
        )
        self.transactions = EntityCollection("transactions", self._validate_transaction)
        self.recurring_payments = EntityCollection(
            "recurring_payments", self._validate_recurring_payment
        )
        self.savings_goals = EntityCollection("savings_goals")

    # Convenience wrappers mirroring the per-entity create calls
    def add_account(self, account: Account) -> Account:
        """Add an account to the store."""
        return self.accounts.create(account)

    def add_payment_method(self, payment_method: PaymentMethod) -> PaymentMethod:
        """Add a payment method to the store."""
        return self.payment_methods.create(payment_method)

    def add_transaction(self, transaction: Transaction) -> Transaction:
        """Add a transaction to the store."""
        return self.transactions.create(transaction)

    def add_recurring_payment(self, payment: RecurringPayment) -> RecurringPayment:
        """Add a recurring payment to the store."""
        return self.recurring_payments.create(payment)

    def add_savings_goal(self, goal: SavingsGoal) -> SavingsGoal:
        """Add a savings goal to the store."""
        return self.savings_goals.create(goal)

    def collections(self) -> dict[str, EntityCollection]:
        """Return every collection keyed by entity type."""
        return {
            "accounts": self.accounts,
            "payment_methods": self.payment_methods,
            "transactions": self.transactions,
            "recurring_payments": self.recurring_payments,
            "savings_goals": self.savings_goals,
        }

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {name: len(collection) for name, collection in self.collections().items()}

    # Validation hooks
    def _validate_payment_method(self, pm: PaymentMethod) -> None:
        if pm.linked_account_id and pm.linked_account_id not in self.accounts:
            raise ReferentialIntegrityError(f"Account {pm.linked_account_id} not found")

        if not pm.is_monthly:
            for name in CYCLE_FIELDS:
                if getattr(pm, name) is not None:
                    raise InvalidEntityStateError(
                        f"{name} is only allowed on monthly payment methods, "
                        f"got {pm.billing_type.value} method {pm.id}"
                    )
            return
        for name in ("closing_day", "payment_day"):
            value = getattr(pm, name)
            if value is not None and not 1 <= value <= 31:
                raise InvalidEntityStateError(f"{name} must be within 1-31, got {value}")
        if pm.payment_month_offset is not None and pm.payment_month_offset < 0:
            raise InvalidEntityStateError(
                f"payment_month_offset must be >= 0, got {pm.payment_month_offset}"
            )

    def _validate_transaction(self, transaction: Transaction) -> None:
        if transaction.account_id not in self.accounts:
            raise ReferentialIntegrityError(f"Account {transaction.account_id} not found")

        if (
            transaction.payment_method_id
            and transaction.payment_method_id not in self.payment_methods
        ):
            raise ReferentialIntegrityError(
                f"Payment method {transaction.payment_method_id} not found"
            )

    def _validate_recurring_payment(self, payment: RecurringPayment) -> None:
        if payment.account_id and payment.account_id not in self.accounts:
            raise ReferentialIntegrityError(f"Account {payment.account_id} not found")

        if payment.payment_method_id and payment.payment_method_id not in self.payment_methods:
            raise ReferentialIntegrityError(
                f"Payment method {payment.payment_method_id} not found"
            )
