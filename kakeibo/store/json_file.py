"""JSON file persistence for the household store."""

import json
import logging
from pathlib import Path
from typing import Any

from kakeibo.config import StorageConfig
from kakeibo.exceptions import StorageError
from kakeibo.models import (
    Account,
    PaymentMethod,
    RecurringPayment,
    SavingsGoal,
    Transaction,
)
from kakeibo.store.household import HouseholdDataStore
from kakeibo.store.serialization import from_dict, to_dict

logger = logging.getLogger(__name__)

RECORD_TYPES: dict[str, type] = {
    "accounts": Account,
    "payment_methods": PaymentMethod,
    "transactions": Transaction,
    "recurring_payments": RecurringPayment,
    "savings_goals": SavingsGoal,
}


class JsonFileStore:
    """Persist a ``HouseholdDataStore`` as one JSON file per entity type."""

    def __init__(self, data_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        data_dir : str | Path
            Directory holding ``<entity_type>.json`` files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.data_dir = Path(data_dir)
        self.pretty = pretty

    @classmethod
    def from_config(cls, config: StorageConfig) -> "JsonFileStore":
        """Build a file store from storage configuration."""
        return cls(config.data_dir, pretty=config.pretty_json)

    def save(self, store: HouseholdDataStore) -> dict[str, int]:
        """Write every collection to disk and return record counts."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        counts: dict[str, int] = {}

        for entity_type, collection in store.collections().items():
            records = collection.get_all()
            self.write_batch(entity_type, records)
            counts[entity_type] = len(records)

        logger.info("Saved household snapshot to %s: %s", self.data_dir, counts)
        return counts

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to a JSON file."""
        file_path = self.data_dir / f"{entity_type}.json"
        data = [to_dict(record) for record in records]

        try:
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as exc:
            raise StorageError(f"Cannot write {file_path}: {exc}") from exc

    def load(self) -> HouseholdDataStore:
        """Rebuild a store from the files in ``data_dir``.

        Missing files load as empty collections. Records are loaded as-is,
        without referential checks, since a snapshot may legitimately hold
        dangling ids left by deletions.
        """
        store = HouseholdDataStore()
        collections = store.collections()

        for entity_type, record_type in RECORD_TYPES.items():
            file_path = self.data_dir / f"{entity_type}.json"
            if not file_path.exists():
                continue
            try:
                with open(file_path, encoding="utf-8") as f:
                    raw = json.load(f)
            except (OSError, json.JSONDecodeError) as exc:
                raise StorageError(f"Cannot read {file_path}: {exc}") from exc

            if not isinstance(raw, list):
                raise StorageError(f"{file_path} must contain a JSON array")
            collections[entity_type].load([from_dict(record_type, item) for item in raw])

        logger.info("Loaded household snapshot from %s: %s", self.data_dir, store.summary())
        return store
