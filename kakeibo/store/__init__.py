"""Record storage for household entities."""

from kakeibo.store.household import EntityCollection, HouseholdDataStore
from kakeibo.store.json_file import JsonFileStore

__all__ = ["EntityCollection", "HouseholdDataStore", "JsonFileStore"]
