"""Serialization helpers for persisting household records."""

import dataclasses
import types
import typing
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar

from kakeibo.exceptions import StorageError

T = TypeVar("T")


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict without deep-copying field values.

    Household records are flat, so ``fields()`` + ``getattr`` is enough
    and avoids ``asdict``'s recursive copy.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    elif isinstance(value, (set, frozenset)):
        return sorted(serialize_value(v) for v in value)
    return value


def from_dict(cls: type[T], data: dict[str, Any]) -> T:
    """Rebuild a record dataclass from its serialized dictionary.

    Unknown keys are ignored so snapshots written by newer versions still
    load. Missing required fields raise ``StorageError``.
    """
    hints = typing.get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(hints[f.name], data[f.name])

    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise StorageError(f"Cannot build {cls.__name__} from {data!r}: {exc}") from exc


def _deserialize_value(hint: Any, value: Any) -> Any:
    if value is None:
        return None

    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        return _deserialize_value(args[0], value) if len(args) == 1 else value
    if origin is frozenset:
        return frozenset(value)
    if origin is dict:
        return dict(value)

    if isinstance(hint, type):
        if issubclass(hint, Enum):
            return hint(value)
        if issubclass(hint, datetime):
            return datetime.fromisoformat(value)
        if issubclass(hint, date):
            return date.fromisoformat(value)
        if dataclasses.is_dataclass(hint):
            return from_dict(hint, value)
    return value
