"""Savings goal model."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class SavingsGoal:
    """Fixed savings target amortized across a span of months.

    The span runs from ``start_month`` through the month of
    ``target_date`` (both ``yyyy-MM`` strings when compared), skipping
    ``excluded_months``.
    """

    id: str
    name: str
    target_amount: int
    start_month: str  # yyyy-MM
    target_date: date
    excluded_months: frozenset[str] = frozenset()
    monthly_overrides: dict[str, int] = field(default_factory=dict)
    icon: str = "piggy-bank"
    color: str = "#0ea5e9"
    created_at: datetime | None = None
    updated_at: datetime | None = None
