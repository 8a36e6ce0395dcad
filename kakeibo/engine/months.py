"""Month-string (``yyyy-MM``) and clamped calendar arithmetic."""

import calendar
import re
from datetime import date, datetime

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_month(month: str) -> tuple[int, int]:
    """Split ``yyyy-MM`` into ``(year, month)``.

    Raises
    ------
    ValueError
        If ``month`` is not a zero-padded ``yyyy-MM`` string.
    """
    match = _MONTH_RE.match(month)
    if match is None or not 1 <= int(match.group(2)) <= 12:
        raise ValueError(f"invalid month string: {month!r}")
    return int(match.group(1)), int(match.group(2))


def format_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def to_year_month(d: date) -> str:
    """Month-string of a date."""
    return format_month(d.year, d.month)


def current_month(now: datetime | date | None = None) -> str:
    """Month-string of ``now`` (default: today)."""
    return to_year_month(now or date.today())


def target_month(target_date: date | str) -> str:
    """Month-string a savings target date falls in."""
    if isinstance(target_date, str):
        return target_date[:7]
    return to_year_month(target_date)


def next_month(month: str) -> str:
    year, m = parse_month(month)
    if m == 12:
        return format_month(year + 1, 1)
    return format_month(year, m + 1)


def prev_month(month: str) -> str:
    year, m = parse_month(month)
    if m == 1:
        return format_month(year - 1, 12)
    return format_month(year, m - 1)


def shift_month(month: str, n: int) -> str:
    """Move a month-string ``n`` months forward (or back when negative)."""
    year, m = parse_month(month)
    index = year * 12 + (m - 1) + n
    return format_month(index // 12, index % 12 + 1)


def compare_months(a: str, b: str) -> int:
    """Negative if ``a`` < ``b``, zero if equal, positive if ``a`` > ``b``.

    Zero-padded ``yyyy-MM`` strings order lexicographically.
    """
    return (a > b) - (a < b)


def months_in_range(start: str, end: str) -> list[str]:
    """Inclusive ascending month-strings from ``start`` to ``end``."""
    months: list[str] = []
    current = start
    while compare_months(current, end) <= 0:
        months.append(current)
        current = next_month(current)
    return months


def last_day_of_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def clamp_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping ``day`` to the month's last day."""
    return date(year, month, min(day, last_day_of_month(year, month)))


def month_start(month: str) -> date:
    year, m = parse_month(month)
    return date(year, m, 1)


def add_months(d: date, n: int) -> date:
    """Move ``d`` by ``n`` months, clamping the day to the month's length.

    Cadences must be computed from their fixed anchor
    (``add_months(anchor, k * step)``) rather than by chaining, otherwise
    an anchor on the 31st decays to the 28th after February.
    """
    index = d.month - 1 + n
    year = d.year + index // 12
    month = index % 12 + 1
    return clamp_date(year, month, d.day)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start``'s month to ``end``'s month."""
    return (end.year - start.year) * 12 + (end.month - start.month)
