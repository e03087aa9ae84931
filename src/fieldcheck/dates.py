"""Date helpers shared by the age, date-of-birth and passport validators."""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime

_US_DATE_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
_LOOSE_ISO_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")
_TEXT_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%d %b %Y")

_DAYS_PER_YEAR = 365.25


@dataclass(frozen=True, slots=True)
class AgeBreakdown:
    """Elapsed time between a birth date and a reference date."""

    years: int
    months: int
    days: int
    decimal_years: float


def as_date(value: date) -> date:
    """Drop the time part of a ``datetime``; return plain dates as-is."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(text: str) -> date | None:
    """Parse a date string, or return None when no format applies.

    Tried in order: ISO 8601 (date or datetime), ``YYYY-M-D``,
    ``MM/DD/YYYY`` (falling back to ``DD/MM/YYYY`` when the first
    number cannot be a month), and spelled-out month names such as
    ``"January 5, 1990"``. Impossible calendar dates yield None.
    """
    text = text.strip()
    if not text:
        return None

    try:
        return as_date(datetime.fromisoformat(text))
    except ValueError:
        pass

    if match := _LOOSE_ISO_RE.fullmatch(text):
        year, month, day = (int(g) for g in match.groups())
        return _safe_date(year, month, day)

    if match := _US_DATE_RE.fullmatch(text):
        first, second, year = (int(g) for g in match.groups())
        if first > 12 >= second:
            return _safe_date(year, second, first)
        return _safe_date(year, first, second)

    for fmt in _TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def age_breakdown(birth: date, reference: date) -> AgeBreakdown:
    """Whole years, months and days from *birth* to *reference*.

    Borrowed days come from the month before *reference*'s month.
    """
    years = reference.year - birth.year
    months = reference.month - birth.month
    days = reference.day - birth.day

    if days < 0:
        months -= 1
        prev_year, prev_month = (
            (reference.year - 1, 12)
            if reference.month == 1
            else (reference.year, reference.month - 1)
        )
        days += calendar.monthrange(prev_year, prev_month)[1]

    if months < 0:
        years -= 1
        months += 12

    decimal_years = round(years + months / 12 + days / _DAYS_PER_YEAR, 2)
    return AgeBreakdown(years=years, months=months, days=days, decimal_years=decimal_years)
