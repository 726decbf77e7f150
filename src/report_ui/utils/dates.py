"""
Date parsing and report date-range helpers.

Report filters are sent to the backend as local ``YYYY-MM-DD`` strings. The
quick-range presets compute those bounds relative to "today" using calendar
month lengths, so February ends on the 28th or 29th and the previous quarter
of a January date lies in the previous year.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y")


class QuickRange(str, Enum):
    """Canned report periods offered by the filter bar."""

    TODAY = "today"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    THIS_QUARTER = "this_quarter"
    LAST_QUARTER = "last_quarter"
    THIS_YEAR = "this_year"
    LAST_YEAR = "last_year"
    LAST_N_DAYS = "last_n_days"


QUICK_RANGE_LABELS: dict[QuickRange, str] = {
    QuickRange.TODAY: "Hari Ini",
    QuickRange.THIS_MONTH: "Bulan Ini",
    QuickRange.LAST_MONTH: "Bulan Lalu",
    QuickRange.THIS_QUARTER: "Kuartal Ini",
    QuickRange.LAST_QUARTER: "Kuartal Lalu",
    QuickRange.THIS_YEAR: "Tahun Ini",
    QuickRange.LAST_YEAR: "Tahun Lalu",
    QuickRange.LAST_N_DAYS: "30 Hari Terakhir",
}

DEFAULT_LAST_N_DAYS = 30


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive date range."""

    start: date
    end: date

    @property
    def start_iso(self) -> str:
        return self.start.isoformat()

    @property
    def end_iso(self) -> str:
        return self.end.isoformat()

    def to_params(self) -> dict[str, str]:
        """Return the range as start_date/end_date query parameters."""
        return {"start_date": self.start_iso, "end_date": self.end_iso}


def parse_date(value: str | date | datetime | None) -> datetime | None:
    """
    Parse a date or datetime value leniently.

    Accepts ISO dates and datetimes (including a trailing ``Z``), ``d/m/Y``
    and ``d-m-Y`` strings, and date/datetime objects.

    Args:
        value: Value to parse.

    Returns:
        datetime if parsing succeeds, None otherwise.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def to_local_iso_date(value: str | date | datetime | None) -> str | None:
    """
    Return value as a local ``YYYY-MM-DD`` string.

    Aware datetimes are converted to the local timezone first so that a
    late-evening UTC timestamp does not move to the previous or next day.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return value.isoformat()
    else:
        moment = parse_date(value)
        if moment is None:
            return None
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date().isoformat()


def quarter_of(month: int) -> int:
    """Return the calendar quarter (1-4) containing month."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return (month - 1) // 3 + 1


def month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def quarter_range(year: int, quarter: int) -> DateRange:
    first_month = (quarter - 1) * 3 + 1
    return DateRange(date(year, first_month, 1), month_end(year, first_month + 2))


def quick_range(
    preset: QuickRange | str,
    today: date | None = None,
    days: int = DEFAULT_LAST_N_DAYS,
) -> DateRange:
    """
    Compute the date range for a quick-select preset.

    Args:
        preset: QuickRange member or its string value.
        today: Reference date, defaults to the local current date.
        days: Length of the LAST_N_DAYS window, today included.

    Returns:
        Inclusive DateRange.

    Raises:
        ValueError: For an unknown preset or a non-positive day count.
    """
    preset = QuickRange(preset)
    today = today or date.today()

    if preset is QuickRange.TODAY:
        return DateRange(today, today)
    if preset is QuickRange.THIS_MONTH:
        return DateRange(today.replace(day=1), month_end(today.year, today.month))
    if preset is QuickRange.LAST_MONTH:
        previous = today.replace(day=1) - timedelta(days=1)
        return DateRange(previous.replace(day=1), previous)
    if preset is QuickRange.THIS_QUARTER:
        return quarter_range(today.year, quarter_of(today.month))
    if preset is QuickRange.LAST_QUARTER:
        quarter = quarter_of(today.month) - 1
        if quarter == 0:
            return quarter_range(today.year - 1, 4)
        return quarter_range(today.year, quarter)
    if preset is QuickRange.THIS_YEAR:
        return DateRange(date(today.year, 1, 1), date(today.year, 12, 31))
    if preset is QuickRange.LAST_YEAR:
        return DateRange(date(today.year - 1, 1, 1), date(today.year - 1, 12, 31))

    if days < 1:
        raise ValueError(f"days must be positive, got {days}")
    return DateRange(today - timedelta(days=days - 1), today)
