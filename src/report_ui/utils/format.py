"""
Display formatters for report values.

All formatters follow Indonesian conventions (``.`` groups thousands, ``,``
separates decimals, short Indonesian month names) and accept ``None`` or
backend strings such as ``"1500.50"`` without raising.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from report_ui.utils.dates import parse_date

EMPTY = "-"

# enough digits to quantize any finite float
_DECIMAL_PRECISION = 400

MONTH_NAMES_SHORT = (
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
)

# currency code -> (symbol, fraction digits)
_CURRENCY_FORMATS: dict[str, tuple[str, int]] = {
    "IDR": ("Rp", 0),
    "USD": ("US$", 2),
    "EUR": ("€", 2),
    "SGD": ("SGD", 2),
    "JPY": ("JP¥", 0),
    "CNY": ("CN¥", 2),
    "AUD": ("AU$", 2),
    "MYR": ("MYR", 2),
}

CURRENCY_OPTIONS: list[dict[str, str]] = [
    {"value": "IDR", "label": "IDR - Rupiah"},
    {"value": "USD", "label": "USD - US Dollar"},
    {"value": "EUR", "label": "EUR - Euro"},
    {"value": "SGD", "label": "SGD - Singapore Dollar"},
    {"value": "JPY", "label": "JPY - Japanese Yen"},
    {"value": "CNY", "label": "CNY - Chinese Yuan"},
    {"value": "AUD", "label": "AUD - Australian Dollar"},
    {"value": "MYR", "label": "MYR - Malaysian Ringgit"},
]

_SWAP_SEPARATORS = str.maketrans(",.", ".,")


@dataclass(frozen=True, slots=True)
class DaysRemaining:
    days: int
    is_overdue: bool


@dataclass(frozen=True, slots=True)
class SolarOffset:
    """Display form of a solar production offset percentage."""

    value: str
    label: str
    is_surplus: bool


def to_number(value: Any) -> float | int:
    """
    Coerce a backend value to a number.

    Numbers pass through, numeric strings are parsed, and anything else
    (None, empty or non-numeric strings, NaN, infinities) becomes 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    return 0


def _rounded(value: float | int, decimals: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        return Decimal(str(value)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def _grouped(value: float | int, decimals: int) -> str:
    """Return abs(value) with Indonesian grouping and a fixed decimal count."""
    text = f"{_rounded(value, decimals).copy_abs():,.{decimals}f}"
    return text.translate(_SWAP_SEPARATORS)


def format_currency(value: Any, currency: str = "IDR") -> str:
    """
    Format an amount in the given currency.

    Args:
        value: Amount; None renders as ``Rp 0``.
        currency: ISO currency code. Unknown codes are shown as-is with two
            decimals.

    Returns:
        Strings like ``Rp 1.500.000``, ``-Rp 50.000`` or ``US$ 1.500,50``.
    """
    if value is None:
        return "Rp 0"
    number = to_number(value)
    code = (currency or "IDR").upper()
    symbol, decimals = _CURRENCY_FORMATS.get(code, (code, 2))
    sign = "-" if _rounded(number, decimals) < 0 else ""
    return f"{sign}{symbol} {_grouped(number, decimals)}"


def format_currency_compact(value: Any) -> str:
    """
    Format a Rupiah amount compactly for dashboards.

    Amounts from one million use ``jt`` (juta), from one billion ``M``
    (miliar): ``Rp 5,5 jt``, ``Rp 326 jt``, ``Rp 1,5 M``.
    """
    number = to_number(value)
    if number == 0:
        return "Rp 0"

    sign = "-" if number < 0 else ""
    magnitude = abs(number)
    if magnitude >= 1_000_000_000:
        return f"{sign}Rp {_grouped(magnitude / 1_000_000_000, 1)} M"
    if magnitude >= 1_000_000:
        scaled = magnitude / 1_000_000
        return f"{sign}Rp {_grouped(scaled, 0 if scaled >= 100 else 1)} jt"
    return format_currency(number)


def format_number(value: Any) -> str:
    """Format a number with thousands grouping and up to three decimals."""
    number = to_number(value)
    text = f"{_rounded(number, 3).copy_abs():,.3f}".rstrip("0").rstrip(".")
    sign = "-" if _rounded(number, 3) < 0 else ""
    return sign + text.translate(_SWAP_SEPARATORS)


def format_percent(value: Any, decimals: int = 1) -> str:
    """Format a percentage value (85.5 -> ``85,5%``)."""
    number = to_number(value)
    return f"{_rounded(number, decimals):.{decimals}f}".replace(".", ",") + "%"


def format_date(value: str | date | datetime | None) -> str:
    """Format a date as ``27 Des 2024``; empty or unparsable values give ``-``."""
    moment = parse_date(value)
    if moment is None:
        return EMPTY
    return f"{moment.day} {MONTH_NAMES_SHORT[moment.month - 1]} {moment.year}"


def format_date_time(value: str | date | datetime | None) -> str:
    """Format a date and time as ``27 Des 2024, 14.30``."""
    moment = parse_date(value)
    if moment is None:
        return EMPTY
    return f"{format_date(moment)}, {moment.hour:02d}.{moment.minute:02d}"


def format_relative_time(
    value: str | date | datetime | None,
    now: datetime | None = None,
) -> str:
    """
    Describe how long ago value was, falling back to the date after a week.

    Args:
        value: Moment in the past.
        now: Reference time, defaults to the current local time.
    """
    moment = parse_date(value)
    if moment is None:
        return EMPTY
    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    now = now or datetime.now()

    minutes = math.floor((now - moment).total_seconds() / 60)
    hours = minutes // 60
    days = hours // 24

    if minutes < 1:
        return "Baru saja"
    if minutes < 60:
        return f"{minutes} menit lalu"
    if hours < 24:
        return f"{hours} jam lalu"
    if days < 7:
        return f"{days} hari lalu"
    return format_date(moment)


def days_remaining(
    due: str | date | datetime | None,
    today: date | None = None,
) -> DaysRemaining:
    """Return the number of days until due and whether it has passed."""
    moment = parse_date(due)
    if moment is None:
        return DaysRemaining(days=0, is_overdue=False)
    diff = (moment.date() - (today or date.today())).days
    return DaysRemaining(days=abs(diff), is_overdue=diff < 0)


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max(max_length - 3, 0)] + "..."


def get_initials(name: str) -> str:
    """Return up to two uppercase initials of name."""
    return "".join(word[0] for word in name.split()).upper()[:2]


def format_solar_offset(percent: Any) -> SolarOffset:
    """
    Format how much of the consumption a solar system covers.

    Below 100% the percentage is shown; from 100% the surplus is shown as a
    multiplier (250 -> ``2,5x``).
    """
    number = to_number(percent)
    if number <= 0:
        return SolarOffset(value="0%", label="Kebutuhan Tercukupi", is_surplus=False)
    if number >= 100:
        multiplier = f"{_rounded(number / 100, 1):.1f}".replace(".", ",")
        return SolarOffset(value=f"{multiplier}x", label="Surplus Energi", is_surplus=True)
    return SolarOffset(
        value=format_percent(number),
        label="Kebutuhan Tercukupi",
        is_surplus=False,
    )
