"""Formatting and date helpers shared across the report UI package."""

from report_ui.utils.dates import (
    DateRange,
    QuickRange,
    parse_date,
    quarter_of,
    quick_range,
    to_local_iso_date,
)
from report_ui.utils.format import (
    CURRENCY_OPTIONS,
    format_currency,
    format_currency_compact,
    format_date,
    format_date_time,
    format_number,
    format_percent,
    format_relative_time,
    to_number,
)

__all__ = [
    "CURRENCY_OPTIONS",
    "DateRange",
    "QuickRange",
    "format_currency",
    "format_currency_compact",
    "format_date",
    "format_date_time",
    "format_number",
    "format_percent",
    "format_relative_time",
    "parse_date",
    "quarter_of",
    "quick_range",
    "to_local_iso_date",
    "to_number",
]
