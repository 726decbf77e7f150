import math
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from report_ui.utils.format import (
    CURRENCY_OPTIONS,
    days_remaining,
    format_currency,
    format_currency_compact,
    format_date,
    format_date_time,
    format_number,
    format_percent,
    format_relative_time,
    format_solar_offset,
    get_initials,
    to_number,
    truncate,
)


@pytest.mark.parametrize(
    ("value", "currency", "expected"),
    [
        (1_500_000, "IDR", "Rp 1.500.000"),
        (-50_000, "IDR", "-Rp 50.000"),
        ("1500000.00", "IDR", "Rp 1.500.000"),
        (1234.5, "IDR", "Rp 1.235"),
        (None, "IDR", "Rp 0"),
        ("abc", "IDR", "Rp 0"),
        (1500.5, "USD", "US$ 1.500,50"),
        (99.9, "EUR", "€ 99,90"),
        (99.9, "usd", "US$ 99,90"),
    ],
)
def test_format_currency(value, currency, expected):
    assert format_currency(value, currency) == expected


def test_format_currency_defaults_to_rupiah():
    assert format_currency(2_750_000) == "Rp 2.750.000"


def test_format_currency_rounding_to_zero_has_no_sign():
    assert format_currency(-0.4) == "Rp 0"


def test_large_magnitudes_format_without_raising():
    assert format_currency(1e26, "USD") == "US$ 100" + ".000" * 8 + ",00"
    assert format_currency(1e30) == "Rp 1" + ".000" * 10
    assert format_currency(-1e30) == "-Rp 1" + ".000" * 10
    assert format_number(1e26) == "100" + ".000" * 8
    assert format_percent(1e27) == "1" + "0" * 27 + ",0%"
    assert format_currency(1e300).startswith("Rp 1.000.000")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "Rp 0"),
        (750_000, "Rp 750.000"),
        (5_500_000, "Rp 5,5 jt"),
        (326_000_000, "Rp 326 jt"),
        (1_500_000_000, "Rp 1,5 M"),
        ("5500000", "Rp 5,5 jt"),
    ],
)
def test_format_currency_compact(value, expected):
    assert format_currency_compact(value) == expected


def test_format_currency_compact_negative():
    assert format_currency_compact(-1_500_000_000) == "-Rp 1,5 M"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1000, "1.000"),
        (1234.5, "1.234,5"),
        (0, "0"),
        (None, "0"),
        (-2500, "-2.500"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_percent():
    assert format_percent(85.5) == "85,5%"
    assert format_percent(12.345, 2) == "12,35%"
    assert format_percent(None) == "0,0%"
    assert format_percent("40") == "40,0%"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-12-27", "27 Des 2024"),
        ("27/12/2024", "27 Des 2024"),
        (date(2024, 8, 1), "1 Agu 2024"),
        (datetime(2024, 5, 3, 9, 0), "3 Mei 2024"),
        ("", "-"),
        (None, "-"),
        ("not a date", "-"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_format_date_time():
    assert format_date_time("2024-12-27T14:30:00") == "27 Des 2024, 14.30"
    assert format_date_time(None) == "-"


def test_format_relative_time():
    now = datetime(2024, 12, 27, 12, 0)

    assert format_relative_time(now - timedelta(seconds=30), now=now) == "Baru saja"
    assert format_relative_time(now - timedelta(minutes=5), now=now) == "5 menit lalu"
    assert format_relative_time(now - timedelta(hours=3), now=now) == "3 jam lalu"
    assert format_relative_time(now - timedelta(days=2), now=now) == "2 hari lalu"
    assert format_relative_time(now - timedelta(days=10), now=now) == "17 Des 2024"
    assert format_relative_time(None, now=now) == "-"


def test_days_remaining():
    today = date(2024, 12, 27)

    upcoming = days_remaining("2024-12-31", today=today)
    assert upcoming.days == 4
    assert upcoming.is_overdue is False

    overdue = days_remaining("2024-12-20", today=today)
    assert overdue.days == 7
    assert overdue.is_overdue is True

    assert days_remaining(None, today=today).days == 0


def test_to_number():
    assert to_number("12.5") == 12.5
    assert to_number(" 7 ") == 7.0
    assert to_number(None) == 0
    assert to_number("abc") == 0
    assert to_number(float("nan")) == 0
    assert to_number(math.inf) == 0
    assert to_number(True) == 1
    assert to_number(Decimal("1.5")) == 1.5
    assert to_number([1, 2]) == 0


def test_truncate_and_initials():
    assert truncate("Laporan Keuangan", 10) == "Laporan..."
    assert truncate("PPN", 10) == "PPN"
    assert get_initials("budi santoso") == "BS"
    assert get_initials("Ani") == "A"
    assert get_initials("a b c") == "AB"


def test_format_solar_offset_surplus():
    offset = format_solar_offset(250)
    assert offset.value == "2,5x"
    assert offset.label == "Surplus Energi"
    assert offset.is_surplus is True


def test_format_solar_offset_partial():
    offset = format_solar_offset(85.5)
    assert offset.value == "85,5%"
    assert offset.label == "Kebutuhan Tercukupi"
    assert offset.is_surplus is False
    assert format_solar_offset(None).value == "0%"


def test_currency_options_start_with_rupiah():
    assert CURRENCY_OPTIONS[0]["value"] == "IDR"
    assert len({option["value"] for option in CURRENCY_OPTIONS}) == len(CURRENCY_OPTIONS)
