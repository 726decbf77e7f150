"""
Solar payback calculator page.

Inputs on the left, the yearly cumulative cash-flow table on the right.
"""

import reflex as rx

from report_ui.components.widgets import stat_card
from report_ui.state import PaybackState

FIELDS = (
    ("investment", "Investasi (Rp)"),
    ("annual_production", "Produksi Tahunan (kWh)"),
    ("electricity_rate", "Tarif Listrik (Rp/kWh)"),
    ("tariff_escalation", "Kenaikan Tarif (%/tahun)"),
    ("degradation_rate", "Degradasi Panel (%/tahun)"),
    ("years", "Umur Sistem (tahun)"),
)


def _field(name: str, label: str) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="field-label"),
        rx.input(
            value=getattr(PaybackState, name),
            on_change=lambda value: PaybackState.set_field(name, value),
            type="number",
            class_name="text-input",
        ),
        class_name="field",
    )


def _row(row) -> rx.Component:
    return rx.table.row(
        rx.table.cell(row["year"]),
        rx.table.cell(row["savings"]),
        rx.table.cell(
            row["cumulative"],
            class_name=rx.cond(row["positive"] == "true", "positive", "negative"),
        ),
    )


def payback_calculator() -> rx.Component:
    """Build the payback calculator page body."""
    return rx.box(
        rx.box(
            *[_field(name, label) for name, label in FIELDS],
            class_name="card calculator-inputs",
        ),
        rx.box(
            rx.box(
                stat_card("Balik Modal", PaybackState.payback_years, PaybackState.break_even),
                stat_card("Total Penghematan", PaybackState.total_savings),
                stat_card("ROI", PaybackState.roi, tone="accent"),
                class_name="stat-grid",
            ),
            rx.table.root(
                rx.table.header(
                    rx.table.row(
                        rx.table.column_header_cell("Tahun"),
                        rx.table.column_header_cell("Penghematan"),
                        rx.table.column_header_cell("Arus Kas Kumulatif"),
                    ),
                ),
                rx.table.body(rx.foreach(PaybackState.rows, _row)),
                variant="surface",
                class_name="report-table",
            ),
            class_name="calculator-results",
        ),
        class_name="report-page calculator",
    )
