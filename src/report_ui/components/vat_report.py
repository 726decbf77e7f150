"""
Monthly VAT (PPN) page.

Shows the yearly totals, the quarter rollup and the twelve monthly rows for
the selected year.
"""

import reflex as rx

from report_ui.components.widgets import report_table, stat_card, status_panel
from report_ui.state import VatReportState

MONTH_COLUMNS = (
    ("month", "Bulan"),
    ("output", "PPN Keluaran"),
    ("input", "PPN Masukan"),
    ("net", "Selisih"),
)
QUARTER_COLUMNS = (
    ("quarter", "Kuartal"),
    ("output", "PPN Keluaran"),
    ("input", "PPN Masukan"),
    ("net", "Selisih"),
)


def vat_report() -> rx.Component:
    """Build the monthly VAT page body."""
    return rx.box(
        rx.box(
            rx.box(
                rx.text("Tahun", class_name="muted"),
                rx.input(
                    value=VatReportState.year,
                    on_change=VatReportState.set_year,
                    placeholder="2024",
                    class_name="year-input",
                ),
                rx.button(
                    rx.icon("refresh-cw", size=16),
                    "Tampilkan",
                    on_click=VatReportState.load,
                    loading=VatReportState.is_loading,
                    class_name="apply-button",
                ),
                class_name="filter-row",
            ),
            class_name="card filter-card",
        ),
        status_panel(
            VatReportState,
            rx.box(
                stat_card("PPN Keluaran", VatReportState.total_output),
                stat_card("PPN Masukan", VatReportState.total_input),
                stat_card("Selisih", VatReportState.total_net, tone="accent"),
                class_name="stat-grid",
            ),
            rx.heading("Per Kuartal", size="4", as_="h2"),
            report_table(QUARTER_COLUMNS, VatReportState.quarters),
            rx.heading("Per Bulan", size="4", as_="h2"),
            report_table(MONTH_COLUMNS, VatReportState.months),
        ),
        class_name="report-page",
    )
