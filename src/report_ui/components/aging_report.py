"""
Receivable and payable aging page.

Bucket totals with their share of the outstanding balance, then one row
per contact.
"""

import reflex as rx

from report_ui.components.widgets import report_table, stat_card, status_panel
from report_ui.reports.derive import AGING_BUCKETS
from report_ui.state import AgingReportState

BUCKET_COLUMNS = (
    ("label", "Umur"),
    ("amount", "Saldo"),
    ("share", "Porsi"),
)
CONTACT_COLUMNS = (
    ("name", "Kontak"),
    *((bucket.key, bucket.label) for bucket in AGING_BUCKETS),
    ("total", "Total"),
)


def aging_report() -> rx.Component:
    """Build the aging page body."""
    return rx.box(
        rx.box(
            rx.box(
                rx.segmented_control.root(
                    rx.segmented_control.item("Piutang", value="receivable"),
                    rx.segmented_control.item("Hutang", value="payable"),
                    value=AgingReportState.kind,
                    on_change=AgingReportState.set_kind,
                ),
                rx.text("Per tanggal", class_name="muted"),
                rx.input(
                    type="date",
                    value=AgingReportState.as_of_date,
                    on_change=AgingReportState.set_as_of_date,
                    class_name="date-input",
                ),
                rx.button(
                    rx.icon("refresh-cw", size=16),
                    "Tampilkan",
                    on_click=AgingReportState.load,
                    loading=AgingReportState.is_loading,
                    class_name="apply-button",
                ),
                class_name="filter-row",
            ),
            class_name="card filter-card",
        ),
        status_panel(
            AgingReportState,
            stat_card("Total Saldo", AgingReportState.total, tone="accent"),
            report_table(BUCKET_COLUMNS, AgingReportState.buckets),
            rx.heading("Per Kontak", size="4", as_="h2"),
            report_table(CONTACT_COLUMNS, AgingReportState.contacts),
        ),
        class_name="report-page",
    )
