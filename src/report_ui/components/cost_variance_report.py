"""
Work order cost variance page.
"""

import reflex as rx

from report_ui.components.widgets import filter_bar, stat_card, status_panel
from report_ui.state import CostVarianceState

COLUMNS = (
    ("wo_number", "No. WO"),
    ("name", "Pekerjaan"),
    ("project", "Proyek"),
    ("estimated", "Estimasi"),
    ("actual", "Aktual"),
    ("variance", "Selisih"),
    ("variance_percent", "%"),
)


def _row(row) -> rx.Component:
    return rx.table.row(
        *[rx.table.cell(row[key]) for key, _ in COLUMNS],
        rx.table.cell(
            rx.badge(
                row["status_label"],
                color_scheme=rx.match(
                    row["status"],
                    ("over", "red"),
                    ("under", "green"),
                    "gray",
                ),
            )
        ),
    )


def cost_variance_report() -> rx.Component:
    """Build the cost variance page body."""
    return rx.box(
        filter_bar(CostVarianceState),
        status_panel(
            CostVarianceState,
            rx.box(
                stat_card("Melebihi Anggaran", CostVarianceState.over_budget, tone="danger"),
                stat_card("Di Bawah Anggaran", CostVarianceState.under_budget, tone="success"),
                stat_card("Sesuai Anggaran", CostVarianceState.on_budget),
                stat_card("Total Selisih", CostVarianceState.total_variance, tone="accent"),
                class_name="stat-grid",
            ),
            rx.table.root(
                rx.table.header(
                    rx.table.row(
                        *[rx.table.column_header_cell(header) for _, header in COLUMNS],
                        rx.table.column_header_cell("Status"),
                    ),
                ),
                rx.table.body(rx.foreach(CostVarianceState.work_orders, _row)),
                variant="surface",
                class_name="report-table",
            ),
        ),
        class_name="report-page",
    )
