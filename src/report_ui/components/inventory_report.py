"""
Inventory valuation page.

Headline stock figures for the selected warehouse and, when a period is
set, the movement summary with average cost per item.
"""

import reflex as rx

from report_ui.components.widgets import filter_bar, report_table, stat_card, status_panel
from report_ui.state import InventoryReportState

MOVEMENT_COLUMNS = (
    ("sku", "SKU"),
    ("name", "Produk"),
    ("in_qty", "Masuk"),
    ("out_qty", "Keluar"),
    ("closing_qty", "Stok Akhir"),
    ("closing_value", "Nilai Akhir"),
    ("average_cost", "Harga Rata-rata"),
    ("share", "Porsi"),
)


def inventory_report() -> rx.Component:
    """Build the inventory page body."""
    warehouse = rx.input(
        value=InventoryReportState.warehouse_id,
        on_change=InventoryReportState.set_warehouse_id,
        placeholder="ID gudang (opsional)",
        class_name="text-input",
    )
    return rx.box(
        filter_bar(InventoryReportState, warehouse),
        status_panel(
            InventoryReportState,
            rx.text(InventoryReportState.warehouse_name, class_name="muted"),
            rx.box(
                stat_card("Nilai Persediaan", InventoryReportState.total_value, tone="accent"),
                stat_card("Total Kuantitas", InventoryReportState.total_quantity),
                stat_card("Harga Rata-rata", InventoryReportState.average_cost),
                stat_card("Stok Menipis", InventoryReportState.low_stock_count, tone="warning"),
                stat_card("Stok Habis", InventoryReportState.out_of_stock_count, tone="danger"),
                class_name="stat-grid",
            ),
            rx.heading("Mutasi Persediaan", size="4", as_="h2"),
            rx.text(InventoryReportState.period_label, class_name="muted"),
            report_table(
                MOVEMENT_COLUMNS,
                InventoryReportState.items,
                empty_message="Pilih periode untuk melihat mutasi persediaan",
            ),
        ),
        class_name="report-page",
    )
