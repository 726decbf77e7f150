"""
Shared building blocks for the report pages.

- filter_bar: period inputs with quick-range presets
- stat_card: labelled headline figure
- report_table: header row plus one row per dict in a list var
- status_panel: loading / error wrapper around page content
"""

from collections.abc import Sequence

import reflex as rx

from report_ui.utils.dates import QUICK_RANGE_LABELS, QuickRange

# presets offered in the filter bar, in display order
FILTER_PRESETS = (
    QuickRange.THIS_MONTH,
    QuickRange.LAST_MONTH,
    QuickRange.THIS_QUARTER,
    QuickRange.LAST_QUARTER,
    QuickRange.THIS_YEAR,
    QuickRange.LAST_N_DAYS,
)


def filter_bar(state: type[rx.State], *extra: rx.Component) -> rx.Component:
    """
    Build the period filter with quick-range buttons.

    Args:
        state: Page state using ReportFilterState.
        *extra: Additional filter inputs rendered after the dates.

    Returns:
        The filter card component.
    """
    return rx.box(
        rx.box(
            rx.input(
                type="date",
                value=state.start_date,
                on_change=state.set_start_date,
                class_name="date-input",
            ),
            rx.text("s/d", class_name="muted"),
            rx.input(
                type="date",
                value=state.end_date,
                on_change=state.set_end_date,
                class_name="date-input",
            ),
            *extra,
            rx.button(
                rx.icon("refresh-cw", size=16),
                "Tampilkan",
                on_click=state.load,
                loading=state.is_loading,
                class_name="apply-button",
            ),
            class_name="filter-row",
        ),
        rx.box(
            *[_preset_button(state, preset) for preset in FILTER_PRESETS],
            class_name="preset-row",
        ),
        class_name="card filter-card",
    )


def _preset_button(state: type[rx.State], preset: QuickRange) -> rx.Component:
    return rx.button(
        QUICK_RANGE_LABELS[preset],
        on_click=[state.apply_quick_range(preset.value), state.load],
        variant="soft",
        class_name=rx.cond(
            state.active_range == preset.value,
            "preset-button active",
            "preset-button",
        ),
    )


def stat_card(label: str, value, hint=None, tone: str = "") -> rx.Component:
    """Build a headline figure card."""
    return rx.box(
        rx.text(label, class_name="stat-label"),
        rx.text(value, class_name="stat-value"),
        rx.text(hint, class_name="muted stat-hint") if hint is not None else rx.fragment(),
        class_name=f"card stat-card {tone}".strip(),
    )


def report_table(
    columns: Sequence[tuple[str, str]],
    rows,
    empty_message: str = "Tidak ada data",
) -> rx.Component:
    """
    Build a table over a list-of-dicts state var.

    Args:
        columns: (key, header) pairs in display order.
        rows: State var holding list[dict[str, str]].
        empty_message: Text shown when rows is empty.

    Returns:
        The table or the empty message.
    """
    return rx.cond(
        rows.length() > 0,
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    *[rx.table.column_header_cell(header) for _, header in columns]
                ),
            ),
            rx.table.body(
                rx.foreach(
                    rows,
                    lambda row: rx.table.row(
                        *[rx.table.cell(row[key]) for key, _ in columns]
                    ),
                ),
            ),
            variant="surface",
            class_name="report-table",
        ),
        rx.box(
            rx.icon("file-x", class_name="empty-icon", size=40),
            rx.text(empty_message, class_name="muted"),
            class_name="card empty-state",
        ),
    )


def status_panel(state: type[rx.State], *children: rx.Component) -> rx.Component:
    """Render the loader, the error message, or the page content."""
    return rx.cond(
        state.is_loading,
        rx.box(
            rx.box(class_name="spinner"),
            rx.text("Memuat laporan...", class_name="muted"),
            class_name="card loading-state",
        ),
        rx.cond(
            state.error != "",
            rx.box(
                rx.icon("circle-alert", class_name="error-icon"),
                rx.text(state.error),
                rx.button("Coba lagi", on_click=state.load, variant="outline"),
                class_name="card error-state",
            ),
            rx.box(*children, class_name="report-content"),
        ),
    )
