"""
Reflex application entry point for the Report UI.

One page per report plus the payback calculator, sharing a header and a
navigation bar.
"""

from collections.abc import Callable

import reflex as rx

from report_ui.components import (
    aging_report,
    cost_variance_report,
    inventory_report,
    payback_calculator,
    vat_report,
)
from report_ui.config import get_settings
from report_ui.lib import logs
from report_ui.state import (
    APP_SUBTITLE,
    APP_TITLE,
    AgingReportState,
    CostVarianceState,
    InventoryReportState,
    PaybackState,
    VatReportState,
)

LOG = logs.logger(__file__)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"

# (route, nav label, page body, on_load)
PAGES: tuple[tuple[str, str, Callable[[], rx.Component], object], ...] = (
    ("/", "PPN Bulanan", vat_report, VatReportState.load),
    ("/aging", "Umur Piutang/Hutang", aging_report, AgingReportState.load),
    ("/cost-variance", "Selisih Biaya", cost_variance_report, CostVarianceState.load),
    ("/inventory", "Persediaan", inventory_report, InventoryReportState.load),
    ("/payback", "Kalkulator Balik Modal", payback_calculator, PaybackState.calculate),
)


def page_header() -> rx.Component:
    """Build the title area and navigation."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        rx.box(
            *[rx.link(label, href=route, class_name="nav-link") for route, label, _, _ in PAGES],
            class_name="nav-bar",
        ),
        class_name="page-header",
    )


def _layout(body: Callable[[], rx.Component]) -> Callable[[], rx.Component]:
    def page() -> rx.Component:
        return rx.box(
            rx.box(page_header(), body(), class_name="app-container"),
            class_name="app-shell",
        )

    page.__name__ = body.__name__
    return page


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

for route, label, body, on_load in PAGES:
    app.add_page(_layout(body), route=route, title=f"{label} | {APP_TITLE}", on_load=on_load)


def main() -> None:
    """Entrypoint used by `report_ui`; runs `reflex run` on the configured port."""
    import subprocess
    import sys

    port = get_settings().port
    LOG.info("Starting Report UI - port:%s service:%s", port, get_settings().service)
    subprocess.run([sys.executable, "-m", "reflex", "run", "--frontend-port", str(port)])


if __name__ == "__main__":
    main()
