"""
Reflex state for the report pages.

Each page state keeps its filters, a loading flag and an error string, runs
a ReportQuery when filters change and stores display-ready rows (strings
formatted with report_ui.utils.format) for the components to render.
"""

from typing import Any

import reflex as rx

from report_ui.errors import GENERIC_ERROR_MESSAGE
from report_ui.lib import logs
from report_ui.queries import ReportQuery
from report_ui.reports import calculations
from report_ui.reports.derive import (
    AGING_BUCKETS,
    VARIANCE_LABELS,
    cumulative_cash_flow,
    share_of_total,
)
from report_ui.services import get_report_service
from report_ui.utils.dates import QuickRange, quick_range
from report_ui.utils.format import (
    format_currency,
    format_currency_compact,
    format_date,
    format_number,
    format_percent,
    to_number,
)

LOG = logs.logger(__file__)

APP_TITLE = "Laporan Keuangan"
APP_SUBTITLE = "Ringkasan pajak, piutang, biaya produksi dan persediaan."
MAX_PROJECTION_YEARS = 50


def _get_service():
    """Get the configured report service (lazy loaded)."""
    return get_report_service()


class ReportFilterState(rx.State, mixin=True):
    """
    Filter vars and the load cycle shared by report pages.

    Concrete pages implement ``_fetch`` and ``_clear``.
    """

    start_date: str = ""
    end_date: str = ""
    active_range: str = ""
    is_loading: bool = False
    error: str = ""

    @rx.var
    def period_label(self) -> str:
        if not self.start_date and not self.end_date:
            return "Semua periode"
        return f"{format_date(self.start_date)} - {format_date(self.end_date)}"

    @rx.event
    def set_start_date(self, value: str):
        self.start_date = value
        self.active_range = ""

    @rx.event
    def set_end_date(self, value: str):
        self.end_date = value
        self.active_range = ""

    @rx.event
    def apply_quick_range(self, preset: str):
        """Set the period from a quick-range preset."""
        date_range = quick_range(QuickRange(preset))
        self.start_date = date_range.start_iso
        self.end_date = date_range.end_iso
        self.active_range = preset

    @rx.event
    def load(self):
        """
        Fetch the page's report with the current filters.

        Yields once so the loading indicator renders before the request.
        """
        self.is_loading = True
        self.error = ""
        yield
        try:
            self._fetch()
        except Exception as e:
            LOG.error("Report page load failed: %s", e, exc_info=True)
            self._clear()
            self.error = GENERIC_ERROR_MESSAGE
        finally:
            self.is_loading = False

    def _query(self, report: str, **filters: Any) -> Any:
        """Run a report query; on failure clear the page and set the error."""
        query = ReportQuery(report, filters, service=_get_service()).run()
        if query.is_error:
            self._clear()
            self.error = query.error or GENERIC_ERROR_MESSAGE
            return None
        return query.model

    def _fetch(self) -> None:
        """Load the page's reports into state vars. Subclasses must override."""
        raise NotImplementedError

    def _clear(self) -> None:
        """Reset the page's data vars after a failure. Subclasses must override."""
        raise NotImplementedError


class VatReportState(ReportFilterState, rx.State):
    """Monthly VAT (PPN) with a quarterly rollup."""

    year: str = ""
    months: list[dict[str, str]] = []
    quarters: list[dict[str, str]] = []
    total_output: str = format_currency(0)
    total_input: str = format_currency(0)
    total_net: str = format_currency(0)

    @rx.event
    def set_year(self, value: str):
        self.year = value.strip()

    def _fetch(self) -> None:
        report = self._query("ppn_monthly", year=self.year)
        if report is None:
            return
        self.year = str(report.year or self.year)
        self.months = [
            {
                "month": m.month_name,
                "output": format_currency(m.output),
                "input": format_currency(m.input),
                "net": format_currency(m.net),
            }
            for m in sorted(report.months, key=lambda m: m.month)
        ]
        self.quarters = [
            {
                "quarter": q.label,
                "output": format_currency(q.get("output")),
                "input": format_currency(q.get("input")),
                "net": format_currency(q.get("net")),
            }
            for q in report.quarters
        ]
        self.total_output = format_currency(report.total_output)
        self.total_input = format_currency(report.total_input)
        self.total_net = format_currency(report.total_net)

    def _clear(self) -> None:
        self.months = []
        self.quarters = []
        self.total_output = self.total_input = self.total_net = format_currency(0)


class AgingReportState(ReportFilterState, rx.State):
    """Receivable or payable aging as of a date."""

    kind: str = "receivable"
    as_of_date: str = ""
    contacts: list[dict[str, str]] = []
    buckets: list[dict[str, str]] = []
    total: str = format_currency(0)

    @rx.event
    def set_kind(self, value: str):
        self.kind = "payable" if value == "payable" else "receivable"
        return AgingReportState.load

    @rx.event
    def set_as_of_date(self, value: str):
        self.as_of_date = value

    def _fetch(self) -> None:
        report = self._query(f"{self.kind}_aging", as_of_date=self.as_of_date)
        if report is None:
            return
        shares = report.shares
        self.buckets = [
            {
                "label": bucket.label,
                "amount": format_currency(report.totals.get(bucket.key, 0)),
                "share": format_percent(shares[bucket.key]),
            }
            for bucket in AGING_BUCKETS
        ]
        self.contacts = [
            {
                "name": contact.name,
                "code": contact.code,
                **{key: format_currency(value) for key, value in contact.buckets.items()},
                "total": format_currency(contact.total),
            }
            for contact in report.contacts
        ]
        self.total = format_currency(report.totals.get("total", 0))

    def _clear(self) -> None:
        self.contacts = []
        self.buckets = []
        self.total = format_currency(0)


class CostVarianceState(ReportFilterState, rx.State):
    """Work order cost variance classified over, under or on budget."""

    work_orders: list[dict[str, str]] = []
    over_budget: int = 0
    under_budget: int = 0
    on_budget: int = 0
    total_variance: str = format_currency(0)

    def _fetch(self) -> None:
        report = self._query(
            "cost_variance", start_date=self.start_date, end_date=self.end_date
        )
        if report is None:
            return
        rows = []
        for wo in sorted(report.work_orders, key=lambda w: w.variance.variance, reverse=True):
            result = wo.variance
            rows.append(
                {
                    "wo_number": wo.wo_number,
                    "name": wo.name,
                    "project": wo.project or "-",
                    "estimated": format_currency(wo.estimated_cost),
                    "actual": format_currency(wo.actual_cost),
                    "variance": format_currency(result.variance),
                    "variance_percent": format_percent(result.variance_percent),
                    "status": result.status.value,
                    "status_label": VARIANCE_LABELS[result.status],
                }
            )
        summary = report.summary
        self.work_orders = rows
        self.over_budget = summary.over_budget
        self.under_budget = summary.under_budget
        self.on_budget = summary.on_budget
        self.total_variance = format_currency(summary.total_variance)

    def _clear(self) -> None:
        self.work_orders = []
        self.over_budget = self.under_budget = self.on_budget = 0
        self.total_variance = format_currency(0)


class InventoryReportState(ReportFilterState, rx.State):
    """Inventory valuation with average cost per movement item."""

    warehouse_id: str = ""
    warehouse_name: str = ""
    total_value: str = format_currency_compact(0)
    total_quantity: str = format_number(0)
    average_cost: str = format_currency(0)
    low_stock_count: int = 0
    out_of_stock_count: int = 0
    items: list[dict[str, str]] = []

    @rx.event
    def set_warehouse_id(self, value: str):
        self.warehouse_id = value

    def _fetch(self) -> None:
        summary = self._query("inventory_summary", warehouse_id=self.warehouse_id)
        if summary is None:
            return
        self.warehouse_name = summary.warehouse_name
        self.total_value = format_currency_compact(summary.total_value)
        self.total_quantity = format_number(summary.total_quantity)
        self.average_cost = format_currency(summary.average_cost)
        self.low_stock_count = summary.low_stock_count
        self.out_of_stock_count = summary.out_of_stock_count

        # movement needs a period; without one only the summary is shown
        self.items = []
        if not (self.start_date and self.end_date):
            return
        movements = self._query(
            "movement_summary",
            start_date=self.start_date,
            end_date=self.end_date,
            warehouse_id=self.warehouse_id,
        )
        if movements is None:
            return
        self.items = [
            {
                "sku": item.sku,
                "name": item.name,
                "in_qty": format_number(item.in_qty),
                "out_qty": format_number(item.out_qty),
                "closing_qty": f"{format_number(item.closing_qty)} {item.unit}".strip(),
                "closing_value": format_currency(item.closing_value),
                "average_cost": format_currency(item.average_cost),
                "share": format_percent(
                    share_of_total(item.closing_value, movements.total_closing_value)
                ),
            }
            for item in movements.items
        ]

    def _clear(self) -> None:
        self.items = []
        self.total_value = format_currency_compact(0)
        self.total_quantity = format_number(0)
        self.average_cost = format_currency(0)
        self.low_stock_count = self.out_of_stock_count = 0


class PaybackState(rx.State):
    """
    Solar proposal payback calculator.

    Pure client-side calculation: yearly savings projections, the cumulative
    cash-flow series starting at the negative investment, break-even year
    and ROI.
    """

    investment: str = "150000000"
    annual_production: str = "14600"
    electricity_rate: str = "1444.70"
    tariff_escalation: str = "3"
    degradation_rate: str = "0.5"
    years: str = "25"

    rows: list[dict[str, str]] = []
    break_even: str = "-"
    payback_years: str = "-"
    total_savings: str = format_currency(0)
    roi: str = format_percent(0)

    @rx.event
    def set_field(self, name: str, value: str):
        """Update one calculator input and recompute."""
        if name in {
            "investment",
            "annual_production",
            "electricity_rate",
            "tariff_escalation",
            "degradation_rate",
            "years",
        }:
            setattr(self, name, value)
        self._recalculate()

    @rx.event
    def calculate(self):
        self._recalculate()

    def _recalculate(self) -> None:
        years = min(max(int(to_number(self.years)), 0), MAX_PROJECTION_YEARS)
        projections = calculations.generate_projections(
            to_number(self.annual_production),
            to_number(self.electricity_rate),
            to_number(self.tariff_escalation),
            to_number(self.degradation_rate),
            years,
        )
        series = cumulative_cash_flow(self.investment, [p.savings for p in projections])
        self.rows = [
            {
                "year": str(p.year),
                "savings": format_currency(p.savings),
                "cumulative": format_currency(total),
                "positive": "true" if total >= 0 else "false",
            }
            for p, total in zip(projections, series.running_totals)
        ]
        self.break_even = (
            f"Tahun ke-{series.break_even_period}" if series.breaks_even else "Tidak tercapai"
        )
        payback = calculations.payback_period(projections, self.investment)
        self.payback_years = "-" if payback is None else f"{format_number(payback)} tahun"
        total = calculations.sum_savings(projections)
        self.total_savings = format_currency_compact(total)
        self.roi = format_percent(calculations.roi(total, self.investment))
