"""
Catalogue of backend report endpoints.

Each ReportDefinition names a report, its endpoint path (relative to the API
base URL, with ``{placeholders}`` for path parameters), the filters it
accepts, which of them must be set before the report can be fetched, and the
model used to parse its payload. Filter values are cleaned before use:
``None`` and empty strings are dropped rather than sent to the backend.
"""

import string
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from report_ui.errors import UnknownReportError
from report_ui.models import (
    AgingReport,
    CashFlowReport,
    CogsMonthlyTrendReport,
    CogsSummaryReport,
    CostVarianceReport,
    InventorySummaryReport,
    MovementSummaryReport,
    PpnMonthlyReport,
    PpnSummaryReport,
    TrialBalanceReport,
    WorkOrderCostsReport,
)

PERIOD = ("start_date", "end_date")
AS_OF = ("as_of_date",)


def clean_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """
    Drop unset filter values and normalize the rest for a query string.

    None and blank strings are removed, strings are stripped, and dates are
    sent as ISO strings.
    """
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        elif isinstance(value, datetime):
            value = value.date().isoformat()
        elif isinstance(value, date):
            value = value.isoformat()
        cleaned[key] = value
    return cleaned


def _current_year() -> int:
    return date.today().year


@dataclass(frozen=True, slots=True)
class ReportDefinition:
    """
    Endpoint description for one report.

    Attributes:
        name: Catalogue key.
        path: Endpoint path, may contain ``{filter}`` placeholders.
        filters: Query filters accepted in addition to path parameters.
        required: Filters that must be set for the report to be enabled.
        model: Parser turning the payload into a model, or None to keep
            the raw payload.
        defaults: Filter name to a factory for its default value.
    """

    name: str
    path: str
    filters: tuple[str, ...] = ()
    required: tuple[str, ...] = ()
    model: Callable[[Mapping[str, Any]], Any] | None = None
    defaults: Mapping[str, Callable[[], Any]] = field(default_factory=dict)

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )

    @property
    def accepted(self) -> tuple[str, ...]:
        return self.path_params + self.filters

    def with_defaults(self, filters: Mapping[str, Any]) -> dict[str, Any]:
        """
        Return cleaned filters with defaults applied.

        Raises:
            ValueError: If a filter is not accepted by this report.
        """
        unexpected = sorted(set(filters) - set(self.accepted))
        if unexpected:
            raise ValueError(f"{self.name} does not accept filters: {', '.join(unexpected)}")
        cleaned = clean_params(filters)
        for key, factory in self.defaults.items():
            cleaned.setdefault(key, factory())
        return cleaned

    def is_enabled(self, filters: Mapping[str, Any]) -> bool:
        """True when every path parameter and required filter has a value."""
        cleaned = self.with_defaults(filters)
        return all(key in cleaned for key in self.path_params + self.required)

    def resolve(self, filters: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        """
        Split filters into the concrete path and its query parameters.

        Raises:
            ValueError: If a path parameter or required filter is missing.
        """
        params = self.with_defaults(filters)
        missing = [key for key in self.path_params + self.required if key not in params]
        if missing:
            raise ValueError(f"{self.name} requires filters: {', '.join(missing)}")
        path = self.path.format(**{key: params.pop(key) for key in self.path_params})
        return path, params

    def parse(self, payload: Mapping[str, Any] | None) -> Any:
        return self.model(payload) if self.model else payload


_DEFINITIONS = [
    ReportDefinition("trial_balance", "/reports/trial-balance", AS_OF, model=TrialBalanceReport.from_dict),
    ReportDefinition("balance_sheet", "/reports/balance-sheet", AS_OF),
    ReportDefinition("income_statement", "/reports/income-statement", PERIOD),
    ReportDefinition("cash_flow", "/reports/cash-flow", PERIOD, model=CashFlowReport.from_dict),
    ReportDefinition("receivable_aging", "/reports/receivable-aging", AS_OF, model=AgingReport.from_dict),
    ReportDefinition("payable_aging", "/reports/payable-aging", AS_OF, model=AgingReport.from_dict),
    ReportDefinition("contact_aging", "/reports/contacts/{contact_id}/aging", AS_OF),
    ReportDefinition("general_ledger", "/reports/general-ledger", PERIOD),
    ReportDefinition("ppn_summary", "/reports/ppn-summary", PERIOD, model=PpnSummaryReport.from_dict),
    ReportDefinition(
        "ppn_monthly",
        "/reports/ppn-monthly",
        ("year",),
        model=PpnMonthlyReport.from_dict,
        defaults={"year": _current_year},
    ),
    ReportDefinition("daily_cash_movement", "/reports/daily-cash-movement", PERIOD),
    ReportDefinition(
        "inventory_summary",
        "/inventory/summary",
        ("warehouse_id",),
        model=InventorySummaryReport.from_dict,
    ),
    ReportDefinition(
        "movement_summary",
        "/inventory/movement-summary",
        PERIOD + ("warehouse_id",),
        required=PERIOD,
        model=MovementSummaryReport.from_dict,
    ),
    ReportDefinition("changes_in_equity", "/reports/changes-in-equity", PERIOD),
    ReportDefinition("input_tax_list", "/reports/input-tax-list", PERIOD),
    ReportDefinition("tax_invoice_list", "/reports/tax-invoice-list", PERIOD),
    ReportDefinition("cogs_summary", "/reports/cogs-summary", PERIOD, model=CogsSummaryReport.from_dict),
    ReportDefinition("cogs_by_category", "/reports/cogs-by-category", PERIOD),
    ReportDefinition("cogs_by_product", "/reports/cogs-by-product", PERIOD),
    ReportDefinition(
        "cogs_monthly_trend",
        "/reports/cogs-monthly-trend",
        ("year",),
        model=CogsMonthlyTrendReport.from_dict,
        defaults={"year": _current_year},
    ),
    ReportDefinition("cost_variance", "/reports/cost-variance", PERIOD, model=CostVarianceReport.from_dict),
    ReportDefinition("project_profitability", "/reports/project-profitability", PERIOD + ("status",)),
    ReportDefinition("project_cost_analysis", "/reports/project-cost-analysis", PERIOD),
    ReportDefinition(
        "work_order_costs",
        "/reports/work-order-costs",
        PERIOD + ("status", "project_id"),
        model=WorkOrderCostsReport.from_dict,
    ),
    ReportDefinition("subcontractor_summary", "/reports/subcontractor-summary", PERIOD),
    ReportDefinition("subcontractor_retention", "/reports/subcontractor-retention"),
    ReportDefinition("subcontractor_detail", "/reports/subcontractors/{contact_id}/summary", PERIOD),
    ReportDefinition("bank_reconciliation", "/reports/accounts/{account_id}/bank-reconciliation", AS_OF),
    ReportDefinition("project_profitability_detail", "/reports/projects/{project_id}/profitability"),
    ReportDefinition("work_order_cost_detail", "/reports/work-orders/{work_order_id}/costs"),
    ReportDefinition("product_cogs_detail", "/reports/products/{product_id}/cogs"),
]

REPORTS: dict[str, ReportDefinition] = {definition.name: definition for definition in _DEFINITIONS}


def get_definition(name: str) -> ReportDefinition:
    """
    Look up a report by name.

    Raises:
        UnknownReportError: If the name is not catalogued.
    """
    try:
        return REPORTS[name]
    except KeyError as exc:
        raise UnknownReportError(name) from exc
