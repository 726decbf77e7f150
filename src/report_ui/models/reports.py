"""
Report payload models.

Each model mirrors one backend report (``GET /reports/<name>``) and is built
with ``from_dict`` from the unwrapped ``data`` payload. Fields the backend
omits take neutral defaults (0, empty string, empty list). Client-side
derivations over the payload, such as VAT quarters or cost variance, are
exposed as properties so they are recomputed from the current data.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from report_ui.models.common import Period, num, records, text, wrap
from report_ui.reports.derive import (
    AGING_KEYS,
    QuarterTotal,
    Variance,
    VarianceSummary,
    aging_shares,
    average_cost,
    cost_of_goods_sold,
    quarterly_rollup,
    summarize_variances,
    variance,
)


@dataclass(slots=True)
class TrialBalanceAccount:
    id: int
    code: str
    name: str
    type: str
    debit_balance: float
    credit_balance: float


@dataclass(slots=True)
class TrialBalanceReport:
    """Trial balance as of a date; ``is_balanced`` is supplied by the backend."""

    report_name: str = ""
    as_of_date: str = ""
    accounts: list[TrialBalanceAccount] = field(default_factory=list)
    total_debit: float = 0
    total_credit: float = 0
    is_balanced: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "TrialBalanceReport":
        b = wrap(data)
        return cls(
            report_name=text(b, "report_name"),
            as_of_date=text(b, "as_of_date"),
            accounts=[
                TrialBalanceAccount(
                    id=int(num(a, "id")),
                    code=text(a, "code"),
                    name=text(a, "name"),
                    type=text(a, "type"),
                    debit_balance=num(a, "debit_balance"),
                    credit_balance=num(a, "credit_balance"),
                )
                for a in records(b, "accounts")
            ],
            total_debit=num(b, "total_debit"),
            total_credit=num(b, "total_credit"),
            is_balanced=bool(b.get("is_balanced", False)),
        )


@dataclass(slots=True)
class PpnSummaryReport:
    """Output and input VAT (PPN) totals for a period."""

    report_name: str = ""
    period: Period = field(default_factory=Period)
    output_tax: float = 0
    input_tax: float = 0
    net_vat: float = 0
    output_count: int = 0
    input_count: int = 0

    @property
    def is_payable(self) -> bool:
        """True when output tax exceeds input tax and VAT must be paid."""
        return self.net_vat > 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PpnSummaryReport":
        b = wrap(data)
        return cls(
            report_name=text(b, "report_name"),
            period=Period.from_payload(b),
            output_tax=num(b, "output_tax"),
            input_tax=num(b, "input_tax"),
            net_vat=num(b, "net_vat"),
            output_count=int(num(b, "output_count")),
            input_count=int(num(b, "input_count")),
        )


@dataclass(slots=True)
class MonthlyVat:
    month: int
    month_name: str
    output: float
    input: float
    net: float


@dataclass(slots=True)
class PpnMonthlyReport:
    """Monthly VAT for one year, with a quarterly view derived client-side."""

    report_name: str = ""
    year: int = 0
    months: list[MonthlyVat] = field(default_factory=list)
    total_output: float = 0
    total_input: float = 0
    total_net: float = 0

    @property
    def quarters(self) -> list[QuarterTotal]:
        return quarterly_rollup(self.months)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PpnMonthlyReport":
        b = wrap(data)
        return cls(
            report_name=text(b, "report_name"),
            year=int(num(b, "year")),
            months=[
                MonthlyVat(
                    month=int(num(m, "month")),
                    month_name=text(m, "month_name"),
                    output=num(m, "output"),
                    input=num(m, "input"),
                    net=num(m, "net"),
                )
                for m in records(b, "months")
            ],
            total_output=num(b, "total_output"),
            total_input=num(b, "total_input"),
            total_net=num(b, "total_net"),
        )


@dataclass(slots=True)
class AgingContact:
    id: int
    code: str
    name: str
    buckets: dict[str, float]
    total: float


@dataclass(slots=True)
class AgingReport:
    """Receivable or payable aging as of a date, per contact and in total."""

    report_name: str = ""
    as_of_date: str = ""
    contacts: list[AgingContact] = field(default_factory=list)
    totals: dict[str, float] = field(default_factory=dict)

    @property
    def shares(self) -> dict[str, float]:
        """Percentage of the outstanding total in each aging bucket."""
        return aging_shares(self.totals)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "AgingReport":
        b = wrap(data)
        totals = {key: num(b, f"totals.{key}") for key in AGING_KEYS}
        totals["total"] = num(b, "totals.total")
        return cls(
            report_name=text(b, "report_name"),
            as_of_date=text(b, "as_of_date"),
            contacts=[
                AgingContact(
                    id=int(num(c, "id")),
                    code=text(c, "code"),
                    name=text(c, "name"),
                    buckets={key: num(c, key) for key in AGING_KEYS},
                    total=num(c, "total"),
                )
                for c in records(b, "contacts")
            ],
            totals=totals,
        )


@dataclass(slots=True)
class CashFlowReport:
    report_name: str = ""
    period: Period = field(default_factory=Period)
    operating: float = 0
    investing: float = 0
    financing: float = 0
    net_cash_change: float = 0
    opening_balance: float = 0
    closing_balance: float = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CashFlowReport":
        b = wrap(data)
        return cls(
            report_name=text(b, "report_name"),
            period=Period.from_payload(b),
            operating=num(b, "operating_activities.total"),
            investing=num(b, "investing_activities.total"),
            financing=num(b, "financing_activities.total"),
            net_cash_change=num(b, "net_cash_change"),
            opening_balance=num(b, "opening_balance"),
            closing_balance=num(b, "closing_balance"),
        )


@dataclass(slots=True)
class CogsSummaryReport:
    report_name: str = ""
    period: Period = field(default_factory=Period)
    beginning_inventory: float = 0
    purchases: float = 0
    goods_available: float = 0
    ending_inventory: float = 0
    cogs: float = 0
    cogs_from_movements: float = 0

    @property
    def computed_cogs(self) -> float:
        """COGS from the periodic formula, for comparison with the backend figure."""
        return cost_of_goods_sold(self.beginning_inventory, self.purchases, self.ending_inventory)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CogsSummaryReport":
        b = wrap(data)
        return cls(
            report_name=text(b, "report_name"),
            period=Period.from_payload(b),
            beginning_inventory=num(b, "beginning_inventory"),
            purchases=num(b, "purchases"),
            goods_available=num(b, "goods_available"),
            ending_inventory=num(b, "ending_inventory"),
            cogs=num(b, "cogs"),
            cogs_from_movements=num(b, "cogs_from_movements"),
        )


@dataclass(slots=True)
class CogsMonth:
    month: int
    month_name: str
    beginning_inventory: float
    purchases: float
    ending_inventory: float
    cogs: float


@dataclass(slots=True)
class CogsMonthlyTrendReport:
    report_name: str = ""
    year: int = 0
    months: list[CogsMonth] = field(default_factory=list)
    total_cogs: float = 0

    @property
    def quarters(self) -> list[QuarterTotal]:
        return quarterly_rollup(self.months, metrics=("purchases", "cogs"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CogsMonthlyTrendReport":
        b = wrap(data)
        return cls(
            report_name=text(b, "report_name"),
            year=int(num(b, "year")),
            months=[
                CogsMonth(
                    month=int(num(m, "month")),
                    month_name=text(m, "month_name"),
                    beginning_inventory=num(m, "beginning_inventory"),
                    purchases=num(m, "purchases"),
                    ending_inventory=num(m, "ending_inventory"),
                    cogs=num(m, "cogs"),
                )
                for m in records(b, "months")
            ],
            total_cogs=num(b, "total_cogs"),
        )


@dataclass(slots=True)
class WorkOrderCost:
    """Estimated against actual cost of one work order."""

    id: int
    wo_number: str
    name: str
    project: str
    status: str
    estimated_cost: float
    actual_cost: float

    @property
    def variance(self) -> Variance:
        return variance(self.actual_cost, self.estimated_cost)

    @classmethod
    def from_payload(cls, w: Mapping[str, Any]) -> "WorkOrderCost":
        w = wrap(w)
        return cls(
            id=int(num(w, "id")),
            wo_number=text(w, "wo_number"),
            name=text(w, "name"),
            project=text(w, "project"),
            status=text(w, "status"),
            estimated_cost=num(w, "estimated_cost"),
            actual_cost=num(w, "actual_cost"),
        )


@dataclass(slots=True)
class CostVarianceReport:
    """
    Work order cost variance for a period.

    The backend groups work orders into over/under/on-budget lists; they are
    merged here and reclassified from their own estimated and actual costs.
    """

    report_name: str = ""
    period: Period = field(default_factory=Period)
    work_orders: list[WorkOrderCost] = field(default_factory=list)

    @property
    def summary(self) -> VarianceSummary:
        return summarize_variances(wo.variance for wo in self.work_orders)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CostVarianceReport":
        b = wrap(data)
        work_orders = [
            WorkOrderCost.from_payload(item)
            for key in ("over_budget_items", "under_budget_items", "on_budget_items")
            for item in records(b, key)
        ]
        return cls(
            report_name=text(b, "report_name"),
            period=Period.from_payload(b),
            work_orders=work_orders,
        )


@dataclass(slots=True)
class WorkOrderCostsReport:
    report_name: str = ""
    period: Period = field(default_factory=Period)
    work_orders: list[WorkOrderCost] = field(default_factory=list)
    total_estimated: float = 0
    total_actual: float = 0

    @property
    def total_variance(self) -> Variance:
        return variance(self.total_actual, self.total_estimated)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "WorkOrderCostsReport":
        b = wrap(data)
        return cls(
            report_name=text(b, "report_name"),
            period=Period.from_payload(b),
            work_orders=[WorkOrderCost.from_payload(w) for w in records(b, "work_orders")],
            total_estimated=num(b, "summary.total_estimated"),
            total_actual=num(b, "summary.total_actual"),
        )


@dataclass(slots=True)
class InventorySummaryReport:
    warehouse_name: str = ""
    total_value: float = 0
    total_items: int = 0
    total_quantity: float = 0
    low_stock_count: int = 0
    out_of_stock_count: int = 0

    @property
    def average_cost(self) -> float:
        return average_cost(self.total_value, self.total_quantity)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "InventorySummaryReport":
        b = wrap(data)
        return cls(
            warehouse_name=text(b, "warehouse.name", "Semua Gudang"),
            total_value=num(b, "summary.total_value"),
            total_items=int(num(b, "summary.total_items")),
            total_quantity=num(b, "summary.total_quantity"),
            low_stock_count=int(num(b, "summary.low_stock_count")),
            out_of_stock_count=int(num(b, "summary.out_of_stock_count")),
        )


@dataclass(slots=True)
class MovementItem:
    product_id: int
    sku: str
    name: str
    unit: str
    opening_qty: float
    in_qty: float
    out_qty: float
    adjustment_qty: float
    closing_qty: float
    opening_value: float
    closing_value: float

    @property
    def average_cost(self) -> float:
        """Closing value per unit in stock."""
        return average_cost(self.closing_value, self.closing_qty)


@dataclass(slots=True)
class MovementSummaryReport:
    warehouse_name: str = ""
    period: Period = field(default_factory=Period)
    items: list[MovementItem] = field(default_factory=list)
    total_opening_value: float = 0
    total_closing_value: float = 0
    total_in: float = 0
    total_out: float = 0
    total_adjustment: float = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "MovementSummaryReport":
        b = wrap(data)
        return cls(
            warehouse_name=text(b, "warehouse.name", "Semua Gudang"),
            period=Period.from_payload(b),
            items=[
                MovementItem(
                    product_id=int(num(i, "product_id")),
                    sku=text(i, "sku"),
                    name=text(i, "name"),
                    unit=text(i, "unit"),
                    opening_qty=num(i, "opening_qty"),
                    in_qty=num(i, "in_qty"),
                    out_qty=num(i, "out_qty"),
                    adjustment_qty=num(i, "adjustment_qty"),
                    closing_qty=num(i, "closing_qty"),
                    opening_value=num(i, "opening_value"),
                    closing_value=num(i, "closing_value"),
                )
                for i in records(b, "summary.items")
            ],
            total_opening_value=num(b, "summary.total_opening_value"),
            total_closing_value=num(b, "summary.total_closing_value"),
            total_in=num(b, "summary.total_in"),
            total_out=num(b, "summary.total_out"),
            total_adjustment=num(b, "summary.total_adjustment"),
        )
