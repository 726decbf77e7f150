"""
Client-side derivations over report payloads.

The backend returns already-aggregated figures; these functions reshape them
for display: VAT months rolled up into quarters, running cash-flow totals for
payback charts, cost variance classification, average unit cost and aging
bucket shares. They coerce every input with ``to_number`` and substitute 0
for missing or zero denominators, so sparse payloads never break a page.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from report_ui.utils.format import to_number

QUARTER_MONTHS: dict[int, tuple[int, int, int]] = {
    1: (1, 2, 3),
    2: (4, 5, 6),
    3: (7, 8, 9),
    4: (10, 11, 12),
}

VAT_METRICS = ("output", "input", "net")


def _field(record: Any, name: str, default: Any = 0) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def _ratio_percent(numerator: Any, denominator: Any) -> float:
    denominator = to_number(denominator)
    if denominator == 0:
        return 0.0
    return to_number(numerator) / denominator * 100


# Quarterly rollup


@dataclass(slots=True)
class QuarterTotal:
    """
    Metric sums for one calendar quarter.

    Attributes:
        quarter: Quarter number, 1-4.
        months: Month numbers belonging to the quarter.
        totals: Metric name to summed value.
    """

    quarter: int
    months: tuple[int, ...]
    totals: dict[str, float] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return f"Q{self.quarter}"

    def get(self, metric: str) -> float:
        return self.totals.get(metric, 0)


def quarterly_rollup(
    months: Iterable[Any],
    metrics: Sequence[str] = VAT_METRICS,
) -> list[QuarterTotal]:
    """
    Sum monthly records into the four calendar quarters.

    Each record is assigned by its ``month`` number, so input order does not
    matter. Records whose month is missing or outside 1..12 are skipped.

    Args:
        months: Mappings or objects with a ``month`` field and the metrics.
        metrics: Names of the fields to sum.

    Returns:
        Four QuarterTotal entries, Q1 to Q4, including empty quarters.
    """
    quarters = [
        QuarterTotal(quarter=q, months=members, totals={m: 0 for m in metrics})
        for q, members in QUARTER_MONTHS.items()
    ]
    for record in months:
        month = int(to_number(_field(record, "month")))
        for quarter in quarters:
            if month in quarter.months:
                for metric in metrics:
                    quarter.totals[metric] += to_number(_field(record, metric))
                break
    return quarters


# Cumulative cash flow


@dataclass(slots=True)
class CashFlowSeries:
    """
    Running cash position after each period.

    Attributes:
        running_totals: Cumulative value after each period, starting from
            the negative investment.
        break_even_period: 1-based period of the first non-negative running
            total, or None when the investment is never recovered.
    """

    running_totals: list[float]
    break_even_period: int | None

    @property
    def breaks_even(self) -> bool:
        return self.break_even_period is not None


def cumulative_cash_flow(investment: Any, savings: Iterable[Any]) -> CashFlowSeries:
    """
    Build the cumulative cash-flow series used by payback charts.

    Args:
        investment: Up-front cost, entered as a positive amount.
        savings: Savings per period, in period order.

    Returns:
        CashFlowSeries with one running total per period.
    """
    running = -to_number(investment)
    totals: list[float] = []
    break_even: int | None = None
    for period, saving in enumerate(savings, start=1):
        running += to_number(saving)
        totals.append(running)
        if break_even is None and running >= 0:
            break_even = period
    return CashFlowSeries(running_totals=totals, break_even_period=break_even)


# Variance


class VarianceStatus(str, Enum):
    OVER = "over"
    UNDER = "under"
    ON = "on"


VARIANCE_LABELS: dict[VarianceStatus, str] = {
    VarianceStatus.OVER: "Over Budget",
    VarianceStatus.UNDER: "Under Budget",
    VarianceStatus.ON: "On Budget",
}


@dataclass(frozen=True, slots=True)
class Variance:
    variance: float
    variance_percent: float
    status: VarianceStatus

    @property
    def label(self) -> str:
        return VARIANCE_LABELS[self.status]


def variance(actual: Any, estimated: Any) -> Variance:
    """
    Compare actual against estimated cost.

    ``variance_percent`` is relative to the estimate and is 0 when there is
    no estimate. The status follows the sign of the variance.
    """
    difference = to_number(actual) - to_number(estimated)
    if difference > 0:
        status = VarianceStatus.OVER
    elif difference < 0:
        status = VarianceStatus.UNDER
    else:
        status = VarianceStatus.ON
    return Variance(
        variance=difference,
        variance_percent=_ratio_percent(difference, estimated),
        status=status,
    )


@dataclass(slots=True)
class VarianceSummary:
    total: int = 0
    over_budget: int = 0
    under_budget: int = 0
    on_budget: int = 0
    total_variance: float = 0


def summarize_variances(variances: Iterable[Variance]) -> VarianceSummary:
    """Count variances per status and sum them."""
    summary = VarianceSummary()
    for item in variances:
        summary.total += 1
        summary.total_variance += item.variance
        if item.status is VarianceStatus.OVER:
            summary.over_budget += 1
        elif item.status is VarianceStatus.UNDER:
            summary.under_budget += 1
        else:
            summary.on_budget += 1
    return summary


# Inventory and COGS


def average_cost(total_value: Any, quantity: Any) -> float:
    """Average unit cost, 0 when there is no quantity."""
    quantity = to_number(quantity)
    if quantity == 0:
        return 0
    return to_number(total_value) / quantity


def goods_available(beginning_inventory: Any, purchases: Any) -> float:
    return to_number(beginning_inventory) + to_number(purchases)


def cost_of_goods_sold(beginning_inventory: Any, purchases: Any, ending_inventory: Any) -> float:
    """COGS from the periodic inventory formula."""
    return goods_available(beginning_inventory, purchases) - to_number(ending_inventory)


def share_of_total(part: Any, total: Any) -> float:
    """Percentage of total represented by part."""
    return _ratio_percent(part, total)


def profit_margin(revenue: Any, cost: Any) -> float:
    """Gross margin as a percentage of revenue."""
    return _ratio_percent(to_number(revenue) - to_number(cost), revenue)


def budget_utilization(actual: Any, budget: Any) -> float:
    return _ratio_percent(actual, budget)


# Aging


@dataclass(frozen=True, slots=True)
class AgingBucket:
    """
    Overdue window used to group receivables and payables.

    Attributes:
        key: Field name used by the backend (``days_1_30`` etc.).
        label: Column heading.
        min_days: Smallest days-overdue value in the bucket.
        max_days: Largest days-overdue value, None for the open-ended bucket.
    """

    key: str
    label: str
    min_days: int
    max_days: int | None

    def contains(self, days_overdue: int) -> bool:
        if days_overdue < self.min_days:
            return False
        return self.max_days is None or days_overdue <= self.max_days


AGING_BUCKETS: tuple[AgingBucket, ...] = (
    AgingBucket("current", "Current", -(10**9), 0),
    AgingBucket("days_1_30", "1-30 Days", 1, 30),
    AgingBucket("days_31_60", "31-60 Days", 31, 60),
    AgingBucket("days_61_90", "61-90 Days", 61, 90),
    AgingBucket("over_90", "> 90 Days", 91, None),
)

AGING_KEYS = tuple(bucket.key for bucket in AGING_BUCKETS)


def aging_bucket(days_overdue: Any) -> AgingBucket:
    """Return the bucket for a days-overdue count; not yet due is current."""
    days = int(to_number(days_overdue))
    for bucket in AGING_BUCKETS:
        if bucket.contains(days):
            return bucket
    return AGING_BUCKETS[0]


def aging_totals(documents: Iterable[Any]) -> dict[str, float]:
    """
    Sum outstanding balances per aging bucket.

    Args:
        documents: Invoices or bills with ``days_overdue`` and ``balance``.

    Returns:
        Bucket key to amount, plus ``total``.
    """
    totals: dict[str, float] = {key: 0 for key in AGING_KEYS}
    for document in documents:
        bucket = aging_bucket(_field(document, "days_overdue"))
        totals[bucket.key] += to_number(_field(document, "balance"))
    totals["total"] = sum(totals[key] for key in AGING_KEYS)
    return totals


def aging_shares(totals: Mapping[str, Any]) -> dict[str, float]:
    """Percentage of the total outstanding in each bucket."""
    total = to_number(totals.get("total")) or sum(to_number(totals.get(k)) for k in AGING_KEYS)
    return {key: share_of_total(totals.get(key), total) for key in AGING_KEYS}
