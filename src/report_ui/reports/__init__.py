"""
Report derivations and solar-proposal calculations.

Modules:
- derive: quarterly rollups, cumulative cash flow, variance, average cost, aging
- calculations: savings projections, payback, ROI, financing, battery sizing
"""

from report_ui.reports.derive import (
    AGING_BUCKETS,
    CashFlowSeries,
    QuarterTotal,
    Variance,
    VarianceStatus,
    aging_bucket,
    aging_shares,
    aging_totals,
    average_cost,
    cumulative_cash_flow,
    quarterly_rollup,
    summarize_variances,
    variance,
)

__all__ = [
    "AGING_BUCKETS",
    "CashFlowSeries",
    "QuarterTotal",
    "Variance",
    "VarianceStatus",
    "aging_bucket",
    "aging_shares",
    "aging_totals",
    "average_cost",
    "cumulative_cash_flow",
    "quarterly_rollup",
    "summarize_variances",
    "variance",
]
