"""
Report payload models.

All models are dataclasses built from backend JSON with ``from_dict`` and
never raise on missing fields.
"""

from report_ui.models.common import Period
from report_ui.models.reports import (
    AgingContact,
    AgingReport,
    CashFlowReport,
    CogsMonth,
    CogsMonthlyTrendReport,
    CogsSummaryReport,
    CostVarianceReport,
    InventorySummaryReport,
    MonthlyVat,
    MovementItem,
    MovementSummaryReport,
    PpnMonthlyReport,
    PpnSummaryReport,
    TrialBalanceAccount,
    TrialBalanceReport,
    WorkOrderCost,
    WorkOrderCostsReport,
)

__all__ = [
    "AgingContact",
    "AgingReport",
    "CashFlowReport",
    "CogsMonth",
    "CogsMonthlyTrendReport",
    "CogsSummaryReport",
    "CostVarianceReport",
    "InventorySummaryReport",
    "MonthlyVat",
    "MovementItem",
    "MovementSummaryReport",
    "Period",
    "PpnMonthlyReport",
    "PpnSummaryReport",
    "TrialBalanceAccount",
    "TrialBalanceReport",
    "WorkOrderCost",
    "WorkOrderCostsReport",
]
