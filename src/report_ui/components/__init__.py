"""
Reflex components for the Report UI.

- widgets: filter bar, stat cards, tables and the loading/error wrapper
- vat_report, aging_report, cost_variance_report, inventory_report: report
  pages bound to their page states
- payback_calculator: solar payback calculator
"""

from report_ui.components.aging_report import aging_report
from report_ui.components.cost_variance_report import cost_variance_report
from report_ui.components.inventory_report import inventory_report
from report_ui.components.payback_calculator import payback_calculator
from report_ui.components.vat_report import vat_report

__all__ = [
    "aging_report",
    "cost_variance_report",
    "inventory_report",
    "payback_calculator",
    "vat_report",
]
