import pytest

from report_ui.data.demo_reports import DEMO_REPORTS
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
from report_ui.models.common import Period, num, text, wrap
from report_ui.reports.derive import VarianceStatus


def test_ppn_monthly_quarters_match_year_totals():
    report = PpnMonthlyReport.from_dict(DEMO_REPORTS["/reports/ppn-monthly"])

    assert report.year == 2024
    assert len(report.months) == 12
    assert len(report.quarters) == 4
    assert sum(q.get("net") for q in report.quarters) == report.total_net
    assert sum(q.get("output") for q in report.quarters) == report.total_output


def test_ppn_summary_accepts_string_numbers():
    report = PpnSummaryReport.from_dict(
        {
            "period": {"start_date": "2024-01-01", "end_date": "2024-03-31"},
            "output_tax": "1500000.50",
            "input_tax": "500000",
            "net_vat": "1000000.50",
        }
    )

    assert report.output_tax == 1500000.5
    assert report.net_vat == 1000000.5
    assert report.is_payable
    assert report.period == Period("2024-01-01", "2024-03-31")


def test_empty_payloads_use_neutral_defaults():
    trial_balance = TrialBalanceReport.from_dict(None)
    assert trial_balance.accounts == []
    assert trial_balance.total_debit == 0
    assert trial_balance.is_balanced is False

    monthly = PpnMonthlyReport.from_dict({})
    assert monthly.months == []
    assert [q.get("net") for q in monthly.quarters] == [0, 0, 0, 0]

    summary = PpnSummaryReport.from_dict({"net_vat": None})
    assert summary.net_vat == 0
    assert not summary.is_payable


def test_trial_balance_accounts():
    report = TrialBalanceReport.from_dict(DEMO_REPORTS["/reports/trial-balance"])

    assert report.accounts
    assert report.is_balanced
    assert report.total_debit == report.total_credit


def test_aging_report_shares():
    report = AgingReport.from_dict(DEMO_REPORTS["/reports/receivable-aging"])

    assert report.contacts
    contact = report.contacts[0]
    assert contact.total == sum(contact.buckets.values())
    assert report.totals["total"] == sum(c.total for c in report.contacts)
    assert sum(report.shares.values()) == pytest.approx(100)


def test_aging_report_ignores_non_mapping_contacts():
    report = AgingReport.from_dict({"contacts": [None, "x", {"name": "PT Sinar", "current": 10}]})

    assert [c.name for c in report.contacts] == ["PT Sinar"]
    assert report.contacts[0].buckets["current"] == 10
    assert report.contacts[0].buckets["over_90"] == 0


@pytest.mark.parametrize("contacts", [5, "PT Sinar", {"name": "PT Sinar"}, None])
def test_aging_report_non_list_contacts_are_empty(contacts):
    report = AgingReport.from_dict({"contacts": contacts, "totals": {"total": 7}})

    assert report.contacts == []
    assert report.totals["total"] == 7


def test_payload_keys_containing_dots():
    report = PpnMonthlyReport.from_dict(
        {"year": 2024, "months": [], "meta": {"v1.2": 1}, "rates": {"11.0": 5}}
    )

    assert report.year == 2024
    assert report.months == []

    b = wrap({"rates": {"11.0": {"amount": "250"}}, "period": {"start": "2024-01-01"}})
    assert num(b, "rates") == 0
    assert text(b, "period.start") == "2024-01-01"
    assert b["rates"]["11.0"]["amount"] == "250"


def test_cash_flow_reads_activity_totals():
    report = CashFlowReport.from_dict(DEMO_REPORTS["/reports/cash-flow"])

    assert report.operating == 512_300_000
    assert report.investing == -215_000_000
    assert report.financing == -80_000_000
    assert report.operating + report.investing + report.financing == report.net_cash_change


def test_cogs_summary_formula_matches_backend():
    report = CogsSummaryReport.from_dict(DEMO_REPORTS["/reports/cogs-summary"])
    assert report.computed_cogs == report.cogs


def test_cogs_monthly_trend_quarters():
    report = CogsMonthlyTrendReport.from_dict(DEMO_REPORTS["/reports/cogs-monthly-trend"])

    assert sum(q.get("cogs") for q in report.quarters) == report.total_cogs
    assert report.quarters[0].months == (1, 2, 3)


def test_cost_variance_reclassifies_work_orders():
    report = CostVarianceReport.from_dict(DEMO_REPORTS["/reports/cost-variance"])
    summary = report.summary

    assert summary.total == 5
    assert summary.over_budget == 2
    assert summary.under_budget == 2
    assert summary.on_budget == 1

    on_budget = [wo for wo in report.work_orders if wo.variance.status is VarianceStatus.ON]
    assert [wo.wo_number for wo in on_budget] == ["WO-2024-0107"]


def test_work_order_costs_total_variance():
    report = WorkOrderCostsReport.from_dict(DEMO_REPORTS["/reports/work-order-costs"])

    assert len(report.work_orders) == 5
    total = report.total_variance
    assert total.variance == report.total_actual - report.total_estimated
    assert total.variance == sum(wo.variance.variance for wo in report.work_orders)


def test_inventory_summary_defaults_warehouse_name():
    report = InventorySummaryReport.from_dict(DEMO_REPORTS["/inventory/summary"])

    assert report.warehouse_name == "Semua Gudang"
    assert report.total_items == 4
    assert report.average_cost == report.total_value / report.total_quantity


def test_inventory_summary_without_quantity():
    report = InventorySummaryReport.from_dict({"summary": {"total_value": 1000}})
    assert report.average_cost == 0


def test_movement_summary_average_cost():
    report = MovementSummaryReport.from_dict(DEMO_REPORTS["/inventory/movement-summary"])

    assert report.warehouse_name == "Gudang Jakarta"
    by_sku = {item.sku: item for item in report.items}
    assert by_sku["PV-550M"].average_cost == 2_250_000
    assert by_sku["MC4-PAIR"].average_cost == 0
    assert report.total_closing_value == sum(item.closing_value for item in report.items)


def test_period_shapes():
    assert Period.from_payload(wrap({"period": {"start": "a", "end": "b"}})) == Period("a", "b")
    assert Period.from_payload(wrap({})) == Period()
    assert Period("a", "b").to_dict() == {"start": "a", "end": "b"}
