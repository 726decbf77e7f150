import pytest

from report_ui.data.demo_reports import DEMO_REPORTS
from report_ui.errors import ReportLoadError, UnknownReportError
from report_ui.services import DemoReportService


def test_load_echoes_year(demo_service):
    payload = demo_service.load("ppn_monthly", year=2023)

    assert payload["year"] == 2023
    assert len(payload["months"]) == 12


def test_load_echoes_period(demo_service):
    payload = demo_service.load("cost_variance", start_date="2024-04-01", end_date="2024-06-30")
    assert payload["period"] == {"start": "2024-04-01", "end": "2024-06-30"}


def test_load_echoes_as_of_date(demo_service):
    payload = demo_service.load("receivable_aging", as_of_date="2024-06-30")
    assert payload["as_of_date"] == "2024-06-30"


def test_payloads_are_copies(demo_service):
    payload = demo_service.load("ppn_monthly")
    payload["months"].clear()

    assert len(DEMO_REPORTS["/reports/ppn-monthly"]["months"]) == 12


def test_missing_demo_data_fails_like_not_found(demo_service):
    with pytest.raises(ReportLoadError) as info:
        demo_service.load("balance_sheet")

    assert info.value.status_code == 404
    assert info.value.path == "/reports/balance-sheet"


def test_invalid_year_fails_like_unprocessable(demo_service):
    with pytest.raises(ReportLoadError) as info:
        demo_service.load("ppn_monthly", year="abc")

    assert info.value.status_code == 422
    assert info.value.path == "/reports/ppn-monthly"


def test_catalogue_errors_propagate(demo_service):
    with pytest.raises(UnknownReportError):
        demo_service.load("profit_forecast")
    with pytest.raises(ValueError):
        demo_service.load("contact_aging")


def test_custom_reports():
    service = DemoReportService(reports={"/reports/ppn-summary": {"net_vat": 5}})

    assert service.load("ppn_summary") == {"net_vat": 5}
    with pytest.raises(ReportLoadError):
        service.load("ppn_monthly")
