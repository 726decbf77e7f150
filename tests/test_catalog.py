from datetime import date, datetime

import pytest

from report_ui.errors import UnknownReportError
from report_ui.models import PpnMonthlyReport
from report_ui.services.catalog import REPORTS, clean_params, get_definition


def test_clean_params_drops_unset_values():
    cleaned = clean_params(
        {
            "a": None,
            "b": "  ",
            "c": " x ",
            "d": date(2024, 1, 2),
            "e": datetime(2024, 1, 3, 10, 0),
            "f": 0,
        }
    )
    assert cleaned == {"c": "x", "d": "2024-01-02", "e": "2024-01-03", "f": 0}


def test_get_definition_unknown_name():
    with pytest.raises(UnknownReportError) as info:
        get_definition("profit_forecast")

    assert isinstance(info.value, KeyError)
    assert info.value.name == "profit_forecast"
    assert str(info.value) == "Unknown report: profit_forecast"


def test_catalogue_names_match_keys():
    assert all(name == definition.name for name, definition in REPORTS.items())
    assert "ppn_monthly" in REPORTS
    assert "inventory_summary" in REPORTS


def test_resolve_fills_path_parameters():
    definition = get_definition("contact_aging")

    path, params = definition.resolve({"contact_id": 7, "as_of_date": "2024-12-31"})

    assert definition.path_params == ("contact_id",)
    assert path == "/reports/contacts/7/aging"
    assert params == {"as_of_date": "2024-12-31"}


def test_path_parameters_gate_the_report():
    definition = get_definition("contact_aging")

    assert not definition.is_enabled({})
    assert not definition.is_enabled({"contact_id": ""})
    assert definition.is_enabled({"contact_id": 7})
    with pytest.raises(ValueError, match="contact_id"):
        definition.resolve({"as_of_date": "2024-12-31"})


def test_required_filters_gate_the_report():
    definition = get_definition("movement_summary")

    assert not definition.is_enabled({"start_date": "2024-01-01"})
    assert definition.is_enabled({"start_date": "2024-01-01", "end_date": "2024-01-31"})


def test_unset_optional_filters_are_not_sent():
    path, params = get_definition("cost_variance").resolve({"start_date": "2024-01-01", "end_date": None})

    assert path == "/reports/cost-variance"
    assert params == {"start_date": "2024-01-01"}


def test_year_defaults_to_current_year():
    params = get_definition("ppn_monthly").with_defaults({})
    assert params == {"year": date.today().year}

    params = get_definition("ppn_monthly").with_defaults({"year": 2023})
    assert params == {"year": 2023}


def test_unexpected_filter_is_rejected():
    with pytest.raises(ValueError, match="warehouse_id"):
        get_definition("trial_balance").with_defaults({"warehouse_id": 1})


def test_parse_uses_model_or_returns_payload():
    assert isinstance(get_definition("ppn_monthly").parse({"year": 2024}), PpnMonthlyReport)
    assert get_definition("balance_sheet").parse({"assets": []}) == {"assets": []}
