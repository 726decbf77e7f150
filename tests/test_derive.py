import pytest

from report_ui.reports.derive import (
    AGING_KEYS,
    VarianceStatus,
    aging_bucket,
    aging_shares,
    aging_totals,
    average_cost,
    budget_utilization,
    cost_of_goods_sold,
    cumulative_cash_flow,
    goods_available,
    profit_margin,
    quarterly_rollup,
    share_of_total,
    summarize_variances,
    variance,
)


def _months():
    return [
        {"month": m, "output": m * 100, "input": m * 40, "net": m * 60}
        for m in range(1, 13)
    ]


def test_quarterly_rollup_sums_months():
    quarters = quarterly_rollup(_months())

    assert [q.label for q in quarters] == ["Q1", "Q2", "Q3", "Q4"]
    assert [q.get("output") for q in quarters] == [600, 1500, 2400, 3300]
    assert [q.get("input") for q in quarters] == [240, 600, 960, 1320]


def test_quarterly_rollup_preserves_totals():
    months = _months()
    quarters = quarterly_rollup(months)

    for metric in ("output", "input", "net"):
        assert sum(q.get(metric) for q in quarters) == sum(m[metric] for m in months)


def test_quarterly_rollup_ignores_order_and_invalid_months():
    months = list(reversed(_months())) + [{"month": 13, "output": 999}, {"output": 5}]
    quarters = quarterly_rollup(months)

    assert [q.get("output") for q in quarters] == [600, 1500, 2400, 3300]


def test_quarterly_rollup_empty_and_partial():
    quarters = quarterly_rollup([])
    assert len(quarters) == 4
    assert all(q.get("net") == 0 for q in quarters)

    partial = quarterly_rollup([{"month": "5", "output": "1000.5"}], metrics=("output",))
    assert partial[1].get("output") == 1000.5
    assert partial[0].get("output") == 0


def test_cumulative_cash_flow_breaks_even():
    series = cumulative_cash_flow(100, [30, 30, 40, 50])

    assert series.running_totals == [-70, -40, 0, 50]
    assert series.break_even_period == 3
    assert series.breaks_even


def test_cumulative_cash_flow_never_breaks_even():
    series = cumulative_cash_flow("100", [10, 10])

    assert series.running_totals == [-90, -80]
    assert series.break_even_period is None
    assert not series.breaks_even


def test_cumulative_cash_flow_empty_savings():
    series = cumulative_cash_flow(100, [])
    assert series.running_totals == []
    assert series.break_even_period is None


@pytest.mark.parametrize(
    ("actual", "estimated", "diff", "percent", "status"),
    [
        (110, 100, 10, 10.0, VarianceStatus.OVER),
        (90, 100, -10, -10.0, VarianceStatus.UNDER),
        (100, 100, 0, 0.0, VarianceStatus.ON),
        (50, 0, 50, 0.0, VarianceStatus.OVER),
        ("447500000", "412000000", 35_500_000, pytest.approx(8.6165, rel=1e-4), VarianceStatus.OVER),
    ],
)
def test_variance(actual, estimated, diff, percent, status):
    result = variance(actual, estimated)

    assert result.variance == diff
    assert result.variance_percent == percent
    assert result.status is status


def test_variance_labels():
    assert variance(2, 1).label == "Over Budget"
    assert variance(1, 2).label == "Under Budget"
    assert variance(1, 1).label == "On Budget"


def test_summarize_variances():
    summary = summarize_variances(
        [variance(110, 100), variance(120, 100), variance(90, 100), variance(5, 5)]
    )

    assert summary.total == 4
    assert summary.over_budget == 2
    assert summary.under_budget == 1
    assert summary.on_budget == 1
    assert summary.total_variance == 20


def test_inventory_derivations():
    assert average_cost(355_500_000, 158) == 2_250_000
    assert average_cost(1000, 0) == 0
    assert average_cost(None, None) == 0
    assert goods_available(100, 50) == 150
    assert cost_of_goods_sold(100, 50, 30) == 120


def test_ratio_derivations():
    assert share_of_total(25, 100) == 25.0
    assert share_of_total(25, 0) == 0
    assert profit_margin(200, 150) == 25.0
    assert profit_margin(0, 150) == 0
    assert budget_utilization(50, 200) == 25.0


@pytest.mark.parametrize(
    ("days", "key"),
    [
        (-5, "current"),
        (0, "current"),
        (1, "days_1_30"),
        (30, "days_1_30"),
        (31, "days_31_60"),
        (60, "days_31_60"),
        (61, "days_61_90"),
        (90, "days_61_90"),
        (91, "over_90"),
        (400, "over_90"),
    ],
)
def test_aging_bucket(days, key):
    assert aging_bucket(days).key == key


def test_aging_totals_and_shares():
    documents = [
        {"days_overdue": 0, "balance": 100},
        {"days_overdue": 15, "balance": 200},
        {"days_overdue": 45, "balance": 300},
        {"days_overdue": 120, "balance": 400},
    ]
    totals = aging_totals(documents)

    assert totals == {
        "current": 100,
        "days_1_30": 200,
        "days_31_60": 300,
        "days_61_90": 0,
        "over_90": 400,
        "total": 1000,
    }

    shares = aging_shares(totals)
    assert set(shares) == set(AGING_KEYS)
    assert shares["over_90"] == 40.0
    assert sum(shares.values()) == pytest.approx(100)


def test_aging_shares_without_balance():
    assert aging_shares({}) == {key: 0 for key in AGING_KEYS}


def test_documented_examples():
    assert average_cost(0, 0) == 0
    assert average_cost(1000, 10) == 100

    over = variance(120, 100)
    assert (over.variance, over.variance_percent, over.status) == (20, 20.0, VarianceStatus.OVER)
    assert variance(80, 100).status is VarianceStatus.UNDER
    assert variance(100, 100).status is VarianceStatus.ON

    recovered = cumulative_cash_flow(1000, [300, 300, 300, 300])
    assert recovered.running_totals == [-700, -400, -100, 200]
    assert recovered.break_even_period == 4

    short = cumulative_cash_flow(1000, [100, 100])
    assert short.running_totals == [-900, -800]
    assert short.break_even_period is None
