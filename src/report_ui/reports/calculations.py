"""
Solar-proposal financial calculations.

Year-by-year savings projections with tariff escalation and panel
degradation, payback period, ROI, financing payments and battery sizing.
Rates and percentages are passed as percentages (3 for 3%) unless noted.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from report_ui.reports.derive import cumulative_cash_flow
from report_ui.utils.format import to_number


@dataclass(frozen=True, slots=True)
class YearlyProjection:
    year: int
    savings: int


@dataclass(frozen=True, slots=True)
class LeaseResult:
    monthly_lease: int
    total_lease_payments: int
    buyout_price: int
    total_cost: int


@dataclass(frozen=True, slots=True)
class SelfConsumption:
    """Self-consumption ratios (0-1) without and with a battery."""

    without: float
    with_battery: float
    increase: float


@dataclass(frozen=True, slots=True)
class BackupCapability:
    hours: float
    days: float


@dataclass(frozen=True, slots=True)
class BatterySavings:
    annual: int
    lifetime: int


def _round_half_up(value: float) -> int:
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def _round1(value: float) -> float:
    return _round_half_up(value * 10) / 10


def generate_projections(
    annual_production: float,
    electricity_rate: float,
    tariff_escalation: float,
    degradation_rate: float,
    years: int,
) -> list[YearlyProjection]:
    """
    Project yearly savings over the system lifetime.

    Year 1 uses the initial production and tariff; each following year the
    tariff grows by tariff_escalation percent and production shrinks by
    degradation_rate percent.

    Args:
        annual_production: First-year production in kWh.
        electricity_rate: Tariff per kWh.
        tariff_escalation: Annual tariff increase, percent.
        degradation_rate: Annual production loss, percent.
        years: Number of years to project.

    Returns:
        One YearlyProjection per year with savings rounded to whole units.
    """
    rate = to_number(electricity_rate)
    production = to_number(annual_production)
    escalation = 1 + to_number(tariff_escalation) / 100
    degradation = 1 - to_number(degradation_rate) / 100

    projections = []
    for year in range(1, int(years) + 1):
        projections.append(YearlyProjection(year=year, savings=_round_half_up(production * rate)))
        rate *= escalation
        production *= degradation
    return projections


def payback_period(projections: Sequence[YearlyProjection], total_cost: Any) -> float | None:
    """
    Years until cumulative savings cover total_cost.

    The crossing year is interpolated linearly and rounded to one decimal.
    Returns 0 for a non-positive cost and None when the projections never
    recover the cost.
    """
    cost = to_number(total_cost)
    if cost <= 0:
        return 0
    savings = [p.savings for p in projections]
    series = cumulative_cash_flow(cost, savings)
    if series.break_even_period is None:
        return None

    index = series.break_even_period - 1
    crossing_savings = savings[index]
    shortfall_before = -(series.running_totals[index] - crossing_savings)
    fraction = shortfall_before / crossing_savings if crossing_savings > 0 else 0
    return _round1(index + fraction)


def sum_savings(projections: Iterable[YearlyProjection]) -> int:
    return sum(p.savings for p in projections)


def roi(total_savings: Any, total_cost: Any) -> float:
    """Return on investment as a percentage; 0 without a cost."""
    cost = to_number(total_cost)
    if cost <= 0:
        return 0
    return (to_number(total_savings) - cost) / cost * 100


def loan_payment(principal: Any, annual_rate_percent: Any, years: Any) -> float:
    """
    Monthly payment of an amortizing loan.

    Uses ``P * r(1+r)^n / ((1+r)^n - 1)`` with the monthly rate r; a zero
    rate spreads the principal evenly.
    """
    principal = to_number(principal)
    rate = to_number(annual_rate_percent)
    months = to_number(years) * 12
    if principal <= 0 or months <= 0:
        return 0
    if rate <= 0:
        return principal / months

    monthly_rate = rate / 100 / 12
    growth = (1 + monthly_rate) ** months
    return principal * monthly_rate * growth / (growth - 1)


def lease_payment(
    system_cost: Any,
    lease_term: Any,
    residual_percent: Any,
    money_factor: Any,
) -> LeaseResult:
    """
    Lease payments from residual value and money factor.

    Args:
        system_cost: Total system cost.
        lease_term: Lease term in years.
        residual_percent: Residual value as a percentage of the cost.
        money_factor: Finance charge factor.
    """
    cost = to_number(system_cost)
    term = to_number(lease_term)
    if cost <= 0 or term <= 0:
        return LeaseResult(0, 0, 0, 0)

    residual = cost * to_number(residual_percent) / 100
    depreciation = (cost - residual) / (term * 12)
    finance_charge = (cost + residual) * to_number(money_factor)
    monthly = depreciation + finance_charge
    total_payments = monthly * term * 12
    return LeaseResult(
        monthly_lease=_round_half_up(monthly),
        total_lease_payments=_round_half_up(total_payments),
        buyout_price=_round_half_up(residual),
        total_cost=_round_half_up(total_payments + residual),
    )


def self_consumption(
    daily_production: float,
    battery_kwh: float,
    round_trip_efficiency: float,
    base_consumption: float,
    max_consumption: float,
) -> SelfConsumption:
    """
    Self-consumption ratio with and without a battery.

    The battery captures part of the excess production, bounded by its
    usable capacity, and the result is capped at max_consumption.
    Efficiency and consumption ratios are decimals (0.9 for 90%).
    """
    if daily_production <= 0:
        return SelfConsumption(base_consumption, base_consumption, 0)

    excess = daily_production * (1 - base_consumption)
    captured = min(battery_kwh * round_trip_efficiency, excess)
    with_battery = min(max_consumption, base_consumption + captured / daily_production)
    return SelfConsumption(
        without=base_consumption,
        with_battery=with_battery,
        increase=with_battery - base_consumption,
    )


def backup_capability(
    battery_kwh: float,
    round_trip_efficiency: float,
    daily_consumption: float,
    active_hours: float = 10,
) -> BackupCapability:
    """Hours and days of backup power at the average hourly load."""
    if daily_consumption <= 0 or active_hours <= 0:
        return BackupCapability(0, 0)
    hourly = daily_consumption / active_hours
    hours = battery_kwh * round_trip_efficiency / hourly
    return BackupCapability(hours=_round1(hours), days=_round1(hours / 24))


def battery_savings(
    annual_production: float,
    self_consumption_increase: float,
    electricity_rate: float,
    degradation_rate: float,
    lifetime_years: int,
) -> BatterySavings:
    annual = annual_production * self_consumption_increase * electricity_rate
    # linear degradation, averaged over the lifetime
    lifetime_factor = 1 - (degradation_rate / 100 * lifetime_years / 2)
    return BatterySavings(
        annual=_round_half_up(annual),
        lifetime=_round_half_up(annual * lifetime_years * lifetime_factor),
    )


def recommended_battery_capacity(
    daily_production: float,
    recommended_ratio: float,
    available_capacities: Sequence[float] = (5, 10, 15, 20),
) -> float:
    """Smallest available capacity covering the recommended size, else the largest."""
    capacities = sorted(available_capacities)
    if not capacities:
        return 20
    target = daily_production * recommended_ratio
    for capacity in capacities:
        if target <= capacity:
            return capacity
    return capacities[-1]
