"""
Investment Strategy Calculations

Projects returns for a single property under three strategies:

- airbnb: short-term rental at a premium over market rent
- lease: long-term lease at market rent
- flip: buy, renovate and resell within a short holding period

All functions are pure. Monetary outputs are rounded half-up to whole
dollars; ROI percentages to one decimal place. A ROI that cannot be
computed (zero cash committed, NaN, infinity) is reported as 0.
"""

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Union

from up_real_estate.calculations.amortization import calculate_payment_from_percent
from up_real_estate.calculations.assumptions import (
    DEFAULT_ASSUMPTIONS,
    InvestmentAssumptions,
)
from up_real_estate.exceptions import InvalidStrategyError

AIRBNB = "airbnb"
LEASE = "lease"
FLIP = "flip"
STRATEGIES = (AIRBNB, LEASE, FLIP)


@dataclass(frozen=True)
class FinancingParameters:
    """Loan terms supplied per request."""

    down_payment: float
    interest_rate: float  # Annual nominal percent (6.5 means 6.5%)
    loan_term: int  # Years


@dataclass(frozen=True)
class RentalResults:
    """Projection for a buy-and-rent strategy."""

    monthly_income: int
    monthly_cash_flow: int
    annual_cash_flow: int
    total_roi: float


@dataclass(frozen=True)
class FlipResults:
    """Projection for a fix-and-flip strategy."""

    total_investment: int
    net_profit: int
    annualized_roi: float


@dataclass(frozen=True)
class FlipCostBreakdown:
    """Cost components behind a flip projection."""

    renovation_budget: int
    after_repair_value: int
    closing_costs_buy: int
    closing_costs_sell: int
    holding_costs: int


@dataclass(frozen=True)
class StrategyResult:
    """Result for one strategy, optionally tagged with its property."""

    strategy: str
    results: Union[RentalResults, FlipResults]
    cost_breakdown: Optional[FlipCostBreakdown] = None
    property: Any = None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return int(math.floor(value + 0.5))


def round_percent(value: float) -> float:
    """Round a percentage to one decimal; non-finite values become 0."""
    if not math.isfinite(value):
        return 0.0
    return math.floor(value * 10 + 0.5) / 10


def _percent(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan
    return numerator / denominator * 100


def base_monthly_rent(
    property: Any, assumptions: InvestmentAssumptions = DEFAULT_ASSUMPTIONS
) -> float:
    """Listing's estimated rent, or a rent derived from its price."""
    estimated_rent = getattr(property, "estimated_rent", None)
    if estimated_rent is not None:
        return estimated_rent
    return round_half_up(property.price * assumptions.rent_to_price_ratio)


def fixed_monthly_costs(
    price: float, assumptions: InvestmentAssumptions = DEFAULT_ASSUMPTIONS
) -> float:
    """Property tax, insurance, maintenance and vacancy reserve per month."""
    tax_insurance = (price * assumptions.tax_insurance_rate) / 12
    maintenance_vacancy = (price * assumptions.maintenance_vacancy_rate) / 12
    return tax_insurance + maintenance_vacancy


def _rental_results(
    gross_income: float,
    monthly_costs: float,
    overhead: float,
    cash_needed: float,
) -> RentalResults:
    monthly_cash_flow = gross_income - (monthly_costs + overhead)
    annual_cash_flow = monthly_cash_flow * 12
    return RentalResults(
        monthly_income=round_half_up(gross_income),
        monthly_cash_flow=round_half_up(monthly_cash_flow),
        annual_cash_flow=round_half_up(annual_cash_flow),
        total_roi=round_percent(_percent(annual_cash_flow, cash_needed)),
    )


def compute_all_strategies(
    property: Any,
    financing: FinancingParameters,
    assumptions: InvestmentAssumptions = DEFAULT_ASSUMPTIONS,
) -> Dict[str, StrategyResult]:
    """
    Project returns for every strategy.

    Inputs are not validated: a down payment above the price or a negative
    rate produce mathematically odd but finite output.

    Args:
        property: Object exposing ``price`` and optionally ``estimated_rent``
        financing: Down payment, annual rate (percent) and term (years)
        assumptions: Underwriting constants

    Returns:
        Mapping of strategy name to its StrategyResult
    """
    price = property.price
    down_payment = financing.down_payment

    principal = price - down_payment
    mortgage = calculate_payment_from_percent(
        principal, financing.interest_rate, financing.loan_term
    )
    monthly_costs = mortgage + fixed_monthly_costs(price, assumptions)

    base_rent = base_monthly_rent(property, assumptions)
    closing_costs_buy = price * assumptions.closing_cost_buy_rate
    cash_needed = down_payment + closing_costs_buy

    airbnb = _rental_results(
        gross_income=round_half_up(base_rent * assumptions.airbnb_premium),
        monthly_costs=monthly_costs,
        overhead=assumptions.airbnb_monthly_overhead,
        cash_needed=cash_needed,
    )
    lease = _rental_results(
        gross_income=round_half_up(base_rent * assumptions.lease_multiplier),
        monthly_costs=monthly_costs,
        overhead=assumptions.lease_monthly_overhead,
        cash_needed=cash_needed,
    )

    # Flip
    renovation_budget = assumptions.renovation_budget
    holding_months = assumptions.holding_period_months
    after_repair_value = round_half_up(price * assumptions.after_repair_multiplier)
    closing_costs_sell = after_repair_value * assumptions.closing_cost_sell_rate
    holding_costs = monthly_costs * holding_months
    total_investment = (
        down_payment + renovation_budget + closing_costs_buy + holding_costs
    )
    net_profit = (
        after_repair_value
        - price
        - renovation_budget
        - closing_costs_sell
        - closing_costs_buy
        - holding_costs
    )
    if total_investment == 0:
        annualized_roi = math.nan
    else:
        annualized_roi = (
            (net_profit / total_investment) / (holding_months / 12) * 100
        )

    flip = FlipResults(
        total_investment=round_half_up(total_investment),
        net_profit=round_half_up(net_profit),
        annualized_roi=round_percent(annualized_roi),
    )
    flip_costs = FlipCostBreakdown(
        renovation_budget=round_half_up(renovation_budget),
        after_repair_value=after_repair_value,
        closing_costs_buy=round_half_up(closing_costs_buy),
        closing_costs_sell=round_half_up(closing_costs_sell),
        holding_costs=round_half_up(holding_costs),
    )

    return {
        AIRBNB: StrategyResult(strategy=AIRBNB, results=airbnb),
        LEASE: StrategyResult(strategy=LEASE, results=lease),
        FLIP: StrategyResult(strategy=FLIP, results=flip, cost_breakdown=flip_costs),
    }


def normalize_strategy(strategy_name: str) -> str:
    """Return the canonical strategy name, or raise InvalidStrategyError."""
    name = str(strategy_name).lower()
    if name not in STRATEGIES:
        raise InvalidStrategyError(strategy_name, STRATEGIES)
    return name


def compute_strategy(
    property: Any,
    strategy_name: str,
    financing: FinancingParameters,
    assumptions: InvestmentAssumptions = DEFAULT_ASSUMPTIONS,
) -> StrategyResult:
    """
    Project returns for a single strategy (case-insensitive name).

    Raises:
        InvalidStrategyError: If strategy_name is not airbnb, lease or flip
    """
    name = normalize_strategy(strategy_name)
    results = compute_all_strategies(property, financing, assumptions)
    return replace(results[name], property=property)
