"""
Investment calculation API endpoints.

Financing parameters arrive as query parameters; anything omitted falls
back to the configured defaults. The calculator itself is permissive, so
the documented preconditions (non-negative down payment, a rate from 0 to
100 percent, a term of 1 to 100 years) are enforced here.
"""

from dataclasses import asdict
from typing import Dict, Optional, Union

from fastapi import APIRouter, Depends, Query
from pydantic import Field

from up_real_estate.api.responses import ErrorResponse
from up_real_estate.calculations.strategies import (
    FinancingParameters,
    StrategyResult,
    compute_all_strategies,
    compute_strategy,
)
from up_real_estate.config import Settings, get_settings
from up_real_estate.db.catalog import PropertyCatalog, get_catalog
from up_real_estate.db.models import CamelModel, Property
from up_real_estate.services import properties as property_service

router = APIRouter()


class RentalResultsResponse(CamelModel):
    """Rental strategy figures."""

    monthly_income: int
    monthly_cash_flow: int
    annual_cash_flow: int
    total_roi: float = Field(alias="totalROI")


class FlipResultsResponse(CamelModel):
    """Fix-and-flip figures."""

    total_investment: int
    net_profit: int
    annualized_roi: float = Field(alias="annualizedROI")


class FlipCostBreakdownResponse(CamelModel):
    """Cost components behind a flip."""

    renovation_budget: int
    after_repair_value: int
    closing_costs_buy: int
    closing_costs_sell: int
    holding_costs: int


class StrategyData(CamelModel):
    """One strategy's projection."""

    strategy: str
    property: Optional[Property] = None
    results: Union[RentalResultsResponse, FlipResultsResponse]
    cost_breakdown: Optional[FlipCostBreakdownResponse] = None

    @classmethod
    def from_result(cls, result: StrategyResult) -> "StrategyData":
        return cls(
            strategy=result.strategy,
            property=result.property,
            results=asdict(result.results),
            cost_breakdown=(
                asdict(result.cost_breakdown) if result.cost_breakdown else None
            ),
        )


class StrategyResponse(CamelModel):
    """Response for a single-strategy calculation."""

    success: bool = True
    data: StrategyData


class AllStrategiesData(CamelModel):
    """Every strategy's projection for one property."""

    property: Property
    strategies: Dict[str, StrategyData]


class AllStrategiesResponse(CamelModel):
    """Response for a side-by-side strategy comparison."""

    success: bool = True
    data: AllStrategiesData


def financing_params(
    down_payment: Optional[float] = Query(None, alias="downPayment", ge=0),
    interest_rate: Optional[float] = Query(None, alias="interestRate", ge=0, le=100),
    loan_term: Optional[int] = Query(None, alias="loanTerm", gt=0, le=100),
    settings: Settings = Depends(get_settings),
) -> FinancingParameters:
    """Dependency that reads financing terms from the query string."""
    return FinancingParameters(
        down_payment=(
            settings.default_down_payment if down_payment is None else down_payment
        ),
        interest_rate=(
            settings.default_interest_rate if interest_rate is None else interest_rate
        ),
        loan_term=settings.default_loan_term if loan_term is None else loan_term,
    )


@router.get(
    "/{property_id}/all",
    response_model=AllStrategiesResponse,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
async def calculate_all(
    property_id: str,
    financing: FinancingParameters = Depends(financing_params),
    catalog: PropertyCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Calculate all three strategies for a property."""
    prop = property_service.get_property(catalog, property_id)
    results = compute_all_strategies(prop, financing, settings.assumptions)

    return AllStrategiesResponse(
        data=AllStrategiesData(
            property=prop,
            strategies={
                name: StrategyData.from_result(result)
                for name, result in results.items()
            },
        )
    )


@router.get(
    "/{property_id}",
    response_model=StrategyResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def calculate(
    property_id: str,
    strategy: str = Query(..., description="airbnb, lease or flip"),
    # Sent by the frontend for flips; the flip uses configured assumptions.
    renovation_budget: Optional[float] = Query(None, alias="renovationBudget"),
    after_repair_value: Optional[float] = Query(None, alias="afterRepairValue"),
    holding_period: Optional[int] = Query(None, alias="holdingPeriod"),
    financing: FinancingParameters = Depends(financing_params),
    catalog: PropertyCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Calculate one investment strategy for a property."""
    prop = property_service.get_property(catalog, property_id)
    result = compute_strategy(prop, strategy, financing, settings.assumptions)

    return StrategyResponse(data=StrategyData.from_result(result))
