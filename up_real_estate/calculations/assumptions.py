"""
Investment Assumptions

Business constants used by the strategy calculator. Defaults reproduce the
demo's underwriting rules; deployments may override individual values via
settings (see up_real_estate.config).
"""

from pydantic import BaseModel, ConfigDict, Field


class InvestmentAssumptions(BaseModel):
    """Fixed underwriting assumptions shared by every calculation."""

    model_config = ConfigDict(frozen=True)

    # Carrying costs (annual, as a fraction of price)
    tax_insurance_rate: float = Field(default=0.012, ge=0)
    maintenance_vacancy_rate: float = Field(default=0.01, ge=0)

    # Rent estimate used when a listing has no estimated rent
    rent_to_price_ratio: float = Field(default=0.007, gt=0)

    # Rental strategies
    airbnb_premium: float = Field(default=1.45, gt=0)
    lease_multiplier: float = Field(default=1.00, gt=0)
    airbnb_monthly_overhead: float = Field(default=150.0, ge=0)
    lease_monthly_overhead: float = Field(default=50.0, ge=0)

    # Closing costs (fraction of price / after-repair value)
    closing_cost_buy_rate: float = Field(default=0.03, ge=0)
    closing_cost_sell_rate: float = Field(default=0.06, ge=0)

    # Fix-and-flip
    renovation_budget: float = Field(default=50000.0, ge=0)
    holding_period_months: int = Field(default=6, gt=0)
    after_repair_multiplier: float = Field(default=1.10, gt=0)


DEFAULT_ASSUMPTIONS = InvestmentAssumptions()
