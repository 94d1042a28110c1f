"""
Print the three investment strategies for every demo listing.

Uses the default financing from settings (the frontend's defaults).
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from up_real_estate.calculations.strategies import (
    FinancingParameters,
    compute_all_strategies,
)
from up_real_estate.config import get_settings
from up_real_estate.db.catalog import build_demo_catalog


def main():
    settings = get_settings()
    financing = FinancingParameters(
        down_payment=settings.default_down_payment,
        interest_rate=settings.default_interest_rate,
        loan_term=settings.default_loan_term,
    )
    print(
        f"Financing: ${financing.down_payment:,.0f} down, "
        f"{financing.interest_rate}% for {financing.loan_term} years\n"
    )

    for prop in build_demo_catalog().all():
        results = compute_all_strategies(prop, financing, settings.assumptions)
        airbnb = results["airbnb"].results
        lease = results["lease"].results
        flip = results["flip"].results

        print(f"[{prop.id}] {prop.address} - ${prop.price:,.0f}")
        print(
            f"  Airbnb: ${airbnb.monthly_cash_flow:,}/mo cash flow, "
            f"{airbnb.total_roi}% ROI"
        )
        print(
            f"  Lease:  ${lease.monthly_cash_flow:,}/mo cash flow, "
            f"{lease.total_roi}% ROI"
        )
        print(
            f"  Flip:   ${flip.net_profit:,} net profit on "
            f"${flip.total_investment:,}, {flip.annualized_roi}% annualized"
        )
        print()


if __name__ == "__main__":
    main()
