"""
Loan Amortization Calculations

Fixed-rate mortgage payment, matching Excel's PMT() function.
"""

import math


def calculate_payment(
    principal: float, annual_rate: float, amortization_months: int
) -> float:
    """
    Calculate monthly loan payment.

    Matches Excel's PMT() function. A negative principal (down payment larger
    than the price) yields a negative payment rather than being clamped.

    When the growth factor (1 + r)^n is too large to represent, the payment
    is its limit as n grows: interest only, principal * r.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal (e.g., 0.065 for 6.5%)
        amortization_months: Total amortization period in months

    Returns:
        Monthly payment amount
    """
    if amortization_months <= 0:
        return 0.0

    monthly_rate = annual_rate / 12

    if monthly_rate == 0:
        return principal / amortization_months

    try:
        growth = (1 + monthly_rate) ** amortization_months
    except OverflowError:
        return principal * monthly_rate

    # Rate too small to move 1 + r off 1.0
    if growth == 1:
        return principal / amortization_months

    payment = principal * monthly_rate * growth / (growth - 1)

    if not math.isfinite(payment):
        return principal * monthly_rate

    return payment


def calculate_payment_from_percent(
    principal: float, interest_rate_percent: float, loan_term_years: int
) -> float:
    """Monthly payment for a rate quoted in percent and a term in years."""
    return calculate_payment(
        principal, interest_rate_percent / 100, loan_term_years * 12
    )
