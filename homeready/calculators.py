from __future__ import annotations

import logging

from homeready.config import resolve_assumptions
from homeready.models import AffordabilityResult, PriceBudget, TargetBudget
from homeready.presets import COMFORTABLE_DTI, LENDER_DTI, PRICE_CEILING, PRICE_FLOOR, PRICE_STEP
from homeready.ranges import income_amount, monthly_debt_amount, price_amount
from homeready.utils import nz, round_half_up, round_to_step

logger = logging.getLogger(__name__)

# Reported DTI when there is no income to divide by.
NO_INCOME_DTI_PCT = 999


def monthly_payment(principal, annual_rate_pct, term_years):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``6.0`` for 6%), and ``term_years`` is
    the amortization period in years.
    """

    L = nz(principal)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_years) * 12)
    if n <= 0:
        return 0.0
    if abs(r) < 1e-9:
        return L / n
    return (r * L) / (1 - (1 + r) ** (-n))


def estimate_monthly_payment(price, down_payment_pct=None, assumptions=None):
    """Estimated total housing payment (PITI plus mortgage insurance) for ``price``.

    This is the single source of truth for what a price costs per month;
    scoring, blockers and the planner all go through it.
    """

    a = resolve_assumptions(assumptions)
    if down_payment_pct is None:
        down_payment_pct = a.min_down_payment_pct
    price = nz(price)
    loan = price * (1 - nz(down_payment_pct))
    pi = monthly_payment(loan, a.annual_rate_pct, a.term_years)
    taxes = price * a.property_tax_rate_pct / 100 / 12
    mi = loan * a.mortgage_insurance_pct / 100 / 12
    return pi + taxes + a.insurance_monthly + mi


def dti_pct(monthly_income, monthly_debts, housing_payment):
    """Unrounded back-end DTI in percent; ``NO_INCOME_DTI_PCT`` without income."""
    inc = nz(monthly_income)
    if inc <= 0:
        return float(NO_INCOME_DTI_PCT)
    return (nz(housing_payment) + nz(monthly_debts)) / inc * 100


def current_dti(monthly_income, monthly_debts, housing_payment) -> int:
    """Back-end DTI rounded to a whole percent."""
    return round_half_up(dti_pct(monthly_income, monthly_debts, housing_payment))


def debt_reduction_for_dti(monthly_income, monthly_debts, housing_payment, target_dti_pct) -> int:
    """Monthly debt that must be paid off to bring DTI down to ``target_dti_pct``."""
    max_obligations = nz(monthly_income) * nz(target_dti_pct) / 100
    reduction = nz(housing_payment) + nz(monthly_debts) - max_obligations
    return max(0, round_half_up(reduction))


def income_increase_for_dti(monthly_income, monthly_debts, housing_payment, target_dti_pct) -> int:
    """Extra monthly income needed for the same obligations to sit at ``target_dti_pct``."""
    target = nz(target_dti_pct)
    if target <= 0:
        return 0
    required = (nz(housing_payment) + nz(monthly_debts)) / (target / 100)
    return max(0, round_half_up(required - nz(monthly_income)))


def max_price_for_dti(
    monthly_income,
    monthly_debts,
    target_dti_pct,
    down_payment_pct=None,
    assumptions=None,
    iterations: int = 20,
) -> int:
    """Solve for the highest price whose payment keeps DTI at ``target_dti_pct``.

    Returns ``0`` when existing debts alone already exceed the ceiling.
    Otherwise the payment model is bisected over the clamped price bound and
    the result is rounded to the nearest $5,000, so the answer is always a
    multiple of 5,000 between ``PRICE_FLOOR`` and ``PRICE_CEILING``.
    """

    max_housing = nz(monthly_income) * nz(target_dti_pct) / 100 - nz(monthly_debts)
    if max_housing <= 0:
        return 0

    def pay(p):
        return estimate_monthly_payment(p, down_payment_pct, assumptions)

    low, high = float(PRICE_FLOOR), float(PRICE_CEILING)
    if pay(low) >= max_housing:
        price = low
    elif pay(high) <= max_housing:
        price = high
    else:
        for _ in range(iterations):
            mid = (low + high) / 2
            if pay(mid) > max_housing:
                high = mid
            else:
                low = mid
        price = low
    result = round_to_step(price, PRICE_STEP)
    logger.debug(
        "max price at %s%% DTI: housing budget %.2f -> %d", target_dti_pct, max_housing, result
    )
    return result


def calculate_affordability(annual_income_range, monthly_debts_range, target_price_range, assumptions=None):
    """Comfortable (36%) and stretch (43%) budgets plus the cost of the target price."""

    a = resolve_assumptions(assumptions)
    monthly_income = income_amount(annual_income_range) / 12
    monthly_debts = monthly_debt_amount(monthly_debts_range)
    target_price = price_amount(target_price_range)

    def budget(ceiling):
        price = max_price_for_dti(monthly_income, monthly_debts, ceiling, assumptions=a)
        payment = estimate_monthly_payment(price, assumptions=a)
        return PriceBudget(max_price=price, max_payment=round_half_up(payment), dti=ceiling)

    target_payment = estimate_monthly_payment(target_price, assumptions=a)
    return AffordabilityResult(
        comfortable=budget(COMFORTABLE_DTI),
        stretch=budget(LENDER_DTI),
        at_target_price=TargetBudget(
            payment=round_half_up(target_payment),
            dti=current_dti(monthly_income, monthly_debts, target_payment),
        ),
        monthly_income=round_half_up(monthly_income),
        monthly_debts=monthly_debts,
        current_rate=a.annual_rate_pct,
    )
