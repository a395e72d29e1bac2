import pytest

from homeready.calculators import (
    NO_INCOME_DTI_PCT,
    calculate_affordability,
    current_dti,
    debt_reduction_for_dti,
    dti_pct,
    estimate_monthly_payment,
    income_increase_for_dti,
    max_price_for_dti,
    monthly_payment,
)
from homeready.config import Assumptions
from homeready.utils import format_currency, round_half_up, round_to_step


def test_monthly_payment_standard_amortization():
    # 6% / 30 years is the textbook $5.9955 per $1,000
    assert abs(monthly_payment(100000, 6.0, 30) - 599.55) < 0.01


def test_monthly_payment_zero_rate():
    assert monthly_payment(120000, 0, 10) == 1000


def test_estimate_monthly_payment_defaults():
    assert abs(estimate_monthly_payment(550000) - 4185.95) < 0.05
    assert abs(estimate_monthly_payment(350000) - 2700.15) < 0.05
    assert abs(estimate_monthly_payment(1200000) - 9014.80) < 0.05


def test_estimate_monthly_payment_components():
    a = Assumptions(annual_rate_pct=0, term_years=30, property_tax_rate_pct=0, insurance_monthly=0,
                    mortgage_insurance_pct=0)
    assert abs(estimate_monthly_payment(360000, down_payment_pct=0.0, assumptions=a) - 1000) < 1e-6


def test_higher_rate_means_higher_payment():
    assert estimate_monthly_payment(400000, assumptions=Assumptions(annual_rate_pct=7.0)) > estimate_monthly_payment(
        400000, assumptions=Assumptions(annual_rate_pct=6.0)
    )


def test_dti_helpers():
    assert dti_pct(10000, 500, 3500) == 40
    assert current_dti(10416.67, 750, 4185.95) == 47
    assert dti_pct(0, 500, 3500) == NO_INCOME_DTI_PCT
    assert debt_reduction_for_dti(10000, 500, 4000, 43) == 200
    assert debt_reduction_for_dti(10000, 0, 1000, 43) == 0
    assert income_increase_for_dti(10000, 500, 4000, 43) == 465
    assert income_increase_for_dti(20000, 0, 1000, 43) == 0


def test_max_price_infeasible_returns_zero():
    assert max_price_for_dti(5000, 3000, 43) == 0
    assert max_price_for_dti(0, 0, 43) == 0


def test_max_price_clamps_to_bounds():
    assert max_price_for_dti(800, 0, 43) == 100000
    assert max_price_for_dti(500000, 0, 43) == 2000000


def test_max_price_known_values():
    monthly = 125000 / 12
    assert max_price_for_dti(monthly, 750, 36) == 390000
    assert max_price_for_dti(monthly, 750, 43) == 490000
    assert max_price_for_dti(monthly, 0, 36) == 490000


@pytest.mark.parametrize("income", [4000, 5000, 6000, 8000, 10000, 12500, 15000])
@pytest.mark.parametrize("debts", [0, 500, 1500])
@pytest.mark.parametrize("ceiling", [36, 43])
def test_max_price_lands_near_requested_dti(income, debts, ceiling):
    price = max_price_for_dti(income, debts, ceiling)
    assert price % 5000 == 0
    if price in (0, 100000, 2000000):
        return
    achieved = dti_pct(income, debts, estimate_monthly_payment(price))
    assert abs(achieved - ceiling) <= 0.5


@pytest.mark.parametrize("income", [2000, 2250, 2500, 3000, 3500])
@pytest.mark.parametrize("debts", [0, 250])
@pytest.mark.parametrize("ceiling", [36, 43])
def test_max_price_low_income_error_within_half_a_step(income, debts, ceiling):
    # $5k rounding alone can move DTI by more than 0.5 points on a small income
    price = max_price_for_dti(income, debts, ceiling)
    assert price % 5000 == 0
    if estimate_monthly_payment(100000) + debts >= income * ceiling / 100:
        assert price == 100000
        return
    step_payment = estimate_monthly_payment(5000) - estimate_monthly_payment(0)
    bound = step_payment / 2 / income * 100
    achieved = dti_pct(income, debts, estimate_monthly_payment(price))
    assert abs(achieved - ceiling) <= bound + 0.01


def test_calculate_affordability():
    res = calculate_affordability("100k-150k", "500-1000", "500k-600k")
    assert res.comfortable.max_price == 390000
    assert res.comfortable.dti == 36
    assert res.stretch.max_price == 490000
    assert res.stretch.dti == 43
    assert res.at_target_price.payment == 4186
    assert res.at_target_price.dti == 47
    assert res.monthly_income == 10417
    assert res.monthly_debts == 750
    assert res.current_rate == 6.0


def test_calculate_affordability_uses_injected_rate():
    res = calculate_affordability("100k-150k", "none", None, assumptions=Assumptions(annual_rate_pct=7.5))
    assert res.current_rate == 7.5
    assert res.comfortable.max_price < 490000


def test_rounding_helpers():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_to_step(492500) == 495000
    assert round_to_step(492499) == 490000


def test_format_currency():
    assert format_currency(1200000) == "$1.2M"
    assert format_currency(45000) == "$45k"
    assert format_currency(22750) == "$23k"
    assert format_currency(500) == "$500"
