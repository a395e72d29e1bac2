import pytest
from pydantic import ValidationError

from homeready import calculate_score
from homeready.calculators import estimate_monthly_payment
from homeready.config import Assumptions, get_assumptions, resolve_assumptions
from homeready.models import ScoreInput


@pytest.fixture
def fresh_defaults():
    get_assumptions.cache_clear()
    yield
    get_assumptions.cache_clear()


def test_defaults(fresh_defaults, monkeypatch):
    monkeypatch.delenv("HOMEREADY_ANNUAL_RATE_PCT", raising=False)
    a = get_assumptions()
    assert a.annual_rate_pct == 6.0
    assert a.term_years == 30
    assert a.property_tax_rate_pct == 1.2
    assert a.insurance_monthly == 100
    assert a.mortgage_insurance_pct == 0.8
    assert a.min_down_payment_pct == 0.035


def test_environment_override(fresh_defaults, monkeypatch):
    monkeypatch.setenv("HOMEREADY_ANNUAL_RATE_PCT", "7.25")
    assert get_assumptions().annual_rate_pct == 7.25
    assert estimate_monthly_payment(500000) > estimate_monthly_payment(500000, assumptions=Assumptions(annual_rate_pct=6.0))


def test_explicit_assumptions_win():
    a = Assumptions(annual_rate_pct=8.0)
    assert resolve_assumptions(a) is a


def test_assumptions_are_frozen():
    a = Assumptions()
    with pytest.raises(ValidationError):
        a.annual_rate_pct = 5.0


def test_invalid_assumptions_rejected():
    with pytest.raises(ValidationError):
        Assumptions(annual_rate_pct=-1)
    with pytest.raises(ValidationError):
        Assumptions(min_down_payment_pct=1.5)


def test_rate_flows_through_the_score():
    si = ScoreInput(annual_income="100k-150k", price_range="500k-600k", monthly_debts="500-1000")
    cheap = calculate_score(si, Assumptions(annual_rate_pct=3.0))
    dear = calculate_score(si, Assumptions(annual_rate_pct=9.0))
    assert cheap.parsed_values.current_dti < dear.parsed_values.current_dti
    assert cheap.sweet_spot.recommended_price >= dear.sweet_spot.recommended_price
