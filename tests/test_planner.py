import itertools
import logging

from homeready.models import ScoreInput
from homeready.planner import calculate_path_to_goal, calculate_sweet_spot
from homeready.presets import INCOME_RANGES, MONTHLY_DEBT_RANGES, PRICE_RANGES
from homeready.scoring import resolve_profile, score_breakdown, total_score


def _plan(score_input):
    profile = resolve_profile(score_input)
    current = total_score(score_breakdown(profile))
    spot = calculate_sweet_spot(score_input, profile, current)
    return profile, current, spot, calculate_path_to_goal(profile, spot, current)


STRETCHED = ScoreInput(
    annual_income="100k-150k",
    price_range="500k-600k",
    down_payment="50k-75k",
    monthly_debts="500-1000",
)


def test_target_that_fits_is_kept():
    _, _, spot, path = _plan(ScoreInput(annual_income="100k-150k", monthly_debts="none", price_range="under-400k"))
    assert spot.recommended_price == 350000
    assert spot.why_this_works.startswith("Your target price fits comfortably")
    assert spot.compared_to_target.price_difference == 0
    assert path is None


def test_target_between_comfortable_and_stretch_gets_comfortable_price():
    _, _, spot, path = _plan(ScoreInput(annual_income="100k-150k", monthly_debts="none", price_range="500k-600k"))
    assert spot.recommended_price == 490000
    assert spot.why_this_works.startswith("This price gives you financial breathing room")
    # 60k away, but the target itself needs no changes
    assert path is None


def test_target_over_stretch_gets_stretch_price():
    _, current, spot, path = _plan(STRETCHED)
    assert current == 61
    assert spot.recommended_price == 490000
    assert spot.why_this_works.startswith("This is the maximum lenders will typically approve")
    # re-scored in the 400k-500k band
    assert spot.score_at_price == 69
    assert spot.status_at_price == "GETTING_CLOSE"
    assert spot.monthly_payment == 3740
    assert spot.down_payment_needed == 17150
    assert spot.dti_at_price == 43
    assert spot.compared_to_target.price_difference == 60000
    assert spot.compared_to_target.score_difference == 8
    assert spot.compared_to_target.payment_difference == 446

    assert path is not None
    assert path.target_price == 550000
    assert path.current_score == 61
    assert [(c.type, c.amount) for c in path.required_changes] == [
        ("debt_reduction", 457),
        ("income_increase", 1062),
    ]
    assert path.estimated_timeline == "3-6 months"
    assert path.encouragement == "Your $550k goal is achievable! Here's what it takes:"


def test_path_includes_savings_gap():
    _, _, spot, path = _plan(
        ScoreInput(annual_income="100k-150k", price_range="700k-800k", down_payment="under-10k", monthly_debts="none")
    )
    assert spot.recommended_price == 590000
    types = [c.type for c in path.required_changes]
    # no debts to pay down, so only income and savings can close the gap
    assert types == ["income_increase", "savings_increase"]
    savings = next(c for c in path.required_changes if c.type == "savings_increase")
    assert savings.amount == 21250
    # 21,250 at 500/mo is 43 months
    assert path.estimated_timeline == "12+ months"


def test_sweet_spot_never_exceeds_target():
    for income, price, debts in itertools.product(INCOME_RANGES, PRICE_RANGES, list(MONTHLY_DEBT_RANGES)[::2]):
        si = ScoreInput(annual_income=income, price_range=price, monthly_debts=debts)
        profile, _, spot, path = _plan(si)
        assert spot.recommended_price <= profile.target_price
        assert spot.recommended_price % 5000 == 0
        gap = profile.target_price - spot.recommended_price
        if abs(gap) < 10000 or gap < 0:
            assert path is None


def test_sweet_spot_logs_decision(caplog):
    with caplog.at_level(logging.DEBUG, logger="homeready.planner"):
        _plan(STRETCHED)
    assert any("sweet spot" in r.getMessage() for r in caplog.records)
