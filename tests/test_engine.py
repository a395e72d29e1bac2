import pytest
from pydantic import ValidationError

import homeready
from homeready import calculate_score, calculate_score_at_price, calculate_score_from_values
from homeready.models import ScoreInput, ScoreValuesInput

EXAMPLE = ScoreInput(
    annual_income="100k-150k",
    price_range="500k-600k",
    down_payment="50k-75k",
    monthly_debts="500-1000",
    first_time_buyer=False,
)


def test_example_result():
    r = calculate_score(EXAMPLE)
    assert r.total == 61
    assert r.status == "GETTING_CLOSE"
    assert r.timeline == "3-6 months"
    assert r.color == "yellow"
    assert r.breakdown.dti == 10
    assert r.programs == ["FHA Loan", "Conventional Loan"]
    assert len(r.program_details) == 5
    assert [g.factor for g in r.gaps] == ["credit", "dti"]
    assert len(r.recommendations) == 2
    assert r.primary_blocker.type == "DTI"
    assert r.sweet_spot.recommended_price == 490000
    assert r.path_to_goal is not None
    pv = r.parsed_values
    assert pv.credit_score is None
    assert pv.annual_income == 125000
    assert pv.target_price == 550000
    assert pv.saved_amount == 62500
    assert pv.monthly_debts == 750
    assert pv.current_dti == 47
    assert r.assistance.fha.eligible


def test_total_matches_breakdown():
    for saved in ("under-10k", "50k-75k", "260k-plus"):
        for veteran in (None, "active"):
            r = calculate_score(EXAMPLE.model_copy(update={"down_payment": saved, "veteran_status": veteran}))
            b = r.breakdown
            raw = b.credit + b.dti + b.down_payment + b.employment + b.reserves + b.bonus - b.penalty
            assert r.total == max(0, min(100, raw))
            assert 0 <= r.total <= 100


def test_empty_input_uses_defaults():
    r = calculate_score(ScoreInput())
    assert r.parsed_values.annual_income == 60000
    assert r.parsed_values.target_price == 500000
    assert r.parsed_values.saved_amount == 20000
    assert r.parsed_values.monthly_debts == 0


def test_deterministic():
    assert calculate_score(EXAMPLE).model_dump() == calculate_score(EXAMPLE).model_dump()


def test_camel_case_serialization():
    data = calculate_score(EXAMPLE).model_dump(by_alias=True)
    assert {"primaryBlocker", "sweetSpot", "pathToGoal", "parsedValues", "programDetails"} <= set(data)
    assert "downPayment" in data["breakdown"]
    assert data["primaryBlocker"]["type"] == "DTI"
    assert data["primaryBlocker"]["currentDti"] == 47
    assert data["sweetSpot"]["comparedToTarget"]["scoreDifference"] == 8
    assert data["pathToGoal"]["requiredChanges"][0]["type"] == "debt_reduction"


def test_result_round_trips_through_json():
    r = calculate_score(EXAMPLE)
    again = homeready.ScoreResult.model_validate_json(r.model_dump_json(by_alias=True))
    assert again == r


def test_ignored_intake_fields_do_not_change_the_score():
    extended = EXAMPLE.model_copy(
        update={"employment_years": "under-1", "utah_resident": True, "utah_residency_years": "5-plus", "rural_interest": True}
    )
    assert calculate_score(extended).total == calculate_score(EXAMPLE).total


def test_score_at_price_uses_price_band():
    r = calculate_score_at_price(EXAMPLE, 480000)
    assert r.parsed_values.target_price == 450000
    assert r.total == 69


def test_score_from_values_buckets_and_merges_co_borrower():
    values = ScoreValuesInput(
        credit_score=720,
        annual_income=90000,
        monthly_debts=300,
        target_home_price=520000,
        saved_for_down_payment=60000,
        co_borrower_credit_score=650,
        co_borrower_annual_income=50000,
        co_borrower_monthly_debts=200,
    )
    r = calculate_score_from_values(values)
    pv = r.parsed_values
    # the lower score is used, then bucketed to 620-659
    assert pv.credit_score == 640
    assert pv.annual_income == 125000
    assert pv.monthly_debts == 750
    assert pv.target_price == 550000
    assert pv.saved_amount == 62500


def test_score_from_values_co_borrower_credit_alone():
    r = calculate_score_from_values(ScoreValuesInput(annual_income=90000, co_borrower_credit_score=700))
    assert r.parsed_values.credit_score == 720


def test_score_from_values_without_credit_is_unknown():
    r = calculate_score_from_values(ScoreValuesInput(annual_income=90000, target_home_price=450000))
    assert r.parsed_values.credit_score is None
    assert r.breakdown.credit == 15


def test_score_from_values_zero_income_lands_in_lowest_band():
    r = calculate_score_from_values(ScoreValuesInput(annual_income=0, target_home_price=450000))
    assert r.parsed_values.annual_income == 35000


def test_score_from_values_rejects_negative_money():
    with pytest.raises(ValidationError):
        ScoreValuesInput(annual_income=-1)
    with pytest.raises(ValidationError):
        ScoreValuesInput(co_borrower_monthly_debts=-5)


def test_score_values_accepts_camel_case():
    values = ScoreValuesInput.model_validate({"annualIncome": 90000, "targetHomePrice": 450000, "firstTimeBuyer": True})
    assert values.annual_income == 90000
    assert values.first_time_buyer is True


def test_version_exposed():
    assert isinstance(homeready.__version__, str)
