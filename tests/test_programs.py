from homeready.models import Profile
from homeready.programs import (
    assistance_shortfalls,
    check_assistance_eligibility,
    effective_credit_score,
    eligible_program_names,
    match_programs,
)


def _profile(**kw):
    base = dict(credit_score=700, annual_income=125000, target_price=450000, saved=30000, monthly_debts=0)
    base.update(kw)
    return Profile(**base)


def test_catalog_order_and_names():
    details = match_programs(_profile())
    assert [d.name for d in details] == [
        "VA Loan",
        "FHA Loan",
        "Conventional Loan",
        "Utah FirstHome",
        "Utah HomeAgain",
    ]


def test_first_time_buyer_under_limit_gets_everything_but_va():
    details = match_programs(_profile(first_time_buyer=True))
    assert eligible_program_names(details) == ["FHA Loan", "Conventional Loan", "Utah FirstHome", "Utah HomeAgain"]
    first_home = details[3]
    assert first_home.benefit == "Up to $27k (6%) down payment assistance"


def test_income_over_limit_blocks_assistance():
    details = match_programs(_profile(annual_income=165000, first_time_buyer=True))
    by_name = {d.name: d for d in details}
    assert not by_name["Utah FirstHome"].eligible
    assert by_name["Utah FirstHome"].reason == "Income over $141,400 limit"
    assert not by_name["Utah HomeAgain"].eligible


def test_income_at_limit_still_qualifies():
    assert check_assistance_eligibility(_profile(annual_income=141400)).home_again.eligible


def test_unknown_credit_is_evaluated_as_650():
    p = _profile(credit_score=None, first_time_buyer=True)
    assert effective_credit_score(p) == 650
    details = {d.name: d for d in match_programs(p)}
    assert details["FHA Loan"].eligible
    assert details["Conventional Loan"].eligible
    assert not details["Utah FirstHome"].eligible
    assert "~650" in details["Utah FirstHome"].reason


def test_low_credit():
    details = {d.name: d for d in match_programs(_profile(credit_score=550))}
    assert not details["FHA Loan"].eligible
    assert not details["Conventional Loan"].eligible
    assert details["FHA Loan"].reason == "Need 580+ credit (yours is ~550)"


def test_veteran_always_va_eligible():
    for status in ("active", "veteran", "guard-reserve", "spouse"):
        p = _profile(credit_score=550, veteran_status=status)
        assert match_programs(p)[0].eligible
        a = check_assistance_eligibility(p)
        assert a.va.eligible
        assert a.best_program == "VA Loan (0% down, no PMI)"
    assert not match_programs(_profile(veteran_status="none"))[0].eligible


def test_fha_down_payment_tiers():
    assert check_assistance_eligibility(_profile(credit_score=600)).fha.down_payment_pct == 3.5
    low = check_assistance_eligibility(_profile(credit_score=550)).fha
    assert low.eligible
    assert low.down_payment_pct == 10
    assert low.benefit == "10% down ($45k)"
    assert not check_assistance_eligibility(_profile(credit_score=480)).fha.eligible


def test_best_program_and_total_assistance():
    a = check_assistance_eligibility(_profile(first_time_buyer=True))
    assert a.best_program.startswith("Utah FirstHome")
    assert a.total_potential_assistance == 27000
    a = check_assistance_eligibility(_profile(annual_income=200000))
    assert a.best_program == "FHA (3.5% down)"
    assert a.total_potential_assistance == 0
    assert a.any_eligible


def test_assistance_shortfalls_lists_every_reason():
    assert assistance_shortfalls(_profile()) == []
    assert assistance_shortfalls(_profile(annual_income=165000)) == ["income"]
    assert assistance_shortfalls(_profile(credit_score=None)) == ["credit"]
    assert assistance_shortfalls(_profile(annual_income=165000, credit_score=640)) == ["income", "credit"]
