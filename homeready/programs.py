"""Loan and down payment assistance program matching."""
from __future__ import annotations

from typing import List

from homeready.models import AssistanceEligibility, FhaCheck, Profile, ProgramCheck, ProgramDetail
from homeready.presets import PROGRAM_LIMITS, UNKNOWN_CREDIT_ESTIMATE
from homeready.scoring import is_va_eligible
from homeready.utils import format_currency

FIRST_HOME = PROGRAM_LIMITS["first_home"]
HOME_AGAIN = PROGRAM_LIMITS["home_again"]
FHA = PROGRAM_LIMITS["fha"]
CONVENTIONAL = PROGRAM_LIMITS["conventional"]


def effective_credit_score(profile: Profile) -> int:
    """Credit score used for eligibility; unknown scores are assumed to be ~650."""
    return profile.credit_score if profile.credit_score is not None else UNKNOWN_CREDIT_ESTIMATE


def _assistance_benefit(profile: Profile, limits: dict) -> str:
    return f"Up to {format_currency(profile.target_price * limits['max_assistance_pct'])} (6%)"


def _first_home(profile: Profile) -> ProgramCheck:
    score = effective_credit_score(profile)
    if profile.first_time_buyer is not True:
        reason = "First-time buyer status required"
    elif score < FIRST_HOME["min_credit_score"]:
        reason = f"Requires 660+ credit (yours is ~{score})"
    elif profile.annual_income > FIRST_HOME["income_limit"]:
        reason = "Income over $141,400 limit"
    else:
        reason = "You qualify!"
    eligible = (
        profile.first_time_buyer is True
        and score >= FIRST_HOME["min_credit_score"]
        and profile.annual_income <= FIRST_HOME["income_limit"]
    )
    return ProgramCheck(eligible=eligible, reason=reason, benefit=_assistance_benefit(profile, FIRST_HOME))


def _home_again(profile: Profile) -> ProgramCheck:
    score = effective_credit_score(profile)
    if score < HOME_AGAIN["min_credit_score"]:
        reason = f"Requires 660+ credit (yours is ~{score})"
    elif profile.annual_income > HOME_AGAIN["income_limit"]:
        reason = "Income over $141,400 limit"
    else:
        reason = "You qualify!"
    eligible = score >= HOME_AGAIN["min_credit_score"] and profile.annual_income <= HOME_AGAIN["income_limit"]
    return ProgramCheck(eligible=eligible, reason=reason, benefit=_assistance_benefit(profile, HOME_AGAIN))


def _fha(profile: Profile) -> FhaCheck:
    score = effective_credit_score(profile)
    eligible = score >= FHA["min_credit_10_down"]
    down_pct = 3.5 if score >= FHA["min_credit_35_down"] else 10.0
    return FhaCheck(
        eligible=eligible,
        reason=f"{down_pct:g}% down payment" if eligible else f"Requires 500+ credit (yours is ~{score})",
        benefit=f"{down_pct:g}% down ({format_currency(profile.target_price * down_pct / 100)})",
        down_payment_pct=down_pct,
    )


def check_assistance_eligibility(profile: Profile) -> AssistanceEligibility:
    """Evaluate Utah down payment assistance plus FHA and VA for one profile."""

    first_home = _first_home(profile)
    home_again = _home_again(profile)
    fha = _fha(profile)
    veteran = is_va_eligible(profile.veteran_status)
    va = ProgramCheck(
        eligible=veteran,
        reason="Military service qualifies you" if veteran else "Requires military service",
        benefit="0% down payment, no PMI",
    )

    total = 0.0
    if first_home.eligible:
        total = profile.target_price * FIRST_HOME["max_assistance_pct"]
    elif home_again.eligible:
        total = profile.target_price * HOME_AGAIN["max_assistance_pct"]

    if veteran:
        best = "VA Loan (0% down, no PMI)"
    elif first_home.eligible:
        best = "Utah FirstHome (up to 6% down payment help)"
    elif home_again.eligible:
        best = "Utah HomeAgain (up to 6% down payment help)"
    elif fha.eligible:
        best = f"FHA ({fha.down_payment_pct:g}% down)"
    else:
        best = None

    return AssistanceEligibility(
        first_home=first_home,
        home_again=home_again,
        fha=fha,
        va=va,
        any_eligible=first_home.eligible or home_again.eligible or fha.eligible or veteran,
        best_program=best,
        total_potential_assistance=total,
    )


def assistance_shortfalls(profile: Profile) -> List[str]:
    """Every reason the Utah assistance programs are out of reach, in display order."""
    reasons = []
    if profile.annual_income > HOME_AGAIN["income_limit"]:
        reasons.append("income")
    if effective_credit_score(profile) < HOME_AGAIN["min_credit_score"]:
        reasons.append("credit")
    return reasons


def match_programs(profile: Profile) -> List[ProgramDetail]:
    """One row per catalog program, eligible or not, in catalog order."""

    score = effective_credit_score(profile)
    assistance = check_assistance_eligibility(profile)
    fha_ok = score >= FHA["min_credit_35_down"]
    conventional_ok = score >= CONVENTIONAL["min_credit_score"]
    first_home = assistance.first_home
    home_again = assistance.home_again

    return [
        ProgramDetail(
            name="VA Loan",
            eligible=assistance.va.eligible,
            reason="Military service" if assistance.va.eligible else assistance.va.reason,
            benefit="0% down payment, no PMI",
        ),
        ProgramDetail(
            name="FHA Loan",
            eligible=fha_ok,
            reason="Credit score qualifies" if fha_ok else f"Need 580+ credit (yours is ~{score})",
            benefit="3.5% down payment",
        ),
        ProgramDetail(
            name="Conventional Loan",
            eligible=conventional_ok,
            reason="Credit score qualifies" if conventional_ok else f"Need 620+ credit (yours is ~{score})",
            benefit="Competitive rates, 3-5% down",
        ),
        ProgramDetail(
            name="Utah FirstHome",
            eligible=first_home.eligible,
            reason="First-time buyer with qualifying credit and income" if first_home.eligible else first_home.reason,
            benefit=f"{first_home.benefit} down payment assistance",
        ),
        ProgramDetail(
            name="Utah HomeAgain",
            eligible=home_again.eligible,
            reason="Credit and income qualify" if home_again.eligible else home_again.reason,
            benefit=f"{home_again.benefit} down payment assistance",
        ),
    ]


def eligible_program_names(details: List[ProgramDetail]) -> List[str]:
    return [d.name for d in details if d.eligible]
