"""Scoring entry points.

``calculate_score`` is the only function that assembles a full
``ScoreResult``; the other two entry points rewrite their input into range
tokens and delegate to it.
"""
from __future__ import annotations

import logging

from homeready import ranges
from homeready.blockers import detect_primary_blocker
from homeready.calculators import current_dti, estimate_monthly_payment
from homeready.config import resolve_assumptions
from homeready.gaps import generate_recommendations, identify_gaps
from homeready.models import ParsedValues, ScoreInput, ScoreResult, ScoreValuesInput
from homeready.planner import calculate_path_to_goal, calculate_sweet_spot
from homeready.programs import check_assistance_eligibility, eligible_program_names, match_programs
from homeready.scoring import (
    color_for_status,
    resolve_profile,
    score_breakdown,
    status_for_score,
    timeline_for_score,
    total_score,
)

logger = logging.getLogger(__name__)


def calculate_score(score_input: ScoreInput, assumptions=None) -> ScoreResult:
    """Score one applicant and plan their path forward."""

    a = resolve_assumptions(assumptions)
    profile = resolve_profile(score_input)
    logger.debug("resolved profile: %s", profile)

    breakdown = score_breakdown(profile, a)
    total = total_score(breakdown)
    status = status_for_score(total)

    details = match_programs(profile)
    gaps = identify_gaps(profile, breakdown)
    housing_payment = estimate_monthly_payment(profile.target_price, assumptions=a)

    sweet_spot = calculate_sweet_spot(score_input, profile, total, a)

    return ScoreResult(
        total=total,
        status=status,
        timeline=timeline_for_score(total),
        color=color_for_status(status),
        breakdown=breakdown,
        programs=eligible_program_names(details),
        program_details=details,
        gaps=gaps,
        recommendations=generate_recommendations(gaps),
        primary_blocker=detect_primary_blocker(profile, breakdown, a),
        sweet_spot=sweet_spot,
        path_to_goal=calculate_path_to_goal(profile, sweet_spot, total, a),
        parsed_values=ParsedValues(
            credit_score=profile.credit_score,
            monthly_income=profile.monthly_income,
            annual_income=profile.annual_income,
            monthly_debts=profile.monthly_debts,
            target_price=profile.target_price,
            saved_amount=profile.saved,
            current_dti=current_dti(profile.monthly_income, profile.monthly_debts, housing_payment),
        ),
        assistance=check_assistance_eligibility(profile),
    )


def calculate_score_at_price(score_input: ScoreInput, override_price, assumptions=None) -> ScoreResult:
    """Re-score with the price band containing ``override_price``."""
    return calculate_score(
        score_input.model_copy(update={"price_range": ranges.price_range(override_price)}), assumptions
    )


def calculate_score_from_values(values: ScoreValuesInput, assumptions=None) -> ScoreResult:
    """Score exact numbers, merging an optional co-borrower.

    Lenders use the lower of two known credit scores; incomes and debts add
    up. The merged values are bucketed into range tokens first, so results
    move in the same steps as the range quiz.
    """

    credit = values.credit_score
    if values.co_borrower_credit_score is not None:
        if credit is None:
            credit = values.co_borrower_credit_score
        else:
            credit = min(credit, values.co_borrower_credit_score)

    income = values.annual_income
    if values.co_borrower_annual_income:
        income += values.co_borrower_annual_income

    debts = values.monthly_debts
    if values.co_borrower_monthly_debts:
        debts += values.co_borrower_monthly_debts

    score_input = ScoreInput(
        credit_score_range=ranges.credit_score_range(credit),
        annual_income=ranges.income_range(income),
        down_payment=ranges.down_payment_range(values.saved_for_down_payment),
        price_range=ranges.price_range(values.target_home_price),
        monthly_debts=ranges.monthly_debt_range(debts),
        first_time_buyer=values.first_time_buyer,
        veteran_status=values.veteran_status,
    )
    logger.debug("values bucketed to %s", score_input)
    return calculate_score(score_input, assumptions)
