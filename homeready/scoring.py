"""Point-allocation scorer.

Five independent sub-scores (credit 30, DTI 25, down payment 20, employment
15, reserves 10) plus bonus modifiers, clamped to 0-100.  Status, timeline
and color are step functions of the total alone.
"""
from __future__ import annotations

import logging
from typing import Optional

from homeready import ranges
from homeready.calculators import dti_pct, estimate_monthly_payment
from homeready.config import resolve_assumptions
from homeready.models import Profile, ScoreBreakdown, ScoreInput, ScoreSummary
from homeready.presets import (
    CREDIT_POINTS,
    CREDIT_UNKNOWN_POINTS,
    DOWN_PAYMENT_FLOOR_POINTS,
    DOWN_PAYMENT_POINTS,
    DTI_POINTS,
    EMPLOYMENT_POINTS,
    FIRST_TIME_BUYER_BONUS,
    RESERVE_POINTS,
    STATUS_TABLE,
    VA_DOWN_PAYMENT_POINTS,
    VA_ELIGIBLE_STATUSES,
    VETERAN_BONUS,
)

logger = logging.getLogger(__name__)


def is_va_eligible(veteran_status: Optional[str]) -> bool:
    return bool(veteran_status) and veteran_status in VA_ELIGIBLE_STATUSES


def resolve_profile(score_input: ScoreInput) -> Profile:
    """Turn range tokens into the numbers the model reasons with."""
    return Profile(
        credit_score=ranges.credit_score(score_input.credit_score_range),
        annual_income=ranges.income_amount(score_input.annual_income),
        target_price=ranges.price_amount(score_input.price_range),
        saved=ranges.down_payment_amount(score_input.down_payment),
        monthly_debts=ranges.monthly_debt_amount(score_input.monthly_debts),
        first_time_buyer=score_input.first_time_buyer,
        veteran_status=score_input.veteran_status,
        employment_years=score_input.employment_years,
    )


def credit_points(credit_score: Optional[int]) -> int:
    if credit_score is None:
        return CREDIT_UNKNOWN_POINTS
    for threshold, points in CREDIT_POINTS:
        if credit_score >= threshold:
            return points
    return 0


def dti_points(monthly_income, target_price, monthly_debts, assumptions=None) -> int:
    payment = estimate_monthly_payment(target_price, assumptions=assumptions)
    dti = dti_pct(monthly_income, monthly_debts, payment)
    for ceiling, points in DTI_POINTS:
        if dti < ceiling:
            return points
    return 0


def down_payment_points(saved, target_price, veteran_status=None) -> int:
    # VA loans need nothing down.
    if is_va_eligible(veteran_status):
        return VA_DOWN_PAYMENT_POINTS
    pct = saved / target_price * 100 if target_price > 0 else 0.0
    for threshold, points in DOWN_PAYMENT_POINTS:
        if pct >= threshold:
            return points
    return DOWN_PAYMENT_FLOOR_POINTS


def employment_points(employment_years: Optional[str] = None) -> int:
    """Stable 2+ years is assumed; ``employment_years`` is not scored yet."""
    return EMPLOYMENT_POINTS


def reserves_points(saved, target_price, assumptions=None) -> int:
    """Months of housing payment left after a minimum down payment."""
    a = resolve_assumptions(assumptions)
    reserves = max(0.0, saved - target_price * a.min_down_payment_pct)
    payment = estimate_monthly_payment(target_price, assumptions=a)
    months = reserves / payment if payment > 0 else 0.0
    for threshold, points in RESERVE_POINTS:
        if months >= threshold:
            return points
    return 0


def bonus_points(first_time_buyer: Optional[bool], veteran_status: Optional[str]) -> int:
    bonus = 0
    if is_va_eligible(veteran_status):
        bonus += VETERAN_BONUS
    if first_time_buyer is True:
        bonus += FIRST_TIME_BUYER_BONUS
    return bonus


def penalty_points(profile: Profile) -> int:
    """Reserved for intake data the simplified flow does not collect."""
    return 0


def score_breakdown(profile: Profile, assumptions=None) -> ScoreBreakdown:
    a = resolve_assumptions(assumptions)
    return ScoreBreakdown(
        credit=credit_points(profile.credit_score),
        dti=dti_points(profile.monthly_income, profile.target_price, profile.monthly_debts, a),
        down_payment=down_payment_points(profile.saved, profile.target_price, profile.veteran_status),
        employment=employment_points(profile.employment_years),
        reserves=reserves_points(profile.saved, profile.target_price, a),
        bonus=bonus_points(profile.first_time_buyer, profile.veteran_status),
        penalty=penalty_points(profile),
    )


def total_score(breakdown: ScoreBreakdown) -> int:
    base = breakdown.credit + breakdown.dti + breakdown.down_payment + breakdown.employment + breakdown.reserves
    return max(0, min(100, base + breakdown.bonus - breakdown.penalty))


def _status_row(score: int):
    for minimum, status, timeline, color in STATUS_TABLE:
        if score >= minimum:
            return status, timeline, color
    return STATUS_TABLE[-1][1:]


def status_for_score(score: int) -> str:
    return _status_row(score)[0]


def timeline_for_score(score: int) -> str:
    return _status_row(score)[1]


def color_for_status(status: str) -> str:
    for _, name, _, color in STATUS_TABLE:
        if name == status:
            return color
    return "blue"


def score_summary(score_input: ScoreInput, assumptions=None) -> ScoreSummary:
    """Total, status and timeline only.

    Used to re-score at an alternate price; it never computes a sweet spot or
    path to goal, so re-scoring cannot recurse.
    """

    total = total_score(score_breakdown(resolve_profile(score_input), assumptions))
    return ScoreSummary(total=total, status=status_for_score(total), timeline=timeline_for_score(total))
