"""Sweet spot and path-to-goal planning."""
from __future__ import annotations

import logging
import math
from typing import List, Optional

from homeready.calculators import (
    current_dti,
    debt_reduction_for_dti,
    estimate_monthly_payment,
    income_increase_for_dti,
    max_price_for_dti,
)
from homeready.config import resolve_assumptions
from homeready.models import (
    DebtReductionChange,
    IncomeIncreaseChange,
    PathToGoal,
    Profile,
    SavingsIncreaseChange,
    ScoreInput,
    SweetSpot,
    TargetComparison,
)
from homeready.presets import COMFORTABLE_DTI, LENDER_DTI, MONTHLY_SAVINGS_RATE, PATH_TO_GOAL_MIN_GAP, PRICE_STEP
from homeready.ranges import price_range
from homeready.scoring import score_summary
from homeready.utils import format_currency as fmt
from homeready.utils import format_pct, round_half_up, round_to_step

logger = logging.getLogger(__name__)

INCOME_CHANGE_MONTHS = 6
# Rough payoff pace: $1,000 of monthly debt retired per year.
DEBT_PAYOFF_PER_YEAR = 1000

TIMELINE_BUCKETS = [
    (3, "1-3 months"),
    (6, "3-6 months"),
    (12, "6-12 months"),
]


def calculate_sweet_spot(score_input: ScoreInput, profile: Profile, current_score: int, assumptions=None) -> SweetSpot:
    """Highest sustainable price at or below the target, re-scored at that price.

    The re-score uses ``score_summary`` and never plans again, so this runs
    the scorer exactly once more.
    """

    a = resolve_assumptions(assumptions)
    income = profile.monthly_income
    debts = profile.monthly_debts
    target = profile.target_price

    comfortable = max_price_for_dti(income, debts, COMFORTABLE_DTI, assumptions=a)
    stretch = max_price_for_dti(income, debts, LENDER_DTI, assumptions=a)

    if target <= comfortable:
        recommended = target
        why = "Your target price fits comfortably within your budget with room to spare."
    elif target <= stretch:
        recommended = comfortable
        why = "This price gives you financial breathing room while still getting a great home."
    else:
        recommended = stretch
        why = "This is the maximum lenders will typically approve. It keeps you within guidelines."

    recommended = min(round_to_step(recommended, PRICE_STEP), round_half_up(target))
    logger.debug(
        "sweet spot: target=%s comfortable=%s stretch=%s -> %s", target, comfortable, stretch, recommended
    )

    at_price = score_summary(score_input.model_copy(update={"price_range": price_range(recommended)}), a)
    payment = estimate_monthly_payment(recommended, assumptions=a)
    target_payment = estimate_monthly_payment(target, assumptions=a)

    return SweetSpot(
        recommended_price=recommended,
        score_at_price=at_price.total,
        status_at_price=at_price.status,
        timeline_at_price=at_price.timeline,
        monthly_payment=round_half_up(payment),
        down_payment_needed=round_half_up(recommended * a.min_down_payment_pct),
        dti_at_price=current_dti(income, debts, payment),
        why_this_works=why,
        compared_to_target=TargetComparison(
            price_difference=target - recommended,
            score_difference=at_price.total - current_score,
            payment_difference=round_half_up(target_payment - payment),
        ),
    )


def _timeline_for_months(months: int) -> str:
    for limit, label in TIMELINE_BUCKETS:
        if months <= limit:
            return label
    return "12+ months"


def _months_for_change(change) -> int:
    if change.type == "debt_reduction":
        return math.ceil(change.amount * 12 / DEBT_PAYOFF_PER_YEAR)
    if change.type == "savings_increase":
        return math.ceil(change.amount / MONTHLY_SAVINGS_RATE)
    return INCOME_CHANGE_MONTHS


def calculate_path_to_goal(
    profile: Profile, sweet_spot: SweetSpot, current_score: int, assumptions=None
) -> Optional[PathToGoal]:
    """What it would take to buy at the target price instead of the sweet spot.

    ``None`` when the target is within $10k of the sweet spot, below it, or
    already needs no changes.
    """

    a = resolve_assumptions(assumptions)
    target = profile.target_price
    recommended = sweet_spot.recommended_price
    if abs(target - recommended) < PATH_TO_GOAL_MIN_GAP or target < recommended:
        return None

    income = profile.monthly_income
    debts = profile.monthly_debts
    housing_payment = estimate_monthly_payment(target, assumptions=a)
    changes: List = []

    if current_dti(income, debts, housing_payment) > LENDER_DTI:
        reduction = debt_reduction_for_dti(income, debts, housing_payment, LENDER_DTI)
        if 0 < reduction <= debts:
            changes.append(
                DebtReductionChange(
                    amount=reduction,
                    description=f"Reduce monthly debt by {fmt(reduction)}",
                    impact="Brings DTI to 43%",
                )
            )
        increase = income_increase_for_dti(income, debts, housing_payment, LENDER_DTI)
        if increase > 0:
            changes.append(
                IncomeIncreaseChange(
                    amount=increase,
                    description=f"Increase monthly income by {fmt(increase)}",
                    impact="Brings DTI to 43%",
                )
            )

    needed = target * a.min_down_payment_pct
    if profile.saved < needed:
        shortfall = needed - profile.saved
        changes.append(
            SavingsIncreaseChange(
                amount=round_half_up(shortfall),
                description=f"Save {fmt(shortfall)} more for down payment",
                impact=f"Meets {format_pct(a.min_down_payment_pct)} down requirement",
            )
        )

    if not changes:
        return None

    months = max(_months_for_change(c) for c in changes)
    return PathToGoal(
        target_price=target,
        current_score=current_score,
        required_changes=changes,
        estimated_timeline=_timeline_for_months(months),
        encouragement=f"Your {fmt(target)} goal is achievable! Here's what it takes:",
    )
