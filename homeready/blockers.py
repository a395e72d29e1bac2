"""Primary blocker detection.

Rules are checked in a fixed order and the first match wins:

1. DTI above 50%            -> DTI, critical (>57%) or significant
2. DTI above 43%, up to 50% -> DTI, minor
3. savings below the minimum down payment -> DOWN_PAYMENT
4. thin down payment (<= 7 of 20 points, non-VA) -> DOWN_PAYMENT
5. known credit below 620   -> CREDIT, critical (<580) or significant
6. known credit 620-659     -> CREDIT, minor

Each blocker carries up to four solutions, each computed independently from
the payment model and the affordability solver and only included when its
number makes sense.
"""
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
    AdjustPriceSolution,
    AssistanceEligibility,
    CreditBlocker,
    DownPaymentBlocker,
    DpaProgramsSolution,
    DtiBlocker,
    ImproveCreditSolution,
    IncreaseIncomeSolution,
    PayDownDebtSolution,
    Profile,
    SaveMoreSolution,
    ScoreBreakdown,
)
from homeready.presets import (
    COMFORT_DOWN_PAYMENT_PCT,
    COMFORTABLE_DTI,
    CRITICAL_DTI,
    FHA_MAX_DTI,
    LENDER_DTI,
    MIN_SUGGESTED_PRICE,
    MONTHLY_SAVINGS_RATE,
    PRICE_STEP,
    PROGRAM_LIMITS,
)
from homeready.programs import assistance_shortfalls, check_assistance_eligibility
from homeready.scoring import is_va_eligible
from homeready.utils import format_currency as fmt
from homeready.utils import format_pct, round_half_up, round_to_step

logger = logging.getLogger(__name__)

INCOME_LIMIT = PROGRAM_LIMITS["home_again"]["income_limit"]
ASSISTANCE_PCT = PROGRAM_LIMITS["home_again"]["max_assistance_pct"]
THIN_DOWN_PAYMENT_POINTS = 7


def _assistance_solution(assistance: AssistanceEligibility, first_home_impact: str) -> Optional[DpaProgramsSolution]:
    if assistance.first_home.eligible:
        return DpaProgramsSolution(
            description=f"Utah FirstHome could provide {assistance.first_home.benefit}",
            impact=first_home_impact,
            action_label="Learn about FirstHome",
            program="Utah FirstHome",
        )
    if assistance.home_again.eligible:
        return DpaProgramsSolution(
            description=f"Utah HomeAgain could provide {assistance.home_again.benefit}",
            impact="Down payment assistance up to 6% with no first-time buyer requirement",
            action_label="Learn about HomeAgain",
            program="Utah HomeAgain",
        )
    return None


def _why_no_assistance(reasons: List[str]) -> str:
    parts = []
    if "income" in reasons:
        parts.append("your income exceeds assistance limits ($141k)")
    if "credit" in reasons:
        parts.append("down payment assistance requires 660+ credit")
    text = " and ".join(parts)
    return text[:1].upper() + text[1:]


def _dti_blocker(profile, assumptions, assistance, dti, housing_payment) -> Optional[DtiBlocker]:
    income = profile.monthly_income
    debts = profile.monthly_debts
    price = profile.target_price

    if dti > FHA_MAX_DTI:
        solutions = []
        affordable = max_price_for_dti(income, debts, LENDER_DTI, assumptions=assumptions)
        if 0 < affordable < price:
            solutions.append(
                AdjustPriceSolution(
                    description=f"Target homes around {fmt(affordable)} instead",
                    impact="Brings your DTI to 43% - within lender guidelines",
                    action_label="See homes in this range",
                    new_price=affordable,
                    monthly_payment=round_half_up(estimate_monthly_payment(affordable, assumptions=assumptions)),
                )
            )
        reduction = debt_reduction_for_dti(income, debts, housing_payment, LENDER_DTI)
        if 0 < reduction <= debts:
            solutions.append(
                PayDownDebtSolution(
                    description=f"Reduce monthly debt payments by {fmt(reduction)}/mo",
                    impact="Brings your DTI to 43% at your target price",
                    action_label="See payoff strategies",
                    debt_reduction=reduction,
                    timeline="6-12 months" if reduction > 500 else "3-6 months",
                )
            )
        increase = income_increase_for_dti(income, debts, housing_payment, LENDER_DTI)
        if increase > 0:
            solutions.append(
                IncreaseIncomeSolution(
                    description=f"Increase monthly income by {fmt(increase)}",
                    impact="Brings your DTI to 43% at your target price",
                    action_label="Explore options",
                    income_increase=increase,
                    timeline="3-6 months",
                )
            )
        if income > 0:
            headline = f"Your dream home at {fmt(price)} would take about {dti}% of your monthly income"
        else:
            headline = f"Add your income to see how a {fmt(price)} home fits lender limits"
        return DtiBlocker(
            severity="critical" if dti > CRITICAL_DTI else "significant",
            headline=headline,
            subheadline="Lenders typically want to see 43% or less. Here are your options:",
            current_value=f"{dti}%",
            target_value="43% or less",
            solutions=solutions,
            current_dti=dti,
        )

    if dti > LENDER_DTI:
        solutions = []
        if assistance.fha.eligible:
            solutions.append(
                DpaProgramsSolution(
                    description="FHA loans allow up to 50% DTI with compensating factors",
                    impact="You may still qualify - let's discuss your full picture",
                    action_label="Explore FHA options",
                    program="FHA Loan",
                )
            )
        comfortable = max_price_for_dti(income, debts, COMFORTABLE_DTI, assumptions=assumptions)
        if 0 < comfortable < price * 0.9:
            solutions.append(
                AdjustPriceSolution(
                    description=f"For more financial breathing room, consider {fmt(comfortable)}",
                    impact="Comfortable 36% DTI with room for life's surprises",
                    action_label="See comfortable range",
                    new_price=comfortable,
                    monthly_payment=round_half_up(estimate_monthly_payment(comfortable, assumptions=assumptions)),
                )
            )
        return DtiBlocker(
            severity="minor",
            headline=f"At {fmt(price)}, about {dti}% of your income goes to housing + debt",
            subheadline="This is on the higher side (lenders prefer 43%), but you have options:",
            current_value=f"{dti}%",
            target_value="43% or less",
            solutions=solutions,
            current_dti=dti,
        )
    return None


def _savings_price_solution(saved, down_pct, description, impact, assumptions) -> AdjustPriceSolution:
    new_price = round_to_step(saved / down_pct, PRICE_STEP)
    return AdjustPriceSolution(
        description=description,
        impact=impact,
        action_label="See homes in range",
        new_price=new_price,
        monthly_payment=round_half_up(estimate_monthly_payment(new_price, assumptions=assumptions)),
    )


def _down_payment_blocker(profile, breakdown, assumptions, assistance) -> Optional[DownPaymentBlocker]:
    a = assumptions
    saved = profile.saved
    price = profile.target_price
    veteran = is_va_eligible(profile.veteran_status)
    minimum = 0.0 if veteran else price * a.min_down_payment_pct
    min_label = format_pct(a.min_down_payment_pct)
    shortfalls = assistance_shortfalls(profile)

    if saved < minimum:
        shortfall = minimum - saved
        solutions = []
        if saved / a.min_down_payment_pct >= MIN_SUGGESTED_PRICE:
            solutions.append(
                _savings_price_solution(
                    saved,
                    a.min_down_payment_pct,
                    f"Your {fmt(saved)} covers {min_label} down on a {fmt(saved / a.min_down_payment_pct)} home",
                    "Ready to buy today at this price point",
                    a,
                )
            )
        needed = round_half_up(shortfall)
        months = math.ceil(needed / MONTHLY_SAVINGS_RATE)
        solutions.append(
            SaveMoreSolution(
                description=f"Save {fmt(shortfall)} more to reach {min_label} down",
                impact=f"At $500/month, that's about {months} months",
                action_label="Create savings plan",
                savings_needed=needed,
                months=months,
                timeline=f"{months} months",
            )
        )
        dpa = _assistance_solution(assistance, "First-time buyer program with 6% down payment assistance")
        if dpa is not None:
            solutions.append(dpa)
        elif assistance.fha.eligible:
            solutions.append(
                DpaProgramsSolution(
                    description=f"{_why_no_assistance(shortfalls)}, but FHA allows {assistance.fha.benefit}",
                    impact="Lower down payment requirement than conventional loans",
                    action_label="Explore FHA options",
                    program="FHA Loan",
                )
            )
        return DownPaymentBlocker(
            severity="significant" if shortfall > 20000 else "minor",
            headline=f"You've saved {fmt(saved)}, a great start!",
            subheadline=(
                f"For a {fmt(price)} home, you'd need about {fmt(minimum)} ({min_label} down). "
                "Here's how to bridge the gap:"
            ),
            current_value=fmt(saved),
            target_value=fmt(minimum),
            solutions=solutions,
            saved=saved,
            required=minimum,
        )

    if breakdown.down_payment <= THIN_DOWN_PAYMENT_POINTS and not veteran:
        pct = saved / price * 100
        comfort_target = price * COMFORT_DOWN_PAYMENT_PCT
        comfort_label = format_pct(COMFORT_DOWN_PAYMENT_PCT)
        solutions = []
        comfortable_price = saved / COMFORT_DOWN_PAYMENT_PCT
        if MIN_SUGGESTED_PRICE <= comfortable_price < price * 0.9:
            solutions.append(
                _savings_price_solution(
                    saved,
                    COMFORT_DOWN_PAYMENT_PCT,
                    f"At {fmt(comfortable_price)}, your savings cover a healthy {comfort_label} down",
                    "More equity from day one, lower monthly payment",
                    a,
                )
            )
        additional = comfort_target - saved
        if additional > 0:
            needed = round_half_up(additional)
            months = math.ceil(needed / MONTHLY_SAVINGS_RATE)
            solutions.append(
                SaveMoreSolution(
                    description=f"Save {fmt(additional)} more to reach {comfort_label} down",
                    impact="Better equity position and possible PMI savings",
                    action_label="Create savings plan",
                    savings_needed=needed,
                    months=months,
                    timeline=f"{months} months at $500/mo",
                )
            )
        dpa = _assistance_solution(
            assistance, "First-time buyer program that covers most or all of your down payment"
        )
        if dpa is not None:
            solutions.append(dpa)
        elif shortfalls:
            needs = []
            if "income" in shortfalls:
                needs.append("income under $141k")
            if "credit" in shortfalls:
                needs.append("660+ credit")
            solutions.append(
                DpaProgramsSolution(
                    description=f"Utah down payment assistance programs require {' and '.join(needs)}",
                    impact=(
                        f"FHA is available with {assistance.fha.benefit}"
                        if assistance.fha.eligible
                        else "Work on qualifying factors to unlock assistance"
                    ),
                    action_label="See your options",
                    program="FHA Loan" if assistance.fha.eligible else "Utah Housing",
                )
            )
        if pct < a.min_down_payment_pct * 100:
            subheadline = (
                f"You'll need at least {min_label} down ({fmt(price * a.min_down_payment_pct)}) for FHA. "
                "Here's how to get there:"
            )
        else:
            subheadline = "That's enough for minimum down payment, but here's how to strengthen your position:"
        return DownPaymentBlocker(
            severity="significant" if breakdown.down_payment <= 3 else "minor",
            headline=f"You've saved {fmt(saved)} ({pct:.1f}% of your target)",
            subheadline=subheadline,
            current_value=fmt(saved),
            target_value=f"{comfort_label}+ ({fmt(comfort_target)})",
            solutions=solutions,
            saved=saved,
            required=comfort_target,
        )
    return None


def _credit_blocker(profile, assistance) -> Optional[CreditBlocker]:
    score = profile.credit_score
    if score is None or score >= 660:
        return None
    income_ok = profile.annual_income <= INCOME_LIMIT
    assistance_value = profile.target_price * ASSISTANCE_PCT

    if score < 620:
        solutions = []
        if assistance.fha.eligible and score >= 580:
            solutions.append(
                DpaProgramsSolution(
                    description=f"With a {score} score, you qualify for FHA loans today",
                    impact=assistance.fha.benefit,
                    action_label="Explore FHA options",
                    program="FHA Loan",
                )
            )
        solutions.append(
            ImproveCreditSolution(
                description="Getting to 660+ unlocks Utah Housing assistance programs",
                impact=(
                    f"Could mean {fmt(assistance_value)} in down payment help"
                    if income_ok
                    else "Better rates and more loan options"
                ),
                action_label="See credit tips",
                timeline="3-6 months with focused effort",
            )
        )
        if score >= 580:
            headline = f"Your credit score around {score} qualifies you for FHA today"
            subheadline = (
                f"Getting to 660 unlocks Utah Housing assistance worth up to {fmt(assistance_value)}."
                if income_ok
                else "Getting to 660 unlocks better rates and more options."
            )
        else:
            headline = f"Your credit score around {score} needs some work"
            subheadline = "Most lenders need 580+ for FHA, 620+ for conventional loans."
        return CreditBlocker(
            severity="critical" if score < 580 else "significant",
            headline=headline,
            subheadline=subheadline,
            current_value=str(score),
            target_value="660+",
            solutions=solutions,
            credit_score=score,
        )

    solutions = [
        DpaProgramsSolution(
            description="You qualify for conventional loans at current rates",
            impact="Good options available today",
            action_label="See your options",
            program="Conventional Loan",
        )
    ]
    if income_ok:
        solutions.append(
            ImproveCreditSolution(
                description="Bumping to 660+ unlocks Utah Housing down payment assistance",
                impact=f"Up to 6% down payment assistance ({fmt(assistance_value)})",
                action_label="Quick credit wins",
                timeline="2-4 months",
            )
        )
    else:
        solutions.append(
            ImproveCreditSolution(
                description="Bumping to 660+ unlocks better rates",
                impact="Lower monthly payments and more loan options",
                action_label="Quick credit wins",
                timeline="2-4 months",
            )
        )
    return CreditBlocker(
        severity="minor",
        headline=f"Your credit score around {score} qualifies you for conventional loans",
        subheadline=(
            "A small boost to 660+ unlocks Utah's best assistance programs:"
            if income_ok
            else "A small boost to 660+ unlocks better rates:"
        ),
        current_value=str(score),
        target_value="660+",
        solutions=solutions,
        credit_score=score,
    )


def detect_primary_blocker(profile: Profile, breakdown: ScoreBreakdown, assumptions=None):
    """Return the single most urgent blocker, or ``None`` when nothing dominates."""

    a = resolve_assumptions(assumptions)
    assistance = check_assistance_eligibility(profile)
    housing_payment = estimate_monthly_payment(profile.target_price, assumptions=a)
    dti = current_dti(profile.monthly_income, profile.monthly_debts, housing_payment)

    blocker = (
        _dti_blocker(profile, a, assistance, dti, housing_payment)
        or _down_payment_blocker(profile, breakdown, a, assistance)
        or _credit_blocker(profile, assistance)
    )
    logger.debug("primary blocker: %s", blocker.type if blocker is not None else "none")
    return blocker
