from __future__ import annotations

from typing import List

from homeready.models import Gap, Profile, Recommendation, ScoreBreakdown
from homeready.presets import GAP_RULES, MAX_POINTS


def _gap_severity(factor: str, points: int) -> str:
    return "high" if points < GAP_RULES[factor]["high_below"] else "medium"


def _gain(factor: str, points: int) -> int:
    lost = MAX_POINTS[factor] - points
    return min(GAP_RULES[factor]["max_gain"], lost)


def identify_gaps(profile: Profile, breakdown: ScoreBreakdown) -> List[Gap]:
    """Factors scoring below their comfortable tier, biggest recoverable gain first."""

    res: List[Gap] = []

    if breakdown.credit < GAP_RULES["credit"]["below"]:
        res.append(
            Gap(
                factor="credit",
                severity=_gap_severity("credit", breakdown.credit),
                current=str(profile.credit_score) if profile.credit_score is not None else "Unknown",
                target="680+",
                points_lost=MAX_POINTS["credit"] - breakdown.credit,
                potential_gain=_gain("credit", breakdown.credit),
                action_required="Improve credit score to unlock better rates",
            )
        )

    if breakdown.down_payment < GAP_RULES["down_payment"]["below"]:
        pct = profile.saved / profile.target_price * 100 if profile.target_price > 0 else 0.0
        res.append(
            Gap(
                factor="down_payment",
                severity=_gap_severity("down_payment", breakdown.down_payment),
                current=f"{pct:.1f}%",
                target="5%+",
                points_lost=MAX_POINTS["down_payment"] - breakdown.down_payment,
                potential_gain=_gain("down_payment", breakdown.down_payment),
                action_required="Save more for down payment",
            )
        )

    if breakdown.dti < GAP_RULES["dti"]["below"]:
        res.append(
            Gap(
                factor="dti",
                severity=_gap_severity("dti", breakdown.dti),
                current="High",
                target="Under 43%",
                points_lost=MAX_POINTS["dti"] - breakdown.dti,
                potential_gain=_gain("dti", breakdown.dti),
                action_required="Reduce debt or increase income",
            )
        )

    # sorted() is stable, so ties keep credit / down payment / DTI order
    return sorted(res, key=lambda g: -g.potential_gain)


RECOMMENDATIONS = {
    "credit": (
        "credit",
        "Boost Your Credit Score",
        "Pay down credit cards to below 30% of limits, avoid new credit applications, "
        "and dispute any errors on your report.",
    ),
    "down_payment": (
        "savings",
        "Build Your Down Payment",
        "Set up automatic transfers to savings. Look into down payment assistance programs you may qualify for.",
    ),
    "dti": (
        "debt",
        "Lower Your Debt-to-Income Ratio",
        "Focus on paying off high-interest debt or consider a lower price point to improve your DTI ratio.",
    ),
}


def generate_recommendations(gaps: List[Gap]) -> List[Recommendation]:
    """One recommendation per gap, same order."""
    out = []
    for i, gap in enumerate(gaps, start=1):
        known = RECOMMENDATIONS.get(gap.factor)
        if known:
            category, title, description = known
            impact = f"+{gap.potential_gain} points to your Home Ready Score"
        else:
            category, title, description = "general", "Improve Your Profile", gap.action_required
            impact = f"+{gap.potential_gain} points"
        out.append(Recommendation(priority=i, category=category, title=title, description=description, impact=impact))
    return out
