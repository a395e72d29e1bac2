import streamlit as st

from homeready.models import ScoreInput
from homeready.presets import (
    CREDIT_SCORE_RANGES,
    DOWN_PAYMENT_RANGES,
    INCOME_RANGES,
    MONTHLY_DEBT_RANGES,
    PRICE_RANGES,
    VETERAN_STATUSES,
)

LABELS = {
    "below-580": "Below 580",
    "not-sure": "Not sure",
    "740-plus": "740+",
    "220k-plus": "$220k+",
    "1m-plus": "$1M+",
    "260k-plus": "$260k+",
    "3000-plus": "$3,000+",
    "none": "None",
}


def token_label(token: str, money: bool = True) -> str:
    """Human label for a range token such as ``100k-150k``."""
    if token in LABELS:
        return LABELS[token]
    if not money:
        return token
    if token.startswith("under-"):
        return "Under $" + token[len("under-"):]
    low, _, high = token.partition("-")
    return f"${low}-${high}"


def _select(label, options, key, default, money=True):
    return st.selectbox(
        label,
        options,
        index=options.index(default),
        format_func=lambda t: token_label(t, money),
        key=key,
    )


def render_quiz() -> ScoreInput:
    """Range-token questionnaire; returns the answers as a ``ScoreInput``."""
    st.header("Your Situation")
    c1, c2 = st.columns(2)
    with c1:
        credit = _select("Credit Score", list(CREDIT_SCORE_RANGES), "q_credit", "not-sure", money=False)
        income = _select("Household Income (yearly)", list(INCOME_RANGES), "q_income", "60k-80k")
        debts = _select("Monthly Debt Payments", list(MONTHLY_DEBT_RANGES), "q_debts", "none")
    with c2:
        price = _select("Target Home Price", list(PRICE_RANGES), "q_price", "400k-500k")
        saved = _select("Saved for Down Payment", list(DOWN_PAYMENT_RANGES), "q_saved", "10k-25k")
        veteran = st.selectbox(
            "Military Service",
            list(VETERAN_STATUSES),
            format_func=lambda s: s.replace("-", " / ").title(),
            key="q_veteran",
        )
    first_time = st.checkbox("First-time home buyer", value=True, key="q_first_time")

    return ScoreInput(
        credit_score_range=credit,
        annual_income=income,
        down_payment=saved,
        price_range=price,
        monthly_debts=debts,
        first_time_buyer=first_time,
        veteran_status=None if veteran == "none" else veteran,
    )
