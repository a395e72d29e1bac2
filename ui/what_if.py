import streamlit as st
from pydantic import ValidationError

from homeready import ranges
from homeready.engine import calculate_score_at_price, calculate_score_from_values
from homeready.models import ScoreInput, ScoreValuesInput
from homeready.presets import PRICE_CEILING, PRICE_FLOOR, PRICE_STEP
from homeready.utils import format_currency


def render_price_slider(score_input: ScoreInput, assumptions, current_total: int):
    """Slide the price and re-score against the same answers."""
    start = min(PRICE_CEILING, max(PRICE_FLOOR, int(ranges.price_amount(score_input.price_range))))
    price = st.slider(
        "What if I looked at...",
        min_value=PRICE_FLOOR,
        max_value=PRICE_CEILING,
        value=start,
        step=PRICE_STEP,
        key="wi_price",
    )
    alt = calculate_score_at_price(score_input, price, assumptions)
    st.caption(
        f"At {format_currency(price)}: score {alt.total}/100 ({alt.total - current_total:+d}) • "
        f"DTI {alt.parsed_values.current_dti}% • {alt.timeline}"
    )
    return alt


def render_what_if_view(score_input: ScoreInput, assumptions, current_total: int):
    """Exact-value scenario with an optional co-borrower.

    Veteran status and first-time buyer carry over from the quiz answers.
    """
    st.header("What If")
    render_price_slider(score_input, assumptions, current_total)

    st.subheader("Exact Numbers")
    c1, c2 = st.columns(2)
    with c1:
        credit = st.number_input("Credit Score", value=700.0, step=10.0, key="wi_credit")
        income = st.number_input("Annual Income", value=90000.0, step=5000.0, key="wi_income")
        debts = st.number_input("Monthly Debts", value=300.0, step=50.0, key="wi_debts")
    with c2:
        price = st.number_input("Home Price", value=450000.0, step=10000.0, key="wi_home_price")
        saved = st.number_input("Saved", value=25000.0, step=1000.0, key="wi_saved")
        first_time = st.checkbox(
            "First-time buyer", value=bool(score_input.first_time_buyer), key="wi_first_time"
        )

    co_values = {}
    if st.checkbox("Add a co-borrower", key="wi_co"):
        cc1, cc2, cc3 = st.columns(3)
        co_values = {
            "co_borrower_credit_score": cc1.number_input("Co-borrower Credit", value=680.0, key="wi_co_credit"),
            "co_borrower_annual_income": cc2.number_input("Co-borrower Income", value=50000.0, key="wi_co_income"),
            "co_borrower_monthly_debts": cc3.number_input("Co-borrower Debts", value=0.0, key="wi_co_debts"),
        }

    try:
        values = ScoreValuesInput(
            credit_score=credit,
            annual_income=income,
            monthly_debts=debts,
            target_home_price=price,
            saved_for_down_payment=saved,
            first_time_buyer=first_time,
            veteran_status=score_input.veteran_status,
            **co_values,
        )
    except ValidationError as exc:
        st.error(f"Check your numbers: {exc.errors()[0]['msg']}")
        return None

    result = calculate_score_from_values(values, assumptions)
    cols = st.columns(3)
    cols[0].metric("What-If Score", f"{result.total}/100", delta=result.total - current_total)
    cols[1].metric("DTI", f"{result.parsed_values.current_dti}%")
    cols[2].metric("Sweet Spot", format_currency(result.sweet_spot.recommended_price))
    return result
