import streamlit as st

from homeready.models import ScoreResult
from homeready.utils import format_currency


def _solution_detail(solution) -> str:
    if solution.type == "ADJUST_PRICE":
        return f"{format_currency(solution.new_price)} • about ${solution.monthly_payment:,}/mo"
    if solution.type == "PAY_DOWN_DEBT":
        return f"-${solution.debt_reduction:,}/mo • {solution.timeline}"
    if solution.type == "INCREASE_INCOME":
        return f"+${solution.income_increase:,}/mo • {solution.timeline}"
    if solution.type == "SAVE_MORE":
        return f"{format_currency(solution.savings_needed)} • {solution.timeline}"
    if solution.type == "IMPROVE_CREDIT":
        return f"Target {solution.target_score}+ • {solution.timeline}"
    if solution.type == "DPA_PROGRAMS":
        return solution.program
    return ""


def render_blocker(result: ScoreResult):
    blocker = result.primary_blocker
    if blocker is None:
        st.success("Nothing major is holding you back. You're in good shape!")
        return
    msg = f"**{blocker.headline}**\n\n{blocker.subheadline}"
    if blocker.severity == "critical":
        st.error(msg)
    elif blocker.severity == "significant":
        st.warning(msg)
    else:
        st.info(msg)
    st.caption(f"Now: {blocker.current_value} • Goal: {blocker.target_value}")
    for solution in blocker.solutions:
        with st.container(border=True):
            st.markdown(f"**{solution.description}**")
            st.caption(f"{solution.impact} • {_solution_detail(solution)}")
            st.button(solution.action_label, key=f"sol_{solution.type}_{solution.action_label}")


def render_path_forward_view(result: ScoreResult):
    """Primary blocker, sweet spot and path to the target price."""
    st.header("Your Path Forward")
    render_blocker(result)

    spot = result.sweet_spot
    st.subheader("Your Sweet Spot")
    cols = st.columns(4)
    cols[0].metric("Recommended Price", format_currency(spot.recommended_price))
    cols[1].metric(
        "Score at Price",
        f"{spot.score_at_price}/100",
        delta=spot.compared_to_target.score_difference or None,
    )
    cols[2].metric("Monthly Payment", f"${spot.monthly_payment:,}")
    cols[3].metric("DTI", f"{spot.dti_at_price}%")
    st.caption(f"Down payment needed: ${spot.down_payment_needed:,} • {spot.why_this_works}")

    path = result.path_to_goal
    if path is not None:
        st.subheader("Path to Your Goal")
        st.write(path.encouragement)
        for change in path.required_changes:
            st.markdown(f"- {change.description} ({change.impact})")
        st.caption(f"Estimated timeline: {path.estimated_timeline}")
