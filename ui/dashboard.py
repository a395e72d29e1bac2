import pandas as pd
import streamlit as st

from homeready.models import ScoreResult
from homeready.presets import MAX_POINTS

STATUS_LABELS = {
    "READY_NOW": "Ready Now",
    "ALMOST_READY": "Almost Ready",
    "GETTING_CLOSE": "Getting Close",
    "BUILDING": "Building",
    "EARLY_STAGE": "Early Stage",
    "JUST_EXPLORING": "Just Exploring",
}


def breakdown_frame(result: ScoreResult) -> pd.DataFrame:
    """Points earned per factor, with the factor maximum and the share earned."""
    b = result.breakdown
    earned = {
        "credit": b.credit,
        "dti": b.dti,
        "down_payment": b.down_payment,
        "employment": b.employment,
        "reserves": b.reserves,
    }
    df = pd.DataFrame(
        {
            "Factor": ["Credit", "Debt-to-Income", "Down Payment", "Employment", "Reserves"],
            "Points": list(earned.values()),
            "Max": [MAX_POINTS[k] for k in earned],
        }
    )
    df["Earned %"] = (df["Points"] / df["Max"] * 100).round(0)
    return df


def programs_frame(result: ScoreResult) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"Program": p.name, "Eligible": "Yes" if p.eligible else "No", "Why": p.reason, "Benefit": p.benefit}
            for p in result.program_details
        ]
    )


def render_dashboard_view(result: ScoreResult):
    """Render score metrics, factor breakdown, programs and recommendations."""
    st.header("Home Ready Score")
    cols = st.columns(4)
    cols[0].metric("Score", f"{result.total}/100")
    cols[1].metric("Status", STATUS_LABELS.get(result.status, result.status))
    cols[2].metric("Timeline", result.timeline)
    cols[3].metric("DTI", f"{result.parsed_values.current_dti}%")

    b = result.breakdown
    if b.bonus or b.penalty:
        st.caption(f"Bonus: +{b.bonus} • Penalty: -{b.penalty}")

    st.subheader("Score Breakdown")
    st.dataframe(breakdown_frame(result), use_container_width=True, hide_index=True)

    st.subheader("Programs")
    st.dataframe(programs_frame(result), use_container_width=True, hide_index=True)
    if result.assistance.best_program:
        st.caption(f"Best fit: {result.assistance.best_program}")

    st.subheader("Recommendations")
    if not result.recommendations:
        st.success("No gaps found. Every factor is in good shape.")
    for rec in result.recommendations:
        gap = result.gaps[rec.priority - 1]
        msg = f"**{rec.priority}. {rec.title}** ({rec.impact}) {rec.description}"
        if gap.severity == "high":
            st.warning(msg)
        else:
            st.info(msg)
