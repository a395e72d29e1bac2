import streamlit as st
from pydantic import ValidationError

from homeready.config import Assumptions, get_assumptions


def render_assumptions_sidebar() -> Assumptions:
    """Sidebar with the editable market assumptions behind every payment."""
    st.session_state.setdefault("assumptions", get_assumptions().model_dump())
    current = st.session_state["assumptions"]

    st.sidebar.header("Assumptions")
    values = {
        "annual_rate_pct": st.sidebar.number_input(
            "Interest Rate %", value=float(current["annual_rate_pct"]), step=0.125, key="as_rate"
        ),
        "term_years": int(
            st.sidebar.number_input("Term (years)", value=int(current["term_years"]), step=5, key="as_term")
        ),
        "property_tax_rate_pct": st.sidebar.number_input(
            "Property Tax %", value=float(current["property_tax_rate_pct"]), step=0.1, key="as_tax"
        ),
        "insurance_monthly": st.sidebar.number_input(
            "Insurance ($/mo)", value=float(current["insurance_monthly"]), step=10.0, key="as_ins"
        ),
        "mortgage_insurance_pct": st.sidebar.number_input(
            "Mortgage Insurance %", value=float(current["mortgage_insurance_pct"]), step=0.05, key="as_mi"
        ),
        "min_down_payment_pct": current["min_down_payment_pct"],
    }

    try:
        assumptions = Assumptions(**values)
    except ValidationError as exc:
        st.sidebar.error(f"Invalid assumptions, keeping previous values ({exc.error_count()} errors)")
        return Assumptions(**current)

    st.session_state["assumptions"] = assumptions.model_dump()
    if st.sidebar.button("Reset to defaults"):
        st.session_state["assumptions"] = get_assumptions().model_dump()
        for key in ("as_rate", "as_term", "as_tax", "as_ins", "as_mi"):
            st.session_state.pop(key, None)
        st.rerun()
    return assumptions
