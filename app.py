import logging

import streamlit as st
from pydantic import ValidationError

from homeready import __version__
from homeready.engine import calculate_score
from homeready.presets import DISCLAIMER
from ui.dashboard import render_dashboard_view
from ui.path_forward import render_path_forward_view
from ui.quiz import render_quiz
from ui.sidebar import render_assumptions_sidebar
from ui.what_if import render_what_if_view

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("homeready.app")

VIEWS = ["Score", "Path Forward", "What If"]


def main():
    st.title("HOME READY SCORE")
    st.caption(f"v{__version__} • Range-based readiness • Utah assistance programs • Path forward")

    assumptions = render_assumptions_sidebar()
    nav = st.sidebar.radio("View", VIEWS, key="view_mode")

    try:
        score_input = render_quiz()
    except ValidationError as exc:
        st.error(f"Invalid answers: {exc.errors()[0]['msg']}")
        return

    result = calculate_score(score_input, assumptions)
    logger.info("scored %s (%s)", result.total, result.status)

    st.divider()
    if nav == "Score":
        render_dashboard_view(result)
    elif nav == "Path Forward":
        render_path_forward_view(result)
    elif nav == "What If":
        render_what_if_view(score_input, assumptions, result.total)

    st.divider()
    st.caption(DISCLAIMER)


if __name__ == "__main__":
    main()
