"""
Streamlit UI for GLYERAL.

Physician workflow: pick a patient, fill in the intake wizard, generate
recommendations, then accept, modify or reject each one. Every action is
written to the audit trail.
"""

import streamlit as st
from dotenv import load_dotenv

from glyeral.utils.logging import setup_logging
from ui.components import (
    render_audit_trail,
    render_chat_panel,
    render_generate,
    render_intake_step,
    render_login,
    render_recommendations,
    render_sidebar,
)
from ui.config import INTAKE_STEPS, PATIENTS, STEP_LABELS
from ui.services.state import (
    get_assistant,
    get_engine,
    get_intake,
    get_recorder,
    get_session,
    get_settings,
)
from ui.styles import STYLES

# Load environment variables
load_dotenv()

# Page configuration
st.set_page_config(
    page_title="GLYERAL",
    page_icon="🩺",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(STYLES, unsafe_allow_html=True)


def render_header(patient_id: str, step: str):
    patient = next((p for p in PATIENTS if p["id"] == patient_id), None)
    subtitle = f"{patient['name']} · {patient['age']}y {patient['gender']}" if patient else patient_id
    st.markdown(
        f'<div class="app-header"><div>'
        f'<h1>{STEP_LABELS[step]}</h1>'
        f'<p>{subtitle}</p>'
        f'</div></div>',
        unsafe_allow_html=True,
    )


def main():
    """Main application."""
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    session = get_session()
    if not session.logged_in:
        render_login(session)
        return

    render_sidebar(session)
    recorder = get_recorder()

    if session.selected_patient_id is None:
        st.info("Select a patient in the sidebar to begin.")
        render_audit_trail(recorder.audit_store)
        return

    render_header(session.selected_patient_id, session.step)
    intake = get_intake(session.selected_patient_id)

    if session.step in INTAKE_STEPS:
        render_intake_step(session, intake)
    elif session.step == "recommendations":
        main_col, chat_col = st.columns([3, 2])
        with main_col:
            render_generate(session, intake, get_engine(), recorder)
            render_recommendations(session, recorder)
        with chat_col:
            render_chat_panel(get_assistant(), session.recommendations)
    else:
        render_audit_trail(recorder.audit_store, patient_id=session.selected_patient_id)


if __name__ == "__main__":
    main()
