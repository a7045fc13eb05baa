"""
Sidebar component for the GLYERAL UI.

Physician login, patient selection and wizard navigation.
"""

import streamlit as st

from glyeral.session import SessionState
from ui.config import PATIENTS, STEP_LABELS
from ui.services.state import clear_intake


def render_login(session: SessionState):
    """Render the login card. Any non-empty name logs in."""
    st.markdown("## 🩺 GLYERAL")
    st.caption("Diabetes medication recommendations with physician review")

    with st.form("login_form"):
        name = st.text_input("Physician name", placeholder="Dr. Jane Doe")
        submitted = st.form_submit_button("Sign in", use_container_width=True)

    if submitted:
        if name.strip():
            session.login(name.strip())
            st.rerun()
        else:
            st.error("Please enter your name")


def render_sidebar(session: SessionState):
    """Render the sidebar: patient picker, step navigation and logout."""
    st.sidebar.markdown(f"**{session.physician}**")

    if st.sidebar.button("◀ Hide" if session.sidebar_open else "▶ Show", key="toggle_sidebar"):
        session.toggle_sidebar()
        st.rerun()

    if not session.sidebar_open:
        return

    st.sidebar.caption("PATIENT")
    labels = {p["id"]: f"{p['name']} ({p['id']})" for p in PATIENTS}
    ids = list(labels)
    current = ids.index(session.selected_patient_id) if session.selected_patient_id in ids else None
    chosen = st.sidebar.selectbox(
        "Patient",
        ids,
        index=current,
        format_func=labels.get,
        placeholder="Select a patient",
        label_visibility="collapsed",
    )
    if chosen and chosen != session.selected_patient_id:
        session.select_patient(chosen)
        st.rerun()

    if session.selected_patient_id:
        st.sidebar.markdown("---")
        st.sidebar.caption("STEPS")
        for step, label in STEP_LABELS.items():
            marker = "➤ " if session.step == step else ""
            if st.sidebar.button(f"{marker}{label}", key=f"step_{step}", use_container_width=True):
                session.go_to(step)
                st.rerun()

    st.sidebar.markdown("---")
    if st.sidebar.button("Log out", key="logout", use_container_width=True):
        session.logout()
        clear_intake()
        st.rerun()
