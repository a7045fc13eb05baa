"""
Intake wizard components for the GLYERAL UI.

One render function per intake step. Each writes into the patient's intake
dict and shows the derived values (age, BMI, CKD stage, glucose average).
"""

from datetime import date

import streamlit as st

from glyeral.intake import age_from_dob, average_glucose, bmi_category, calculate_bmi, ckd_stage
from glyeral.session import SessionState
from ui.config import GLUCOSE_READINGS, INTAKE_STEPS, MEDICATION_CHOICES, STEP_LABELS


def _next_button(session: SessionState):
    index = INTAKE_STEPS.index(session.step)
    following = INTAKE_STEPS[index + 1] if index + 1 < len(INTAKE_STEPS) else "recommendations"
    if st.button(f"Continue to {STEP_LABELS[following]} →", type="primary"):
        session.go_to(following)
        st.rerun()


def render_demographics(session: SessionState, form: dict):
    st.markdown("### 👤 Demographics")
    cols = st.columns(2)
    with cols[0]:
        form["first_name"] = st.text_input("First name", value=form.get("first_name", ""))
        form["dob"] = st.date_input(
            "Date of birth",
            value=form.get("dob"),
            min_value=date(1900, 1, 1),
            max_value=date.today(),
        )
        form["weight_kg"] = st.text_input("Weight (kg)", value=form.get("weight_kg", ""))
    with cols[1]:
        form["last_name"] = st.text_input("Last name", value=form.get("last_name", ""))
        form["gender"] = st.selectbox(
            "Gender",
            ["Male", "Female", "Other"],
            index=["Male", "Female", "Other"].index(form.get("gender", "Male")),
        )
        form["height_cm"] = st.text_input("Height (cm)", value=form.get("height_cm", ""))

    age = age_from_dob(form.get("dob"))
    bmi = calculate_bmi(form.get("weight_kg"), form.get("height_cm"))
    metrics = st.columns(2)
    metrics[0].metric("Age", f"{age} years" if age is not None else "--")
    metrics[1].metric("BMI", f"{bmi} ({bmi_category(bmi)})" if bmi is not None else "--")

    _next_button(session)


def render_conditions(session: SessionState, form: dict):
    st.markdown("### 🩺 Conditions")
    form["is_pregnant"] = st.checkbox("Pregnant", value=form.get("is_pregnant", False))
    form["has_ckd"] = st.checkbox("Chronic kidney disease", value=form.get("has_ckd", False))
    form["has_cad"] = st.checkbox("Coronary artery disease", value=form.get("has_cad", False))
    _next_button(session)


def render_labs(session: SessionState, form: dict):
    st.markdown("### 🧪 Labs")
    cols = st.columns(2)
    with cols[0]:
        form["hba1c"] = st.text_input("HbA1c (%)", value=form.get("hba1c", ""), help="Normal < 5.7")
    with cols[1]:
        form["egfr"] = st.text_input("eGFR (mL/min)", value=form.get("egfr", ""), help="Normal > 90")

    stage = ckd_stage(form.get("egfr"))
    if stage is not None:
        st.info(f"CKD Stage {stage.stage}: {stage.label}")
    st.caption("Missing labs default to HbA1c 7.0% and eGFR 100 mL/min.")
    _next_button(session)


def render_glucose(session: SessionState, form: dict):
    st.markdown("### 📈 Glucose readings (mg/dL)")
    readings = form.setdefault("readings", {})
    cols = st.columns(len(GLUCOSE_READINGS))
    for col, label in zip(cols, GLUCOSE_READINGS):
        with col:
            readings[label] = st.text_input(label, value=readings.get(label, ""))
    st.metric("Average", f"{average_glucose(v for v in readings.values() if v)} mg/dL")
    _next_button(session)


def render_medications(session: SessionState, form: dict):
    st.markdown("### 💊 Current medications")
    cols = st.columns(2)
    for i, (key, label) in enumerate(MEDICATION_CHOICES.items()):
        with cols[i % 2]:
            form[key] = st.checkbox(label, value=form.get(key, False), key=f"med_{key}")
    _next_button(session)


STEP_RENDERERS = {
    "demographics": render_demographics,
    "conditions": render_conditions,
    "labs": render_labs,
    "glucose": render_glucose,
    "medications": render_medications,
}


def render_intake_step(session: SessionState, intake: dict):
    """Render the intake form for the session's current step."""
    STEP_RENDERERS[session.step](session, intake[session.step])
