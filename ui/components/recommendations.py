"""
Recommendation components for the GLYERAL UI.

Renders the evaluated drug list with accept / modify / reject actions.
"""

import streamlit as st
from pydantic import ValidationError

from glyeral.decisions import DecisionRecorder
from glyeral.engine import RecommendationEngine, formulary
from glyeral.errors import GlyeralError
from glyeral.intake import profile_from_intake
from glyeral.models import Decision, DrugRecommendation
from glyeral.session import SessionState
from ui.config import get_status_color, get_status_emoji


def render_generate(
    session: SessionState,
    intake: dict,
    engine: RecommendationEngine,
    recorder: DecisionRecorder,
):
    """Generate (or regenerate) recommendations from the intake forms."""
    label = "🔄 Regenerate" if session.recommendations else "✨ Generate recommendations"
    if st.button(label, type="primary"):
        profile = profile_from_intake(session.selected_patient_id, intake)
        recommendations = engine.evaluate(profile)
        recorder.track(session.selected_patient_id, recommendations)
        session.set_recommendations(recommendations)

        defaulted = profile.resolve().defaulted_labs
        if defaulted:
            st.session_state["defaulted_labs"] = list(defaulted)
        else:
            st.session_state.pop("defaulted_labs", None)
        st.rerun()

    if st.session_state.get("defaulted_labs"):
        st.warning("Defaults used for missing labs: " + ", ".join(st.session_state["defaulted_labs"]))


def _render_decision(decision: Decision):
    if decision.action == "accepted":
        st.success("✅ Accepted")
    elif decision.action == "rejected":
        st.error(f"❌ Rejected{': ' + decision.notes if decision.notes else ''}")
    else:
        mod = decision.modification
        st.info(f"✏️ Modified to **{mod.dose_text}** ({mod.timing})  \n_{mod.notes}_")


def _render_modify_form(patient_id: str, rec: DrugRecommendation, recorder: DecisionRecorder, physician: str):
    entry = formulary.lookup(rec.drug_id)
    with st.form(f"modify_{rec.drug_id}"):
        st.caption(f"{entry.drug_class} · range {entry.dosage_range}")
        cols = st.columns(3)
        dosage = cols[0].selectbox("Dosage", entry.dosage_options)
        frequency = cols[1].selectbox("Frequency", entry.frequency_options)
        timing = cols[2].selectbox("Timing", entry.timing_options)
        notes = st.text_area("Justification (required)")
        submitted = st.form_submit_button("Save modification")

    if submitted:
        try:
            recorder.modify(
                patient_id,
                rec,
                {"modified_dosage": dosage, "frequency": frequency, "timing": timing, "notes": notes},
                physician=physician,
            )
        except ValidationError as e:
            st.error(e.errors()[0]["msg"])
            return
        except GlyeralError as e:
            st.error(str(e))
            return
        st.rerun()


def render_recommendation_card(
    session: SessionState,
    rec: DrugRecommendation,
    recorder: DecisionRecorder,
):
    """Render one recommendation with its actions or recorded decision."""
    patient_id = session.selected_patient_id
    color = get_status_color(rec.status)
    prescribed = " · currently prescribed" if rec.currently_prescribed else ""

    st.markdown(
        f'<div class="rec-card" style="border-left-color: {color};">'
        f'<strong>{get_status_emoji(rec.status)} {rec.display_name}</strong> '
        f'<span class="rec-class">{rec.drug_class}{prescribed}</span><br>'
        f'<span class="rec-dose">{rec.dose_text}</span>'
        f'</div>',
        unsafe_allow_html=True,
    )
    st.progress(rec.confidence / 100, text=f"Confidence {rec.confidence}%")

    for warning in rec.warnings:
        if warning.startswith("BLOCKED"):
            st.error(warning)
        else:
            st.warning(warning)
    if rec.guidelines:
        st.caption(" · ".join(rec.guidelines))

    decision = recorder.decision_for(patient_id, rec.drug_id)
    if decision is not None:
        _render_decision(decision)
        return

    cols = st.columns(3)
    with cols[0]:
        if st.button("Accept", key=f"accept_{rec.drug_id}", disabled=rec.is_blocked):
            try:
                recorder.accept(patient_id, rec, physician=session.physician)
            except GlyeralError as e:
                st.error(str(e))
            else:
                st.rerun()
    with cols[1]:
        modify_key = f"show_modify_{rec.drug_id}"
        if st.button("Modify", key=f"modify_{rec.drug_id}", disabled=rec.is_blocked):
            st.session_state[modify_key] = not st.session_state.get(modify_key, False)
    with cols[2]:
        if st.button("Reject", key=f"reject_{rec.drug_id}"):
            try:
                recorder.reject(patient_id, rec, physician=session.physician)
            except GlyeralError as e:
                st.error(str(e))
            else:
                st.rerun()

    if st.session_state.get(f"show_modify_{rec.drug_id}") and not rec.is_blocked:
        _render_modify_form(patient_id, rec, recorder, session.physician)


def render_recommendations(session: SessionState, recorder: DecisionRecorder):
    """Render the recommendation list grouped by category."""
    if not session.recommendations:
        st.info("No recommendations yet. Complete the intake and generate them.")
        return

    actioned = sum(
        1 for rec in session.recommendations
        if recorder.decision_for(session.selected_patient_id, rec.drug_id) is not None
    )
    st.caption(f"{actioned} of {len(session.recommendations)} reviewed")

    for category in ("Oral", "Injectable", "Insulin"):
        recs = [r for r in session.recommendations if r.category == category]
        if not recs:
            continue
        st.markdown(f"#### {category}")
        for rec in recs:
            with st.container(border=True):
                render_recommendation_card(session, rec, recorder)
