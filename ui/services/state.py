"""
Cached state management for the GLYERAL UI.

Shared resources (engine, recorder, chat assistant) live in Streamlit's
resource cache so every rerun and every browser session sees the same audit
trail. Per-browser state lives in st.session_state.
"""

from typing import Any

import streamlit as st

from glyeral.chat import ChatAssistant
from glyeral.config import Settings, load_settings
from glyeral.decisions import AuditStore, DecisionRecorder
from glyeral.engine import RecommendationEngine
from glyeral.session import SessionState
from glyeral.utils.logging import get_logger


logger = get_logger("ui")

SESSION_KEY = "glyeral_session"
INTAKE_KEY = "glyeral_intake"


@st.cache_resource
def get_settings() -> Settings:
    return load_settings()


@st.cache_resource
def get_engine() -> RecommendationEngine:
    return RecommendationEngine()


@st.cache_resource
def get_recorder() -> DecisionRecorder:
    """Get the shared Decision Recorder, backed by the configured audit file."""
    audit_path = get_settings().audit_path
    logger.info(f"UI audit trail: {audit_path or 'in memory'}")
    return DecisionRecorder(AuditStore(storage_path=audit_path))


@st.cache_resource
def get_assistant() -> ChatAssistant:
    return ChatAssistant()


def get_session() -> SessionState:
    """This browser session's SessionState, created on first use."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SessionState()
    return st.session_state[SESSION_KEY]


def get_intake(patient_id: str) -> dict[str, Any]:
    """Intake form values for a patient, keyed by form section."""
    if INTAKE_KEY not in st.session_state:
        st.session_state[INTAKE_KEY] = {}
    forms = st.session_state[INTAKE_KEY]
    if patient_id not in forms:
        forms[patient_id] = {
            "demographics": {},
            "conditions": {},
            "labs": {},
            "glucose": {},
            "medications": {},
        }
    return forms[patient_id]


def clear_intake():
    st.session_state.pop(INTAKE_KEY, None)
