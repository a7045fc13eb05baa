"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from fastapi.testclient import TestClient

from glyeral.decisions import AuditStore, DecisionRecorder
from glyeral.engine import RecommendationEngine
from glyeral.models import PatientProfile


# ============================================================================
# Patient Profiles
# ============================================================================

@pytest.fixture
def healthy_profile():
    """Typical T2DM patient: good renal function, not pregnant."""
    return PatientProfile(patient_id="MR-2024-001", egfr=90, hba1c=8.2)


@pytest.fixture
def ckd_profile():
    """Moderate CKD (eGFR 35)."""
    return PatientProfile(patient_id="MR-2024-002", egfr=35, hba1c=7.5, has_ckd=True)


@pytest.fixture
def severe_ckd_profile():
    """Severe CKD (eGFR 20): Metformin and Farxiga both blocked."""
    return PatientProfile(patient_id="MR-2024-003", egfr=20, hba1c=9.1)


@pytest.fixture
def pregnant_profile():
    return PatientProfile(patient_id="MR-2024-004", egfr=100, hba1c=6.8, is_pregnant=True)


# ============================================================================
# Engine and Recommendations
# ============================================================================

@pytest.fixture
def engine():
    return RecommendationEngine()


@pytest.fixture
def recommendations(engine, healthy_profile):
    """Recommendations for the healthy profile, keyed by drug id."""
    return {rec.drug_id: rec for rec in engine.evaluate(healthy_profile)}


@pytest.fixture
def severe_recommendations(engine, severe_ckd_profile):
    return {rec.drug_id: rec for rec in engine.evaluate(severe_ckd_profile)}


@pytest.fixture
def blocked_metformin(severe_recommendations):
    return severe_recommendations["Metformin"]


# ============================================================================
# Decisions and Audit
# ============================================================================

@pytest.fixture
def audit_path(tmp_path):
    return tmp_path / "audit" / "audit_trail.jsonl"


@pytest.fixture
def audit_store(audit_path):
    return AuditStore(storage_path=audit_path)


@pytest.fixture
def recorder(audit_store, healthy_profile, recommendations):
    """Recorder with the healthy profile's recommendations issued."""
    recorder = DecisionRecorder(audit_store)
    recorder.track(healthy_profile.patient_id, list(recommendations.values()))
    return recorder


# ============================================================================
# API
# ============================================================================

@pytest.fixture
def api_client(tmp_path, monkeypatch):
    """TestClient with a fresh recorder writing to a temp audit file."""
    monkeypatch.setenv("GLYERAL_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.setenv("GLYERAL_AUDIT_PATH", str(tmp_path / "api_audit.jsonl"))

    from api import state
    from api.main import app

    state.reset_state()
    with TestClient(app) as client:
        yield client
    state.reset_state()
