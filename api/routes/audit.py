"""Audit trail routes."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.state import get_recorder
from glyeral.decisions import DecisionRecorder
from glyeral.models import AuditEntry

router = APIRouter()


@router.get("/audit", response_model=list[AuditEntry])
def list_audit_entries(
    status: Optional[str] = Query(default=None, description="All, Approved, Modified or Rejected"),
    patient_id: Optional[str] = Query(default=None, alias="patientId"),
    recorder: DecisionRecorder = Depends(get_recorder),
) -> list[AuditEntry]:
    """Audit entries, newest first."""
    return recorder.audit_store.list_entries(status=status, patient_id=patient_id)


@router.get("/audit/{log_id}", response_model=AuditEntry)
def get_audit_entry(
    log_id: str,
    recorder: DecisionRecorder = Depends(get_recorder),
) -> AuditEntry:
    entry = recorder.audit_store.get(log_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Audit entry {log_id} not found")
    return entry
