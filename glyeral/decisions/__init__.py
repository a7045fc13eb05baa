"""Physician decisions and the audit trail."""

from glyeral.decisions.recorder import DecisionRecorder
from glyeral.decisions.store import AuditStore

__all__ = ["AuditStore", "DecisionRecorder"]
