"""Data models for the recommendation service."""

from glyeral.models.audit import AuditEntry, Decision
from glyeral.models.chat import ChatReply, QuickChip
from glyeral.models.enums import (
    AuditStatus,
    DrugCategory,
    PhysicianAction,
    RecommendationStatus,
    WizardStep,
)
from glyeral.models.patient import PatientProfile, ResolvedProfile
from glyeral.models.recommendation import (
    DrugRecommendation,
    ModificationRequest,
    ModifiedRecommendation,
)

__all__ = [
    "AuditEntry",
    "AuditStatus",
    "ChatReply",
    "Decision",
    "DrugCategory",
    "DrugRecommendation",
    "ModificationRequest",
    "ModifiedRecommendation",
    "PatientProfile",
    "PhysicianAction",
    "QuickChip",
    "RecommendationStatus",
    "ResolvedProfile",
    "WizardStep",
]
