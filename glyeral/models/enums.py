"""
GLYERAL - Enumerations

Centralized enum definitions shared by the engine, recorder and API.
"""

from enum import Enum


class RecommendationStatus(str, Enum):
    """Approval status computed by the rule engine."""

    APPROVED = "approved"
    WARNING = "warning"  # Prescribable, but with notable class risks
    BLOCKED = "blocked"  # Hard contraindication fired


class DrugCategory(str, Enum):
    """Display grouping for the recommendation list."""

    ORAL = "Oral"
    INJECTABLE = "Injectable"
    INSULIN = "Insulin"


class PhysicianAction(str, Enum):
    """What the physician did with a recommendation."""

    ACCEPTED = "accepted"
    MODIFIED = "modified"
    REJECTED = "rejected"


class AuditStatus(str, Enum):
    """Status column of the audit trail."""

    APPROVED = "Approved"
    MODIFIED = "Modified"
    REJECTED = "Rejected"


ACTION_TO_AUDIT_STATUS = {
    PhysicianAction.ACCEPTED: AuditStatus.APPROVED,
    PhysicianAction.MODIFIED: AuditStatus.MODIFIED,
    PhysicianAction.REJECTED: AuditStatus.REJECTED,
}


class WizardStep(str, Enum):
    """Intake wizard sections, in sidebar order."""

    DEMOGRAPHICS = "demographics"
    CONDITIONS = "conditions"
    LABS = "labs"
    GLUCOSE = "glucose"
    MEDICATIONS = "medications"
    RECOMMENDATIONS = "recommendations"
    AUDIT = "audit"
