"""
GLYERAL - Decision and Audit Models

Records of what a physician did with each recommendation.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from glyeral.models.enums import AuditStatus, PhysicianAction
from glyeral.models.recommendation import ModifiedRecommendation


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Decision(BaseModel):
    """The latest physician action on one drug for one patient."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )

    patient_id: str
    drug_id: str
    action: PhysicianAction
    timestamp: datetime = Field(default_factory=utc_now)
    physician: Optional[str] = None
    notes: Optional[str] = None
    modification: Optional[ModifiedRecommendation] = None


class AuditEntry(BaseModel):
    """One row of the audit trail."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    log_id: str = Field(description="Sequential id, e.g. 'REQ-001'")
    time: datetime = Field(default_factory=utc_now)
    status: AuditStatus
    meds: str = Field(description="Medication summary, e.g. 'Glargine 10 units → 15 units'")
    confidence: int = Field(ge=0, le=100)
    action: str = ""
    patient_id: Optional[str] = None
    drug_id: Optional[str] = None

    @property
    def display_time(self) -> str:
        return self.time.strftime("%Y-%m-%d %H:%M")
