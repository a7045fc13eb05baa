"""
GLYERAL - Recommendation Models

Output of the rule engine and the records produced when a physician
modifies a recommendation.
"""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from glyeral.models.enums import DrugCategory, RecommendationStatus


class DrugRecommendation(BaseModel):
    """One evaluated drug. Immutable once produced."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )

    drug_id: str = Field(description="Stable identifier, e.g. 'Glargine_Before_Dinner'")
    display_name: str = ""
    drug_class: str = "N/A"
    dose_text: str
    original_dosage: str
    confidence: int = Field(ge=0, le=100)
    status: RecommendationStatus
    guidelines: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(
        default_factory=list,
        description="Most severe first; a BLOCKED reason is always index 0",
    )
    category: DrugCategory
    currently_prescribed: bool = False

    @property
    def is_blocked(self) -> bool:
        return self.status == RecommendationStatus.BLOCKED.value

    @property
    def primary_warning(self) -> Optional[str]:
        """The warning shown in the collapsed card."""
        return self.warnings[0] if self.warnings else None


class ModificationRequest(BaseModel):
    """Physician input from the modify dialog."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    modified_dosage: str = Field(description="Selected dosage, e.g. '500mg'")
    frequency: Optional[str] = None
    timing: Optional[str] = None
    notes: str = Field(description="Justification, required for the audit trail")

    @field_validator("modified_dosage", "notes")
    @classmethod
    def _require_text(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            label = "notes" if info.field_name == "notes" else "modified dosage"
            raise ValueError(f"A {label} is required for every modification")
        return value

    @field_validator("frequency", "timing")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


class ModifiedRecommendation(BaseModel):
    """A physician-modified recommendation. The original is kept untouched."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    original: DrugRecommendation
    modified_dosage: str
    frequency: str
    timing: str
    notes: str = Field(min_length=1)
    modified_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: Literal["modified"] = "modified"

    @computed_field
    @property
    def drug_id(self) -> str:
        return self.original.drug_id

    @computed_field
    @property
    def dose_text(self) -> str:
        return f"{self.modified_dosage} {self.frequency.lower()}"
