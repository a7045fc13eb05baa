"""
GLYERAL - Patient Profile

Input model for the recommendation engine. Intake forms hand over partially
filled data, so every field is optional and lab values are coerced rather
than validated.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from glyeral.utils.parsing import parse_flag, parse_lab_value, parse_number


DEFAULT_HBA1C = 7.0
DEFAULT_EGFR = 100.0

# eGFR below this counts as CKD even without the explicit condition flag
CKD_EGFR_THRESHOLD = 60


class PatientProfile(BaseModel):
    """Patient data consumed by the rule evaluator."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    patient_id: Optional[str] = None
    egfr: Optional[float] = Field(default=None, description="mL/min")
    hba1c: Optional[float] = Field(default=None, description="percent")
    is_pregnant: bool = False
    has_ckd: bool = Field(default=False, alias="hasCKD")
    has_cad: bool = Field(default=False, alias="hasCAD")
    current_medications: dict[str, Any] = Field(
        default_factory=dict,
        description="Intake medication form: key -> dose or on/off flag",
    )

    @field_validator("patient_id", mode="before")
    @classmethod
    def _coerce_patient_id(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("egfr", "hba1c", mode="before")
    @classmethod
    def _coerce_lab(cls, value: Any) -> Optional[float]:
        return parse_lab_value(value)

    @field_validator("is_pregnant", "has_ckd", "has_cad", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return parse_flag(value)

    @field_validator("current_medications", mode="before")
    @classmethod
    def _coerce_medications(cls, value: Any) -> dict[str, Any]:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): v for k, v in value.items()}
        if isinstance(value, (list, tuple, set)):
            return {str(name): True for name in value if name}
        return {}

    @property
    def active_medication_keys(self) -> list[str]:
        """Medication keys the patient is currently taking (non-zero dose or checked)."""
        active = []
        for key, value in self.current_medications.items():
            number = parse_number(value)
            if number is not None:
                if number > 0:
                    active.append(key)
            elif parse_flag(value):
                active.append(key)
        return active

    def resolve(self) -> "ResolvedProfile":
        """Apply lab defaults and derive the effective CKD flag."""
        defaulted = []

        egfr = self.egfr
        if egfr is None:
            egfr = DEFAULT_EGFR
            defaulted.append("egfr")

        hba1c = self.hba1c
        if hba1c is None:
            hba1c = DEFAULT_HBA1C
            defaulted.append("hba1c")

        return ResolvedProfile(
            egfr=egfr,
            hba1c=hba1c,
            is_pregnant=self.is_pregnant,
            has_ckd=self.has_ckd or egfr < CKD_EGFR_THRESHOLD,
            has_cad=self.has_cad,
            defaulted_labs=tuple(defaulted),
        )


@dataclass(frozen=True)
class ResolvedProfile:
    """Profile with defaults applied; the only thing rule functions see."""

    egfr: float
    hba1c: float
    is_pregnant: bool
    has_ckd: bool
    has_cad: bool
    defaulted_labs: tuple[str, ...] = ()
