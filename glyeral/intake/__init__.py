"""Intake form helpers."""

from glyeral.intake.derived import (
    CkdStage,
    age_from_dob,
    average_glucose,
    bmi_category,
    calculate_bmi,
    ckd_stage,
)
from glyeral.intake.forms import profile_from_intake

__all__ = [
    "CkdStage",
    "age_from_dob",
    "average_glucose",
    "bmi_category",
    "calculate_bmi",
    "ckd_stage",
    "profile_from_intake",
]
