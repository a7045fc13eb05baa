"""Assemble a PatientProfile from the wizard's intake sections."""

from typing import Any, Optional

from glyeral.models.patient import PatientProfile


def profile_from_intake(
    patient_id: Optional[str],
    intake: dict[str, dict[str, Any]],
) -> PatientProfile:
    """
    Build the engine input from intake form sections.

    Args:
        patient_id: Patient the forms belong to
        intake: Section name ("labs", "conditions", "medications", ...) to form values

    Returns:
        PatientProfile; missing sections simply leave fields at their defaults
    """
    labs = intake.get("labs") or {}
    conditions = intake.get("conditions") or {}
    medications = intake.get("medications") or {}

    return PatientProfile(
        patient_id=patient_id,
        egfr=labs.get("egfr"),
        hba1c=labs.get("hba1c"),
        is_pregnant=conditions.get("is_pregnant", False),
        has_ckd=conditions.get("has_ckd", False),
        has_cad=conditions.get("has_cad", False),
        current_medications=medications,
    )
