"""
Configuration constants for the GLYERAL UI.

Wizard step labels, status styling and the demo patient list.
"""

from glyeral.models import WizardStep

# Wizard navigation (in display order)
STEP_LABELS = {
    WizardStep.DEMOGRAPHICS.value: "Demographics",
    WizardStep.CONDITIONS.value: "Conditions",
    WizardStep.LABS.value: "Labs",
    WizardStep.GLUCOSE.value: "Glucose",
    WizardStep.MEDICATIONS.value: "Medications",
    WizardStep.RECOMMENDATIONS.value: "Recommendations",
    WizardStep.AUDIT.value: "Audit Trail",
}

INTAKE_STEPS = [
    WizardStep.DEMOGRAPHICS.value,
    WizardStep.CONDITIONS.value,
    WizardStep.LABS.value,
    WizardStep.GLUCOSE.value,
    WizardStep.MEDICATIONS.value,
]

# Recommendation status styling
STATUS_COLORS = {
    "approved": "#22c55e",
    "warning": "#f59e0b",
    "blocked": "#ef4444",
}

STATUS_EMOJIS = {
    "approved": "🟢",
    "warning": "🟡",
    "blocked": "⛔",
}

AUDIT_STATUS_FILTERS = ["All", "Approved", "Modified", "Rejected"]

GLUCOSE_READINGS = ["Fasting", "Pre-lunch", "Pre-dinner", "Bedtime"]

# Current-medication checkboxes on the medications step
MEDICATION_CHOICES = {
    "metformin": "Metformin",
    "glimepiride": "Glimepiride",
    "linagliptin": "Tradjenta (Linagliptin)",
    "dapagliflozin": "Farxiga (Dapagliflozin)",
    "semaglutide": "Semaglutide",
    "repaglinide_breakfast": "Repaglinide (breakfast)",
    "repaglinide_lunch": "Repaglinide (lunch)",
    "repaglinide_dinner": "Repaglinide (dinner)",
    "glargine": "Glargine",
    "lispro_breakfast": "Lispro (breakfast)",
    "lispro_lunch": "Lispro (lunch)",
    "lispro_dinner": "Lispro (dinner)",
}

# Demo patient list
PATIENTS = [
    {"id": "MR-2024-001", "name": "John Smith", "age": 58, "gender": "Male", "hba1c": "8.2"},
    {"id": "MR-2024-002", "name": "Maria Garcia", "age": 62, "gender": "Female", "hba1c": "7.5"},
    {"id": "MR-2024-003", "name": "Robert Johnson", "age": 45, "gender": "Male", "hba1c": "9.1"},
    {"id": "MR-2024-004", "name": "Sarah Chen", "age": 51, "gender": "Female", "hba1c": "6.8"},
    {"id": "MR-2024-005", "name": "James Wilson", "age": 67, "gender": "Male", "hba1c": "7.9"},
]


def get_status_color(status: str) -> str:
    """Get color for a recommendation status."""
    return STATUS_COLORS.get(status, "#666666")


def get_status_emoji(status: str) -> str:
    return STATUS_EMOJIS.get(status, "⚪")
