"""
Values derived from intake form fields.

Every helper tolerates missing or malformed input and returns None (or 0 for
glucose averages) instead of raising.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Optional, Union

from glyeral.utils.parsing import parse_lab_value, parse_number


@dataclass(frozen=True)
class CkdStage:
    stage: int
    label: str


# (lower eGFR bound, stage, label), highest first
CKD_STAGES = [
    (90, 1, "Normal"),
    (60, 2, "Mild"),
    (30, 3, "Moderate"),
    (15, 4, "Severe"),
]

BMI_CATEGORIES = [
    (30.0, "Obese"),
    (25.0, "Overweight"),
    (18.5, "Normal"),
]


def ckd_stage(egfr: Any) -> Optional[CkdStage]:
    """
    Stage chronic kidney disease from eGFR.

    Args:
        egfr: eGFR in mL/min, as entered

    Returns:
        CkdStage, or None when eGFR is missing
    """
    value = parse_lab_value(egfr)
    if value is None:
        return None
    for bound, stage, label in CKD_STAGES:
        if value >= bound:
            return CkdStage(stage, label)
    return CkdStage(5, "Failure")


def calculate_bmi(weight_kg: Any, height_cm: Any) -> Optional[float]:
    """Body mass index rounded to one decimal, or None if either input is unusable."""
    weight = parse_lab_value(weight_kg)
    height = parse_lab_value(height_cm)
    if weight is None or height is None:
        return None
    meters = height / 100
    return _round_half_up(weight / (meters * meters) * 10) / 10


def bmi_category(bmi: Optional[float]) -> Optional[str]:
    if bmi is None:
        return None
    for bound, label in BMI_CATEGORIES:
        if bmi >= bound:
            return label
    return "Underweight"


def age_from_dob(
    dob: Union[str, date, None],
    today: Optional[date] = None,
) -> Optional[int]:
    """
    Age in whole years, counting a birthday only once it has happened.

    Args:
        dob: Date of birth (date or ISO "YYYY-MM-DD" string)
        today: Reference date (defaults to today)

    Returns:
        Age in years, or None if dob is missing or unparseable
    """
    if isinstance(dob, datetime):
        dob = dob.date()
    elif isinstance(dob, str):
        try:
            dob = date.fromisoformat(dob.strip())
        except ValueError:
            return None
    if not isinstance(dob, date):
        return None

    today = today or date.today()
    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age


def average_glucose(readings: Iterable[Any]) -> int:
    """Mean of the parseable readings, rounded to a whole mg/dL; 0 when none parse."""
    values = [v for v in (parse_number(r) for r in readings or []) if v is not None]
    if not values:
        return 0
    return _round_half_up(sum(values) / len(values))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
