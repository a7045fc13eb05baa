"""
Formulary - prescribing metadata for every drug the engine can recommend.

Backs the modify dialog (dosage, frequency and timing choices) and the drug
class shown on each card. Lookups never fail: an unknown drug id gets the
generic "N/A" entry so a physician-facing screen can always render.
"""

import logging
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


logger = logging.getLogger(__name__)


class FormularyEntry(BaseModel):
    """Prescribing options for one drug id."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    drug_class: str = "N/A"
    dosage_range: str = "N/A"
    dosage_options: list[str] = Field(default_factory=lambda: ["Custom"])
    frequency_options: list[str] = Field(default_factory=lambda: ["Once daily"])
    timing_options: list[str] = Field(default_factory=lambda: ["Morning"])
    unit: Optional[str] = None

    @property
    def default_frequency(self) -> str:
        return self.frequency_options[0]

    @property
    def default_timing(self) -> str:
        return self.timing_options[0]


GENERIC_ENTRY = FormularyEntry()

_INSULIN_DOSES = [
    "4 units", "6 units", "8 units", "10 units", "12 units", "15 units",
    "20 units", "25 units", "30 units", "40 units", "50 units",
]
_BASAL_DOSES = _INSULIN_DOSES + ["60 units", "80 units", "100 units"]
_REPAGLINIDE_DOSES = ["0.5mg", "1mg", "1.5mg", "2mg"]


def _mealtime(drug_class: str, dosage_range: str, doses: list[str], meal: str, unit: str) -> FormularyEntry:
    return FormularyEntry(
        drug_class=drug_class,
        dosage_range=dosage_range,
        dosage_options=doses,
        frequency_options=["Before meals"],
        timing_options=[f"Before {meal}"],
        unit=unit,
    )


FORMULARY: dict[str, FormularyEntry] = {
    "Metformin": FormularyEntry(
        drug_class="Biguanide",
        dosage_range="500-2000mg",
        dosage_options=["500mg", "750mg", "1000mg", "1500mg", "2000mg"],
        frequency_options=["Once daily", "Twice daily"],
        timing_options=["With breakfast", "With dinner", "With meals"],
        unit="mg",
    ),
    "Glimepiride": FormularyEntry(
        drug_class="Sulfonylurea",
        dosage_range="1-4mg",
        dosage_options=["1mg", "2mg", "3mg", "4mg"],
        frequency_options=["Once daily"],
        timing_options=["Before breakfast", "With breakfast"],
        unit="mg",
    ),
    "Tradjenta": FormularyEntry(
        drug_class="DPP-4 Inhibitor",
        dosage_range="5mg",
        dosage_options=["5mg"],
        frequency_options=["Once daily"],
        timing_options=["Morning", "Any time"],
        unit="mg",
    ),
    "Farxiga": FormularyEntry(
        drug_class="SGLT2 Inhibitor",
        dosage_range="5-10mg",
        dosage_options=["5mg", "10mg"],
        frequency_options=["Once daily"],
        timing_options=["Morning", "Any time"],
        unit="mg",
    ),
    "Semaglutide": FormularyEntry(
        drug_class="GLP-1 RA",
        dosage_range="0.25-2mg",
        dosage_options=["0.25mg", "0.5mg", "1mg", "1.5mg", "2mg"],
        frequency_options=["Once weekly"],
        timing_options=["Same day each week", "Any time of day"],
        unit="mg",
    ),
    "Repaglinide_Before_Breakfast": _mealtime("Meglitinide", "0.5-2mg", _REPAGLINIDE_DOSES, "breakfast", "mg"),
    "Repaglinide_Before_Lunch": _mealtime("Meglitinide", "0.5-2mg", _REPAGLINIDE_DOSES, "lunch", "mg"),
    "Repaglinide_Before_Dinner": _mealtime("Meglitinide", "0.5-2mg", _REPAGLINIDE_DOSES, "dinner", "mg"),
    "Glargine_Before_Dinner": FormularyEntry(
        drug_class="Basal Insulin",
        dosage_range="4-100 units",
        dosage_options=_BASAL_DOSES,
        frequency_options=["Once daily"],
        timing_options=["Before dinner", "At bedtime"],
        unit="units",
    ),
    "Lispro_Before_Breakfast": _mealtime("Rapid-Acting Insulin", "4-100 units", _INSULIN_DOSES, "breakfast", "units"),
    "Lispro_Before_Lunch": _mealtime("Rapid-Acting Insulin", "4-100 units", _INSULIN_DOSES, "lunch", "units"),
    "Lispro_Before_Dinner": _mealtime("Rapid-Acting Insulin", "4-100 units", _INSULIN_DOSES, "dinner", "units"),
}


# Intake form keys, generic and brand names -> drug id
MEDICATION_ALIASES: dict[str, str] = {
    "metformin": "Metformin",
    "glucophage": "Metformin",
    "glimepiride": "Glimepiride",
    "amaryl": "Glimepiride",
    "tradjenta": "Tradjenta",
    "linagliptin": "Tradjenta",
    "farxiga": "Farxiga",
    "dapagliflozin": "Farxiga",
    "semaglutide": "Semaglutide",
    "ozempic": "Semaglutide",
    "glargine": "Glargine_Before_Dinner",
    "lantus": "Glargine_Before_Dinner",
    "lispro_breakfast": "Lispro_Before_Breakfast",
    "lispro_lunch": "Lispro_Before_Lunch",
    "lispro_dinner": "Lispro_Before_Dinner",
    "repaglinide_breakfast": "Repaglinide_Before_Breakfast",
    "repaglinide_lunch": "Repaglinide_Before_Lunch",
    "repaglinide_dinner": "Repaglinide_Before_Dinner",
}


def lookup(drug_id: str) -> FormularyEntry:
    """
    Get prescribing metadata for a drug id.

    Args:
        drug_id: Engine drug id, e.g. "Lispro_Before_Lunch"

    Returns:
        The formulary entry, or the generic N/A entry for unknown ids
    """
    entry = FORMULARY.get(drug_id)
    if entry is None:
        logger.warning(f"No formulary entry for {drug_id!r}, using generic entry")
        return GENERIC_ENTRY
    return entry


def display_name(drug_id: str) -> str:
    """Human label for a drug id: 'Glargine_Before_Dinner' -> 'Glargine (Before Dinner)'."""
    base, _, slot = drug_id.partition("_")
    if not slot:
        return base
    return f"{base} ({slot.replace('_', ' ')})"


def match_medication(name: str) -> Optional[str]:
    """
    Match an intake medication key or drug name to an engine drug id.

    Args:
        name: e.g. "lispro_breakfast", "Dapagliflozin 10mg", "Glargine_Before_Dinner"

    Returns:
        Matching drug id or None
    """
    if not name:
        return None

    if name in FORMULARY:
        return name

    key = re.sub(r"[\s\-]+", "_", name.strip().lower())
    if key in MEDICATION_ALIASES:
        return MEDICATION_ALIASES[key]

    # Exact drug id with different casing
    for drug_id in FORMULARY:
        if drug_id.lower() == key:
            return drug_id

    # Names that carry a dose or route ("metformin 1000mg")
    first_word = key.split("_")[0]
    if first_word in MEDICATION_ALIASES:
        return MEDICATION_ALIASES[first_word]

    return None
