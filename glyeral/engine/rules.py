"""
Drug rule table for the recommendation engine.

Each row describes one candidate drug: how its dose and confidence are
derived from the resolved patient profile, which hard contraindications block
it, and which caveats and class warnings it carries. Every rule is a small
pure function of ResolvedProfile. Adding a drug means appending a row.

Row order is evaluation order and display order.
"""

from dataclasses import dataclass, field
from typing import Callable

from glyeral.models.enums import DrugCategory, RecommendationStatus
from glyeral.models.patient import ResolvedProfile


ProfileRule = Callable[[ResolvedProfile], bool]


@dataclass(frozen=True)
class Dose:
    """Dose text shown to the physician plus the canonical starting dosage."""

    text: str
    original: str


@dataclass(frozen=True)
class BlockRule:
    """A hard contraindication. `reason` must start with 'BLOCKED: '."""

    reason: str
    applies: ProfileRule


@dataclass(frozen=True)
class Caveat:
    """A conditional dose-adjustment or appropriateness note."""

    text: str
    applies: ProfileRule


@dataclass(frozen=True)
class DrugRule:
    """One row of the drug table."""

    drug_id: str
    category: DrugCategory
    dose: Callable[[ResolvedProfile], Dose]
    confidence: Callable[[ResolvedProfile], int]
    guidelines: tuple[str, ...] = ()
    blocks: tuple[BlockRule, ...] = ()
    caveats: tuple[Caveat, ...] = ()
    class_warnings: tuple[str, ...] = ()
    base_status: RecommendationStatus = RecommendationStatus.APPROVED

    def block_reason(self, profile: ResolvedProfile) -> str | None:
        """First firing block in table order, or None."""
        for block in self.blocks:
            if block.applies(profile):
                return block.reason
        return None

    def warnings(self, profile: ResolvedProfile, block_reason: str | None) -> list[str]:
        """Block reason, then caveats, then class warnings (only when prescribable)."""
        warnings = []
        if block_reason:
            warnings.append(block_reason)
        warnings.extend(c.text for c in self.caveats if c.applies(profile))
        if not block_reason:
            warnings.extend(self.class_warnings)
        return warnings


# =============================================================================
# RULE BUILDING BLOCKS
# =============================================================================


def fixed_dose(text: str, original: str) -> Callable[[ResolvedProfile], Dose]:
    dose = Dose(text=text, original=original)
    return lambda profile: dose


def fixed_confidence(value: int) -> Callable[[ResolvedProfile], int]:
    return lambda profile: value


def egfr_floor(floor: float, reason: str) -> BlockRule:
    """Block when eGFR is strictly below `floor`."""
    return BlockRule(reason=reason, applies=lambda p: p.egfr < floor)


PREGNANCY_BLOCK = BlockRule(reason="BLOCKED: Pregnancy", applies=lambda p: p.is_pregnant)

HYPOGLYCEMIA_RISK = "Hypoglycemia risk"
MONITOR_HYPOGLYCEMIA = "Monitor for hypoglycemia"
BOLUS_GUIDELINE = "ADA: Bolus insulin for post-meal control"


# =============================================================================
# PER-DRUG RULES
# =============================================================================


def metformin_dose(p: ResolvedProfile) -> Dose:
    if p.egfr >= 45:
        return Dose("1000mg twice daily", "1000mg")
    if p.egfr >= 30:
        return Dose("500mg twice daily", "500mg")
    return Dose("Not recommended", "500mg")


def metformin_confidence(p: ResolvedProfile) -> int:
    if p.egfr >= 45:
        return 95
    if p.egfr >= 30:
        return 70
    return 0


def farxiga_dose(p: ResolvedProfile) -> Dose:
    if p.egfr >= 45:
        return Dose("10mg once daily", "10mg")
    return Dose("5mg once daily", "5mg")


def farxiga_confidence(p: ResolvedProfile) -> int:
    # SGLT2 inhibitors carry cardio-renal benefit
    return 90 if p.has_cad or p.has_ckd else 82


def semaglutide_dose(p: ResolvedProfile) -> Dose:
    if p.hba1c > 8:
        return Dose("0.5mg weekly → titrate to 1mg", "0.5mg")
    return Dose("0.25mg weekly → titrate to 0.5mg", "0.25mg")


def glargine_dose(p: ResolvedProfile) -> Dose:
    if p.hba1c > 9:
        return Dose("20 units before dinner", "20 units")
    return Dose("10 units before dinner", "10 units")


def glargine_confidence(p: ResolvedProfile) -> int:
    return 92 if p.hba1c > 9 else 78


def lispro_confidence(high: int, low: int) -> Callable[[ResolvedProfile], int]:
    return lambda p: high if p.hba1c > 8.5 else low


def repaglinide(meal: str, guidelines: tuple[str, ...], class_warnings: tuple[str, ...]) -> DrugRule:
    return DrugRule(
        drug_id=f"Repaglinide_Before_{meal.capitalize()}",
        category=DrugCategory.ORAL,
        dose=fixed_dose(f"1mg before {meal}", "1mg"),
        confidence=fixed_confidence(50),
        guidelines=guidelines,
        blocks=(PREGNANCY_BLOCK,),
        class_warnings=class_warnings,
        base_status=RecommendationStatus.WARNING,
    )


def lispro(meal: str, units: int, confidence: Callable[[ResolvedProfile], int],
           guidelines: tuple[str, ...], class_warnings: tuple[str, ...]) -> DrugRule:
    return DrugRule(
        drug_id=f"Lispro_Before_{meal.capitalize()}",
        category=DrugCategory.INSULIN,
        dose=fixed_dose(f"{units} units before {meal}", f"{units} units"),
        confidence=confidence,
        guidelines=guidelines,
        class_warnings=class_warnings,
    )


# =============================================================================
# DRUG TABLE
# =============================================================================

DRUG_TABLE: tuple[DrugRule, ...] = (
    # Oral agents
    DrugRule(
        drug_id="Metformin",
        category=DrugCategory.ORAL,
        dose=metformin_dose,
        confidence=metformin_confidence,
        guidelines=("ADA 2025 First-line therapy",),
        blocks=(
            egfr_floor(30, "BLOCKED: eGFR < 30 - Contraindicated"),
            PREGNANCY_BLOCK,
        ),
        caveats=(
            Caveat("Reduce dose for eGFR 30-45", lambda p: 30 <= p.egfr < 45),
        ),
    ),
    DrugRule(
        drug_id="Glimepiride",
        category=DrugCategory.ORAL,
        dose=fixed_dose("2mg once daily before breakfast", "2mg"),
        confidence=fixed_confidence(55),
        guidelines=("Second-line if Metformin intolerant",),
        blocks=(PREGNANCY_BLOCK,),
        class_warnings=(HYPOGLYCEMIA_RISK, "Weight gain potential"),
        base_status=RecommendationStatus.WARNING,
    ),
    DrugRule(
        drug_id="Tradjenta",
        category=DrugCategory.ORAL,
        dose=fixed_dose("5mg once daily", "5mg"),
        confidence=fixed_confidence(75),
        guidelines=("No renal dose adjustment needed", "ADA: DPP-4i option"),
        blocks=(PREGNANCY_BLOCK,),
    ),
    DrugRule(
        drug_id="Farxiga",
        category=DrugCategory.ORAL,
        dose=farxiga_dose,
        confidence=farxiga_confidence,
        guidelines=("KDIGO 2024: CKD benefit", "AHA: Heart failure protection"),
        blocks=(
            egfr_floor(25, "BLOCKED: eGFR < 25"),
            PREGNANCY_BLOCK,
        ),
        caveats=(
            Caveat("Reduced glucose efficacy at lower eGFR", lambda p: 25 <= p.egfr < 45),
        ),
    ),
    # GLP-1 receptor agonist
    DrugRule(
        drug_id="Semaglutide",
        category=DrugCategory.INJECTABLE,
        dose=semaglutide_dose,
        confidence=fixed_confidence(88),
        guidelines=("ADA: Weight loss benefit", "AHA: CV risk reduction"),
        blocks=(PREGNANCY_BLOCK,),
        class_warnings=("Start low, titrate slowly for GI tolerance",),
    ),
    # Meglitinides, one row per meal slot
    repaglinide(
        "breakfast",
        guidelines=("Alternative to sulfonylureas", "Flexible meal-time dosing"),
        class_warnings=(HYPOGLYCEMIA_RISK, "Requires meal-time dosing"),
    ),
    repaglinide(
        "lunch",
        guidelines=("Alternative to sulfonylureas",),
        class_warnings=(HYPOGLYCEMIA_RISK,),
    ),
    repaglinide(
        "dinner",
        guidelines=("Alternative to sulfonylureas",),
        class_warnings=(HYPOGLYCEMIA_RISK,),
    ),
    # Insulin is never blocked by pregnancy
    DrugRule(
        drug_id="Glargine_Before_Dinner",
        category=DrugCategory.INSULIN,
        dose=glargine_dose,
        confidence=glargine_confidence,
        guidelines=("ADA: Basal insulin when HbA1c > 9%", "Safe in pregnancy"),
        caveats=(
            Caveat("May not be needed if HbA1c at goal", lambda p: p.hba1c <= 7.5),
        ),
    ),
    lispro(
        "breakfast", 6, lispro_confidence(80, 60),
        guidelines=(BOLUS_GUIDELINE, "Safe in pregnancy"),
        class_warnings=(MONITOR_HYPOGLYCEMIA, "Adjust based on carb intake"),
    ),
    lispro(
        "lunch", 6, lispro_confidence(80, 60),
        guidelines=(BOLUS_GUIDELINE,),
        class_warnings=(MONITOR_HYPOGLYCEMIA,),
    ),
    lispro(
        "dinner", 8, lispro_confidence(82, 62),
        guidelines=(BOLUS_GUIDELINE,),
        class_warnings=(MONITOR_HYPOGLYCEMIA,),
    ),
)
