"""Medication recommendation rule engine."""

from glyeral.engine.engine import RecommendationEngine, evaluate
from glyeral.engine.formulary import FormularyEntry, display_name, lookup, match_medication
from glyeral.engine.rules import DRUG_TABLE, BlockRule, Caveat, Dose, DrugRule

__all__ = [
    "DRUG_TABLE",
    "BlockRule",
    "Caveat",
    "Dose",
    "DrugRule",
    "FormularyEntry",
    "RecommendationEngine",
    "display_name",
    "evaluate",
    "lookup",
    "match_medication",
]
