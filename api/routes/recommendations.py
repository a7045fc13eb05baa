"""Recommendation and formulary routes."""

from fastapi import APIRouter, Depends

from api.state import get_engine, get_recorder
from glyeral.decisions import DecisionRecorder
from glyeral.engine import RecommendationEngine, formulary
from glyeral.engine.formulary import FormularyEntry
from glyeral.models import DrugRecommendation, PatientProfile

router = APIRouter()


@router.post("/recommendations/evaluate", response_model=list[DrugRecommendation])
async def evaluate_recommendations(
    profile: PatientProfile,
    engine: RecommendationEngine = Depends(get_engine),
) -> list[DrugRecommendation]:
    """
    Evaluate every drug in the table for a patient profile.

    Missing or invalid labs are defaulted, so any well-formed JSON object
    (even {}) gets the full list back in table order. Nothing is recorded.
    """
    return engine.evaluate(profile)


@router.post(
    "/patients/{patient_id}/recommendations",
    response_model=list[DrugRecommendation],
)
def generate_recommendations(
    patient_id: str,
    profile: PatientProfile,
    engine: RecommendationEngine = Depends(get_engine),
    recorder: DecisionRecorder = Depends(get_recorder),
) -> list[DrugRecommendation]:
    """
    Generate (or regenerate) the recommendations a physician will act on.

    Only recommendations issued here can be accepted, modified or rejected.
    Regenerating clears the patient's current decisions.
    """
    recommendations = engine.evaluate(profile.model_copy(update={"patient_id": patient_id}))
    recorder.track(patient_id, recommendations)
    return recommendations


@router.get("/formulary/{drug_id}", response_model=FormularyEntry)
async def get_formulary_entry(drug_id: str) -> FormularyEntry:
    """Prescribing options for a drug; unknown ids get the generic entry."""
    return formulary.lookup(drug_id)
