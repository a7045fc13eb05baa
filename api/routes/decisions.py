"""Physician decision routes: accept, reject, modify."""

from fastapi import APIRouter, Depends, HTTPException

from api.schemas.decisions import AcceptRequest, ModifyRequest, RejectRequest
from api.state import get_recorder
from glyeral.decisions import DecisionRecorder
from glyeral.errors import (
    AlreadyActionedError,
    BlockedRecommendationError,
    UnverifiedRecommendationError,
)
from glyeral.models import Decision, DrugRecommendation, ModifiedRecommendation
from glyeral.utils.logging import get_logger

router = APIRouter()

logger = get_logger("api.decisions")


def _check_drug(drug_id: str, recommendation: DrugRecommendation):
    if recommendation.drug_id != drug_id:
        raise HTTPException(
            status_code=400,
            detail=f"Recommendation is for {recommendation.drug_id}, not {drug_id}",
        )


def _conflict(error: Exception) -> HTTPException:
    logger.warning(str(error))
    return HTTPException(status_code=409, detail=str(error))


@router.post(
    "/patients/{patient_id}/decisions/{drug_id}/accept",
    response_model=Decision,
)
def accept_recommendation(
    patient_id: str,
    drug_id: str,
    request: AcceptRequest,
    recorder: DecisionRecorder = Depends(get_recorder),
) -> Decision:
    _check_drug(drug_id, request.recommendation)
    try:
        return recorder.accept(patient_id, request.recommendation, physician=request.physician)
    except (BlockedRecommendationError, AlreadyActionedError, UnverifiedRecommendationError) as e:
        raise _conflict(e)


@router.post(
    "/patients/{patient_id}/decisions/{drug_id}/reject",
    response_model=Decision,
)
def reject_recommendation(
    patient_id: str,
    drug_id: str,
    request: RejectRequest,
    recorder: DecisionRecorder = Depends(get_recorder),
) -> Decision:
    _check_drug(drug_id, request.recommendation)
    try:
        return recorder.reject(
            patient_id,
            request.recommendation,
            reason=request.reason,
            physician=request.physician,
        )
    except (AlreadyActionedError, UnverifiedRecommendationError) as e:
        raise _conflict(e)


@router.post(
    "/patients/{patient_id}/decisions/{drug_id}/modify",
    response_model=ModifiedRecommendation,
)
def modify_recommendation(
    patient_id: str,
    drug_id: str,
    request: ModifyRequest,
    recorder: DecisionRecorder = Depends(get_recorder),
) -> ModifiedRecommendation:
    """
    Record a modification. Blank notes or dosage fail validation (422)
    before the recorder is called.
    """
    _check_drug(drug_id, request.recommendation)
    try:
        return recorder.modify(
            patient_id,
            request.recommendation,
            request.modification,
            physician=request.physician,
        )
    except (BlockedRecommendationError, AlreadyActionedError, UnverifiedRecommendationError) as e:
        raise _conflict(e)


@router.get("/patients/{patient_id}/decisions", response_model=list[Decision])
def list_decisions(
    patient_id: str,
    recorder: DecisionRecorder = Depends(get_recorder),
) -> list[Decision]:
    return recorder.decisions_for(patient_id)


@router.delete("/patients/{patient_id}/decisions")
def clear_decisions(
    patient_id: str,
    recorder: DecisionRecorder = Depends(get_recorder),
) -> dict:
    """Forget current decisions after recommendations are regenerated."""
    return {"patientId": patient_id, "cleared": recorder.clear(patient_id)}
