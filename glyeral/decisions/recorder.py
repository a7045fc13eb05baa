"""
Decision Recorder - physician accept / modify / reject actions.

Decisions are keyed by (patient_id, drug_id). The recorder remembers the
recommendations issued for each patient and only acts on those exact
recommendations, so a caller cannot unblock a drug by editing its status.
The engine never sees this state. Every recorded action also lands in the
audit trail.
"""

import logging
import threading
from typing import Any, Optional, Union

from glyeral.decisions.store import AuditStore
from glyeral.engine import formulary
from glyeral.errors import (
    AlreadyActionedError,
    BlockedRecommendationError,
    UnverifiedRecommendationError,
)
from glyeral.models.audit import Decision
from glyeral.models.enums import ACTION_TO_AUDIT_STATUS, PhysicianAction
from glyeral.models.recommendation import (
    DrugRecommendation,
    ModificationRequest,
    ModifiedRecommendation,
)


logger = logging.getLogger(__name__)


class DecisionRecorder:
    """Tracks the current decision per drug per patient and writes the audit trail."""

    def __init__(self, audit_store: Optional[AuditStore] = None):
        """
        Initialize the recorder.

        Args:
            audit_store: Where audit entries go (in-memory store if omitted)
        """
        self.audit_store = audit_store if audit_store is not None else AuditStore()
        self._decisions: dict[tuple[str, str], Decision] = {}
        self._issued: dict[str, dict[str, DrugRecommendation]] = {}
        self._lock = threading.Lock()


    # =========================================================================
    # ISSUED RECOMMENDATIONS
    # =========================================================================

    def track(self, patient_id: str, recommendations: list[DrugRecommendation]) -> int:
        """
        Remember the recommendations just generated for a patient.

        Replaces any earlier set and forgets the patient's decisions, so every
        drug can be actioned again. The audit trail is untouched.

        Returns:
            Number of decisions cleared
        """
        with self._lock:
            self._issued[patient_id] = {rec.drug_id: rec for rec in recommendations}
            cleared = self._clear_decisions(patient_id)
        logger.info(
            f"Tracking {len(recommendations)} recommendations for patient {patient_id}"
            + (f" ({cleared} decisions cleared)" if cleared else "")
        )
        return cleared

    def issued_for(self, patient_id: str) -> list[DrugRecommendation]:
        with self._lock:
            return list(self._issued.get(patient_id, {}).values())

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def accept(
        self,
        patient_id: str,
        recommendation: DrugRecommendation,
        physician: Optional[str] = None,
    ) -> Decision:
        """
        Accept a recommendation as shown.

        Raises:
            UnverifiedRecommendationError: if it is not the one issued for the patient
            BlockedRecommendationError: if the recommendation is blocked
            AlreadyActionedError: if the drug was already actioned
        """
        issued = self._verified(patient_id, recommendation)
        self._ensure_prescribable(issued)

        decision = Decision(
            patient_id=patient_id,
            drug_id=issued.drug_id,
            action=PhysicianAction.ACCEPTED,
            physician=physician,
        )
        action_text = f"Accepted - {physician}" if physician else "Accepted"
        meds = f"{self._label(issued)} {issued.original_dosage}"
        return self._record(decision, issued, meds, action_text)

    def reject(
        self,
        patient_id: str,
        recommendation: DrugRecommendation,
        reason: Optional[str] = None,
        physician: Optional[str] = None,
    ) -> Decision:
        """
        Reject a recommendation. Blocked recommendations may be rejected.

        Raises:
            UnverifiedRecommendationError: if it is not the one issued for the patient
            AlreadyActionedError: if the drug was already actioned
        """
        issued = self._verified(patient_id, recommendation)
        reason = reason.strip() if reason else None
        decision = Decision(
            patient_id=patient_id,
            drug_id=issued.drug_id,
            action=PhysicianAction.REJECTED,
            physician=physician,
            notes=reason,
        )
        meds = f"{self._label(issued)} {issued.original_dosage}"
        return self._record(decision, issued, meds, reason or "Rejected")

    def modify(
        self,
        patient_id: str,
        recommendation: DrugRecommendation,
        request: Union[ModificationRequest, dict[str, Any]],
        physician: Optional[str] = None,
    ) -> ModifiedRecommendation:
        """
        Record a physician modification.

        The request is validated before anything is stored: blank notes or a
        blank dosage raise pydantic.ValidationError and nothing is recorded.

        Args:
            patient_id: Patient the recommendation belongs to
            recommendation: The recommendation as shown (left unchanged)
            request: Dosage, frequency, timing and justification notes
            physician: Optional physician name for the audit trail

        Returns:
            The new modified record
        """
        if not isinstance(request, ModificationRequest):
            request = ModificationRequest.model_validate(request)

        issued = self._verified(patient_id, recommendation)
        self._ensure_prescribable(issued)

        entry = formulary.lookup(issued.drug_id)
        modified = ModifiedRecommendation(
            original=issued,
            modified_dosage=request.modified_dosage,
            frequency=request.frequency or entry.default_frequency,
            timing=request.timing or entry.default_timing,
            notes=request.notes,
        )

        decision = Decision(
            patient_id=patient_id,
            drug_id=issued.drug_id,
            action=PhysicianAction.MODIFIED,
            timestamp=modified.modified_at,
            physician=physician,
            notes=request.notes,
            modification=modified,
        )
        meds = (
            f"{self._label(issued)} {issued.original_dosage} "
            f"→ {modified.modified_dosage}"
        )
        self._record(decision, issued, meds, request.notes)
        return modified

    # =========================================================================
    # QUERIES
    # =========================================================================

    def decision_for(self, patient_id: str, drug_id: str) -> Optional[Decision]:
        with self._lock:
            return self._decisions.get((patient_id, drug_id))

    def decisions_for(self, patient_id: str) -> list[Decision]:
        """All current decisions for a patient, oldest first."""
        with self._lock:
            decisions = [d for (pid, _), d in self._decisions.items() if pid == patient_id]
        return sorted(decisions, key=lambda d: d.timestamp)

    def clear(self, patient_id: str) -> int:
        """
        Forget a patient's current decisions. Issued recommendations stay.

        The audit trail is untouched.

        Returns:
            Number of decisions cleared
        """
        with self._lock:
            cleared = self._clear_decisions(patient_id)
        if cleared:
            logger.info(f"Cleared {cleared} decisions for patient {patient_id}")
        return cleared

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _clear_decisions(self, patient_id: str) -> int:
        keys = [key for key in self._decisions if key[0] == patient_id]
        for key in keys:
            del self._decisions[key]
        return len(keys)

    def _verified(self, patient_id: str, recommendation: DrugRecommendation) -> DrugRecommendation:
        """The issued recommendation matching the one supplied."""
        with self._lock:
            issued = self._issued.get(patient_id, {}).get(recommendation.drug_id)
        if issued is None:
            raise UnverifiedRecommendationError(
                patient_id, recommendation.drug_id, "was not recommended"
            )
        if issued != recommendation:
            logger.warning(
                f"Refusing {recommendation.drug_id} for patient {patient_id}: "
                f"does not match the issued recommendation"
            )
            raise UnverifiedRecommendationError(
                patient_id, recommendation.drug_id, "does not match the issued recommendation"
            )
        return issued

    def _ensure_prescribable(self, recommendation: DrugRecommendation):
        if recommendation.is_blocked:
            raise BlockedRecommendationError(
                recommendation.drug_id,
                recommendation.primary_warning,
            )

    def _record(
        self,
        decision: Decision,
        issued: DrugRecommendation,
        meds: str,
        action_text: str,
    ) -> Decision:
        key = (decision.patient_id, decision.drug_id)
        with self._lock:
            if self._issued.get(decision.patient_id, {}).get(decision.drug_id) is not issued:
                raise UnverifiedRecommendationError(
                    decision.patient_id, decision.drug_id, "was regenerated meanwhile"
                )
            existing = self._decisions.get(key)
            if existing is not None:
                raise AlreadyActionedError(decision.drug_id, existing.action)

            self.audit_store.record(
                time=decision.timestamp,
                status=ACTION_TO_AUDIT_STATUS[PhysicianAction(decision.action)],
                meds=meds,
                confidence=issued.confidence,
                action=action_text,
                patient_id=decision.patient_id,
                drug_id=decision.drug_id,
            )
            self._decisions[key] = decision

        logger.info(f"{decision.drug_id} {decision.action} for patient {decision.patient_id}")
        return decision

    def _label(self, recommendation: DrugRecommendation) -> str:
        return recommendation.display_name or formulary.display_name(recommendation.drug_id)
