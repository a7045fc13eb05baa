"""
Recommendation Engine - evaluates the drug table against a patient profile.

Pure and deterministic: the same profile always produces the same list, one
recommendation per drug table row, in table order. Missing labs are defaulted
by PatientProfile.resolve() before any rule runs.
"""

import logging
from collections import Counter
from typing import Any, Optional, Sequence, Union

from glyeral.engine import formulary
from glyeral.engine.rules import DRUG_TABLE, DrugRule
from glyeral.models.enums import RecommendationStatus
from glyeral.models.patient import PatientProfile, ResolvedProfile
from glyeral.models.recommendation import DrugRecommendation


logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Table-driven medication recommendation evaluator."""

    def __init__(self, rules: Optional[Sequence[DrugRule]] = None):
        """
        Initialize the engine.

        Args:
            rules: Drug table to evaluate (defaults to DRUG_TABLE)
        """
        self.rules: tuple[DrugRule, ...] = tuple(rules) if rules is not None else DRUG_TABLE

    @property
    def drug_ids(self) -> list[str]:
        return [rule.drug_id for rule in self.rules]

    def evaluate(
        self,
        profile: Union[PatientProfile, dict[str, Any], None],
    ) -> list[DrugRecommendation]:
        """
        Produce one recommendation per drug in the table.

        Args:
            profile: Patient profile, or its JSON-shaped dict. None means an
                empty intake (all defaults).

        Returns:
            Recommendations in table order
        """
        if profile is None:
            profile = PatientProfile()
        elif isinstance(profile, dict):
            profile = PatientProfile.model_validate(profile)

        resolved = profile.resolve()
        if resolved.defaulted_labs:
            logger.debug(
                f"Defaulted labs for patient {profile.patient_id or '<new>'}: "
                f"{', '.join(resolved.defaulted_labs)}"
            )

        prescribed = self._prescribed_drug_ids(profile)
        recommendations = [
            self._evaluate_rule(rule, resolved, rule.drug_id in prescribed)
            for rule in self.rules
        ]

        counts = Counter(rec.status for rec in recommendations)
        logger.info(
            f"Evaluated {len(recommendations)} drugs for patient {profile.patient_id or '<new>'}: "
            f"{counts.get(RecommendationStatus.APPROVED.value, 0)} approved, "
            f"{counts.get(RecommendationStatus.WARNING.value, 0)} warning, "
            f"{counts.get(RecommendationStatus.BLOCKED.value, 0)} blocked"
        )
        return recommendations

    def _evaluate_rule(
        self,
        rule: DrugRule,
        profile: ResolvedProfile,
        currently_prescribed: bool,
    ) -> DrugRecommendation:
        """Apply one table row to the resolved profile."""
        block_reason = rule.block_reason(profile)
        if block_reason:
            logger.debug(f"{rule.drug_id} blocked: {block_reason}")
            status = RecommendationStatus.BLOCKED
        else:
            status = rule.base_status

        dose = rule.dose(profile)
        confidence = max(0, min(100, int(rule.confidence(profile))))

        return DrugRecommendation(
            drug_id=rule.drug_id,
            display_name=formulary.display_name(rule.drug_id),
            drug_class=formulary.lookup(rule.drug_id).drug_class,
            dose_text=dose.text,
            original_dosage=dose.original,
            confidence=confidence,
            status=status,
            guidelines=list(rule.guidelines),
            warnings=rule.warnings(profile, block_reason),
            category=rule.category,
            currently_prescribed=currently_prescribed,
        )

    def _prescribed_drug_ids(self, profile: PatientProfile) -> set[str]:
        """Drug ids matching the patient's active intake medications."""
        matched = set()
        for key in profile.active_medication_keys:
            drug_id = formulary.match_medication(key)
            if drug_id:
                matched.add(drug_id)
        return matched


_default_engine = RecommendationEngine()


def evaluate(profile: Union[PatientProfile, dict[str, Any], None]) -> list[DrugRecommendation]:
    """Evaluate the default drug table. See RecommendationEngine.evaluate."""
    return _default_engine.evaluate(profile)
