"""
GLYERAL - Session State

UI-only state for one logged-in physician: which patient is open, which
wizard step is showing, and the recommendations currently on screen.
"""

import logging
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from glyeral.models.enums import WizardStep
from glyeral.models.recommendation import DrugRecommendation


logger = logging.getLogger(__name__)


class SessionState(BaseModel):
    """Mutable per-session state. Server data lives in the stores, not here."""

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True, validate_default=True)

    physician: Optional[str] = None
    selected_patient_id: Optional[str] = None
    step: WizardStep = WizardStep.DEMOGRAPHICS
    sidebar_open: bool = True
    recommendations: list[DrugRecommendation] = Field(default_factory=list)

    @property
    def logged_in(self) -> bool:
        return self.physician is not None

    def login(self, physician: str):
        self.physician = physician

    def select_patient(self, patient_id: str):
        """Open a patient at the first wizard step with no recommendations."""
        self.selected_patient_id = patient_id
        self.step = WizardStep.DEMOGRAPHICS
        self.recommendations = []
        logger.debug(f"Selected patient {patient_id}")

    def go_to(self, step: Union[str, WizardStep]):
        """
        Move to a wizard step.

        Raises:
            ValueError: if the step is not a known wizard step
        """
        try:
            self.step = WizardStep(step)
        except ValueError:
            valid = ", ".join(s.value for s in WizardStep)
            raise ValueError(f"Unknown wizard step '{step}' (expected one of: {valid})") from None

    def toggle_sidebar(self) -> bool:
        self.sidebar_open = not self.sidebar_open
        return self.sidebar_open

    def set_recommendations(self, recommendations: list[DrugRecommendation]):
        self.recommendations = list(recommendations)

    def logout(self):
        """Reset every field to its default."""
        defaults = SessionState()
        for name in type(self).model_fields:
            setattr(self, name, getattr(defaults, name))
        logger.debug("Session reset on logout")
