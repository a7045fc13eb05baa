"""Decision and chat API schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from glyeral.models import DrugRecommendation, ModificationRequest


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AcceptRequest(_CamelModel):
    """Accept a recommendation as shown."""
    recommendation: DrugRecommendation
    physician: Optional[str] = None


class RejectRequest(_CamelModel):
    """Reject a recommendation, optionally with a reason."""
    recommendation: DrugRecommendation
    reason: Optional[str] = None
    physician: Optional[str] = None


class ModifyRequest(_CamelModel):
    """Modify a recommendation. Notes are required."""
    recommendation: DrugRecommendation
    modification: ModificationRequest
    physician: Optional[str] = None


class ChatRequest(_CamelModel):
    """A chat message plus the recommendations currently on screen."""
    message: str = Field(min_length=1)
    recommendations: list[DrugRecommendation] = Field(default_factory=list)


class ChipsRequest(_CamelModel):
    recommendations: list[DrugRecommendation] = Field(default_factory=list)
