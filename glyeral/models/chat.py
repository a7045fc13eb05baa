"""
GLYERAL - Chat Assistant Models
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChatReply(BaseModel):
    """A canned assistant reply."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    response: str
    intent: str = Field(description="Which dispatch entry answered, e.g. 'metformin:why'")
    delay_ms: int = Field(
        default=0,
        ge=0,
        description="Suggested typing delay for the UI; nothing waits on it",
    )


class QuickChip(BaseModel):
    """A suggested prompt shown above the chat input."""

    label: str
    message: str
