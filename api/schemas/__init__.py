"""API schema modules."""

from api.schemas.decisions import (
    AcceptRequest,
    ChatRequest,
    ChipsRequest,
    ModifyRequest,
    RejectRequest,
)

__all__ = [
    "AcceptRequest",
    "ChatRequest",
    "ChipsRequest",
    "ModifyRequest",
    "RejectRequest",
]
