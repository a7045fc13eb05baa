"""Chat assistant routes."""

from fastapi import APIRouter, Depends

from api.schemas.decisions import ChatRequest, ChipsRequest
from api.state import get_assistant
from glyeral.chat import ChatAssistant
from glyeral.models import ChatReply, QuickChip

router = APIRouter()


@router.post("/chat", response_model=ChatReply)
async def chat(
    request: ChatRequest,
    assistant: ChatAssistant = Depends(get_assistant),
) -> ChatReply:
    """Answer a question about the recommendations on screen."""
    return assistant.respond(request.message, request.recommendations)


@router.post("/chat/chips", response_model=list[QuickChip])
async def quick_chips(
    request: ChipsRequest,
    assistant: ChatAssistant = Depends(get_assistant),
) -> list[QuickChip]:
    return assistant.quick_chips(request.recommendations)
