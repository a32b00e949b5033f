from fastapi import APIRouter, Depends

from askmynote.core.deps import get_chat_service
from askmynote.models.chat import ChatRequest, ChatResponse
from askmynote.services.chat_service import ChatService

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
def chat(body: ChatRequest, service: ChatService = Depends(get_chat_service)):
    return service.reply(
        message=body.message,
        subject=body.subject,
        focus_level=body.focusLevel,
    )
