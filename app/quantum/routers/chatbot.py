from fastapi import APIRouter, Depends, Request

from app.quantum.core.deps import get_current_user
from app.quantum.schemas.chatbot import ChatbotAnswer, ChatbotQuestion
from app.quantum.services.chatbot import ChatbotService, get_chatbot_service

router = APIRouter()


@router.post("/chatbot", response_model=ChatbotAnswer)
async def ask_chatbot(
    request: Request,
    payload: ChatbotQuestion,
    user=Depends(get_current_user),
    service: ChatbotService = Depends(get_chatbot_service),
):
    authorization = request.headers.get("Authorization", "")
    token = authorization.split(" ", 1)[1] if authorization.lower().startswith("bearer ") else None
    answer = await service.ask(payload.question.strip(), user_email=user.email, token=token)
    return ChatbotAnswer(**answer, trace_id=getattr(request.state, "trace_id", ""))
