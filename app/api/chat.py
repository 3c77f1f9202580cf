from fastapi import APIRouter, Depends, HTTPException

from app.api.errors import ai_http_error
from app.models.schemas import ChatRequest, ChatResponse
from app.services.llm import LLMService, llm_service

router = APIRouter()


def get_llm_service() -> LLMService:
    return llm_service


@router.post("/message", response_model=ChatResponse)
def send_message(request: ChatRequest, llm: LLMService = Depends(get_llm_service)):
    """Answer a question grounded in the supplied document context"""
    if not request.message or not request.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    if not request.doc_text or not request.doc_text.strip():
        raise HTTPException(
            status_code=400,
            detail="Please provide a document context before asking questions.",
        )

    history = [msg.model_dump() for msg in request.history]

    try:
        answer = llm.answer_question(request.message, request.doc_text, history)
    except Exception as e:
        raise ai_http_error(e) from e

    return ChatResponse(response=answer)
