from fastapi import APIRouter, Depends, HTTPException

from app.api.errors import ai_http_error
from app.models.schemas import SummaryRequest, SummaryResponse
from app.services.llm import LLMService, llm_service

router = APIRouter()


def get_llm_service() -> LLMService:
    return llm_service


@router.post("", response_model=SummaryResponse)
def generate_summary(request: SummaryRequest, llm: LLMService = Depends(get_llm_service)):
    """Generate a short, detailed, chronology or key-points summary"""
    if not request.text or not request.text.strip() or not request.type:
        raise HTTPException(status_code=400, detail="Missing input")

    try:
        result = llm.summarize(request.text, request.type.value)
    except Exception as e:
        raise ai_http_error(e) from e

    return SummaryResponse(type=request.type, result=result)
