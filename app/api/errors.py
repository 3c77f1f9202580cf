"""Translate AI provider failures into HTTP errors"""

import logging

import anthropic
from fastapi import HTTPException

from app.services.llm import AIServiceNotConfigured

logger = logging.getLogger(__name__)


def ai_http_error(e: Exception) -> HTTPException:
    """Map an exception raised while calling Claude to an HTTPException"""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, AIServiceNotConfigured):
        return HTTPException(status_code=500, detail=str(e))
    if isinstance(e, anthropic.AuthenticationError):
        return HTTPException(
            status_code=401,
            detail="Invalid API key. Please check your ANTHROPIC_API_KEY.",
        )
    if isinstance(e, anthropic.RateLimitError):
        return HTTPException(
            status_code=429,
            detail="API rate limit exceeded. Please try again in a moment.",
        )

    logger.error("AI processing error: %s", e)
    return HTTPException(status_code=500, detail=f"AI processing error: {e}")
