"""
Claude client wrapper for document Q&A, summaries and OCR
"""

import base64
import logging
from typing import Dict, List, Optional

from anthropic import Anthropic

from app.config import settings
from app.services.prompts import (
    CHAT_SYSTEM_INSTRUCTION,
    IMAGE_OCR_PROMPT,
    SCANNED_PDF_OCR_PROMPT,
    build_chat_prompt,
    build_summary_prompt,
)

logger = logging.getLogger(__name__)


class AIServiceNotConfigured(RuntimeError):
    """Raised when a call needs Claude but no API key is set"""


class LLMService:
    def __init__(self):
        self.client = None
        if settings.anthropic_api_key:
            self.client = Anthropic(api_key=settings.anthropic_api_key)
        self.model = settings.claude_model

    def _require_client(self):
        if not self.client:
            raise AIServiceNotConfigured(
                "Anthropic API key is not configured. "
                "Please add ANTHROPIC_API_KEY to your .env file."
            )

    def _generation_params(self) -> Dict:
        params = {
            "model": self.model,
            "max_tokens": settings.max_output_tokens,
            "temperature": settings.chat_temperature,
            "top_k": settings.chat_top_k,
        }
        if settings.chat_top_p is not None:
            params["top_p"] = settings.chat_top_p
        return params

    @staticmethod
    def _response_text(response) -> str:
        if not response.content:
            return ""
        return response.content[0].text

    @staticmethod
    def to_claude_messages(history: List[Dict[str, str]]) -> List[Dict[str, str]]:
        """
        Convert a chat transcript into Claude message turns

        The transcript uses 'user'/'model' roles. Claude wants 'user'/'assistant',
        a user turn first, and no two consecutive turns from the same role.
        """
        messages = []

        for msg in history:
            role = "assistant" if msg.get("role") == "model" else "user"
            content = msg.get("content") or ""
            if not content.strip():
                continue
            if not messages and role == "assistant":
                continue

            if messages and messages[-1]["role"] == role:
                messages[-1]["content"] += "\n\n" + content
            else:
                messages.append({"role": role, "content": content})

        return messages

    def answer_question(
        self, message: str, doc_text: str, history: Optional[List[Dict[str, str]]] = None
    ) -> str:
        """Answer a question strictly from the document context"""
        self._require_client()

        messages = self.to_claude_messages(history or [])
        prompt = build_chat_prompt(doc_text, message)
        if messages and messages[-1]["role"] == "user":
            messages[-1]["content"] += "\n\n" + prompt
        else:
            messages.append({"role": "user", "content": prompt})

        logger.info(
            "Answering question with %d history turns and %d chars of context",
            len(messages) - 1,
            len(doc_text),
        )
        response = self.client.messages.create(
            system=CHAT_SYSTEM_INSTRUCTION,
            messages=messages,
            **self._generation_params(),
        )
        return self._response_text(response)

    def summarize(self, text: str, summary_type: str) -> str:
        """Generate a canned summary of a document"""
        prompt = build_summary_prompt(summary_type, text)
        self._require_client()

        logger.info("Generating %s summary for %d chars", summary_type, len(text))
        response = self.client.messages.create(
            messages=[{"role": "user", "content": prompt}],
            **self._generation_params(),
        )
        return self._response_text(response)

    def extract_text_from_image(self, image_bytes: bytes, media_type: str) -> str:
        """OCR an image through Claude vision"""
        self._require_client()

        response = self.client.messages.create(
            model=self.model,
            max_tokens=8192,
            temperature=0.0,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": media_type,
                                "data": base64.b64encode(image_bytes).decode("utf-8"),
                            },
                        },
                        {"type": "text", "text": IMAGE_OCR_PROMPT},
                    ],
                }
            ],
        )
        return self._response_text(response)

    def extract_text_from_pdf(self, pdf_bytes: bytes) -> str:
        """Extract text from a scanned PDF by sending the raw document"""
        self._require_client()

        response = self.client.messages.create(
            model=self.model,
            max_tokens=8192,
            temperature=0.0,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "document",
                            "source": {
                                "type": "base64",
                                "media_type": "application/pdf",
                                "data": base64.b64encode(pdf_bytes).decode("utf-8"),
                            },
                        },
                        {"type": "text", "text": SCANNED_PDF_OCR_PROMPT},
                    ],
                }
            ],
        )
        return self._response_text(response)


# Singleton instance
llm_service = LLMService()
