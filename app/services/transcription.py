"""Audio transcription service using Groq Whisper"""

import logging

from groq import Groq

from app.config import settings
from app.services.prompts import TRANSCRIPTION_PROMPT

logger = logging.getLogger(__name__)


class TranscriptionNotConfigured(RuntimeError):
    """Raised when transcription is requested without a Groq API key"""


class TranscriptionService:
    """Service for turning recordings into text"""

    def __init__(self):
        self.client = None
        if settings.groq_api_key:
            self.client = Groq(api_key=settings.groq_api_key)
        self.model = settings.whisper_model

    def transcribe(self, filename: str, audio_bytes: bytes) -> str:
        """
        Transcribe an audio recording

        Args:
            filename: Original file name, used by the API to detect the format
            audio_bytes: Raw audio content

        Returns:
            Transcribed text, stripped
        """
        if not self.client:
            raise TranscriptionNotConfigured(
                "Groq API key is not configured. Please add GROQ_API_KEY to your .env file."
            )

        logger.info("Transcribing %s (%d bytes)", filename, len(audio_bytes))
        response = self.client.audio.transcriptions.create(
            file=(filename, audio_bytes),
            model=self.model,
            prompt=TRANSCRIPTION_PROMPT,
            response_format="text",
            temperature=0.0,
        )
        return str(response).strip()


# Singleton instance
transcription_service = TranscriptionService()
