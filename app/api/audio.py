import logging
from typing import Optional

import groq
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.models.schemas import TranscriptionResponse
from app.services.transcription import (
    TranscriptionNotConfigured,
    TranscriptionService,
    transcription_service,
)
from app.services.validation import UploadValidationError, upload_validator

logger = logging.getLogger(__name__)

router = APIRouter()


def get_transcription_service() -> TranscriptionService:
    return transcription_service


@router.post("/transcribe", response_model=TranscriptionResponse)
def transcribe_audio(
    audio: Optional[UploadFile] = File(None),
    transcriber: TranscriptionService = Depends(get_transcription_service),
):
    """Transcribe an uploaded or recorded audio file into document text"""
    if audio is None or not audio.filename:
        raise HTTPException(status_code=400, detail="No audio file provided")

    content = audio.file.read()

    try:
        upload_validator.validate_audio(audio.filename, len(content))
    except UploadValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        text = transcriber.transcribe(audio.filename, content)
    except TranscriptionNotConfigured as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    except groq.AuthenticationError as e:
        raise HTTPException(
            status_code=401, detail="Invalid API key. Please check your GROQ_API_KEY."
        ) from e
    except Exception as e:
        logger.error("Audio transcription error for %s: %s", audio.filename, e)
        raise HTTPException(status_code=502, detail=f"Transcription failed: {e}") from e

    if not text:
        raise HTTPException(
            status_code=400,
            detail="Could not transcribe the audio. Please ensure the audio has clear speech.",
        )

    return TranscriptionResponse(
        text=text,
        file_name=audio.filename,
        file_size=len(content),
    )
