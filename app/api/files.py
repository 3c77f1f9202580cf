import logging
from typing import List, Optional

import anthropic
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.api.errors import ai_http_error
from app.models.schemas import ParseBatchResponse, ParseFileResponse
from app.services.document_processor import DocumentProcessor, document_processor
from app.services.llm import AIServiceNotConfigured
from app.services.validation import UploadValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_document_processor() -> DocumentProcessor:
    return document_processor


@router.post("/parse", response_model=ParseFileResponse)
def parse_file(
    file: Optional[UploadFile] = File(None),
    processor: DocumentProcessor = Depends(get_document_processor),
):
    """Extract text from a single PDF or plain text file"""
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    try:
        processor.validator.validate_single_document(file.filename)
        content = file.file.read()
        parsed = processor.process_file(file.filename, content)
    except UploadValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except (AIServiceNotConfigured, anthropic.APIError) as e:
        raise ai_http_error(e) from e
    except Exception as e:
        logger.error("File parse error for %s: %s", file.filename, e)
        raise HTTPException(status_code=500, detail=f"Failed to parse file: {e}") from e

    if not parsed["text"]:
        raise HTTPException(
            status_code=400,
            detail="Could not extract text from the file. "
            "The file may be empty or contain only images.",
        )

    return ParseFileResponse(
        text=parsed["text"],
        file_name=parsed["file_name"],
        file_size=parsed["file_size"],
        ocr_used=parsed["ocr_used"],
    )


@router.post("/parse-batch", response_model=ParseBatchResponse)
def parse_files(
    files: Optional[List[UploadFile]] = File(None),
    processor: DocumentProcessor = Depends(get_document_processor),
):
    """Extract and merge text from up to 3 documents and 5 images"""
    if not files:
        raise HTTPException(status_code=400, detail="No files provided")

    try:
        uploads = [{"filename": f.filename or "", "content": f.file.read()} for f in files]
        result = processor.process_batch(uploads)
    except UploadValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except (AIServiceNotConfigured, anthropic.APIError) as e:
        raise ai_http_error(e) from e
    except Exception as e:
        logger.error("Batch parse error: %s", e)
        raise HTTPException(status_code=500, detail=f"Failed to parse files: {e}") from e

    if not result["text"] or not result["files"]:
        raise HTTPException(
            status_code=400,
            detail="Could not extract text from any of the provided files.",
        )

    return ParseBatchResponse(**result)
