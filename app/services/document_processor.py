"""
Document processing service
Handles PDF, Word, plain text and images, with AI OCR for scanned content
"""

import io
import logging
import re
from typing import Any, Dict, List, Optional

import anthropic
import PyPDF2
from tika import parser

from app.config import settings
from app.services.llm import AIServiceNotConfigured, LLMService, llm_service
from app.services.validation import UploadValidator, upload_validator

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Extract text from uploaded files and merge them into one document context"""

    def __init__(
        self,
        llm: Optional[LLMService] = None,
        validator: Optional[UploadValidator] = None,
    ):
        self.llm = llm or llm_service
        self.validator = validator or upload_validator
        self.scanned_pdf_min_chars = settings.scanned_pdf_min_chars

    def process_file(self, filename: str, content: bytes) -> Dict[str, Any]:
        """
        Extract text from a single uploaded file

        Args:
            filename: Original file name; its extension picks the extractor
            content: Raw file bytes

        Returns:
            Parsed file dict with file_name, file_type, text, file_size, ocr_used
        """
        file_type = self.validator.classify(filename)
        ext = self.validator.get_extension(filename)
        ocr_used = False

        if ext == ".pdf":
            text, ocr_used = self._process_pdf(filename, content)
        elif ext in [".doc", ".docx"]:
            text = self._process_word(filename, content)
        elif ext == ".txt":
            text = self._process_text(content)
        elif file_type == "image":
            text = self._process_image_ocr(filename, content)
            ocr_used = True
        else:
            raise ValueError(f"No text extractor for {filename}")

        return {
            "file_name": filename,
            "file_type": file_type,
            "text": self.clean_text(text),
            "file_size": len(content),
            "ocr_used": ocr_used,
        }

    def process_batch(self, files: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Validate and extract a multi-file upload

        Args:
            files: List of {"filename": str, "content": bytes} in upload order

        Returns:
            Dict with the merged text, parsed files and per-category counts
        """
        groups = self.validator.validate_batch([f["filename"] for f in files])

        # Documents first, then images, each in upload order
        ordered = [f for f in files if f["filename"] in groups["document"]]
        ordered += [f for f in files if f["filename"] in groups["image"]]

        parsed_files = []
        for upload in ordered:
            parsed = self.process_file(upload["filename"], upload["content"])
            if parsed["text"]:
                parsed_files.append(parsed)
            else:
                logger.warning("No text extracted from %s", upload["filename"])

        return {
            "text": self.merge(parsed_files),
            "files": parsed_files,
            "total_files": len(files),
            "document_count": len(groups["document"]),
            "image_count": len(groups["image"]),
        }

    @staticmethod
    def clean_text(text: Optional[str]) -> str:
        """Normalize line endings, collapse long blank runs and trim"""
        if not text:
            return ""
        text = text.replace("\r\n", "\n")
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.strip()

    @staticmethod
    def merge(parsed_files: List[Dict[str, Any]]) -> str:
        """Build the document context from parsed files with text"""
        sections = []

        for parsed in parsed_files:
            if not parsed.get("text"):
                continue
            label = "Image" if parsed.get("file_type") == "image" else "Document"
            sections.append(f"--- {label}: {parsed['file_name']} ---\n\n{parsed['text']}")

        return "\n\n".join(sections).strip()

    def _process_pdf(self, filename: str, content: bytes):
        """Native PDF extraction with a fallback to AI OCR for scanned files"""
        pdf_reader = PyPDF2.PdfReader(io.BytesIO(content))

        text = ""
        for page in pdf_reader.pages:
            page_text = page.extract_text()
            if page_text:
                text += page_text + "\n\n"

        # Check if PDF has extractable text
        if len(text.strip()) >= self.scanned_pdf_min_chars:
            return text, False

        logger.info(
            "PDF %s has %d chars of native text, using OCR",
            filename,
            len(text.strip()),
        )
        try:
            ocr_text = self.llm.extract_text_from_pdf(content)
        except (AIServiceNotConfigured, anthropic.APIError) as e:
            if not text.strip():
                raise
            logger.warning("OCR failed for %s, keeping native text: %s", filename, e)
            return text, False

        if ocr_text and ocr_text.strip():
            return ocr_text, True

        logger.warning("OCR returned no text for %s", filename)
        return text, False

    def _process_word(self, filename: str, content: bytes) -> str:
        """Process Word document with Tika"""
        try:
            parsed = parser.from_buffer(content)
        except Exception as e:
            logger.error("Tika processing error for %s: %s", filename, e)
            return f"[Error extracting text from: {filename}]"

        text = (parsed or {}).get("content") or ""
        if not text.strip() and filename.lower().endswith(".doc"):
            return f"[Old Word format: {filename} - Please convert to .docx for better results]"
        return text

    def _process_text(self, content: bytes) -> str:
        """Process plain text file"""
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError:
            # Try with different encoding
            return content.decode("latin-1")

    def _process_image_ocr(self, filename: str, content: bytes) -> str:
        """Process image file with OCR"""
        logger.info("Processing image %s with OCR", filename)
        media_type = self.validator.get_mime_type(filename)
        return self.llm.extract_text_from_image(content, media_type)


# Singleton instance
document_processor = DocumentProcessor()
