"""
Upload validation: file-type classification, per-batch limits and size caps
"""

from typing import Dict, List, Optional

from app.config import settings


class UploadValidationError(ValueError):
    """Raised when an upload is rejected before any extraction happens"""


class UploadValidator:
    """Classifies uploads by extension and enforces upload limits"""

    DOCUMENT_EXTENSIONS = [".pdf", ".txt", ".doc", ".docx"]
    IMAGE_EXTENSIONS = [".jpg", ".jpeg", ".png", ".gif", ".webp"]
    AUDIO_EXTENSIONS = [".mp3", ".wav", ".webm", ".ogg", ".m4a", ".mp4"]

    IMAGE_MIME_TYPES = {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".gif": "image/gif",
        ".webp": "image/webp",
    }
    AUDIO_MIME_TYPES = {
        ".mp3": "audio/mpeg",
        ".wav": "audio/wav",
        ".webm": "audio/webm",
        ".ogg": "audio/ogg",
        ".m4a": "audio/mp4",
        ".mp4": "audio/mp4",
    }

    def __init__(
        self,
        max_document_files: Optional[int] = None,
        max_image_files: Optional[int] = None,
        max_audio_bytes: Optional[int] = None,
    ):
        if max_document_files is None:
            max_document_files = settings.max_document_files
        if max_image_files is None:
            max_image_files = settings.max_image_files
        if max_audio_bytes is None:
            max_audio_bytes = settings.max_audio_bytes

        self.max_document_files = max_document_files
        self.max_image_files = max_image_files
        self.max_audio_bytes = max_audio_bytes

    @staticmethod
    def get_extension(filename: Optional[str]) -> str:
        """Lowercase suffix of a file name, including the dot"""
        name = filename or ""
        if "." not in name:
            return ""
        return "." + name.rsplit(".", 1)[-1].lower()

    def classify(self, filename: str) -> str:
        """Return 'document', 'image' or 'audio' for a file name"""
        ext = self.get_extension(filename)

        if ext in self.DOCUMENT_EXTENSIONS:
            return "document"
        if ext in self.IMAGE_EXTENSIONS:
            return "image"
        if ext in self.AUDIO_EXTENSIONS:
            return "audio"

        raise UploadValidationError(f"Unsupported file type: {filename}")

    def validate_batch(self, filenames: List[str]) -> Dict[str, List[str]]:
        """
        Split a multi-file upload into documents and images

        Args:
            filenames: Names of the uploaded files, in upload order

        Returns:
            Dict with 'document' and 'image' lists of file names
        """
        if not filenames:
            raise UploadValidationError("No files provided")

        groups = {"document": [], "image": []}

        for filename in filenames:
            category = self.classify(filename)
            if category not in groups:
                raise UploadValidationError(f"Unsupported file type: {filename}")
            groups[category].append(filename)

        if len(groups["document"]) > self.max_document_files:
            raise UploadValidationError(
                f"Maximum {self.max_document_files} document files allowed (PDF/Word/TXT)"
            )

        if len(groups["image"]) > self.max_image_files:
            raise UploadValidationError(
                f"Maximum {self.max_image_files} image files allowed"
            )

        return groups

    def validate_single_document(self, filename: str):
        """Single-file parsing only accepts plain text and PDF"""
        if self.get_extension(filename) not in [".txt", ".pdf"]:
            raise UploadValidationError("Only .txt and .pdf files are supported")

    def validate_audio(self, filename: str, size: int):
        """Check audio extension and size cap"""
        if self.get_extension(filename) not in self.AUDIO_EXTENSIONS:
            raise UploadValidationError(
                "Unsupported audio format. Please use MP3, WAV, WEBM, OGG, or M4A."
            )

        if size > self.max_audio_bytes:
            max_mb = self.max_audio_bytes // (1024 * 1024)
            raise UploadValidationError(
                f"Audio file too large. Maximum size is {max_mb}MB."
            )

    def get_mime_type(self, filename: str) -> str:
        """MIME type for an image or audio file"""
        ext = self.get_extension(filename)

        if ext in self.AUDIO_EXTENSIONS:
            return self.AUDIO_MIME_TYPES.get(ext, "audio/mpeg")

        return self.IMAGE_MIME_TYPES.get(ext, "application/octet-stream")


# Singleton instance
upload_validator = UploadValidator()
