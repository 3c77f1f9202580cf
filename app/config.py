from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App info
    app_name: str = "Saathi.ai Legal Assistant"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Claude API
    anthropic_api_key: str = ""
    claude_model: str = "claude-sonnet-4-20250514"
    chat_temperature: float = 0.3
    chat_top_p: Optional[float] = None
    chat_top_k: int = 40
    max_output_tokens: int = 2048

    # Groq (audio transcription)
    groq_api_key: str = ""
    whisper_model: str = "whisper-large-v3"

    # Redis sessions
    redis_url: str = "redis://localhost:6379/0"
    session_ttl_hours: int = 24

    # Upload limits
    max_document_files: int = 3
    max_image_files: int = 5
    max_audio_bytes: int = 25 * 1024 * 1024  # 25MB

    # PDFs with less native text than this are treated as scanned
    scanned_pdf_min_chars: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
