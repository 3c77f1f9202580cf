import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch
from typing import Generator
import os

import httpx
import redis

# Set test environment
os.environ["TESTING"] = "true"
os.environ["REDIS_URL"] = "redis://localhost:1/0"

from app.main import app
from app.services.document_processor import DocumentProcessor
from app.services.llm import LLMService
from app.services.session import SessionManager
from app.services.transcription import TranscriptionService
from app.services.validation import UploadValidator


@pytest.fixture
def client() -> Generator:
    """Create test client"""
    with TestClient(app) as test_client:
        yield test_client


def _claude_reply(text: str) -> MagicMock:
    return MagicMock(content=[MagicMock(type="text", text=text)])


@pytest.fixture
def claude_reply():
    """Build the shape of an Anthropic messages.create() result"""
    return _claude_reply


@pytest.fixture
def mock_claude_client():
    """Mock Claude API client"""
    mock = MagicMock()
    mock.messages.create = MagicMock(
        return_value=_claude_reply("The petitioner is **ABC Pvt. Ltd.**")
    )
    return mock


@pytest.fixture
def anthropic_error():
    """Build an Anthropic SDK error with the given HTTP status"""

    def factory(cls, status_code):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        response = httpx.Response(status_code, request=request)
        return cls("error", response=response, body=None)

    return factory


@pytest.fixture
def mock_groq_client():
    """Mock Groq API client"""
    mock = MagicMock()
    mock.audio.transcriptions.create = MagicMock(
        return_value="Speaker 1: The matter is listed for hearing on 12 October.\n"
    )
    return mock


@pytest.fixture
def llm_service(mock_claude_client):
    """Create LLM service with mocked Claude"""
    service = LLMService()
    service.client = mock_claude_client
    return service


@pytest.fixture
def transcription_service(mock_groq_client):
    """Create transcription service with mocked Groq"""
    service = TranscriptionService()
    service.client = mock_groq_client
    return service


@pytest.fixture
def upload_validator():
    return UploadValidator(max_document_files=3, max_image_files=5)


@pytest.fixture
def document_processor(llm_service, upload_validator):
    """Create document processor with mocked Claude"""
    processor = DocumentProcessor(llm=llm_service, validator=upload_validator)
    processor.scanned_pdf_min_chars = 100
    return processor


@pytest.fixture
def session_manager():
    """Session manager running on its in-memory fallback"""
    with patch(
        "app.services.session.redis.from_url",
        side_effect=redis.ConnectionError("Redis unavailable"),
    ):
        return SessionManager(ttl_hours=24)


@pytest.fixture
def sample_document_text():
    """Sample document for testing"""
    return (
        "IN THE SUPREME COURT OF INDIA\n"
        "CIVIL APPELLATE JURISDICTION\n"
        "SPECIAL LEAVE PETITION (CIVIL) NO. 1234 OF 2025\n\n"
        "ABC Pvt. Ltd. ... Petitioner\n"
        "Versus\n"
        "Union of India ... Respondent\n\n"
        "The petitioner challenges the order dated 22.09.2025 passed by the "
        "High Court of Delhi dismissing its writ petition."
    )


@pytest.fixture
def sample_history():
    return [
        {"role": "user", "content": "Who is the petitioner?"},
        {"role": "model", "content": "The petitioner is ABC Pvt. Ltd."},
    ]


@pytest.fixture
def pdf_reader_factory():
    """Build a PyPDF2.PdfReader replacement returning fixed page texts"""

    def factory(page_texts):
        reader = MagicMock()
        reader.pages = [
            MagicMock(extract_text=MagicMock(return_value=t)) for t in page_texts
        ]
        return MagicMock(return_value=reader)

    return factory
