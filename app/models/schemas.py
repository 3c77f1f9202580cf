from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class SummaryType(str, Enum):
    SHORT = "short"
    DETAILED = "detailed"
    CHRONOLOGY = "chronology"
    KEY_POINTS = "key_points"


class ChatMessage(BaseModel):
    """One turn of a chat transcript"""

    role: Literal["user", "model"]
    content: str


# Request/Response Schemas
class ChatRequest(BaseModel):
    """Question about a document, with the transcript so far"""

    message: Optional[str] = Field(None, description="The user's question")
    history: List[ChatMessage] = Field(
        default_factory=list, description="Prior turns, oldest first"
    )
    doc_text: Optional[str] = Field(
        None, description="Document context the answer must be grounded in"
    )


class ChatResponse(BaseModel):
    response: str
    success: bool = True


class SummaryRequest(BaseModel):
    text: Optional[str] = Field(None, description="Document context to summarize")
    type: Optional[SummaryType] = Field(None, description="Kind of summary")


class SummaryResponse(BaseModel):
    type: SummaryType
    result: str


class ParsedFile(BaseModel):
    file_name: str
    file_type: Literal["document", "image", "audio"]
    text: str
    file_size: int
    ocr_used: bool = False


class ParseFileResponse(BaseModel):
    text: str
    file_name: str
    file_size: int
    ocr_used: bool = False
    success: bool = True


class ParseBatchResponse(BaseModel):
    text: str = Field(..., description="Merged document context")
    files: List[ParsedFile]
    total_files: int
    document_count: int
    image_count: int
    success: bool = True


class TranscriptionResponse(BaseModel):
    text: str
    file_name: str
    file_size: int
    duration: Optional[float] = None
    success: bool = True


class SessionDocument(BaseModel):
    """Document context to attach to a matter session"""

    text: str = Field(..., description="Full document context", min_length=1)
    files: List[ParsedFile] = Field(default_factory=list)


class SessionMessageRequest(BaseModel):
    message: str = Field(..., description="The user's question")


class Matter(BaseModel):
    id: str
    title: str
    court: str
    stage: str
    parties: str
    next_hearing: str
    last_order: str
