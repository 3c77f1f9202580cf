"""Matter workspace API: a server-held document context and chat transcript"""

from typing import Dict

from fastapi import APIRouter, Depends, HTTPException

from app.api.errors import ai_http_error
from app.models.schemas import ChatResponse, SessionDocument, SessionMessageRequest
from app.services.llm import llm_service
from app.services.session import session_manager

router = APIRouter()


def get_services() -> Dict:
    """Get all required services"""
    return {"sessions": session_manager, "llm": llm_service}


def _get_or_404(sessions, session_id: str) -> Dict:
    session = sessions.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("")
def create_session(services: Dict = Depends(get_services)):
    """Start a new matter"""
    session_id = services["sessions"].create_session()
    return {"session_id": session_id}


@router.get("/{session_id}")
def get_session(session_id: str, services: Dict = Depends(get_services)):
    """Get the matter's document, files and transcript"""
    return _get_or_404(services["sessions"], session_id)


@router.delete("/{session_id}")
def delete_session(session_id: str, services: Dict = Depends(get_services)):
    """Discard the matter entirely"""
    if not services["sessions"].delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"session_id": session_id, "deleted": True}


@router.put("/{session_id}/document")
def set_document(
    session_id: str, document: SessionDocument, services: Dict = Depends(get_services)
):
    """Attach a document context to the matter, replacing any previous one"""
    sessions = services["sessions"]
    _get_or_404(sessions, session_id)

    files = [f.model_dump() for f in document.files]
    session = sessions.set_document(session_id, document.text, files)
    return {
        "session_id": session_id,
        "doc_length": len(session["doc_text"]),
        "files": session["files"],
    }


@router.delete("/{session_id}/document")
def clear_document(session_id: str, services: Dict = Depends(get_services)):
    """Clear the document but keep the transcript"""
    sessions = services["sessions"]
    _get_or_404(sessions, session_id)

    sessions.clear_document(session_id)
    return {"session_id": session_id, "doc_length": 0, "files": []}


@router.post("/{session_id}/messages", response_model=ChatResponse)
def send_message(
    session_id: str,
    request: SessionMessageRequest,
    services: Dict = Depends(get_services),
):
    """Ask a question against the matter's stored document"""
    sessions = services["sessions"]
    llm = services["llm"]
    session = _get_or_404(sessions, session_id)

    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    doc_text = session.get("doc_text") or ""
    if not doc_text.strip():
        raise HTTPException(
            status_code=400,
            detail="Please paste or upload a document before asking questions.",
        )

    history = [
        {"role": m["role"], "content": m["content"]}
        for m in sessions.get_messages(session_id)
    ]

    try:
        answer = llm.answer_question(request.message, doc_text, history)
    except Exception as e:
        raise ai_http_error(e) from e

    # A failed turn leaves the transcript untouched
    sessions.add_messages(
        session_id,
        [
            {"role": "user", "content": request.message.strip()},
            {"role": "model", "content": answer},
        ],
    )
    return ChatResponse(response=answer)
