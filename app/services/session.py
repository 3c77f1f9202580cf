"""
Redis-based session management for matter workspaces
"""
import json
import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import redis

from app.config import settings

logger = logging.getLogger(__name__)

MAX_MESSAGES = 100


class SessionManager:
    """Holds a matter's document context and chat transcript in Redis"""

    def __init__(self, redis_url: Optional[str] = None, ttl_hours: Optional[int] = None):
        """Initialize Redis connection"""
        redis_url = redis_url or settings.redis_url
        self.ttl_hours = ttl_hours or settings.session_ttl_hours
        self.memory_store = {}

        try:
            self.redis_client = redis.from_url(redis_url, decode_responses=True)
            self.redis_client.ping()
            self.enabled = True
            logger.info("Redis connection established")
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Using in-memory fallback.", e)
            self.redis_client = None
            self.enabled = False

    @staticmethod
    def _key(session_id: str) -> str:
        return f"session:{session_id}"

    def create_session(self) -> str:
        """Create a new, empty matter session"""
        session_id = str(uuid.uuid4())
        session_data = {
            "session_id": session_id,
            "created_at": datetime.now().isoformat(),
            "doc_text": "",
            "files": [],
            "messages": [],
        }

        self.set_session(session_id, session_data)
        return session_id

    def get_session(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Get session data"""
        key = self._key(session_id)

        # Writes that failed to reach Redis are newer than its copy
        if key in self.memory_store:
            return self.memory_store[key]

        if self.enabled:
            try:
                data = self.redis_client.get(key)
                if data:
                    return json.loads(data)
            except redis.RedisError as e:
                logger.error("Redis get error: %s", e)

        return None

    def set_session(self, session_id: str, data: Dict[str, Any]):
        """Set or update session data"""
        if self.enabled:
            try:
                self.redis_client.setex(
                    self._key(session_id),
                    timedelta(hours=self.ttl_hours),
                    json.dumps(data, default=str),
                )
                self.memory_store.pop(self._key(session_id), None)
                return
            except redis.RedisError as e:
                logger.error("Redis set error: %s", e)

        self.memory_store[self._key(session_id)] = data

    def delete_session(self, session_id: str) -> bool:
        """Discard a session, returns False when it did not exist"""
        existed = self.memory_store.pop(self._key(session_id), None) is not None

        if self.enabled:
            try:
                existed = bool(self.redis_client.delete(self._key(session_id))) or existed
            except redis.RedisError as e:
                logger.error("Redis delete error: %s", e)

        return existed

    def set_document(
        self, session_id: str, doc_text: str, files: Optional[List[Dict]] = None
    ) -> Optional[Dict[str, Any]]:
        """Replace the session's document context"""
        session = self.get_session(session_id)
        if not session:
            return None

        session["doc_text"] = doc_text
        session["files"] = files or []
        self.set_session(session_id, session)
        return session

    def clear_document(self, session_id: str) -> Optional[Dict[str, Any]]:
        """Drop the document context but keep the transcript"""
        return self.set_document(session_id, "", [])

    def add_messages(self, session_id: str, messages: List[Dict[str, str]]):
        """Append chat turns to session history"""
        session = self.get_session(session_id)
        if not session:
            return None

        for message in messages:
            session["messages"].append(
                {
                    "role": message["role"],
                    "content": message["content"],
                    "timestamp": datetime.now().isoformat(),
                }
            )

        # Keep only last 100 messages
        if len(session["messages"]) > MAX_MESSAGES:
            session["messages"] = session["messages"][-MAX_MESSAGES:]

        self.set_session(session_id, session)
        return session

    def get_messages(self, session_id: str, limit: int = 50) -> List[Dict]:
        """Get session messages"""
        session = self.get_session(session_id)
        if session:
            messages = session.get("messages", [])
            return messages[-limit:] if limit else messages
        return []


# Singleton instance
session_manager = SessionManager()
