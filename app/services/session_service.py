from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict
import logging
import threading

from app.services.speech_controller import SpeechController

logger = logging.getLogger(__name__)


@dataclass
class SessionData:
    """Estado de uma sessão da interface"""
    session_id: str
    controller: SpeechController
    created_at: datetime
    last_accessed: datetime

    def touch(self):
        self.last_accessed = datetime.now()

    def is_expired(self, ttl_minutes: int) -> bool:
        return datetime.now() - self.last_accessed > timedelta(minutes=ttl_minutes)


class SessionManager:
    """
    Guarda um SpeechController por sessão, só em memória.
    Sessões ociosas expiram e são limpas no próximo acesso.
    """

    def __init__(self, controller_factory: Callable[[], SpeechController], ttl_minutes: int = 120):
        self.sessions: Dict[str, SessionData] = {}
        self.controller_factory = controller_factory
        self.ttl_minutes = ttl_minutes
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str) -> SpeechController:
        with self._lock:
            self._cleanup_expired()
            session = self.sessions.get(session_id)
            if session is None:
                session = self._create_session(session_id)
            else:
                session.touch()
            return session.controller

    def _create_session(self, session_id: str) -> SessionData:
        now = datetime.now()
        session = SessionData(
            session_id=session_id,
            controller=self.controller_factory(),
            created_at=now,
            last_accessed=now
        )
        self.sessions[session_id] = session
        logger.info(f"Nova sessão criada: {session_id}")
        return session

    def _cleanup_expired(self) -> int:
        expired = [
            sid for sid, session in self.sessions.items()
            if session.is_expired(self.ttl_minutes)
        ]
        for sid in expired:
            del self.sessions[sid]
        if expired:
            logger.info(f"{len(expired)} sessão(ões) expirada(s) removida(s)")
        return len(expired)
