from fastapi import FastAPI
from app.api import murf, ui
from app.core.config import settings
from app.services.murf_service import MurfService
from app.services.session_service import SessionManager
from app.services.speech_controller import SpeechController
from app.services.voice_catalog import default_voice
import logging

# Configurar logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Murf TTS")

if not settings.MURF_API_KEY:
    logger.warning("MURF_API_KEY não configurada; as chamadas à Murf serão rejeitadas")

# A chave fica só no servidor e é passada explicitamente ao cliente da Murf
app.state.murf_service = MurfService(
    api_key=settings.MURF_API_KEY,
    base_url=settings.MURF_BASE_URL,
    audio_format=settings.MURF_AUDIO_FORMAT,
    timeout_seconds=settings.MURF_TIMEOUT_SECONDS,
)
app.state.session_manager = SessionManager(
    controller_factory=lambda: SpeechController(app.state.murf_service, default_voice()),
    ttl_minutes=settings.SESSION_TTL_MINUTES,
)

app.include_router(murf.router, prefix="/api", tags=["Murf"])
app.include_router(ui.router, tags=["UI"])
