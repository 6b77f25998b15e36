import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.voice import Voice
from app.services.session_service import SessionManager
from app.services.speech_controller import SpeechController


CATALOG = [
    {"voiceId": "v1", "displayName": "Alex", "locale": "en-US"},
    {"voiceId": "v2", "displayName": "Daisy", "locale": "en-US", "accent": "US"},
]

DEFAULT_VOICE = Voice(voiceId="en-US-daisy", displayName="Daisy", locale="en-US")


class FakeMurf:
    """Substitui o MurfService sem rede."""

    def __init__(self, voices=None, speech=None, voices_error=None, speech_error=None):
        self.voices = CATALOG if voices is None else voices
        self.speech = {"audioFile": "https://cdn.murf.ai/audio/1.mp3"} if speech is None else speech
        self.voices_error = voices_error
        self.speech_error = speech_error
        self.voice_calls = 0
        self.speech_calls = []

    async def list_voices(self):
        self.voice_calls += 1
        if self.voices_error:
            raise self.voices_error
        return self.voices

    async def generate_speech(self, text, voice_id):
        self.speech_calls.append((text, voice_id))
        if self.speech_error:
            raise self.speech_error
        return self.speech


@pytest.fixture
def fake_murf():
    return FakeMurf()


@pytest.fixture
def client(fake_murf):
    original_murf = app.state.murf_service
    original_sessions = app.state.session_manager

    app.state.murf_service = fake_murf
    app.state.session_manager = SessionManager(
        controller_factory=lambda: SpeechController(app.state.murf_service, DEFAULT_VOICE)
    )
    yield TestClient(app)

    app.state.murf_service = original_murf
    app.state.session_manager = original_sessions


@pytest.fixture
def default_voice():
    return DEFAULT_VOICE


@pytest.fixture
def controller(fake_murf):
    return SpeechController(fake_murf, DEFAULT_VOICE)
