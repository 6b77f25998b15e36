import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    MURF_API_KEY: str = os.getenv("MURF_API_KEY", "")
    MURF_BASE_URL: str = os.getenv("MURF_BASE_URL", "https://api.murf.ai/v1/speech")
    MURF_AUDIO_FORMAT: str = os.getenv("MURF_AUDIO_FORMAT", "MP3")
    MURF_DEFAULT_VOICE_ID: str = os.getenv("MURF_DEFAULT_VOICE_ID", "en-US-daisy")
    MURF_DEFAULT_VOICE_NAME: str = os.getenv("MURF_DEFAULT_VOICE_NAME", "Daisy")
    MURF_DEFAULT_VOICE_LOCALE: str = os.getenv("MURF_DEFAULT_VOICE_LOCALE", "en-US")
    MURF_TIMEOUT_SECONDS: float = float(os.getenv("MURF_TIMEOUT_SECONDS", 30))
    SESSION_TTL_MINUTES: int = int(os.getenv("SESSION_TTL_MINUTES", 120))
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "murf_session")

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
