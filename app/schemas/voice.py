from pydantic import BaseModel
from typing import Optional

class Voice(BaseModel):
    voiceId: str
    displayName: str = ""
    locale: str = ""
    displayLanguage: Optional[str] = None
    accent: Optional[str] = None

class SpeechResult(BaseModel):
    audioFile: str
    voiceId: str
