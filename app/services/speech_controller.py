import logging
import re
from typing import List, Optional

from app.schemas.voice import SpeechResult, Voice
from app.services.murf_service import MurfService
from app.services.voice_catalog import fetch_catalog, filter_voices
from app.utils.text_utils import find_and_replace

logger = logging.getLogger(__name__)


class SpeechController:
    """
    Estado da tela de geração de voz de uma sessão.

    Fluxo: idle -> loading (ao gerar) -> idle com resultado, ou idle sem resultado
    quando a Murf falha. Cada envio recebe um número de sequência e só a resposta
    do envio mais recente altera o estado.
    """

    def __init__(self, murf: MurfService, fallback_voice: Voice):
        self.murf = murf
        self.fallback_voice = fallback_voice

        self.text = ""
        self.voices: List[Voice] = []
        self.voice_id = ""
        self.search_term = ""
        self.dropdown_open = False
        self.voices_loaded = False
        self.using_fallback = False

        self.loading = False
        self.result: Optional[SpeechResult] = None
        self.error: Optional[str] = None
        self._pattern_error = False
        self._sequence = 0

    async def load_voices(self):
        self.voices, self.using_fallback = await fetch_catalog(self.murf, self.fallback_voice)
        if self.selected_voice is None:
            self.voice_id = self.voices[0].voiceId
        self.voices_loaded = True

    # -------------------------------------------------------------------
    # Seleção de voz / dropdown
    # -------------------------------------------------------------------
    def select_voice(self, voice_id: str):
        self.voice_id = voice_id or ""
        self.dropdown_open = False

    def set_search(self, term: str):
        self.search_term = term or ""
        self.dropdown_open = True

    def open_dropdown(self):
        self.dropdown_open = True

    def close_dropdown(self):
        self.dropdown_open = False

    @property
    def filtered_voices(self) -> List[Voice]:
        return filter_voices(self.voices, self.search_term)

    @property
    def selected_voice(self) -> Optional[Voice]:
        for voice in self.voices:
            if voice.voiceId == self.voice_id:
                return voice
        return None

    # -------------------------------------------------------------------
    # Texto
    # -------------------------------------------------------------------
    def replace_text(self, pattern: str, replacement: str,
                     use_regex: bool = True, ignore_case: bool = False) -> int:
        try:
            self.text, count = find_and_replace(self.text, pattern, replacement, use_regex, ignore_case)
        except re.error as e:
            logger.warning(f"Expressão regular inválida {pattern!r}: {str(e)}")
            self.error = f"Invalid pattern: {e}"
            self._pattern_error = True
            return 0
        if self._pattern_error:
            self.error = None
            self._pattern_error = False
        return count

    # -------------------------------------------------------------------
    # Geração
    # -------------------------------------------------------------------
    @property
    def can_submit(self) -> bool:
        return bool(self.text) and bool(self.voice_id) and not self.loading

    @property
    def download_filename(self) -> Optional[str]:
        if not self.result:
            return None
        return f"murf-{self.result.voiceId}.mp3"

    async def generate(self) -> Optional[SpeechResult]:
        if not self.text or not self.voice_id:
            return None

        self._sequence += 1
        sequence = self._sequence
        text, voice_id = self.text, self.voice_id

        self.loading = True
        self.result = None
        self.error = None
        self._pattern_error = False

        data = None
        answered = False
        try:
            data = await self.murf.generate_speech(text, voice_id)
            answered = True
        except Exception as e:
            logger.error(f"Falha na geração de voz: {str(e)}")

        if sequence != self._sequence:
            logger.info(f"Resposta descartada (envio {sequence}, atual {self._sequence})")
            return None

        self.loading = False

        audio_file = data.get("audioFile") if isinstance(data, dict) else None
        if not audio_file or not isinstance(audio_file, str):
            if not answered:
                return None
            logger.warning(f"Resposta sem audioFile: {data}")
            if self.using_fallback and voice_id == self.fallback_voice.voiceId:
                self.error = f"The default voice {voice_id} was rejected by the provider"
            return None

        self.result = SpeechResult(audioFile=audio_file, voiceId=voice_id)
        logger.info(f"Áudio gerado: {audio_file}")
        return self.result
