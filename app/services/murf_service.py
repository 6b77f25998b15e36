import aiohttp
import asyncio
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class MurfError(Exception):
    """Falha de rede, timeout ou resposta ilegível da API da Murf."""


class MurfService:
    def __init__(self, api_key: str, base_url: str = "https://api.murf.ai/v1/speech",
                 audio_format: str = "MP3", timeout_seconds: float = 30):
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.audio_format = audio_format
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _get_headers(self) -> Dict[str, str]:
        return {
            "api-key": self.api_key,
            "Content-Type": "application/json"
        }

    async def _request(self, method: str, path: str, payload: Dict = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                logger.info(f"Chamando Murf: {method} {url}")
                async with session.request(method, url, headers=self._get_headers(), json=payload) as response:
                    # O corpo volta como veio, mesmo quando o status é de erro
                    data = await response.json(content_type=None)
                    logger.info(f"Resposta da Murf: Status={response.status}")
                    logger.debug(f"Corpo da resposta: {data}")
                    return data
        except asyncio.TimeoutError:
            logger.error(f"Timeout ao chamar a Murf: {method} {url}")
            raise MurfError(f"Timeout calling {url}")
        except aiohttp.ClientError as e:
            logger.error(f"Erro de rede ao chamar a Murf: {str(e)}")
            raise MurfError(str(e)) from e
        except ValueError as e:
            logger.error(f"Resposta da Murf não é JSON: {str(e)}")
            raise MurfError(f"Invalid JSON from {url}") from e

    async def list_voices(self) -> Any:
        """
        Lista as vozes disponíveis na conta.
        Retorna o JSON da Murf sem alterações (lista ou objeto).
        """
        return await self._request("GET", "/voices")

    async def generate_speech(self, text: str, voice_id: str) -> Any:
        """
        Gera o áudio e retorna o JSON da Murf, que traz a URL em `audioFile`.
        """
        payload = {
            "text": text,
            "voice_id": voice_id,
            "format": self.audio_format
        }
        logger.info(f"Gerando áudio com: Voice={voice_id}, Formato={self.audio_format}")
        return await self._request("POST", "/generate", payload)
