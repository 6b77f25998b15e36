from typing import Any, List, Tuple
from pydantic import ValidationError
from app.core.config import settings
from app.schemas.voice import Voice
from app.services.murf_service import MurfService
import logging

logger = logging.getLogger(__name__)


def default_voice() -> Voice:
    """Voz embutida usada quando a lista da Murf não está disponível."""
    return Voice(
        voiceId=settings.MURF_DEFAULT_VOICE_ID,
        displayName=settings.MURF_DEFAULT_VOICE_NAME,
        locale=settings.MURF_DEFAULT_VOICE_LOCALE,
    )


def normalize_voices(data: Any) -> List[Voice]:
    """
    A Murf pode devolver uma lista de vozes ou um objeto cujos valores são vozes.
    Os dois formatos viram uma lista, na ordem original.
    """
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict):
        items = list(data.values())
    else:
        logger.warning(f"Formato inesperado na lista de vozes: {type(data).__name__}")
        return []

    voices = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning(f"Item ignorado na lista de vozes: {item!r}")
            continue
        try:
            voices.append(Voice.model_validate(item))
        except ValidationError:
            logger.warning(f"Voz inválida ignorada: {item}")
    return voices


async def fetch_catalog(murf: MurfService, fallback: Voice) -> Tuple[List[Voice], bool]:
    """
    Busca o catálogo uma única vez, sem retry.
    Retorna (vozes, usou_fallback).
    """
    try:
        data = await murf.list_voices()
        voices = normalize_voices(data)
    except Exception as e:
        logger.error(f"Falha ao buscar vozes: {str(e)}")
        return [fallback], True

    if not voices:
        logger.warning(f"Nenhuma voz válida retornada, usando {fallback.voiceId}")
        return [fallback], True

    logger.info(f"{len(voices)} vozes carregadas")
    return voices, False


def filter_voices(voices: List[Voice], term: str) -> List[Voice]:
    term = (term or "").lower()
    return [v for v in voices if term in v.displayName.lower()]
