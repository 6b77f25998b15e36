from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from app.services.murf_service import MurfService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_murf_service(request: Request) -> MurfService:
    return request.app.state.murf_service


@router.post("/murf-generate")
async def murf_generate(request: Request, murf: MurfService = Depends(get_murf_service)):
    """
    Repassa texto e voz para a Murf com a chave do servidor.
    Devolve o JSON da Murf como veio.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if not isinstance(payload, dict):
        payload = {}

    text = payload.get("text")
    voice_id = payload.get("voiceId")
    if not text or not voice_id:
        return JSONResponse(status_code=400, content={"error": "Missing text or voiceId"})

    try:
        data = await murf.generate_speech(text, voice_id)
        return JSONResponse(status_code=200, content=data)
    except Exception as e:
        logger.error(f"Erro ao gerar voz: {str(e)}")
        return JSONResponse(status_code=500, content={"error": "Failed to generate speech"})


@router.api_route("/murf-generate", methods=["GET", "HEAD", "OPTIONS", "PUT", "PATCH", "DELETE"],
                  include_in_schema=False)
async def murf_generate_not_allowed():
    return JSONResponse(status_code=405, content={"error": "Method not allowed"})


@router.get("/murf-voices")
async def murf_voices(murf: MurfService = Depends(get_murf_service)):
    """
    Lista as vozes da Murf sem expor a chave ao navegador.
    """
    try:
        data = await murf.list_voices()
        return JSONResponse(status_code=200, content=data)
    except Exception as e:
        logger.error(f"Erro ao buscar vozes: {str(e)}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch voices"})
