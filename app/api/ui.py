from fastapi import APIRouter, Form, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from html import escape
from typing import Optional
import logging
import uuid

from app.core.config import settings
from app.services.speech_controller import SpeechController

logger = logging.getLogger(__name__)

router = APIRouter()


def _session_id(request: Request) -> str:
    return request.cookies.get(settings.SESSION_COOKIE_NAME) or uuid.uuid4().hex


def _controller(request: Request, session_id: str) -> SpeechController:
    return request.app.state.session_manager.get_or_create(session_id)


def _with_cookie(response: Response, session_id: str) -> Response:
    response.set_cookie(settings.SESSION_COOKIE_NAME, session_id, httponly=True, samesite="lax")
    return response


def _back_home(session_id: str) -> Response:
    return _with_cookie(RedirectResponse(url="/", status_code=303), session_id)


def render_page(controller: SpeechController) -> str:
    """Monta o HTML da tela a partir do estado do controller."""
    selected = controller.selected_voice
    selected_label = (
        f"{escape(selected.displayName)} ({escape(selected.locale)})" if selected else "Select a voice"
    )

    voice_items = "\n".join(
        f"""<li><form method="post" action="/ui/voice">
              <input type="hidden" name="voice_id" value="{escape(v.voiceId)}">
              <button type="submit" class="voice{' selected' if v.voiceId == controller.voice_id else ''}">
                {escape(v.displayName)} ({escape(v.locale)})
              </button>
            </form></li>"""
        for v in controller.filtered_voices
    ) or "<li class=\"empty\">No voices found</li>"

    error_html = f'<p class="error">{escape(controller.error)}</p>' if controller.error else ""

    result_html = ""
    if controller.result:
        url = escape(controller.result.audioFile)
        result_html = f"""
        <div class="result">
          <audio controls>
            <source src="{url}" type="audio/mpeg">
          </audio>
          <a href="{url}" download="{escape(controller.download_filename)}">Download Voice</a>
        </div>"""

    disabled = "" if not controller.loading else " disabled"
    button_label = "Generating..." if controller.loading else "Generate Voice"

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Murf TTS</title>
</head>
<body>
  <main>
    <h1>Murf TTS</h1>
    {error_html}

    <details id="voice-dropdown"{' open' if controller.dropdown_open else ''}>
      <summary>{selected_label}</summary>
      <form method="get" action="/">
        <input type="search" name="q" value="{escape(controller.search_term)}" placeholder="Search voices...">
      </form>
      <ul>
        {voice_items}
      </ul>
    </details>

    <form id="generate-form" method="post" action="/ui/generate">
      <textarea name="text" rows="4" placeholder="Enter text...">{escape(controller.text)}</textarea>
      <input type="hidden" name="voice_id" value="{escape(controller.voice_id)}">
      <button type="submit" id="generate"{disabled}>{button_label}</button>
    </form>

    <form method="post" action="/ui/replace">
      <input type="text" name="pattern" placeholder="Find">
      <input type="text" name="replacement" placeholder="Replace with">
      <label><input type="checkbox" name="use_regex" value="true" checked> Regex</label>
      <label><input type="checkbox" name="ignore_case" value="true"> Ignore case</label>
      <button type="submit">Replace</button>
    </form>
    {result_html}
  </main>
  <script>
    const dropdown = document.getElementById("voice-dropdown");
    document.addEventListener("click", (event) => {{
      if (dropdown.open && !dropdown.contains(event.target)) {{
        dropdown.open = false;
        fetch("/ui/dropdown/close", {{method: "POST"}});
      }}
    }});
    document.getElementById("generate-form").addEventListener("submit", () => {{
      const button = document.getElementById("generate");
      button.disabled = true;
      button.textContent = "Generating...";
    }});
  </script>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, q: Optional[str] = None):
    session_id = _session_id(request)
    controller = _controller(request, session_id)

    # Cada carregamento da página busca o catálogo de novo; a busca só filtra
    if q is None or not controller.voices_loaded:
        await controller.load_voices()
    if q is not None:
        controller.set_search(q)

    return _with_cookie(HTMLResponse(render_page(controller)), session_id)


@router.post("/ui/generate")
async def ui_generate(request: Request, text: str = Form(""), voice_id: str = Form("")):
    session_id = _session_id(request)
    controller = _controller(request, session_id)

    controller.text = text
    if voice_id:
        controller.select_voice(voice_id)

    if controller.can_submit:
        await controller.generate()
    else:
        logger.info("Envio ignorado: texto vazio, voz não selecionada ou geração em andamento")

    return _back_home(session_id)


@router.post("/ui/voice")
async def ui_select_voice(request: Request, voice_id: str = Form("")):
    session_id = _session_id(request)
    _controller(request, session_id).select_voice(voice_id)
    return _back_home(session_id)


@router.post("/ui/replace")
async def ui_replace(request: Request, pattern: str = Form(""), replacement: str = Form(""),
                     use_regex: bool = Form(False), ignore_case: bool = Form(False)):
    session_id = _session_id(request)
    count = _controller(request, session_id).replace_text(pattern, replacement, use_regex, ignore_case)
    logger.info(f"{count} substituição(ões) no texto")
    return _back_home(session_id)


@router.post("/ui/dropdown/close", status_code=204)
async def ui_close_dropdown(request: Request):
    session_id = _session_id(request)
    _controller(request, session_id).close_dropdown()
    return _with_cookie(Response(status_code=204), session_id)
