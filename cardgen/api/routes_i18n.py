import asyncio
import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from starlette.responses import StreamingResponse

from ..i18n.context import I18nContext
from ..i18n.events import LanguageChanged
from ..i18n.selector import parse_accept_language
from .deps import get_i18n

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/i18n", tags=["i18n"])

# Query parameters of /translate that are not interpolation params
_RESERVED_PARAMS = {"key", "lang"}


class SwitchLanguageRequest(BaseModel):
    language: str


@router.get("/languages")
async def list_languages(ctx: I18nContext = Depends(get_i18n)):
    engine = ctx.engine
    return {
        "languages": [
            {"code": code, "name": name}
            for code, name in engine.supported_languages.items()
        ],
        "current": engine.current_language,
        "fallback": engine.fallback_language,
        "loaded": engine.loaded_languages(),
    }


@router.get("/current")
async def get_current(ctx: I18nContext = Depends(get_i18n)):
    engine = ctx.engine
    tree = engine.translations()
    return {
        "language": engine.current_language,
        "translations": tree.to_dict() if tree is not None else {},
    }


@router.put("/language")
async def switch_language(req: SwitchLanguageRequest, ctx: I18nContext = Depends(get_i18n)):
    if not ctx.engine.is_supported(req.language):
        raise HTTPException(status_code=400, detail=f"Unsupported language: {req.language}")
    ok = await ctx.selector.switch_language(req.language)
    if not ok:
        raise HTTPException(status_code=503, detail=f"Could not load language: {req.language}")
    return {"status": "ok", "language": ctx.engine.current_language}


@router.get("/translate")
async def translate(
    request: Request,
    key: str,
    lang: Optional[str] = None,
    ctx: I18nContext = Depends(get_i18n),
):
    params = {k: v for k, v in request.query_params.items() if k not in _RESERVED_PARAMS}
    return {"key": key, "value": ctx.engine.resolve(key, params, lang)}


@router.get("/keywords")
async def get_keywords(lang: Optional[str] = None, ctx: I18nContext = Depends(get_i18n)):
    return {"keywords": ctx.engine.get_keywords(lang)}


@router.get("/detect")
async def detect_language(request: Request, ctx: I18nContext = Depends(get_i18n)):
    host_language = parse_accept_language(request.headers.get("accept-language"))
    return {
        "host_language": host_language,
        "language": ctx.selector.determine_initial_language(host_language),
    }


async def _language_event_generator(ctx: I18nContext):
    queue = ctx.bridge.subscribe()
    try:
        while True:
            try:
                event: LanguageChanged = await asyncio.wait_for(queue.get(), timeout=30)
                payload = {"language": event.language}
                yield f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"
            except asyncio.TimeoutError:
                # Keepalive
                yield ": keepalive\n\n"
    except asyncio.CancelledError:
        pass
    finally:
        ctx.bridge.unsubscribe(queue)


@router.get("/events")
async def stream_language_events(ctx: I18nContext = Depends(get_i18n)):
    return StreamingResponse(
        _language_event_generator(ctx),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
