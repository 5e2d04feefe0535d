import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes_i18n import router as i18n_router
from .api.routes_prompts import router as prompts_router
from .config import get_config, get_preferences_path
from .i18n.context import I18nContext, build_context
from .i18n.selector import detect_host_language

logging.basicConfig(
    level=os.environ.get("CARDGEN_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)

logger = logging.getLogger(__name__)


def create_app(i18n: Optional[I18nContext] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app):
        ctx = i18n
        if ctx is None:
            ctx = build_context(get_config().i18n, get_preferences_path())
        app.state.i18n = ctx
        language = await ctx.start(detect_host_language())
        logger.info("Starting with language %s", language)
        yield
        await ctx.close()

    app = FastAPI(title="Card Generator Backend", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:5173",     # Vite dev server
            "http://127.0.0.1:5173",
            "http://localhost:8765",
            "http://127.0.0.1:8765",
        ],
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept-Language"],
    )

    app.include_router(i18n_router)
    app.include_router(prompts_router)

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port)
