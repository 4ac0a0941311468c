"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from herefornow import __version__
from herefornow.codec.errors import RenderError
from herefornow.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.hfn_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _render_error_handler(request: Request, exc: RenderError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Here, For Now",
        description="Presence renderer — SVG image and base64 token metadata",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RenderError, _render_error_handler)

    from herefornow.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
