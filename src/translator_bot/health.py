"""Liveness endpoint for hosting platforms that probe the process over HTTP."""

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

LIVENESS_BODY = "Bot is running!"


def create_health_app() -> FastAPI:
    app = FastAPI(title="translator-bot", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/", response_class=PlainTextResponse)
    async def liveness() -> str:
        return LIVENESS_BODY

    return app
