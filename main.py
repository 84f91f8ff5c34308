# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import Settings, configure_logging, cors_origins_from_env, load_settings
from models import EmailRequest
from services.draft import draft_reply
from services.gemini import ERROR_PREFIX, GeminiClient

logger = logging.getLogger(__name__)

APP_TITLE = "Email Writer Backend"


def create_app(settings: Optional[Settings] = None, http: Optional[httpx.Client] = None) -> FastAPI:
    """
    Build the API. Settings are resolved at startup, so a missing
    GEMINI_API_URL / GEMINI_API_KEY stops the server before it serves.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        resolved = settings or load_settings()
        configure_logging(resolved.log_level)
        app.state.settings = resolved
        app.state.gemini = GeminiClient(resolved, http=http)
        logger.info("✅ Gemini client ready for %s", resolved.api_url)
        try:
            yield
        finally:
            app.state.gemini.close()

    app = FastAPI(title=APP_TITLE, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins if settings else cors_origins_from_env(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_routes(app)
    return app


def get_gemini(request: Request) -> GeminiClient:
    return request.app.state.gemini


def _register_routes(app: FastAPI) -> None:

    @app.post("/api/emails/generate", response_class=PlainTextResponse)
    def generate_email(payload: EmailRequest, gemini: GeminiClient = Depends(get_gemini)):
        logger.info("Received request to generate email.")
        try:
            reply = draft_reply(gemini, payload)
            if reply.startswith(ERROR_PREFIX):
                logger.error("Failed to generate email: %s", reply)
                return PlainTextResponse(reply, status_code=500)

            logger.info("Email generation successful.")
            return PlainTextResponse(reply)
        except Exception as e:
            logger.exception("Exception in generate_email: %s", e)
            return PlainTextResponse(f"Internal Server Error: {e}", status_code=500)

    @app.get("/")
    def root():
        return {"status": "running", "app": APP_TITLE}


app = create_app()


if __name__ == "__main__":
    s = load_settings()
    uvicorn.run("main:app", host=s.host, port=s.port)
