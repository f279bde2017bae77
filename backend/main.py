import logging
import os

from fastapi import FastAPI

from api.cors import CorsHeadersMiddleware
from api.errors import register_exception_handlers
from api.router import create_limiter, create_router
from config import Settings, settings
from services.gemini_client import CompletionClient, GeminiCompletionClient


def create_app(
    app_settings: Settings | None = None,
    completion_client: CompletionClient | None = None,
) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(
        title="Skill Match API",
        description="Compare resume skills against a job description with Gemini",
        version="1.0.0",
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.settings = app_settings
    app.state.completion_client = completion_client or GeminiCompletionClient.from_settings(app_settings)
    limiter = create_limiter()
    app.state.limiter = limiter

    app.add_middleware(CorsHeadersMiddleware, path=app_settings.analyze_path)
    register_exception_handlers(app)
    app.include_router(create_router(app_settings, limiter))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8000")))
