import logging

from fastapi import APIRouter, Body, Depends, Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_completion_client, get_settings
from api.errors import error_response
from config import Settings
from models.requests import AnalyzeRequest
from models.responses import AnalysisResult
from services import skill_analyzer
from services.errors import AnalysisError, ExtractionError
from services.gemini_client import CompletionClient

logger = logging.getLogger(__name__)


def create_limiter() -> Limiter:
    # One limiter per app: slowapi keys route limits by endpoint name
    return Limiter(key_func=get_remote_address)


def create_router(app_settings: Settings, limiter: Limiter) -> APIRouter:
    """Register the analyze route at ``app_settings.analyze_path``."""
    path = app_settings.analyze_path
    router = APIRouter()

    @router.get(path)
    async def analyze_status():
        return {"message": "Analyze endpoint is working"}

    @router.options(path)
    async def analyze_preflight():
        return Response(status_code=200)

    @router.post(path, response_model=AnalysisResult)
    @limiter.limit(app_settings.rate_limit)
    async def analyze(
        request: Request,
        body: AnalyzeRequest | None = Body(None),
        client: CompletionClient = Depends(get_completion_client),
        settings: Settings = Depends(get_settings),
    ):
        try:
            return await skill_analyzer.analyze(body or AnalyzeRequest(), client, settings)
        except ExtractionError as e:
            return error_response(request, e.status_code, f"PDF processing failed: {e}", e)
        except AnalysisError as e:
            return error_response(request, e.status_code, str(e), e)
        except Exception as e:
            logger.exception("Unexpected error processing analyze request")
            return error_response(request, 500, str(e) or "Internal server error", e)

    return router
