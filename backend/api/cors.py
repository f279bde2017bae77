from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Requested-With, Accept, Origin",
    "Access-Control-Max-Age": "86400",  # 24 hours
}


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp the fixed CORS headers on every response from the given path."""

    def __init__(self, app, path: str):
        super().__init__(app)
        self.path = path.rstrip("/") or "/"

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        if (request.url.path.rstrip("/") or "/") == self.path:
            response.headers.update(CORS_HEADERS)
        return response
