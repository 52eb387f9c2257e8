from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["Content-Security-Policy"] = "default-src 'self'; script-src 'self'; style-src 'self';"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        return response


def create_cors_headers(origin, allowed_origins):
    """CORS headers for a response; the origin is only echoed back when allow-listed."""
    headers = {
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
        "Access-Control-Max-Age": "86400",
    }
    if origin and origin in allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
    return headers


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answers every OPTIONS request with an empty 204 and stamps CORS headers on
    all other responses, errors included.
    """

    def __init__(self, app, allowed_origins=()):
        super().__init__(app)
        self.allowed_origins = tuple(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        cors_headers = create_cors_headers(request.headers.get("origin"), self.allowed_origins)

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers)

        response = await call_next(request)
        response.headers.update(cors_headers)
        return response
