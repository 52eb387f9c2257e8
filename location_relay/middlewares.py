# middlewares.py
from fastapi import Request
from fastapi.responses import JSONResponse
import logging

from location_relay.config import Config


async def limit_request_size(request: Request, call_next):
    settings = getattr(request.app.state, "settings", None)
    max_request_size = settings.max_request_size if settings else Config.MAX_REQUEST_SIZE

    try:
        content_length = int(request.headers.get("content-length", 0))
    except ValueError:
        content_length = 0

    if content_length > max_request_size:
        return JSONResponse(status_code=413, content={"error": "Request Entity Too Large"})

    response = await call_next(request)
    return response

async def log_requests(request: Request, call_next):
    logger = logging.getLogger("uvicorn.access")
    logger.info(f"Request: {request.method} {request.url} Origin: {request.headers.get('origin')}")
    response = await call_next(request)
    logger.info(f"Response status: {response.status_code}")
    return response
