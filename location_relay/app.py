# Standard library imports
import os
import logging

# Third-party imports
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

# Local application imports
from location_relay.config import Config, load_settings
from location_relay.errors import ParseError, RelayError, SendError, ValidationError
from location_relay.messenger import discord_sender
from location_relay.metrics import metrics
from location_relay.middlewares import limit_request_size, log_requests
from location_relay.models import ErrorResponse, LocationResponse
from location_relay.security import CorsHeadersMiddleware, SecurityHeadersMiddleware
from location_relay.utils import compose_notification, setup_logging
from location_relay.validation import validate_location_request

SUCCESS_MESSAGE = "Location sent successfully!"


def create_app(settings=None, message_sender=None):
    """
    Build the relay application.

    :param settings: RelaySettings; read from the environment when omitted.
    :param message_sender: Callable (token, channel_id, text) -> bool. Defaults to the Discord API.
    """
    if settings is None:
        settings = load_settings()
    if message_sender is None:
        message_sender = discord_sender(settings.discord_api_base)

    app = FastAPI(title="location-relay")
    app.state.settings = settings
    app.state.message_sender = message_sender

    logging.info(
        "Environment variables available: hasToken=%s hasChannelId=%s",
        bool(settings.discord_bot_token),
        bool(settings.discord_channel_id),
    )

    # Registered innermost first
    app.middleware("http")(limit_request_size)
    app.add_middleware(SecurityHeadersMiddleware)
    if settings.enable_cors:
        app.add_middleware(CorsHeadersMiddleware, allowed_origins=settings.allowed_origins)
    app.middleware("http")(log_requests)

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        status_code = exc.status_code
        if isinstance(exc, (ValidationError, ParseError)):
            metrics.validation_failures += 1
            status_code = settings.validation_error_status
        elif isinstance(exc, SendError):
            metrics.send_failures += 1

        metrics.failed_responses += 1
        metrics.log_metrics()
        return JSONResponse(status_code=status_code, content=ErrorResponse(error=exc.message).model_dump())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return PlainTextResponse("Not Found", status_code=404)
        if exc.status_code == 405:
            return JSONResponse(status_code=405, content={"error": "Method not allowed"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.post("/post", response_model=LocationResponse)
    async def post_location(request: Request):
        metrics.api_calls += 1

        try:
            payload = await request.json()
        except ValueError:
            raise ParseError()

        location = validate_location_request(payload)
        notification = compose_notification(location, settings)

        try:
            sent = await run_in_threadpool(
                message_sender,
                settings.discord_bot_token,
                settings.discord_channel_id,
                notification.text,
            )
        except Exception as e:
            logging.error(f"Message sender raised: {e}")
            sent = False

        if not sent:
            raise SendError()

        metrics.successful_responses += 1
        metrics.log_metrics()
        return LocationResponse(message=SUCCESS_MESSAGE, url=notification.url)

    return app


app = create_app()


def main():
    setup_logging(os.getenv('LOG_FILE', Config.LOG_FILE))
    uvicorn.run(
        "location_relay.app:app",
        host=os.getenv('HOST', Config.HOST),
        port=int(os.getenv('PORT', Config.PORT)),
    )


if __name__ == "__main__":
    main()
