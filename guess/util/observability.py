"""Observability configuration using Logfire.

Services emit structured events and spans directly:

    import logfire

    with logfire.span("game_service.compute_stats", vote_id=vote_id):
        ...
        logfire.info("Game stats computed", total_votes=stats.total_votes)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from guess.config import Settings

SERVICE_NAME = "guess-api"
SERVICE_VERSION = "0.1.0"


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is present."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry to Logfire cloud;
    OBSERVABILITY__SEND_TO_LOGFIRE overrides that choice. Without either,
    spans and events are printed to the console only.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        captcha_enabled=settings.captcha.enabled,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Forwarded client addresses are recorded so rate limit decisions can be
    traced back to a request.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            result["forwarded_for"] = forwarded
        elif request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued by the vote and constraint repositories.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound geolocation and reCAPTCHA requests."""
    logfire.instrument_httpx()
