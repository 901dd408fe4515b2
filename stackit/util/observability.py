"""Logfire setup and instrumentation.

Services log with ``logfire.info(...)`` and wrap multi-step operations in
``logfire.span(...)``; this module configures where that telemetry goes and
hooks FastAPI and SQLAlchemy into the same traces.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from stackit.config import ObservabilitySettings, Settings

SERVICE_NAME = "stackit-api"
SERVICE_VERSION = "0.1.0"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise telemetry is sent only
    when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Must run before the FastAPI app is created, since instrumentation
    attaches to the configured Logfire instance.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
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
        send_to_logfire=send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Attach method, path and client host to request spans."""
    extra = {"method": request.method, "path": request.url.path}
    if request.client:
        extra["client_host"] = request.client.host
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``.

    Headers are not captured: ``Authorization`` carries bearer tokens.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
