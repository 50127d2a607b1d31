"""Logfire setup for the comments service.

Domain services emit their own spans (``comment_service.create``,
``flag_service.flag``...). This module only wires the exporters and the
framework integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from snip.config import Settings

SERVICE_NAME = "snip-comments"


def _should_send(settings: Settings) -> bool:
    # OBSERVABILITY__SEND_TO_LOGFIRE wins over token presence
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire exporters and console output.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        service=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Headers are never captured since they carry the caller's token.
    """

    def _request_attributes(request, attributes):
        client = getattr(request, "client", None)
        return {
            **attributes,
            "path": request.url.path,
            "client_host": client.host if client else None,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
