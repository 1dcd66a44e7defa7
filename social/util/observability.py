"""Logfire setup and library instrumentation.

Application code logs through logfire directly:

    import logfire

    with logfire.span("post_service.like_post", post_id=str(post_id)):
        logfire.info("Duplicate like attempt", user_id=str(caller_id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from social.config import ObservabilitySettings, Settings

SERVICE_NAME = "social-api"
SERVICE_VERSION = "0.1.0"


def should_send(observability: ObservabilitySettings) -> bool:
    """Decide whether spans go to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise a token enables sending.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

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
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Headers are not captured since ``Authorization`` carries bearer tokens.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries run through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
