"""Logfire setup and library instrumentation.

Application code logs through ``logfire`` directly::

    with logfire.span("invite_caregiver.execute", profile_id=str(profile_id)):
        logfire.info("Invitation created", token=token.redacted())

Invitation tokens are bearer secrets: only their first 8 characters may
reach telemetry. Request instrumentation below strips them from URLs and
skips headers (which carry the session cookie).
"""

from urllib.parse import parse_qsl, urlencode

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from cradle.config import Settings

SECRET_QUERY_PARAMS = frozenset({"token", "invite"})


def redact_query(query: str) -> str:
    """Truncate secret query parameter values to an 8 character prefix."""
    pairs = [
        (key, value[:8] + "..." if key in SECRET_QUERY_PARAMS and value else value)
        for key, value in parse_qsl(query, keep_blank_values=True)
    ]
    return urlencode(pairs, safe=".")


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Telemetry goes to Logfire cloud when ``OBSERVABILITY__SEND_TO_LOGFIRE``
    says so, or, when unset, whenever ``OBSERVABILITY__LOGFIRE_TOKEN`` is
    present. Otherwise output stays on the console.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name="cradle-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
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
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, with invitation tokens redacted from the query."""

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
            if request.url.query:
                result["query"] = redact_query(request.url.query)
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound HTTP calls (the Resend API)."""
    logfire.instrument_httpx()
