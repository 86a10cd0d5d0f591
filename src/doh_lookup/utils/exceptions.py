"""Custom exceptions and error handling utilities."""

import logging
from typing import Optional

import sentry_sdk

from doh_lookup.core.config import get_settings

logger = logging.getLogger(__name__)


class DoHLookupError(Exception):
    """Base exception for DoH lookup errors."""

    status_code: int = 500


class MissingParameterError(DoHLookupError):
    """A required query parameter was absent or empty."""

    status_code = 400

    def __init__(self, name: str):
        super().__init__(f"Missing required query parameter: {name}")
        self.name = name


class UpstreamHTTPError(DoHLookupError):
    """The DoH resolver answered with a non-success HTTP status."""

    def __init__(self, status: int):
        super().__init__(f"DNS resolver returned HTTP {status}")
        self.status = status
        self.status_code = status


class NoAddressFoundError(DoHLookupError):
    """The resolver answer carried no A record."""

    status_code = 404

    def __init__(self, domain: str):
        super().__init__("Domain not found or no IP address available.")
        self.domain = domain


def describe_exception(exception: BaseException) -> str:
    """Return the exception message, or its class name when the message is empty."""
    return str(exception) or type(exception).__name__


def capture_exception(
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "error",
) -> None:
    """
    Capture exception to Sentry if configured, otherwise log it.

    Args:
        exception: The exception to capture
        context: Additional context to include
        level: Log level ('error', 'warning', 'info')
    """
    settings = get_settings()

    # Log locally
    log_func = getattr(logger, level, logger.error)
    log_func("%s: %s", type(exception).__name__, exception, exc_info=exception)

    if settings.sentry_enabled:
        if context:
            with sentry_sdk.new_scope() as scope:
                for key, value in context.items():
                    scope.set_extra(key, value)
                sentry_sdk.capture_exception(exception)
        else:
            sentry_sdk.capture_exception(exception)


def init_sentry() -> bool:
    """Initialize Sentry SDK if configured. Returns True when initialized."""
    settings = get_settings()

    if not settings.sentry_enabled:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        send_default_pii=False,
    )

    return True
