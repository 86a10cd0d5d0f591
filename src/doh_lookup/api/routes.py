"""API routes for the DoH lookup service."""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from doh_lookup.api.models import ErrorResponse, LookupResponse
from doh_lookup.core.config import Settings, get_settings
from doh_lookup.dns.doh import DoHClient, DoHResolver
from doh_lookup.utils.exceptions import (
    MissingParameterError,
    NoAddressFoundError,
    UpstreamHTTPError,
    capture_exception,
    describe_exception,
)

router = APIRouter()

USAGE = "/api/dns?domain=google.com"


@dataclass
class RouteDependencies:
    """Dependencies for route handlers."""

    settings: Settings = field(default_factory=get_settings)
    resolver: Optional[DoHResolver] = None
    clock: Callable[[], float] = time.perf_counter

    def __post_init__(self):
        if self.resolver is None:
            self.resolver = DoHClient(settings=self.settings)


# Global dependencies instance (can be overridden for testing)
_dependencies: Optional[RouteDependencies] = None


def get_dependencies() -> RouteDependencies:
    """Get the current route dependencies."""
    global _dependencies  # pylint: disable=global-statement
    if _dependencies is None:
        _dependencies = RouteDependencies()
    return _dependencies


def set_dependencies(deps: RouteDependencies) -> None:
    """Set custom dependencies (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = deps


def reset_dependencies() -> None:
    """Reset dependencies to default (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = None


def format_elapsed(start: float, end: float) -> str:
    """Render an elapsed time in whole milliseconds, e.g. ``42ms``."""
    return f"{max(0, round((end - start) * 1000))}ms"


def first_query_value(request: Request, name: str) -> Optional[str]:
    """Return the first value of a repeated query parameter, or None."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


def _json(model: BaseModel, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(by_alias=True, exclude_none=True),
    )


@router.get(
    "/api/dns",
    response_model=LookupResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def dns_lookup(
    request: Request,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Resolve ``domain`` to its first IPv4 address through the DoH resolver."""
    start = deps.clock()
    domain = first_query_value(request, "domain")

    if not domain:
        missing = MissingParameterError("domain")
        return _json(
            ErrorResponse(error=str(missing), usage=USAGE), missing.status_code
        )

    try:
        ip_address = await deps.resolver.resolve_ipv4(domain)
    except UpstreamHTTPError as e:
        return _json(ErrorResponse(error=str(e)), e.status_code)
    except NoAddressFoundError as e:
        return _json(ErrorResponse(error=str(e), domain=e.domain), e.status_code)
    except Exception as e:  # pylint: disable=broad-exception-caught
        capture_exception(e, {"domain": domain})
        return _json(
            ErrorResponse(error="Failed to resolve DNS.", details=describe_exception(e)),
            500,
        )

    return _json(
        LookupResponse(
            domain=domain,
            ip_address=ip_address,
            lookup_time=format_elapsed(start, deps.clock()),
        ),
        200,
    )
