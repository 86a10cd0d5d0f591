"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from doh_lookup.api.healthcheck import router as healthcheck_router
from doh_lookup.api.routes import router
from doh_lookup.core.config import get_settings
from doh_lookup.utils.exceptions import init_sentry

# Configure logging for the application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logging.getLogger("doh_lookup").setLevel(get_settings().log_level.upper())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    sentry_active = init_sentry()

    logger.info("DoH lookup starting...")
    logger.info(f"Resolver: {settings.resolver_url}")
    logger.info(f"Sentry: {'enabled' if sentry_active else 'disabled'}")

    yield

    logger.info("DoH lookup shutting down...")


app = FastAPI(
    title="DoH Lookup",
    description="Resolve a domain to its first IPv4 address over DNS-over-HTTPS",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)
app.include_router(healthcheck_router)
