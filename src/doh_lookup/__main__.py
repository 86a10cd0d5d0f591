"""Entry point for running the application directly."""

import uvicorn

from doh_lookup.core.config import get_settings


def main():
    """Serve the lookup API with uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "doh_lookup.app:app",
        host=settings.host,
        port=settings.port,
        log_level="warning",
    )


if __name__ == "__main__":
    main()
