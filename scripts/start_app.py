#!/usr/bin/env python3
"""Serve the Local Hunt API with uvicorn.

Logfire is configured here, before the app module is imported, so
startup failures are reported too.
"""

import sys
import logfire
import uvicorn

from hunt.config import Settings
from hunt.util.observability import configure_logfire

APP = "hunt.interface.api.app:app"


def main() -> int:
    """Run the server until it is stopped."""
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Serving Local Hunt API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )

    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development" and settings.debug,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Local Hunt API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
