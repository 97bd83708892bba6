#!/usr/bin/env python3
"""Serve the game API under uvicorn.

Logging and Logfire are configured here, before the app module is
imported, so startup failures are reported too.
"""

import sys
import logfire
import uvicorn

from guess.config import Settings
from guess.util.logging import setup_logging
from guess.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting game API", host=settings.host, port=settings.port)

        # Behind a reverse proxy the client address arrives in
        # X-Forwarded-For; rate limits and geolocation depend on it
        uvicorn.run(
            "guess.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            proxy_headers=True,
            forwarded_allow_ips="*",
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Game API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
