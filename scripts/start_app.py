#!/usr/bin/env python3
"""Serve the Social API with uvicorn, logging startup failures to Logfire."""

import sys

import logfire
import uvicorn

from social.config import Settings
from social.util.observability import configure_logfire


def main() -> int:
    """Start the API server."""
    settings = Settings()

    # Before the app import so startup errors are captured
    configure_logfire(settings)

    logfire.info(
        "Starting API server",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        rate_limit_enabled=settings.rate_limit.enabled,
    )

    try:
        # Client IPs come from X-Forwarded-For behind the proxy; the rate
        # limiter keys on them
        uvicorn.run(
            "social.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            proxy_headers=True,
            forwarded_allow_ips="*",
            reload=settings.environment == "development" and settings.debug,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "API server failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
