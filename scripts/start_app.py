#!/usr/bin/env python3
"""Start the Folio API with Logfire error tracking for startup errors."""

import os
import sys

import logfire
import uvicorn

from folio.config import Settings
from folio.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    port = int(os.environ.get("PORT", "8000"))

    try:
        logfire.info(
            "Starting Folio API",
            environment=settings.environment,
            git_sha=settings.git_sha,
            port=port,
        )

        # Fail fast on a production deployment without a public URL,
        # otherwise every invitation link would be broken
        if settings.is_production:
            settings.resolve_base_url()

        uvicorn.run(
            "folio.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
