#!/usr/bin/env python3
"""Create or promote the Folio superadmin account with Logfire error tracking.

Usage: SUPERADMIN_EMAIL=admin@example.com SUPERADMIN_PASSWORD=... \
    python scripts/ensure_superadmin.py

The password is only needed the first time, when the account does not exist.
"""

import asyncio
import os
import sys

import logfire

from folio.application.usecase.admin import EnsureSuperadminUseCase
from folio.config import Settings
from folio.util.di.container import create_container
from folio.util.observability import configure_logfire


async def ensure_superadmin(password: str | None) -> None:
    container = create_container()
    try:
        # The session commits when the request scope closes
        async with container() as request_container:
            use_case = await request_container.get(EnsureSuperadminUseCase)
            response = await use_case.execute(password)
        logfire.info(
            "Superadmin ready",
            user_id=response.user_id,
            email=response.email,
            created=response.created,
        )
    finally:
        await container.close()


def main() -> int:
    """Ensure the superadmin exists and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        asyncio.run(ensure_superadmin(os.environ.get("SUPERADMIN_PASSWORD")))
        return 0

    except Exception as e:
        logfire.error(
            "Superadmin bootstrap failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
