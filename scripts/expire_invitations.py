#!/usr/bin/env python3
"""Persist the expired status of stale pending invitations.

Safe to run at any interval (e.g. a daily cron job); acceptance already
treats these invitations as expired, this only keeps the stored status
honest for listings and reporting.
"""

import asyncio
import sys

import logfire

from cradle.application.usecase.invitation import (
    ExpireInvitationsRequest,
    ExpireInvitationsUseCase,
)
from cradle.config import Settings
from cradle.util.di.container import create_container
from cradle.util.logging import setup_logging
from cradle.util.observability import configure_logfire


async def run() -> int:
    container = create_container(web=False)
    try:
        async with container() as request_container:
            use_case = await request_container.get(ExpireInvitationsUseCase)
            response = await use_case.execute(ExpireInvitationsRequest())
        return len(response.expired_ids)
    finally:
        await container.close()


def main() -> int:
    """Run the sweep and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        with logfire.span("expire_invitations"):
            count = asyncio.run(run())
        logfire.info("Invitation sweep completed", expired=count)
        return 0

    except Exception as e:
        logfire.error(
            "Invitation sweep failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
