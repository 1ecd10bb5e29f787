"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, Firebase identity
client, SQL engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from realm_admin.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, identity client (optional). Shutdown: identity client
    close, SQL engine dispose.
    """
    setup_logging()

    from realm_admin.infrastructure.firebase.client import (
        close_identity_client,
        init_identity_client,
    )

    if init_identity_client():
        logger.info("Firebase identity client initialized")
    else:
        logger.warning("Firebase identity client not configured; batch import disabled")

    yield

    await close_identity_client()

    from realm_admin.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
