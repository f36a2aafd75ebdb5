"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the admin facade and
the GraphQL client it owns.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from content_admin.core.config import get_settings
from content_admin.infrastructure.factory import AdminFacadeFactory
from content_admin.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, GraphQL client, admin facade (stored on app.state).
    Shutdown: GraphQL client close.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    remote_executor = AdminFacadeFactory.create_remote_executor(settings)
    app.state.remote_executor = remote_executor
    app.state.admin_facade = AdminFacadeFactory.create_admin_facade(
        settings, remote_executor=remote_executor
    )
    logger.info(
        "Admin facade ready (content_api_url=%s, data_layer=%s)",
        settings.content_api_url,
        settings.data_layer_enabled,
    )

    yield

    # ---- Shutdown ----
    if getattr(app.state, "remote_executor", None) is not None:
        await app.state.remote_executor.aclose()
        app.state.remote_executor = None
        logger.info("Content API HTTP client closed")
