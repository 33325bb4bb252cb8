"""
Workspace runtime lifespan.

Usable directly or as a FastAPI lifespan helper:

    async with workspace_runtime() as organizations:
        org = await organizations.create_default(user)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from common.database import MongoDB, set_main_database
from common.events import EventBus
from common.i18n import I18nService
from common.utils import configure_logging
from workspace.config import Settings, get_settings
from workspace.dependencies import init_workspace_services, reset_workspace_services
from workspace.services.organization import OrganizationService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def workspace_runtime(
    settings: Optional[Settings] = None,
    database: Optional[MongoDB] = None,
) -> AsyncIterator[OrganizationService]:
    """
    Start the organization lifecycle and tear it down on exit.

    Startup: logging, MongoDB connection, translations, event bus, services.
    Shutdown: drain pending events, stop the bus, close the connection.

    Args:
        settings: Settings to use; the global snapshot when omitted
        database: Connection manager; a new MongoDB() when omitted
    """
    settings_provider = get_settings if settings is None else (lambda: settings)
    settings = settings or get_settings()
    settings.validate_required()
    configure_logging(settings.LOG_LEVEL)

    database = database or MongoDB()
    await database.connect(uri=settings.MONGODB_URI, database_name=settings.MONGODB_DATABASE)
    set_main_database(database)

    i18n_service = I18nService(
        locales_dir=settings.LOCALES_DIR,
        default_language=settings.DEFAULT_LANGUAGE,
        supported_languages=settings.get_supported_languages(),
    )
    event_bus = EventBus(max_queue_size=settings.EVENT_QUEUE_SIZE)
    await event_bus.start()

    organization_service = init_workspace_services(
        db=database.db,
        i18n_service=i18n_service,
        event_bus=event_bus,
        settings_provider=settings_provider,
    )
    logger.info(f"Workspace runtime started in {settings.WORKSPACE_MODE.value} mode")

    try:
        yield organization_service
    finally:
        await event_bus.stop(timeout=settings.EVENT_STOP_TIMEOUT)
        reset_workspace_services()
        await database.disconnect()
        logger.info("Workspace runtime stopped")
