"""
Common library for reusable infrastructure components.

- config: Base settings class
- database: Async MongoDB connection via Motor
- events: In-process fire-and-forget event bus
- i18n: Localized message lookup
- utils: Exceptions and logging setup
"""

from common.config import BaseAppSettings
from common.database import MongoDB
from common.events import EventBus
from common.i18n import I18nService
from common.utils import (
    APIException,
    InvalidParameterException,
    NotFoundException,
    ValidationException,
    ConfigurationException,
    configure_logging,
)

__all__ = [
    # Config
    "BaseAppSettings",
    # Database
    "MongoDB",
    # Events
    "EventBus",
    # i18n
    "I18nService",
    # Utils
    "APIException",
    "InvalidParameterException",
    "NotFoundException",
    "ValidationException",
    "ConfigurationException",
    "configure_logging",
]
