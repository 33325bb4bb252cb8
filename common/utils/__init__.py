"""
Utilities module - exceptions and logging helpers.
"""

from common.utils.exceptions import (
    APIException,
    InvalidParameterException,
    NotFoundException,
    ValidationException,
    ConfigurationException,
)
from common.utils.log_config import configure_logging

__all__ = [
    "APIException",
    "InvalidParameterException",
    "NotFoundException",
    "ValidationException",
    "ConfigurationException",
    "configure_logging",
]
