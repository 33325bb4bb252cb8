"""
Custom HTTP exceptions with error codes.

Extends FastAPI's HTTPException with standardized error codes so service
errors can be told apart by kind (bad input, missing resource,
misconfiguration) without the services choosing transport codes themselves.

Example:
    from common.utils import NotFoundException

    org = await repository.find_by_id_and_state(org_id, OrganizationState.ACTIVE)
    if not org:
        raise NotFoundException("Organization not found", code="UNABLE_TO_FIND_VALID_ORG")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception with error code support.

    Provides consistent error response format across the API.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
            headers: Optional response headers
        """
        detail: Dict[str, Any] = {"message": message}

        if code:
            detail["code"] = code

        if details is not None:
            detail["details"] = details

        self.message = message
        self.code = code
        self.details = details

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" if self.code else self.message


class InvalidParameterException(APIException):
    """400 Bad Request - A named parameter is invalid."""

    def __init__(
        self,
        parameter: str,
        message: Optional[str] = None,
        code: str = "INVALID_PARAMETER",
    ):
        super().__init__(
            400,
            message or f"Invalid parameter: {parameter}",
            code,
            {"parameter": parameter},
        )
        self.parameter = parameter


class NotFoundException(APIException):
    """404 Not Found - Resource doesn't exist."""

    def __init__(
        self,
        message: str = "Not found",
        code: str = "NOT_FOUND",
        details: Optional[Any] = None,
    ):
        super().__init__(404, message, code, details)


class ValidationException(APIException):
    """422 Validation Error - Request validation failed."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(422, message, code, details)


class ConfigurationException(APIException):
    """500 Internal Server Error - Deployment configuration is inconsistent."""

    def __init__(
        self,
        message: str = "Configuration error",
        code: str = "CONFIGURATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(500, message, code, details)
