from typing import List, Optional

from fastapi import status

from src.core.response.schemas import ErrorDetail


class ServiceException(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "SERVICE_ERROR"

    def __init__(
        self,
        detail: str = "Service error",
        error_details: Optional[List[ErrorDetail]] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.error_details = error_details or []


class ValidationException(ServiceException):
    status_code = 422
    error_code = "VALIDATION_ERROR"


class AuthenticationException(ServiceException):
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "UNAUTHORIZED"


class ConsistencyException(ServiceException):
    """Stored data contradicts what a collaborator reports."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "INTERNAL_SERVER_ERROR"
