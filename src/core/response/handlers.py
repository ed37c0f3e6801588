import logging
from typing import Any, List, Optional

import httpx
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.bases.base_repository import RepositoryError
from src.core.exceptions import ServiceException
from src.core.response.schemas import ErrorDetail

logger = logging.getLogger(__name__)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Wrap ``data`` in the success envelope. Models are dumped by alias."""
    content = {"success": True, "message": message, "data": data}
    return JSONResponse(
        status_code=status_code, content=jsonable_encoder(content, by_alias=True)
    )


def error_response(
    error_code: str,
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[List[dict]] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    content = {
        "success": False,
        "message": message,
        "data": None,
        "error_code": error_code,
        "error_details": details or [],
    }
    return JSONResponse(
        status_code=status_code, content=jsonable_encoder(content), headers=headers
    )


async def service_exception_handler(request: Request, exc: ServiceException):
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(
        error_code=exc.error_code,
        message=exc.detail,
        status_code=exc.status_code,
        details=[detail.model_dump() for detail in exc.error_details],
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        ErrorDetail(
            field=".".join(str(part) for part in error.get("loc", ())[1:]),
            code=str(error.get("type", "invalid")).upper(),
            message=error.get("msg", "Invalid value"),
            target=str(error.get("loc", ("body",))[0]),
        ).model_dump()
        for error in exc.errors()
    ]
    return error_response(
        error_code="VALIDATION_ERROR",
        message="Request validation failed",
        status_code=422,
        details=details,
    )


async def repository_exception_handler(request: Request, exc: RepositoryError):
    logger.error("Post store failure on %s %s: %s", request.method, request.url.path, exc)
    return error_response(
        error_code="DATABASE_ERROR",
        message="Database error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def identity_gateway_exception_handler(request: Request, exc: httpx.HTTPError):
    logger.error(
        "Identity gateway failure on %s %s: %r", request.method, request.url.path, exc
    )
    return error_response(
        error_code="IDENTITY_GATEWAY_ERROR",
        message="Identity provider request failed",
        status_code=status.HTTP_502_BAD_GATEWAY,
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        error_code="INTERNAL_SERVER_ERROR",
        message="Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
