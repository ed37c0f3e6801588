import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel, select

from src.core.bases.base_repository import RepositoryError
from src.core.config import settings
from src.core.database import engine, get_session
from src.core.exceptions import ServiceException
from src.core.logging_config import setup_logging
from src.core.response.handlers import (
    global_exception_handler,
    identity_gateway_exception_handler,
    repository_exception_handler,
    request_validation_handler,
    service_exception_handler,
)
import src.shared.models  # noqa: F401

# Import routers from apps
from src.apps.feed import post_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create missing tables and check the connection
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    async with get_session() as session:
        await session.exec(select(1))
    logger.info("Database connection established")
    yield
    logger.info("Shutting down")
    await engine.dispose()


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceException, service_exception_handler)  # type: ignore
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore
    app.add_exception_handler(RepositoryError, repository_exception_handler)  # type: ignore
    app.add_exception_handler(httpx.HTTPError, identity_gateway_exception_handler)  # type: ignore
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with health check."""
        return {"message": "Server is running", "status": "healthy", "version": settings.PROJECT_VERSION}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "message": "Service is running normally"}

    app.include_router(post_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
