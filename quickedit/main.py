"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quickedit.config import get_settings
from quickedit.domain.exceptions import QuickEditError
from quickedit.infrastructure.database import Base, engine
from quickedit.infrastructure.database.entity_catalog import SQLAlchemyEntityCatalog
from quickedit.infrastructure.logging.log_config import setup_logging
from quickedit.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables and build the entity catalog."""
    setup_logging()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Inspect every mapped type once; requests only read this catalog
    app.state.entity_catalog = SQLAlchemyEntityCatalog.from_base(Base)

    yield

    # Shutdown
    await engine.dispose()


async def quick_edit_error_handler(request: Request, exc: QuickEditError) -> JSONResponse:
    """Every quick edit failure is a client error with a readable message."""
    logger.info("Quick edit rejected [%s]: %s", exc.code, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(QuickEditError, quick_edit_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quickedit.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
