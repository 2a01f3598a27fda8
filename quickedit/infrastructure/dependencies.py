"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from quickedit.config import get_settings
from quickedit.application.interfaces import EntityCatalog
from quickedit.application.services import ArticleService, QuickEditService
from quickedit.infrastructure.database.base import Base
from quickedit.infrastructure.database.entity_catalog import SQLAlchemyEntityCatalog
from quickedit.infrastructure.database.session import get_db_session
from quickedit.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyRecordStore,
)


def get_entity_catalog(request: Request) -> EntityCatalog:
    """Return the catalog built at startup, building it on first use if the lifespan did not run."""
    catalog = getattr(request.app.state, "entity_catalog", None)
    if catalog is None:
        catalog = SQLAlchemyEntityCatalog.from_base(Base)
        request.app.state.entity_catalog = catalog
    return catalog


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_quick_edit_service(
    catalog: EntityCatalog = Depends(get_entity_catalog),
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[QuickEditService, None]:
    """Provides a QuickEditService bound to the request's session."""
    settings = get_settings()
    yield QuickEditService(
        catalog=catalog,
        store=SQLAlchemyRecordStore(session),
        bool_accepts_numeric=settings.bool_accepts_numeric,
    )
