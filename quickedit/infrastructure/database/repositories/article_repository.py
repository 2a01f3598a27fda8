"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quickedit.application.interfaces import ArticleRepository
from quickedit.infrastructure.database.models import Article


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, article_id: int) -> Article | None:
        return await self._session.get(Article, article_id)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Article]:
        stmt = select(Article).offset(skip).limit(limit).order_by(Article.created_at.desc())
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, article: Article) -> Article:
        self._session.add(article)
        await self._session.flush()
        return article
