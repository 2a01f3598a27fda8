"""Application service (use case) for Article operations."""

from quickedit.application.interfaces import ArticleRepository
from quickedit.application.schemas import ArticleCreate
from quickedit.domain.exceptions import EntityNotFoundError
from quickedit.infrastructure.database.models import Article


class ArticleService:
    """Orchestrates article reads and creation. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, skip: int = 0, limit: int = 100) -> list[Article]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            title=data.title,
            content=data.content,
            published=data.published,
            rating=0.0,
            view_count=0,
        )
        return await self._repository.create(article)
