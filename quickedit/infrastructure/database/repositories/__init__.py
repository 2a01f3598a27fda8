from .article_repository import SQLAlchemyArticleRepository
from .record_store import SQLAlchemyRecordStore

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyRecordStore",
]
