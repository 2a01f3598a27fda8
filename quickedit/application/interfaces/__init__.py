from .article_repository import ArticleRepository
from .entity_catalog import EntityCatalog
from .record_store import RecordStore

__all__ = [
    "ArticleRepository",
    "EntityCatalog",
    "RecordStore",
]
