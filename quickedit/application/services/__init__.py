from .article_service import ArticleService
from .quick_edit_service import QuickEditService

__all__ = [
    "ArticleService",
    "QuickEditService",
]
