from .article import ArticleCreate, ArticleResponse
from .quick_edit import FlashMessage, QuickEditRequest, QuickEditResponse

__all__ = [
    "ArticleCreate",
    "ArticleResponse",
    "FlashMessage",
    "QuickEditRequest",
    "QuickEditResponse",
]
