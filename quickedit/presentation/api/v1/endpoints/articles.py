"""Article read/create endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from quickedit.application.schemas import ArticleCreate, ArticleResponse
from quickedit.application.services import ArticleService
from quickedit.domain.exceptions import EntityNotFoundError
from quickedit.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    skip: int = 0,
    limit: int = 100,
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve a paginated list of articles."""
    articles = await service.list_articles(skip=skip, limit=limit)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(data)
    return ArticleResponse.model_validate(article, from_attributes=True)
