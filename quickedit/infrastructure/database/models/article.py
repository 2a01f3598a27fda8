"""SQLAlchemy ORM model for the Article entity."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from quickedit.domain.editable import editable
from quickedit.infrastructure.database.base import Base


class Article(Base):
    """ORM model — maps to the 'articles' table.

    Setters follow the ``set<Property>`` naming the quick edit API derives
    from the requested property name.
    """

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    @editable
    def setTitle(self, title: str) -> None:
        title = title.strip()
        if not title:
            raise ValueError("Title can not be empty.")
        if len(title) > 255:
            raise ValueError("Title can not be longer than 255 characters.")
        self.title = title
        self._touch()

    @editable
    def setContent(self, content: str) -> None:
        self.content = content
        self._touch()

    @editable
    def setPublished(self, published: bool) -> None:
        self.published = published
        self._touch()

    @editable
    def setRating(self, rating: float) -> None:
        if not 0.0 <= rating <= 5.0:
            raise ValueError(f"Rating must be between 0 and 5, {rating} given.")
        self.rating = rating
        self._touch()

    # Maintained by the application, not editable from outside.
    def setViewCount(self, view_count: int) -> None:
        self.view_count = view_count

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, title='{self.title}')>"
