"""Unit tests for the QuickEditService pipeline."""

import pytest
from sqlalchemy import Boolean, Float, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from quickedit.application.interfaces import RecordStore
from quickedit.application.services import QuickEditService
from quickedit.domain.editable import editable
from quickedit.domain.entities import EditRequest, EntityTypeDescriptor
from quickedit.domain.exceptions import (
    AmbiguousEntityNameError,
    ApplyFailedError,
    ArityMismatchError,
    NonUniqueRecordError,
    NotEditableError,
    QuickEditError,
    RecordNotFoundError,
    SetterMissingError,
    UnknownEntityTypeError,
)
from quickedit.infrastructure.database.entity_catalog import SQLAlchemyEntityCatalog


# ── Test models ─────────────────────────────────────────────────────

class EditBase(DeclarativeBase):
    pass


class Article(EditBase):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    published: Mapped[bool] = mapped_column(Boolean, default=False)
    rating: Mapped[float] = mapped_column(Float, default=0.0)
    views: Mapped[int] = mapped_column(Integer, default=0)

    @editable
    def setTitle(self, title: str) -> None:
        self.title = title

    @editable
    def setPublished(self, published: bool) -> None:
        self.published = published

    @editable
    def setRating(self, rating: float) -> None:
        if rating > 5:
            raise ValueError("Rating can not exceed 5.")
        self.rating = rating

    @editable
    def setViews(self, *, views: int) -> None:
        self.views = views

    def setSecret(self, value: str) -> None:
        self.title = value

    @editable
    def setTitleAndViews(self, title: str, views: int) -> None:
        self.title = title
        self.views = views

    @editable
    def setDefaults(self) -> None:
        self.views = 0


class BlogPost(EditBase):
    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(primary_key=True)


class AmbiguousBase(DeclarativeBase):
    pass


def _widget(module: str, table: str) -> type:
    return type(
        "Widget",
        (AmbiguousBase,),
        {
            "__module__": module,
            "__tablename__": table,
            "id": mapped_column(Integer, primary_key=True),
        },
    )


InventoryWidget = _widget("shop.inventory", "inventory_widgets")
ArchivedWidget = _widget("shop.archive", "archived_widgets")


# ── Fake Record Store ───────────────────────────────────────────────

class FakeRecordStore(RecordStore):
    """In-memory record store counting flushes."""

    def __init__(self, records: list[object] | None = None):
        self._records = records or []
        self.flush_count = 0

    async def fetch(self, descriptor: EntityTypeDescriptor, identifier: str) -> list[object]:
        matches = [
            r for r in self._records
            if isinstance(r, descriptor.entity_class)
            and str(getattr(r, descriptor.identifier)) == identifier
        ]
        return matches[:2]

    async def flush(self) -> None:
        self.flush_count += 1


@pytest.fixture
def article() -> Article:
    return Article(id=10, title="Old title", published=False, rating=0.0, views=3)


@pytest.fixture
def store(article: Article) -> FakeRecordStore:
    return FakeRecordStore([article])


@pytest.fixture
def service(store: FakeRecordStore) -> QuickEditService:
    return QuickEditService(SQLAlchemyEntityCatalog.from_base(EditBase), store)


def _request(property_name: str, value: str, declared_type: str = "text", **overrides) -> EditRequest:
    fields = {
        "entity_name": "Article",
        "property_name": property_name,
        "identifier": "10",
        "raw_value": value,
        "declared_type": declared_type,
    }
    fields.update(overrides)
    return EditRequest(**fields)


# ── Entity resolution ───────────────────────────────────────────────

def test_resolve_by_qualified_name(service: QuickEditService):
    descriptor = service.resolve_entity_type(f"{Article.__module__}.Article")
    assert descriptor.entity_class is Article


@pytest.mark.parametrize("name", ["Article", "article", "ARTICLE", "ar-ti-cle"])
def test_resolve_by_short_name_ignores_case_and_hyphens(service: QuickEditService, name: str):
    assert service.resolve_entity_type(name).entity_class is Article


def test_resolve_hyphenated_alias(service: QuickEditService):
    assert service.resolve_entity_type("blog-post").entity_class is BlogPost


def test_resolve_unknown_name(service: QuickEditService):
    with pytest.raises(UnknownEntityTypeError, match='"comment"'):
        service.resolve_entity_type("comment")


def test_resolve_ambiguous_name_names_both_candidates():
    service = QuickEditService(SQLAlchemyEntityCatalog.from_base(AmbiguousBase), FakeRecordStore())

    with pytest.raises(AmbiguousEntityNameError) as exc_info:
        service.resolve_entity_type("widget")

    message = str(exc_info.value)
    assert "shop.archive.Widget" in message
    assert "shop.inventory.Widget" in message


def test_qualified_name_skips_ambiguity_check():
    service = QuickEditService(SQLAlchemyEntityCatalog.from_base(AmbiguousBase), FakeRecordStore())

    descriptor = service.resolve_entity_type("shop.archive.Widget")
    assert descriptor.qualified_name == "shop.archive.Widget"


# ── Record lookup ───────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_fetch_missing_record(service: QuickEditService, store: FakeRecordStore):
    with pytest.raises(RecordNotFoundError, match='identifier "999" does not exist'):
        await service.edit(_request("title", "New", identifier="999"))
    assert store.flush_count == 0


@pytest.mark.asyncio
async def test_fetch_non_unique_record(article: Article):
    store = FakeRecordStore([article, Article(id=10, title="Duplicate")])
    service = QuickEditService(SQLAlchemyEntityCatalog.from_base(EditBase), store)

    with pytest.raises(NonUniqueRecordError, match="is not unique"):
        await service.edit(_request("title", "New"))
    assert store.flush_count == 0


# ── Applying edits ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_edit_title(service: QuickEditService, store: FakeRecordStore, article: Article):
    message = await service.edit(_request("title", "Getting Started"))

    assert article.title == "Getting Started"
    assert store.flush_count == 1
    assert message == 'Property "title" has been changed.'


@pytest.mark.asyncio
async def test_edit_lowercase_entity_alias(service: QuickEditService, article: Article):
    await service.edit(_request("Title", "Via alias", entity_name="article"))
    assert article.title == "Via alias"


@pytest.mark.asyncio
async def test_edit_coerces_declared_types(service: QuickEditService, article: Article):
    await service.edit(_request("published", "1", "boolean"))
    await service.edit(_request("rating", "4.5", "float"))

    assert article.published is True
    assert article.rating == pytest.approx(4.5)


@pytest.mark.asyncio
async def test_edit_keyword_only_setter(service: QuickEditService, article: Article):
    await service.edit(_request("views", "42", "int"))
    assert article.views == 42


@pytest.mark.asyncio
async def test_edit_is_repeatable(service: QuickEditService, store: FakeRecordStore, article: Article):
    first = await service.edit(_request("title", "Same"))
    second = await service.edit(_request("title", "Same"))

    assert first == second
    assert article.title == "Same"
    assert store.flush_count == 2


@pytest.mark.asyncio
async def test_missing_setter(service: QuickEditService, store: FakeRecordStore):
    with pytest.raises(ApplyFailedError) as exc_info:
        await service.edit(_request("subtitle", "x"))

    assert isinstance(exc_info.value.__cause__, SetterMissingError)
    assert exc_info.value.code == SetterMissingError.code
    assert 'Setter "setsubtitle" does not exist' in str(exc_info.value)
    assert store.flush_count == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(("value", "declared_type"), [("x", "text"), ("12", "int"), ("", "bool")])
async def test_setter_without_marker_is_not_editable(
    service: QuickEditService, store: FakeRecordStore, article: Article, value: str, declared_type: str
):
    with pytest.raises(ApplyFailedError) as exc_info:
        await service.edit(_request("Secret", value, declared_type))

    assert isinstance(exc_info.value.__cause__, NotEditableError)
    assert exc_info.value.code == "not_editable"
    assert article.title == "Old title"
    assert store.flush_count == 0


@pytest.mark.asyncio
async def test_too_many_arguments_fails_before_coercion(
    service: QuickEditService, store: FakeRecordStore, monkeypatch: pytest.MonkeyPatch
):
    calls: list[tuple[str, str]] = []
    monkeypatch.setattr(service, "coerce", lambda t, v: calls.append((t, v)))

    with pytest.raises(ApplyFailedError) as exc_info:
        await service.edit(_request("TitleAndViews", "x"))

    assert isinstance(exc_info.value.__cause__, ArityMismatchError)
    assert "too many arguments" in str(exc_info.value)
    assert calls == []
    assert store.flush_count == 0


@pytest.mark.asyncio
async def test_zero_arguments_fails(service: QuickEditService):
    with pytest.raises(ApplyFailedError) as exc_info:
        await service.edit(_request("Defaults", "x"))

    assert isinstance(exc_info.value.__cause__, ArityMismatchError)
    assert "First input argument" in str(exc_info.value)


@pytest.mark.asyncio
async def test_setter_exception_is_wrapped(service: QuickEditService, store: FakeRecordStore):
    with pytest.raises(ApplyFailedError) as exc_info:
        await service.edit(_request("rating", "9", "float"))

    error = exc_info.value
    assert isinstance(error.__cause__, ValueError)
    assert error.code == ApplyFailedError.code
    assert str(error) == (
        f'Value for entity "{Article.__module__}.Article" with identifier "10" '
        "can not be changed: Rating can not exceed 5."
    )
    assert store.flush_count == 0


class FailingFlushRecordStore(FakeRecordStore):
    """Record store whose flush fails the way a database constraint would."""

    def __init__(self, records: list[object], error: Exception):
        super().__init__(records)
        self._error = error

    async def flush(self) -> None:
        self.flush_count += 1
        raise self._error


@pytest.mark.asyncio
async def test_flush_failure_is_wrapped(article: Article):
    store = FailingFlushRecordStore([article], RuntimeError("integrity violation on flush"))
    service = QuickEditService(SQLAlchemyEntityCatalog.from_base(EditBase), store)

    with pytest.raises(ApplyFailedError) as exc_info:
        await service.edit(_request("title", "New title"))

    error = exc_info.value
    assert isinstance(error, QuickEditError)
    assert isinstance(error.__cause__, RuntimeError)
    assert error.code == ApplyFailedError.code
    assert str(error).endswith("can not be changed: integrity violation on flush")
    assert store.flush_count == 1


@pytest.mark.asyncio
async def test_flush_quick_edit_error_is_not_rewrapped(article: Article):
    store = FailingFlushRecordStore([article], NonUniqueRecordError("Article", "10"))
    service = QuickEditService(SQLAlchemyEntityCatalog.from_base(EditBase), store)

    with pytest.raises(NonUniqueRecordError):
        await service.edit(_request("title", "New title"))
