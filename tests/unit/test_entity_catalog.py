"""Unit tests for the SQLAlchemy-backed entity catalog."""

import pytest
from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from quickedit.domain.editable import EditableMarker, detect_marker, editable
from quickedit.infrastructure.database.entity_catalog import SQLAlchemyEntityCatalog


class CatalogBase(DeclarativeBase):
    pass


class Product(CatalogBase):
    __tablename__ = "products"

    sku: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    stock: Mapped[int] = mapped_column(Integer, default=0)

    @editable
    def setName(self, name: str) -> None:
        self.name = name

    def setStock(self, stock: int) -> None:
        self.stock = stock

    @editable
    def setPair(self, first: str, second: str) -> None:
        self.name = first + second

    def settle(self) -> None:
        """Not a setter for any editable property."""

    def reset(self) -> None:
        self.stock = 0


class LegacyBase(DeclarativeBase):
    pass


class Note(LegacyBase):
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(primary_key=True)
    body: Mapped[str] = mapped_column(String(200))

    def setBody(self, body: str) -> None:
        """Change the note body.

        @editable
        """
        self.body = body


def test_catalog_describes_mapped_classes():
    catalog = SQLAlchemyEntityCatalog.from_base(CatalogBase)

    descriptors = catalog.all()
    assert len(descriptors) == 1
    product = descriptors[0]
    assert product.short_name == "Product"
    assert product.qualified_name == f"{Product.__module__}.Product"
    assert product.entity_class is Product
    assert product.identifier == "sku"
    assert catalog.get(product.qualified_name) is product
    assert catalog.get("Product") is None


def test_catalog_collects_setters_with_markers_and_arity():
    product = SQLAlchemyEntityCatalog.from_base(CatalogBase).all()[0]

    assert set(product.setters) == {"setName", "setStock", "setPair", "settle"}
    assert product.setters["setName"].marker is EditableMarker.ATTRIBUTE
    assert product.setters["setName"].parameters == ("name",)
    assert product.setters["setName"].param_type is str
    assert product.setters["setStock"].marker is EditableMarker.NONE
    assert not product.setters["setStock"].is_editable
    assert product.setters["setPair"].arity == 2
    assert product.setters["settle"].arity == 0


def test_find_setter_falls_back_to_case_insensitive_match():
    product = SQLAlchemyEntityCatalog.from_base(CatalogBase).all()[0]

    assert product.find_setter("setName").name == "setName"
    assert product.find_setter("setname").name == "setName"
    assert product.find_setter("setMissing") is None


def test_legacy_doc_marker_warns_once_when_catalog_is_built():
    with pytest.warns(DeprecationWarning, match="@editable"):
        catalog = SQLAlchemyEntityCatalog.from_base(LegacyBase)

    note = catalog.all()[0]
    assert note.setters["setBody"].marker is EditableMarker.LEGACY_DOC
    assert note.setters["setBody"].is_editable


class DraftNote:
    def setBody(self, body: str) -> None:
        """@editable"""


class PinnedNote(DraftNote):
    def setBody(self, body: str) -> None:
        pass


def test_override_does_not_inherit_legacy_doc_marker():
    assert detect_marker(DraftNote.setBody) is EditableMarker.LEGACY_DOC
    assert detect_marker(PinnedNote.setBody) is EditableMarker.NONE
