"""Entity catalog built from the SQLAlchemy declarative registry.

Setters are inspected once, when the catalog is built at startup, so the
request path never has to introspect classes.
"""

import inspect
import logging
import warnings
from typing import Any

from sqlalchemy.orm import DeclarativeBase, Mapper

from quickedit.application.interfaces import EntityCatalog
from quickedit.domain.editable import EditableMarker, detect_marker
from quickedit.domain.entities import EntityTypeDescriptor, SetterEntry

logger = logging.getLogger(__name__)

_SETTER_PREFIX = "set"


class SQLAlchemyEntityCatalog(EntityCatalog):
    """Implements the EntityCatalog port over the mapped classes of a declarative base."""

    def __init__(self, descriptors: list[EntityTypeDescriptor]):
        self._descriptors = sorted(descriptors, key=lambda d: d.qualified_name)
        self._by_name = {d.qualified_name: d for d in self._descriptors}

    @classmethod
    def from_base(cls, base: type[DeclarativeBase]) -> "SQLAlchemyEntityCatalog":
        """Build descriptors for every class mapped on ``base``'s registry."""
        descriptors = [_describe(mapper) for mapper in base.registry.mappers]
        catalog = cls(descriptors)
        logger.info(
            "Entity catalog built: %d types, %d editable setters",
            len(descriptors),
            sum(1 for d in descriptors for s in d.setters.values() if s.is_editable),
        )
        return catalog

    def all(self) -> list[EntityTypeDescriptor]:
        return list(self._descriptors)

    def get(self, qualified_name: str) -> EntityTypeDescriptor | None:
        return self._by_name.get(qualified_name)


def _describe(mapper: Mapper) -> EntityTypeDescriptor:
    entity_class = mapper.class_
    qualified_name = f"{entity_class.__module__}.{entity_class.__qualname__}"
    setters = _collect_setters(entity_class, qualified_name)

    for entry in setters.values():
        logger.debug(
            "%s.%s marker=%s params=%s type=%s",
            qualified_name, entry.name, entry.marker.value, entry.parameters, entry.param_type,
        )

    return EntityTypeDescriptor(
        qualified_name=qualified_name,
        short_name=entity_class.__name__,
        entity_class=entity_class,
        identifier=_identifier_attribute(mapper),
        setters=setters,
    )


def _identifier_attribute(mapper: Mapper) -> str:
    """Attribute name of the primary key column, preferring one called ``id``."""
    columns = list(mapper.primary_key)
    chosen = next((c for c in columns if c.key == "id"), columns[0])
    return mapper.get_property_by_column(chosen).key


def _collect_setters(entity_class: type, qualified_name: str) -> dict[str, SetterEntry]:
    setters: dict[str, SetterEntry] = {}
    for name in dir(entity_class):
        if len(name) <= len(_SETTER_PREFIX) or name[:3].lower() != _SETTER_PREFIX:
            continue
        func = inspect.getattr_static(entity_class, name)
        if not inspect.isfunction(func):
            continue

        parameters = list(inspect.signature(func).parameters.values())[1:]
        marker = detect_marker(func)
        if marker is EditableMarker.LEGACY_DOC:
            message = (
                f'Annotation "@editable" (in class "{qualified_name}" and method "{name}") '
                "is deprecated, please use the @editable decorator instead."
            )
            warnings.warn(message, DeprecationWarning, stacklevel=2)
            logger.warning(message)

        setters[name] = SetterEntry(
            name=name,
            function=func,
            marker=marker,
            parameters=tuple(p.name for p in parameters),
            param_type=_annotation(parameters),
            keyword_only=bool(parameters) and parameters[0].kind is inspect.Parameter.KEYWORD_ONLY,
        )
    return setters


def _annotation(parameters: list[inspect.Parameter]) -> Any:
    if not parameters or parameters[0].annotation is inspect.Parameter.empty:
        return None
    return parameters[0].annotation
