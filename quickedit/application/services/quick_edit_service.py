"""Quick edit service — change one editable property of one persisted record."""

from quickedit.application.interfaces import EntityCatalog, RecordStore
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
from quickedit.domain.value_types import coerce_value
from quickedit.infrastructure.logging.colored_logger import EditLogger, EditStage

elog = EditLogger("QuickEditService")


class QuickEditService:
    """Application service running a single property edit.

    Pipeline: Resolve → Fetch → Validate → Coerce → Invoke → Persist.
    The first failing step aborts the edit; nothing is flushed after a failure.
    """

    def __init__(
        self,
        catalog: EntityCatalog,
        store: RecordStore,
        *,
        bool_accepts_numeric: bool = True,
    ):
        self._catalog = catalog
        self._store = store
        self._bool_accepts_numeric = bool_accepts_numeric

    async def edit(self, request: EditRequest) -> str:
        """Apply ``request`` and return the success notice for the client."""
        with elog.timed_step(EditStage.RESOLVE, "Resolving entity type", entity=request.entity_name):
            descriptor = self.resolve_entity_type(request.entity_name)

        with elog.timed_step(EditStage.FETCH, "Loading record", id=request.identifier):
            record = await self.fetch_by_id(descriptor, request.identifier)

        with elog.timed_step(EditStage.INVOKE, "Applying new value", setter=request.setter_name):
            self.apply_edit(descriptor, record, request)

        with elog.timed_step(EditStage.PERSIST, "Flushing changes"):
            await self.persist(descriptor, request)

        message = f'Property "{request.property_name}" has been changed.'
        elog.step_complete(EditStage.COMPLETE, message, entity=descriptor.short_name, id=request.identifier)
        return message

    def resolve_entity_type(self, name: str) -> EntityTypeDescriptor:
        """Find the registered type for a fully-qualified name or a short alias.

        Short aliases are compared case-insensitively with hyphens removed,
        so ``"blog-post"`` matches a class named ``BlogPost``.
        """
        descriptor = self._catalog.get(name)
        if descriptor is not None:
            return descriptor

        normalized = name.lower().replace("-", "")
        match: EntityTypeDescriptor | None = None
        for candidate in self._catalog.all():
            if candidate.short_name.lower() != normalized:
                continue
            if match is not None:
                raise AmbiguousEntityNameError(
                    normalized, match.qualified_name, candidate.qualified_name
                )
            match = candidate

        if match is None:
            raise UnknownEntityTypeError(name)
        return match

    async def fetch_by_id(self, descriptor: EntityTypeDescriptor, identifier: str) -> object:
        records = await self._store.fetch(descriptor, identifier)
        if not records:
            raise RecordNotFoundError(descriptor.qualified_name, identifier)
        if len(records) > 1:
            raise NonUniqueRecordError(descriptor.qualified_name, identifier)
        return records[0]

    def coerce(self, declared_type: str, raw_value: str) -> str | int | float | bool:
        return coerce_value(
            declared_type, raw_value, bool_accepts_numeric=self._bool_accepts_numeric
        )

    def apply_edit(self, descriptor: EntityTypeDescriptor, record: object, request: EditRequest) -> None:
        """Validate the setter, coerce the value and call the setter on ``record``.

        Every failure, including errors raised by the setter itself, surfaces
        as ApplyFailedError chained to the original exception.
        """
        setter_name = request.setter_name
        try:
            entry = descriptor.find_setter(setter_name)
            if entry is None:
                raise SetterMissingError(setter_name)
            if not entry.is_editable:
                raise NotEditableError(entry.name)
            if entry.arity != 1:
                raise ArityMismatchError(entry.name, entry.arity)

            elog.step_complete(EditStage.VALIDATE, "Setter accepts external edits", setter=entry.name)

            value = self.coerce(request.declared_type, request.raw_value)
            elog.step_complete(EditStage.COERCE, "Value converted", type=request.declared_type, value=repr(value))

            setter = getattr(record, entry.name)
            if entry.keyword_only:
                setter(**{entry.parameters[0]: value})
            else:
                setter(value)
        except Exception as exc:
            raise ApplyFailedError(descriptor.qualified_name, request.identifier, exc) from exc

    async def persist(self, descriptor: EntityTypeDescriptor, request: EditRequest) -> None:
        """Flush the edited record; database errors become ApplyFailedError."""
        try:
            await self._store.flush()
        except QuickEditError:
            raise
        except Exception as exc:
            raise ApplyFailedError(descriptor.qualified_name, request.identifier, exc) from exc
