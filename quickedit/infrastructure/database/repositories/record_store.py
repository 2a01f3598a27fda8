"""Record store backed by the request's SQLAlchemy session."""

from sqlalchemy import Select, String, cast, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from quickedit.application.interfaces import RecordStore
from quickedit.domain.entities import EntityTypeDescriptor


def select_by_identifier(descriptor: EntityTypeDescriptor, identifier: str) -> Select:
    """Select at most two records whose identifier column equals ``identifier``.

    The identifier travels as a text parameter and the database casts it to
    the column type, so drivers with strict parameter typing accept it.
    """
    column = getattr(descriptor.entity_class, descriptor.identifier)
    return (
        select(descriptor.entity_class)
        .where(column == cast(literal(identifier, String()), column.type))
        .limit(2)
    )


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def fetch(self, descriptor: EntityTypeDescriptor, identifier: str) -> list[object]:
        result = await self._session.execute(select_by_identifier(descriptor, identifier))
        return list(result.scalars().all())

    async def flush(self) -> None:
        await self._session.flush()
