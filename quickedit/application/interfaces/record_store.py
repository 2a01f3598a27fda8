"""Abstract record store (port) used by the quick edit pipeline."""

from abc import ABC, abstractmethod

from quickedit.domain.entities import EntityTypeDescriptor


class RecordStore(ABC):
    """Port for loading one record by identifier and flushing pending changes."""

    @abstractmethod
    async def fetch(self, descriptor: EntityTypeDescriptor, identifier: str) -> list[object]:
        """Return the records whose identifier equals ``identifier`` (at most two)."""
        ...

    @abstractmethod
    async def flush(self) -> None:
        """Write all pending in-memory changes to the backing store."""
        ...
