"""Abstract catalog of persisted types (port)."""

from abc import ABC, abstractmethod

from quickedit.domain.entities import EntityTypeDescriptor


class EntityCatalog(ABC):
    """Port listing every registered persisted type — built by the infrastructure layer."""

    @abstractmethod
    def all(self) -> list[EntityTypeDescriptor]:
        """Return the descriptors of all registered types."""
        ...

    @abstractmethod
    def get(self, qualified_name: str) -> EntityTypeDescriptor | None:
        """Return the descriptor registered under a fully-qualified name."""
        ...
