"""Domain entities — descriptors of persisted record types and their setters."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from quickedit.domain.editable import EditableMarker


@dataclass(frozen=True)
class SetterEntry:
    """One ``set*`` method of a persisted type, inspected once at startup."""

    name: str
    function: Callable[..., Any]
    marker: EditableMarker
    parameters: tuple[str, ...]
    param_type: Any = None
    keyword_only: bool = False

    @property
    def is_editable(self) -> bool:
        return self.marker is not EditableMarker.NONE

    @property
    def arity(self) -> int:
        return len(self.parameters)


@dataclass(frozen=True)
class EntityTypeDescriptor:
    """Metadata of a registered persisted type.

    ``qualified_name`` is ``module.QualName``; ``short_name`` is the last
    segment and is what case-insensitive aliases are matched against.
    """

    qualified_name: str
    short_name: str
    entity_class: type
    identifier: str
    setters: dict[str, SetterEntry] = field(default_factory=dict)

    def find_setter(self, name: str) -> SetterEntry | None:
        """Look up a setter by exact name, then case-insensitively."""
        entry = self.setters.get(name)
        if entry is not None:
            return entry
        folded = name.casefold()
        for candidate, entry in self.setters.items():
            if candidate.casefold() == folded:
                return entry
        return None
