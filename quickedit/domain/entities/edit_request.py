"""Domain entity describing one property edit."""

from dataclasses import dataclass

from quickedit.domain.value_types import ValueType


@dataclass(frozen=True)
class EditRequest:
    """A single quick edit: which record, which property, which raw value."""

    entity_name: str
    property_name: str
    identifier: str
    raw_value: str
    declared_type: str = ValueType.TEXT.value

    @property
    def setter_name(self) -> str:
        return "set" + self.property_name
