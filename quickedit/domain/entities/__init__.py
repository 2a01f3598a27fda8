from .entity_type import EntityTypeDescriptor, SetterEntry
from .edit_request import EditRequest

__all__ = [
    "EntityTypeDescriptor",
    "SetterEntry",
    "EditRequest",
]
