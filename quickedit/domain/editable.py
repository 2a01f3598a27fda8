"""Opt-in marker for setters that may be changed through the quick edit API."""

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

F = TypeVar("F", bound=Callable)

EDITABLE_ATTRIBUTE = "__quickedit_editable__"
LEGACY_DOC_TOKEN = "@editable"


class EditableMarker(str, Enum):
    """How a setter was marked editable, if at all."""

    NONE = "none"
    ATTRIBUTE = "attribute"
    LEGACY_DOC = "legacy_doc"


def editable(func: F) -> F:
    """Mark a setter as callable by external clients.

    Usage:
        class Article(Base):
            @editable
            def setTitle(self, title: str) -> None:
                ...
    """
    setattr(func, EDITABLE_ATTRIBUTE, True)
    return func


def detect_marker(func: Callable) -> EditableMarker:
    """Return the marker carried by ``func``; the decorator wins over the docstring.

    Only the docstring written on ``func`` itself counts; an override does not
    inherit the legacy marker of the method it replaces.
    """
    if getattr(func, EDITABLE_ATTRIBUTE, False):
        return EditableMarker.ATTRIBUTE
    if LEGACY_DOC_TOKEN in (func.__doc__ or ""):
        return EditableMarker.LEGACY_DOC
    return EditableMarker.NONE
