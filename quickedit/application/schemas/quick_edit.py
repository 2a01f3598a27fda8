"""Pydantic DTOs (Data Transfer Objects) for the quick edit endpoint."""

from typing import Literal

from pydantic import BaseModel, Field

from quickedit.domain.entities import EditRequest


class QuickEditRequest(BaseModel):
    """Schema for a single property edit.

    Wire names follow the existing front-end contract (``property``, ``id``,
    ``type``); the Python attribute names avoid shadowing builtins.
    """

    entity: str = Field(..., min_length=1, examples=["article"])
    property_name: str = Field(..., alias="property", min_length=1, examples=["Title"])
    identifier: str = Field(..., alias="id", min_length=1, examples=["10"])
    value: str = Field(..., examples=["Getting Started"])
    value_type: str = Field("text", alias="type", examples=["text", "int", "float", "bool"])

    model_config = {"populate_by_name": True}

    def to_edit_request(self) -> EditRequest:
        return EditRequest(
            entity_name=self.entity,
            property_name=self.property_name,
            identifier=self.identifier,
            raw_value=self.value,
            declared_type=self.value_type,
        )


class FlashMessage(BaseModel):
    message: str
    type: Literal["success", "info", "warning", "error"] = "info"


class QuickEditResponse(BaseModel):
    """Success acknowledgement returned to the client."""

    state: Literal["ok"] = "ok"
    message: str
    flash_messages: list[FlashMessage] = Field(default_factory=list)
