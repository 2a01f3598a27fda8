"""Quick edit endpoint — change a single editable property of a record."""

from fastapi import APIRouter, Depends

from quickedit.application.schemas import FlashMessage, QuickEditRequest, QuickEditResponse
from quickedit.application.services import QuickEditService
from quickedit.infrastructure.dependencies import get_quick_edit_service

router = APIRouter(prefix="/quick-edit", tags=["Quick Edit"])


@router.post("", response_model=QuickEditResponse)
async def quick_edit(
    data: QuickEditRequest,
    service: QuickEditService = Depends(get_quick_edit_service),
) -> QuickEditResponse:
    """Set one property of one record through its ``set<Property>`` setter.

    The setter must be marked ``@editable``. Failures are returned as
    400 responses carrying a human-readable message.
    """
    message = await service.edit(data.to_edit_request())
    return QuickEditResponse(
        message=message,
        flash_messages=[FlashMessage(message=message, type="success")],
    )
