"""Health check endpoint; also lists the entity types open to quick edit."""

from fastapi import APIRouter, Depends

from quickedit.application.interfaces import EntityCatalog
from quickedit.config import get_settings
from quickedit.infrastructure.dependencies import get_entity_catalog

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(catalog: EntityCatalog = Depends(get_entity_catalog)) -> dict:
    settings = get_settings()
    editable_types = sorted(
        descriptor.short_name
        for descriptor in catalog.all()
        if any(entry.is_editable for entry in descriptor.setters.values())
    )
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "editable_entities": editable_types,
    }
