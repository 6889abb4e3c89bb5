"""Service preview endpoints. Reads are public, writes need an admin session."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.lovgol.api.dependencies import CurrentAdmin, ServicePreviewServiceDep
from src.lovgol.models.enums import ServiceCategory
from src.lovgol.schemas.content import (
    ServicePreviewCreate,
    ServicePreviewRead,
    ServicePreviewUpdate,
)

router = APIRouter(prefix="/service-previews", tags=["service-previews"])


@router.get("", response_model=list[ServicePreviewRead], summary="List service previews")
async def list_service_previews(
    service: ServicePreviewServiceDep,
    category: Annotated[ServiceCategory | None, Query(description="Filter by category")] = None,
    technology: Annotated[str | None, Query(description="Filter by technology")] = None,
) -> list[ServicePreviewRead]:
    previews = await service.list_previews(
        category=category.value if category else None,
        technology=technology,
    )
    return [ServicePreviewRead.model_validate(p) for p in previews]


@router.get("/{preview_id}", response_model=ServicePreviewRead, summary="Get service preview")
async def get_service_preview(
    preview_id: UUID, service: ServicePreviewServiceDep
) -> ServicePreviewRead:
    return ServicePreviewRead.model_validate(await service.get_preview(preview_id))


@router.post(
    "",
    response_model=ServicePreviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create service preview",
)
async def create_service_preview(
    data: ServicePreviewCreate,
    service: ServicePreviewServiceDep,
    _admin: CurrentAdmin,
) -> ServicePreviewRead:
    return ServicePreviewRead.model_validate(await service.create_preview(data))


@router.put("/{preview_id}", response_model=ServicePreviewRead, summary="Update service preview")
async def update_service_preview(
    preview_id: UUID,
    data: ServicePreviewUpdate,
    service: ServicePreviewServiceDep,
    _admin: CurrentAdmin,
) -> ServicePreviewRead:
    return ServicePreviewRead.model_validate(await service.update_preview(preview_id, data))


@router.delete(
    "/{preview_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete service preview",
)
async def delete_service_preview(
    preview_id: UUID,
    service: ServicePreviewServiceDep,
    _admin: CurrentAdmin,
) -> None:
    await service.delete_preview(preview_id)
