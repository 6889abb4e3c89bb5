"""Case study endpoints. Reads are public, writes need an admin session."""

from uuid import UUID

from fastapi import APIRouter, status

from src.lovgol.api.dependencies import CaseStudyServiceDep, CurrentAdmin
from src.lovgol.schemas.content import CaseStudyCreate, CaseStudyRead, CaseStudyUpdate

router = APIRouter(prefix="/case-studies", tags=["case-studies"])


@router.get("", response_model=list[CaseStudyRead], summary="List case studies")
async def list_case_studies(service: CaseStudyServiceDep) -> list[CaseStudyRead]:
    return [CaseStudyRead.model_validate(c) for c in await service.list_case_studies()]


@router.get("/slug/{slug}", response_model=CaseStudyRead, summary="Get case study by slug")
async def get_case_study_by_slug(slug: str, service: CaseStudyServiceDep) -> CaseStudyRead:
    return CaseStudyRead.model_validate(await service.get_by_slug(slug))


@router.get("/{case_study_id}", response_model=CaseStudyRead, summary="Get case study")
async def get_case_study(case_study_id: UUID, service: CaseStudyServiceDep) -> CaseStudyRead:
    return CaseStudyRead.model_validate(await service.get_case_study(case_study_id))


@router.post(
    "",
    response_model=CaseStudyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create case study",
    responses={409: {"description": "Slug already in use"}},
)
async def create_case_study(
    data: CaseStudyCreate,
    service: CaseStudyServiceDep,
    _admin: CurrentAdmin,
) -> CaseStudyRead:
    return CaseStudyRead.model_validate(await service.create_case_study(data))


@router.put("/{case_study_id}", response_model=CaseStudyRead, summary="Update case study")
async def update_case_study(
    case_study_id: UUID,
    data: CaseStudyUpdate,
    service: CaseStudyServiceDep,
    _admin: CurrentAdmin,
) -> CaseStudyRead:
    return CaseStudyRead.model_validate(await service.update_case_study(case_study_id, data))


@router.delete(
    "/{case_study_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete case study",
)
async def delete_case_study(
    case_study_id: UUID,
    service: CaseStudyServiceDep,
    _admin: CurrentAdmin,
) -> None:
    await service.delete_case_study(case_study_id)
