"""Contact and inquiry form endpoints."""

from fastapi import APIRouter, status

from src.lovgol.api.dependencies import CurrentAdmin, SubmissionServiceDep
from src.lovgol.schemas.submission import (
    ContactSubmissionCreate,
    ContactSubmissionRead,
    InquirySubmissionCreate,
    InquirySubmissionRead,
)

router = APIRouter(tags=["submissions"])


@router.post(
    "/contact-submissions",
    response_model=ContactSubmissionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit contact form",
)
async def submit_contact(
    data: ContactSubmissionCreate, service: SubmissionServiceDep
) -> ContactSubmissionRead:
    return ContactSubmissionRead.model_validate(await service.submit_contact(data))


@router.get(
    "/contact-submissions",
    response_model=list[ContactSubmissionRead],
    summary="List contact submissions",
)
async def list_contacts(
    service: SubmissionServiceDep, _admin: CurrentAdmin
) -> list[ContactSubmissionRead]:
    return [ContactSubmissionRead.model_validate(s) for s in await service.list_contacts()]


@router.post(
    "/inquiry-submissions",
    response_model=InquirySubmissionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit service inquiry",
)
async def submit_inquiry(
    data: InquirySubmissionCreate, service: SubmissionServiceDep
) -> InquirySubmissionRead:
    return InquirySubmissionRead.model_validate(await service.submit_inquiry(data))


@router.get(
    "/inquiry-submissions",
    response_model=list[InquirySubmissionRead],
    summary="List inquiry submissions",
)
async def list_inquiries(
    service: SubmissionServiceDep, _admin: CurrentAdmin
) -> list[InquirySubmissionRead]:
    return [InquirySubmissionRead.model_validate(s) for s in await service.list_inquiries()]
