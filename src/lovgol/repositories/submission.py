"""Repositories for contact and inquiry form submissions."""

from src.lovgol.models import ContactSubmission, InquirySubmission
from src.lovgol.repositories.base import BaseRepository


class ContactSubmissionRepository(BaseRepository[ContactSubmission]):
    model = ContactSubmission

    async def list_all(self) -> list[ContactSubmission]:
        return await self.list_ordered(ContactSubmission.submitted_at)


class InquirySubmissionRepository(BaseRepository[InquirySubmission]):
    model = InquirySubmission

    async def list_all(self) -> list[InquirySubmission]:
        return await self.list_ordered(InquirySubmission.submitted_at)
