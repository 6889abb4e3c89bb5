"""Contact and inquiry form submissions."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.lovgol.core.logging import get_logger
from src.lovgol.models import ContactSubmission, InquirySubmission
from src.lovgol.repositories import ContactSubmissionRepository, InquirySubmissionRepository
from src.lovgol.schemas.submission import ContactSubmissionCreate, InquirySubmissionCreate
from src.lovgol.services.base import BaseService

logger = get_logger(__name__)


class SubmissionService(BaseService):
    def __init__(
        self,
        contact_repo: ContactSubmissionRepository,
        inquiry_repo: InquirySubmissionRepository,
        session: AsyncSession,
    ):
        super().__init__(session)
        self.contact_repo = contact_repo
        self.inquiry_repo = inquiry_repo

    async def submit_contact(self, data: ContactSubmissionCreate) -> ContactSubmission:
        submission = ContactSubmission(**data.model_dump())
        self.contact_repo.add(submission)
        await self.commit(submission, action="store contact submission")
        logger.info("Contact submission received", submission_id=str(submission.id))
        return submission

    async def list_contacts(self) -> list[ContactSubmission]:
        return await self.contact_repo.list_all()

    async def submit_inquiry(self, data: InquirySubmissionCreate) -> InquirySubmission:
        submission = InquirySubmission(**data.model_dump())
        self.inquiry_repo.add(submission)
        await self.commit(submission, action="store inquiry submission")
        logger.info("Inquiry submission received", submission_id=str(submission.id))
        return submission

    async def list_inquiries(self) -> list[InquirySubmission]:
        return await self.inquiry_repo.list_all()
