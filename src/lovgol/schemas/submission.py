"""Contact and inquiry form schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from src.lovgol.schemas.base import CamelModel, NonEmptyStr


class ContactSubmissionCreate(CamelModel):
    name: NonEmptyStr = Field(max_length=200)
    email: EmailStr
    service: str | None = Field(default=None, max_length=200)
    budget: str | None = Field(default=None, max_length=100)
    message: NonEmptyStr


class ContactSubmissionRead(CamelModel):
    id: UUID
    name: str
    email: str
    service: str | None
    budget: str | None
    message: str
    submitted_at: datetime


class InquirySubmissionCreate(CamelModel):
    name: NonEmptyStr = Field(max_length=200)
    email: EmailStr
    service: NonEmptyStr = Field(max_length=200)
    details: NonEmptyStr


class InquirySubmissionRead(CamelModel):
    id: UUID
    name: str
    email: str
    service: str
    details: str
    submitted_at: datetime
