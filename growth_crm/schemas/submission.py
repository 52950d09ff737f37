from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from .base import CamelModel, blank_to_none


class ContactSubmissionCreate(CamelModel):
    name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    message: str = Field(..., min_length=1)
    package: Optional[str] = Field(None, max_length=100)

    @field_validator('name', 'message', mode='before')
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('package', mode='before')
    @classmethod
    def empty_package_to_none(cls, v):
        v = blank_to_none(v)
        if isinstance(v, str):
            return v.strip()
        return v


class ContactSubmissionResponse(CamelModel):
    id: str
    name: str
    email: str
    message: str
    package: Optional[str] = None
    created_at: datetime


class ContactSubmitResponse(CamelModel):
    """Response for the public consultation form"""
    success: bool = True
    id: str
    message: str = "Thank you! We'll be in touch within 24 hours."
