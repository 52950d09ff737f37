from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from ..models.prospect import ProspectStatus, ProspectPriority, DEFAULT_PROSPECT_SOURCE
from .base import CamelModel, blank_to_none, normalize_datetime


# Base Prospect Schema
class ProspectBase(CamelModel):
    name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    company: Optional[str] = Field(None, max_length=255)
    status: ProspectStatus = ProspectStatus.NEW
    priority: ProspectPriority = ProspectPriority.MEDIUM
    source: Optional[str] = DEFAULT_PROSPECT_SOURCE
    next_follow_up_date: Optional[datetime] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('status', 'priority', mode='before')
    @classmethod
    def normalize_enum(cls, v):
        """Accept any casing for enum values"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('next_follow_up_date', 'assigned_to', 'company', 'source', 'notes', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator('next_follow_up_date')
    @classmethod
    def follow_up_to_utc(cls, v):
        return normalize_datetime(v)


# Create Prospect Schema
class ProspectCreate(ProspectBase):
    submission_id: Optional[str] = None


# Update Prospect Schema
class ProspectUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=2, max_length=200)
    email: Optional[EmailStr] = None
    company: Optional[str] = Field(None, max_length=255)
    status: Optional[ProspectStatus] = None
    priority: Optional[ProspectPriority] = None
    source: Optional[str] = None
    next_follow_up_date: Optional[datetime] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('status', 'priority', mode='before')
    @classmethod
    def normalize_enum(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('next_follow_up_date', 'assigned_to', 'company', 'source', 'notes', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator('next_follow_up_date')
    @classmethod
    def follow_up_to_utc(cls, v):
        return normalize_datetime(v)

    @field_validator('name', 'email', 'status', 'priority')
    @classmethod
    def not_null(cls, v):
        # Omit a required field to leave it unchanged; null is not a value for it
        if v is None:
            raise ValueError('Field cannot be null')
        return v


# Prospect Response Schema (returned from API)
class ProspectResponse(CamelModel):
    id: str
    submission_id: Optional[str] = None
    name: str
    email: str
    company: Optional[str] = None
    status: ProspectStatus
    priority: ProspectPriority
    source: Optional[str] = None
    next_follow_up_date: Optional[datetime] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
