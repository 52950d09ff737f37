from pydantic import EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime

from ..models.client import ClientStatus
from .base import CamelModel, blank_to_none, normalize_datetime


class ClientBase(CamelModel):
    name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    company: Optional[str] = Field(None, max_length=255)
    current_package: Optional[str] = None
    package_start_date: Optional[datetime] = None
    monthly_value: Optional[str] = Field(None, max_length=50)
    status: ClientStatus = ClientStatus.ACTIVE
    notes: Optional[str] = None

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('package_start_date', 'monthly_value', 'current_package', 'company', 'notes', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator('package_start_date')
    @classmethod
    def start_date_to_utc(cls, v):
        return normalize_datetime(v)


class ClientCreate(ClientBase):
    submission_id: Optional[str] = None


class ClientUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=2, max_length=200)
    email: Optional[EmailStr] = None
    company: Optional[str] = Field(None, max_length=255)
    current_package: Optional[str] = None
    package_start_date: Optional[datetime] = None
    monthly_value: Optional[str] = Field(None, max_length=50)
    status: Optional[ClientStatus] = None
    notes: Optional[str] = None

    @field_validator('status', mode='before')
    @classmethod
    def normalize_status(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('package_start_date', 'monthly_value', 'current_package', 'company', 'notes', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator('package_start_date')
    @classmethod
    def start_date_to_utc(cls, v):
        return normalize_datetime(v)

    @field_validator('name', 'email', 'status')
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError('Field cannot be null')
        return v


class ClientResponse(CamelModel):
    id: str
    submission_id: Optional[str] = None
    name: str
    email: str
    company: Optional[str] = None
    current_package: Optional[str] = None
    package_start_date: Optional[datetime] = None
    monthly_value: Optional[str] = None
    status: ClientStatus
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class BulkConversionResponse(CamelModel):
    """Response for converting every unconverted submission to a client"""
    converted_count: int = 0
    clients: List[ClientResponse] = []
