from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from ..models.interaction import InteractionType, InteractionOutcome
from .base import CamelModel, blank_to_none, normalize_datetime


class InteractionBase(CamelModel):
    type: InteractionType
    subject: Optional[str] = Field(None, max_length=255)
    content: str = Field(..., min_length=1)
    outcome: Optional[InteractionOutcome] = None
    next_action: Optional[str] = None
    next_action_date: Optional[datetime] = None

    @field_validator('type', 'outcome', mode='before')
    @classmethod
    def normalize_enum(cls, v):
        v = blank_to_none(v)
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('subject', 'next_action', 'next_action_date', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator('content')
    @classmethod
    def content_not_blank(cls, v: str):
        if not v.strip():
            raise ValueError('Content is required')
        return v

    @field_validator('next_action_date')
    @classmethod
    def action_date_to_utc(cls, v):
        return normalize_datetime(v)


class InteractionCreate(InteractionBase):
    prospect_id: str = Field(..., min_length=1)
    created_by: str = "admin"


class InteractionUpdate(CamelModel):
    type: Optional[InteractionType] = None
    subject: Optional[str] = None
    content: Optional[str] = Field(None, min_length=1)
    outcome: Optional[InteractionOutcome] = None
    next_action: Optional[str] = None
    next_action_date: Optional[datetime] = None

    @field_validator('type', 'outcome', mode='before')
    @classmethod
    def normalize_enum(cls, v):
        v = blank_to_none(v)
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator('subject', 'next_action', 'next_action_date', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator('next_action_date')
    @classmethod
    def action_date_to_utc(cls, v):
        return normalize_datetime(v)

    @field_validator('type', 'content')
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError('Field cannot be null')
        return v


class InteractionResponse(CamelModel):
    id: str
    prospect_id: str
    type: InteractionType
    subject: Optional[str] = None
    content: str
    outcome: Optional[InteractionOutcome] = None
    next_action: Optional[str] = None
    next_action_date: Optional[datetime] = None
    created_at: datetime
    created_by: Optional[str] = None
