from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..core.database import as_naive_utc


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def blank_to_none(v):
    """Convert empty or whitespace-only strings to None"""
    if isinstance(v, str) and not v.strip():
        return None
    return v


def normalize_datetime(v: Optional[datetime]) -> Optional[datetime]:
    return as_naive_utc(v)
