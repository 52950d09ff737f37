from sqlalchemy import Column, String, DateTime, Text, ForeignKey, Enum as SQLEnum
import enum
import uuid
from ..core.database import Base, utcnow
from .prospect import _enum_values


class InteractionType(str, enum.Enum):
    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"
    NOTE = "note"


class InteractionOutcome(str, enum.Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    FOLLOW_UP_NEEDED = "follow_up_needed"


class Interaction(Base):
    """
    A logged contact event against a prospect.
    The outcome is advisory only; it never moves the prospect's status.
    """
    __tablename__ = "interactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    prospect_id = Column(String(36), ForeignKey("prospects.id"), nullable=False, index=True)

    type = Column(
        SQLEnum(InteractionType, values_callable=_enum_values, native_enum=False, length=16),
        nullable=False,
    )
    subject = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    outcome = Column(
        SQLEnum(InteractionOutcome, values_callable=_enum_values, native_enum=False, length=32),
        nullable=True,
    )
    next_action = Column(Text, nullable=True)
    next_action_date = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    created_by = Column(Text, default="admin")

    def __repr__(self):
        return f"<Interaction {self.type} on {self.prospect_id}>"
