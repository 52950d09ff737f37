from sqlalchemy import Column, String, DateTime, Text, ForeignKey, Enum as SQLEnum
import enum
import uuid
from ..core.database import Base, utcnow


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class ProspectStatus(str, enum.Enum):
    """Prospect pipeline; declaration order is the usual happy path"""
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    MEETING_SCHEDULED = "meeting_scheduled"
    PROPOSAL_SENT = "proposal_sent"
    CONVERTED = "converted"  # Became a client
    REJECTED = "rejected"  # Not a good fit


class ProspectPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Terminal states drop a prospect out of the active pipeline.
# Nothing stops a later edit from moving it again.
TERMINAL_STATUSES = frozenset({ProspectStatus.CONVERTED, ProspectStatus.REJECTED})

DEFAULT_PROSPECT_SOURCE = "consultation_form"


class Prospect(Base):
    """
    A lead being actively pursued, usually converted from a consultation
    submission. Interactions are logged against it.
    """
    __tablename__ = "prospects"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    submission_id = Column(String(36), ForeignKey("contact_submissions.id"), nullable=True)

    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, index=True)
    company = Column(Text, nullable=True)

    # Status & Workflow
    status = Column(
        SQLEnum(ProspectStatus, values_callable=_enum_values, native_enum=False, length=32),
        default=ProspectStatus.NEW,
        nullable=False,
        index=True,
    )
    priority = Column(
        SQLEnum(ProspectPriority, values_callable=_enum_values, native_enum=False, length=16),
        default=ProspectPriority.MEDIUM,
        nullable=False,
    )
    source = Column(Text, default=DEFAULT_PROSPECT_SOURCE)

    next_follow_up_date = Column(DateTime, nullable=True)
    assigned_to = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Prospect {self.name} ({self.email}) - {self.status}>"

    @property
    def is_active(self):
        """Still in the pipeline (not converted or rejected)"""
        return self.status not in TERMINAL_STATUSES
