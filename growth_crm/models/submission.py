from sqlalchemy import Column, String, DateTime, Text
import enum
import uuid
from ..core.database import Base, utcnow


class ServicePackage(str, enum.Enum):
    """Service packages a consultation request can name"""
    STARTUP = "startup"
    GROWTH = "growth"
    ONGOING = "ongoing"


class ContactSubmission(Base):
    """
    Inbound consultation request from the public site.
    Written once at intake and never modified afterwards.
    """
    __tablename__ = "contact_submissions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, index=True)
    message = Column(Text, nullable=False)
    # Free text: usually a ServicePackage value, but other values are kept as sent
    package = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f"<ContactSubmission {self.name} ({self.email})>"
