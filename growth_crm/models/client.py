from sqlalchemy import Column, String, DateTime, Text, ForeignKey, Enum as SQLEnum
import enum
import uuid
from ..core.database import Base, utcnow
from .prospect import _enum_values


class ClientStatus(str, enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class Client(Base):
    """
    A paying engagement. monthly_value is display text such as "£1,500";
    anything that sums it has to parse it first.
    """
    __tablename__ = "clients"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    submission_id = Column(String(36), ForeignKey("contact_submissions.id"), nullable=True)

    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, index=True)
    company = Column(Text, nullable=True)

    current_package = Column(Text, nullable=True)
    package_start_date = Column(DateTime, nullable=True)
    monthly_value = Column(Text, nullable=True)

    status = Column(
        SQLEnum(ClientStatus, values_callable=_enum_values, native_enum=False, length=16),
        default=ClientStatus.ACTIVE,
        nullable=False,
    )
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f"<Client {self.name} ({self.email}) - {self.status}>"
