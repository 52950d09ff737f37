from sqlalchemy import Column, String, DateTime, Text
import uuid
from ..core.database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(150), unique=True, index=True, nullable=False)
    hashed_password = Column(Text, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
