"""
Prospect repository for record store operations.
"""

from typing import Optional, List
from sqlalchemy.orm import Session

from ..models.prospect import Prospect
from .base_repository import BaseRepository


class ProspectRepository(BaseRepository[Prospect]):
    """Repository for Prospect records."""

    def __init__(self, db: Session):
        super().__init__(Prospect, db)

    def get_by_email(self, email: str) -> Optional[Prospect]:
        """Get prospect by email address."""
        return self.db.query(Prospect).filter(Prospect.email == email).first()

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_with_follow_up(self) -> List[Prospect]:
        """Prospects that have a follow-up date set, soonest first."""
        return self.db.query(Prospect)\
            .filter(Prospect.next_follow_up_date.isnot(None))\
            .order_by(Prospect.next_follow_up_date)\
            .all()
