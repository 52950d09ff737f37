"""
Client repository.
"""

from typing import Optional, Set
from sqlalchemy.orm import Session

from ..models.client import Client
from .base_repository import BaseRepository


class ClientRepository(BaseRepository[Client]):
    """Repository for Client records. Deletes are hard deletes."""

    def __init__(self, db: Session):
        super().__init__(Client, db)

    def get_by_email(self, email: str) -> Optional[Client]:
        return self.db.query(Client).filter(Client.email == email).first()

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def emails(self) -> Set[str]:
        """Every client email, used to skip already-converted submissions."""
        return {row.email for row in self.db.query(Client.email).all()}
