"""
Contact submission repository.
"""

from sqlalchemy.orm import Session

from ..models.submission import ContactSubmission
from .base_repository import BaseRepository


class SubmissionRepository(BaseRepository[ContactSubmission]):
    """Repository for consultation submissions. Submissions are never edited."""

    def __init__(self, db: Session):
        super().__init__(ContactSubmission, db)
