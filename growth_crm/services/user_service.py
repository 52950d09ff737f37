"""
User service. Users exist so the admin account is part of the record store;
no route authenticates against them.
"""

import logging
from sqlalchemy.orm import Session

from ..core.security import get_password_hash
from ..models.user import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = UserRepository(db)

    def create_user(self, username: str, password: str) -> User:
        return self.repository.create(obj_in={
            "username": username,
            "hashed_password": get_password_hash(password),
        })

    def ensure_user(self, username: str, password: str) -> User:
        """Create the user unless one with that username already exists."""
        existing = self.repository.get_by_username(username)
        if existing:
            return existing
        user = self.create_user(username, password)
        logger.info(f"Created user '{username}'")
        return user
