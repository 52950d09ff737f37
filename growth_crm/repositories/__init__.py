"""
Repository layer initialization.
Repositories handle all record store operations and queries.
"""

from .base_repository import BaseRepository
from .submission_repository import SubmissionRepository
from .prospect_repository import ProspectRepository
from .interaction_repository import InteractionRepository
from .client_repository import ClientRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "SubmissionRepository",
    "ProspectRepository",
    "InteractionRepository",
    "ClientRepository",
    "UserRepository",
]
