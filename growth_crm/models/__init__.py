# Import all models so SQLAlchemy registers every table
from .submission import ContactSubmission, ServicePackage
from .prospect import (
    Prospect, ProspectStatus, ProspectPriority,
    TERMINAL_STATUSES, DEFAULT_PROSPECT_SOURCE,
)
from .interaction import Interaction, InteractionType, InteractionOutcome
from .client import Client, ClientStatus
from .user import User

__all__ = ['ContactSubmission', 'ServicePackage',
           'Prospect', 'ProspectStatus', 'ProspectPriority',
           'TERMINAL_STATUSES', 'DEFAULT_PROSPECT_SOURCE',
           'Interaction', 'InteractionType', 'InteractionOutcome',
           'Client', 'ClientStatus',
           'User']
