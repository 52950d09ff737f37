"""
Controller layer initialization.
Controllers handle HTTP request/response logic and coordinate between routes and services.
"""

from .submission_controller import SubmissionController
from .prospect_controller import ProspectController
from .client_controller import ClientController
from .interaction_controller import InteractionController
from .dashboard_controller import DashboardController
from .email_controller import EmailController

__all__ = [
    "SubmissionController",
    "ProspectController",
    "ClientController",
    "InteractionController",
    "DashboardController",
    "EmailController",
]
