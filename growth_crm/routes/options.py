"""
Dropdown options for the admin UI, built from the enum display tables.
"""

from fastapi import APIRouter

from ..models import display
from ..models.client import ClientStatus
from ..models.interaction import InteractionOutcome, InteractionType
from ..models.prospect import ProspectPriority, ProspectStatus
from ..models.submission import ServicePackage
from ..services.lifecycle_service import default_price_for_package

router = APIRouter()


@router.get("")
async def get_options():
    return {
        "prospectStatuses": display.options(ProspectStatus, display.STATUS_BADGE_VARIANTS),
        "prospectPriorities": display.options(ProspectPriority, display.PRIORITY_COLORS),
        "clientStatuses": display.options(ClientStatus, display.CLIENT_STATUS_BADGE_VARIANTS),
        "interactionTypes": display.options(InteractionType, display.INTERACTION_TYPE_ICONS),
        "interactionOutcomes": display.options(InteractionOutcome, display.OUTCOME_BADGE_VARIANTS),
        "packages": [
            {
                "value": package.value,
                "label": display.PACKAGE_LABELS[package],
                "monthlyValue": default_price_for_package(package.value),
            }
            for package in ServicePackage
        ],
    }
