"""
Display hints for every enumerated field.

Each table is checked against its enum when the module is imported, so a new
enum member without a display entry fails at startup instead of quietly
falling back to a default badge.
"""

from .prospect import ProspectStatus, ProspectPriority
from .client import ClientStatus
from .interaction import InteractionType, InteractionOutcome
from .submission import ServicePackage


def _require_exhaustive(enum_cls, mapping):
    missing = [member.value for member in enum_cls if member not in mapping]
    if missing:
        raise RuntimeError(f"{enum_cls.__name__} has no display entry for: {', '.join(missing)}")
    return mapping


def label_for(value):
    """'meeting_scheduled' -> 'Meeting Scheduled'"""
    raw = value.value if hasattr(value, "value") else str(value)
    return raw.replace("_", " ").title()


STATUS_BADGE_VARIANTS = _require_exhaustive(ProspectStatus, {
    ProspectStatus.NEW: "secondary",
    ProspectStatus.CONTACTED: "outline",
    ProspectStatus.QUALIFIED: "default",
    ProspectStatus.MEETING_SCHEDULED: "default",
    ProspectStatus.PROPOSAL_SENT: "default",
    ProspectStatus.CONVERTED: "default",
    ProspectStatus.REJECTED: "destructive",
})

PRIORITY_COLORS = _require_exhaustive(ProspectPriority, {
    ProspectPriority.HIGH: "text-red-600",
    ProspectPriority.MEDIUM: "text-yellow-600",
    ProspectPriority.LOW: "text-green-600",
})

CLIENT_STATUS_BADGE_VARIANTS = _require_exhaustive(ClientStatus, {
    ClientStatus.ACTIVE: "default",
    ClientStatus.PAUSED: "secondary",
    ClientStatus.COMPLETED: "outline",
})

INTERACTION_TYPE_ICONS = _require_exhaustive(InteractionType, {
    InteractionType.CALL: "phone",
    InteractionType.EMAIL: "mail",
    InteractionType.MEETING: "calendar",
    InteractionType.NOTE: "file-text",
})

OUTCOME_BADGE_VARIANTS = _require_exhaustive(InteractionOutcome, {
    InteractionOutcome.POSITIVE: "default",
    InteractionOutcome.NEGATIVE: "destructive",
    InteractionOutcome.NEUTRAL: "secondary",
    InteractionOutcome.FOLLOW_UP_NEEDED: "outline",
})

PACKAGE_LABELS = _require_exhaustive(ServicePackage, {
    ServicePackage.STARTUP: "Startup Solutions",
    ServicePackage.GROWTH: "Growth Accelerator",
    ServicePackage.ONGOING: "Ongoing Support",
})


def options(enum_cls, hints=None):
    """Dropdown entries for an enum, in declaration order."""
    entries = []
    for member in enum_cls:
        entry = {"value": member.value, "label": label_for(member)}
        if hints is not None:
            entry["hint"] = hints[member]
        entries.append(entry)
    return entries
