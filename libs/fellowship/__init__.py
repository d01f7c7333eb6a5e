"""Fellowship — party members that coordinate through a mediator."""

from fellowship.helpers.sinks import RecordingSink, stdout_sink
from fellowship.mediator.party import Party
from fellowship.members import (
    MEMBER_TYPES,
    Hobbit,
    Hunter,
    PartyMember,
    Rogue,
    Wizard,
    create_member,
)
from fellowship.models.actions import ACTIONS, Action, ActionDetail, is_valid_action
from fellowship.models.notifications import JOIN_MESSAGE, Notification, NotificationKind
from fellowship.scenario import build_party, run_adventure

__all__ = [
    # Mediator
    "Party",
    # Members
    "Hobbit",
    "Hunter",
    "MEMBER_TYPES",
    "PartyMember",
    "Rogue",
    "Wizard",
    "create_member",
    # Models
    "ACTIONS",
    "Action",
    "ActionDetail",
    "JOIN_MESSAGE",
    "Notification",
    "NotificationKind",
    # Helpers
    "RecordingSink",
    "build_party",
    "is_valid_action",
    "run_adventure",
    "stdout_sink",
]
