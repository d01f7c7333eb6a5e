from fellowship.models.actions import ACTIONS, Action, ActionDetail, is_valid_action
from fellowship.models.notifications import JOIN_MESSAGE, Notification, NotificationKind

__all__ = [
    "ACTIONS",
    "Action",
    "ActionDetail",
    "JOIN_MESSAGE",
    "Notification",
    "NotificationKind",
    "is_valid_action",
]
