"""Notification model — one line on the party's notification channel."""

from enum import StrEnum

from pydantic import BaseModel

from fellowship.models.actions import Action

JOIN_MESSAGE = "joins the party"


class NotificationKind(StrEnum):
    """Why a member emitted a line."""

    JOIN = "join"
    ACT = "act"
    PARTY_ACTION = "party_action"


class Notification(BaseModel):
    """A single emission from a party member.

    Rendered on the wire as `"<member> <message>"`, see `line`.
    """

    member: str
    kind: NotificationKind
    action: Action | None = None
    message: str

    model_config = {"frozen": True}

    @property
    def line(self) -> str:
        return f"{self.member} {self.message}"
