"""PartyMember — base class for every actor that can belong to a Party."""

from __future__ import annotations

import logging
from abc import ABC
from collections.abc import Callable
from typing import TYPE_CHECKING

from fellowship.helpers.sinks import stdout_sink
from fellowship.models.actions import Action
from fellowship.models.notifications import JOIN_MESSAGE, Notification, NotificationKind

if TYPE_CHECKING:
    from fellowship.mediator.party import Party

logger = logging.getLogger(__name__)


class PartyMember(ABC):
    """An actor that only talks to its Party, never to other members.

    Subclasses set SIGNATURE_ACTION; everything else is shared. Every
    emission goes through the injected sink as a single line.
    """

    SIGNATURE_ACTION: Action

    def __init__(self, sink: Callable[[str], None] = stdout_sink) -> None:
        self._sink = sink
        self._party: Party | None = None

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def party(self) -> Party | None:
        """The Party this member last joined, if any."""
        return self._party

    def joined_party(self, party: Party) -> None:
        """Record the mediator and announce the join."""
        self._party = party
        self._emit(NotificationKind.JOIN, JOIN_MESSAGE)

    def party_action(self, action: Action) -> None:
        """React to an action performed by another member of the party."""
        self._emit(NotificationKind.PARTY_ACTION, action.description, action)

    def act(self, action: Action) -> None:
        """Perform an action and let the party tell everyone else."""
        self._emit(NotificationKind.ACT, action.label, action)
        if self._party is None:
            logger.debug("%s acted alone: %s", self.name, action)
            return
        self._party.act(self, action)

    def _emit(
        self,
        kind: NotificationKind,
        message: str,
        action: Action | None = None,
    ) -> None:
        notification = Notification(
            member=self.name, kind=kind, action=action, message=message
        )
        logger.debug("%s emitted %s: %s", self.name, kind, notification.line)
        self._sink(notification.line)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{self.name}>"
