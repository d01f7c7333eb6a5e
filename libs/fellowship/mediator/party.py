"""Party — the mediator that relays one member's action to all the others."""

import logging

from fellowship.members.base import PartyMember
from fellowship.models.actions import Action

logger = logging.getLogger(__name__)


class Party:
    """Owns the roster and broadcasts actions between members.

    Members never reference each other; they only know their Party.
    Fan-out is synchronous and follows join order.
    """

    def __init__(self) -> None:
        self._members: list[PartyMember] = []

    @property
    def members(self) -> tuple[PartyMember, ...]:
        return tuple(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def add_member(self, member: PartyMember) -> None:
        """Append a member to the roster and tell it which party it joined."""
        self._members.append(member)
        logger.debug("%s added to party (%d members)", member, len(self._members))
        member.joined_party(self)

    def act(self, acting_member: PartyMember, action: Action) -> None:
        """Notify every member except the actor, in roster order."""
        logger.debug("Broadcasting %s from %s", action, acting_member)
        for member in self._members:
            if member is not acting_member:
                member.party_action(action)
