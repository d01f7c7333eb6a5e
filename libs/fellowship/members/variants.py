"""Concrete party members. They differ only in narrative flavour."""

from collections.abc import Callable

from fellowship.helpers.sinks import stdout_sink
from fellowship.members.base import PartyMember
from fellowship.models.actions import Action


class Hobbit(PartyMember):
    SIGNATURE_ACTION = Action.HUNT_GOLD


class Hunter(PartyMember):
    SIGNATURE_ACTION = Action.TAME_HORSE


class Rogue(PartyMember):
    SIGNATURE_ACTION = Action.ACT_STEALTHILY


class Wizard(PartyMember):
    SIGNATURE_ACTION = Action.CAST_SPELL


MEMBER_TYPES: dict[str, type[PartyMember]] = {
    "hobbit": Hobbit,
    "hunter": Hunter,
    "rogue": Rogue,
    "wizard": Wizard,
}


def create_member(kind: str, sink: Callable[[str], None] = stdout_sink) -> PartyMember:
    """Build a party member by kind name (case-insensitive).

    Raises:
        ValueError: If the kind is unknown.
    """
    member_class = MEMBER_TYPES.get(kind.lower())
    if member_class is None:
        raise ValueError(f"Unknown party member kind: {kind}")
    return member_class(sink)
