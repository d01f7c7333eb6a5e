"""Adventure scenario — wires a party together and lets everyone take a turn."""

import logging
from collections.abc import Callable

from fellowship.helpers.sinks import stdout_sink
from fellowship.mediator.party import Party
from fellowship.members.base import PartyMember
from fellowship.members.variants import Hobbit, Hunter, Rogue, Wizard

logger = logging.getLogger(__name__)


def build_party(
    sink: Callable[[str], None] = stdout_sink,
) -> tuple[Party, list[PartyMember]]:
    """Create a party of Hobbit, Wizard, Rogue and Hunter, in that join order."""
    party = Party()
    members: list[PartyMember] = [Hobbit(sink), Wizard(sink), Rogue(sink), Hunter(sink)]
    for member in members:
        party.add_member(member)
    return party, members


def run_adventure(sink: Callable[[str], None] = stdout_sink) -> Party:
    """Every member performs its signature action once, in roster order."""
    party, members = build_party(sink)
    for member in members:
        member.act(member.SIGNATURE_ACTION)
    logger.info("Adventure finished with %d members", len(party))
    return party
