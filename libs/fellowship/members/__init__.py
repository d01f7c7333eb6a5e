from fellowship.members.base import PartyMember
from fellowship.members.variants import (
    MEMBER_TYPES,
    Hobbit,
    Hunter,
    Rogue,
    Wizard,
    create_member,
)

__all__ = [
    "MEMBER_TYPES",
    "Hobbit",
    "Hunter",
    "PartyMember",
    "Rogue",
    "Wizard",
    "create_member",
]
