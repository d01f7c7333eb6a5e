"""Action catalogue — the closed set of events a party member can perform."""

from enum import StrEnum

from pydantic import BaseModel


class Action(StrEnum):
    """All actions a party member can perform or witness."""

    HUNT_GOLD = "hunt_gold"
    TAME_HORSE = "tame_horse"
    ACT_STEALTHILY = "act_stealthily"
    CAST_SPELL = "cast_spell"
    HUNT = "hunt"
    TELL_TALE = "tell_tale"
    SPOT_ENEMY = "spot_enemy"

    @property
    def label(self) -> str:
        """Short label used when a member announces its own act."""
        return ACTIONS[self].label

    @property
    def description(self) -> str:
        """Text used when a member is told about someone else's act."""
        return ACTIONS[self].description


class ActionDetail(BaseModel):
    """Display text for a single action."""

    kind: Action
    label: str  # "I did X"
    description: str  # "I witnessed X"

    model_config = {"frozen": True}


# --- Action catalogue ---

ACTIONS: dict[Action, ActionDetail] = {
    Action.HUNT_GOLD: ActionDetail(
        kind=Action.HUNT_GOLD,
        label="hunts for gold",
        description="found 1 gold piece.",
    ),
    Action.TAME_HORSE: ActionDetail(
        kind=Action.TAME_HORSE,
        label="tames a horse",
        description="saddles up for the ride.",
    ),
    Action.ACT_STEALTHILY: ActionDetail(
        kind=Action.ACT_STEALTHILY,
        label="acts stealthily",
        description="keeps quiet and watches the shadows.",
    ),
    Action.CAST_SPELL: ActionDetail(
        kind=Action.CAST_SPELL,
        label="casts a spell",
        description="feels the magic in the air.",
    ),
    Action.HUNT: ActionDetail(
        kind=Action.HUNT,
        label="hunted a rabbit",
        description="arrives for dinner",
    ),
    Action.TELL_TALE: ActionDetail(
        kind=Action.TELL_TALE,
        label="tells a tale",
        description="comes to listen",
    ),
    Action.SPOT_ENEMY: ActionDetail(
        kind=Action.SPOT_ENEMY,
        label="spotted enemies",
        description="runs for cover",
    ),
}


def is_valid_action(name: str) -> bool:
    """Check if an action kind exists in the catalogue."""
    return name in {action.value for action in ACTIONS}
