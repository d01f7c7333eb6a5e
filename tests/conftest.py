"""Shared test fixtures."""

import pytest
from fellowship import Hobbit, Hunter, PartyMember, RecordingSink, Rogue, Wizard

MEMBER_CLASSES: list[type[PartyMember]] = [Hobbit, Hunter, Rogue, Wizard]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(params=MEMBER_CLASSES, ids=lambda cls: cls.__name__)
def member(request, sink: RecordingSink) -> PartyMember:
    """One fresh member of each variant, writing to the recording sink."""
    return request.param(sink)
