"""Unit tests for party members — run once per member variant."""

from unittest.mock import create_autospec

import pytest
from fellowship import (
    MEMBER_TYPES,
    Action,
    Hobbit,
    Party,
    PartyMember,
    RecordingSink,
    Wizard,
    create_member,
)


class TestPartyAction:
    def test_emits_description(self, member: PartyMember, sink: RecordingSink):
        for action in Action:
            member.party_action(action)
        assert sink.lines == [f"{member} {action.description}" for action in Action]

    def test_does_not_touch_party(self, member: PartyMember, sink: RecordingSink):
        party = create_autospec(Party, instance=True)
        member.joined_party(party)
        sink.clear()

        member.party_action(Action.SPOT_ENEMY)

        assert sink.lines == [f"{member} runs for cover"]
        party.act.assert_not_called()


class TestAct:
    def test_act_without_party(self, member: PartyMember, sink: RecordingSink):
        member.act(Action.HUNT_GOLD)
        assert sink.lines == [f"{member} hunts for gold"]
        assert member.party is None

    def test_act_delegates_to_party(self, member: PartyMember, sink: RecordingSink):
        party = create_autospec(Party, instance=True)
        member.joined_party(party)
        assert sink.lines == [f"{member} joins the party"]
        sink.clear()

        for action in Action:
            member.act(action)
            party.act.assert_called_with(member, action)

        assert party.act.call_count == len(Action)
        assert sink.lines == [f"{member} {action.label}" for action in Action]


class TestJoinedParty:
    def test_records_party(self, member: PartyMember, sink: RecordingSink):
        party = Party()
        member.joined_party(party)
        assert member.party is party
        assert sink.lines == [f"{member} joins the party"]

    def test_replaces_previous_party(self, member: PartyMember):
        first, second = Party(), Party()
        member.joined_party(first)
        member.joined_party(second)
        assert member.party is second


class TestDisplayName:
    def test_name_is_class_name(self, member: PartyMember):
        assert str(member) == type(member).__name__
        assert member.name == type(member).__name__

    def test_repr(self):
        assert repr(Hobbit(RecordingSink())) == "<Hobbit>"

    def test_default_sink_is_stdout(self, capsys):
        Wizard().act(Action.CAST_SPELL)
        assert capsys.readouterr().out == "Wizard casts a spell\n"


class TestSignatureActions:
    def test_every_variant_has_one(self):
        for member_class in MEMBER_TYPES.values():
            assert isinstance(member_class.SIGNATURE_ACTION, Action)

    def test_signatures_are_distinct(self):
        signatures = [cls.SIGNATURE_ACTION for cls in MEMBER_TYPES.values()]
        assert len(set(signatures)) == len(signatures)


class TestCreateMember:
    def test_known_kinds(self):
        for kind, member_class in MEMBER_TYPES.items():
            assert type(create_member(kind, RecordingSink())) is member_class

    def test_case_insensitive(self):
        assert isinstance(create_member("Wizard", RecordingSink()), Wizard)

    def test_uses_given_sink(self):
        sink = RecordingSink()
        create_member("rogue", sink).act(Action.ACT_STEALTHILY)
        assert sink.lines == ["Rogue acts stealthily"]

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown party member kind: dragon"):
            create_member("dragon")
