import pytest

from botkit.events import (
    JoinRulesEvent,
    MessageEvent,
    RoomEvent,
    StateEvent,
    TypedEvent,
)


def join_rules_event(rule="invite"):
    return {
        "type": "m.room.join_rules",
        "sender": "@alice:example.org",
        "event_id": "$143273582443PhrSn:example.org",
        "origin_server_ts": 1432735824653,
        "state_key": "",
        "content": {"join_rule": rule},
        "unsigned": {"age": 1234, "prev_content": {"join_rule": "public"}},
    }


class TestClass:
    @pytest.mark.parametrize("rule", ["public", "knock", "invite", "private"])
    def test_join_rules(self, rule):
        event = JoinRulesEvent.from_dict(join_rules_event(rule))
        assert event.rule == rule

    def test_unknown_join_rule_passes_through(self):
        event = JoinRulesEvent.from_dict(join_rules_event("restricted"))
        assert event.rule == "restricted"

    def test_content_is_not_copied(self):
        source = join_rules_event()
        event = JoinRulesEvent(source)

        assert event.content is source["content"]
        assert event.raw is source

    def test_missing_content(self):
        event = JoinRulesEvent({"type": "m.room.join_rules"})

        assert event.content == {}
        assert event.rule is None
        assert event.sender is None
        assert event.event_id is None
        assert event.state_key is None

    def test_state_event_fields(self):
        event = JoinRulesEvent.from_dict(join_rules_event())

        assert event.type == "m.room.join_rules"
        assert event.sender == "@alice:example.org"
        assert event.event_id == "$143273582443PhrSn:example.org"
        assert event.timestamp == 1432735824653
        assert event.state_key == ""
        assert event.previous_content == {"join_rule": "public"}
        assert not event.redacted

    def test_redacted(self):
        source = join_rules_event()
        source["unsigned"]["redacted_because"] = {"type": "m.room.redaction"}

        assert JoinRulesEvent(source).redacted

    def test_message_event(self):
        event = MessageEvent.from_dict(
            {
                "type": "m.room.message",
                "sender": "@alice:example.org",
                "event_id": "$2",
                "content": {
                    "msgtype": "m.text",
                    "body": "> <@bob:example.org> hi\n\nok",
                    "format": "org.matrix.custom.html",
                    "formatted_body": "<b>ok</b>",
                    "m.relates_to": {"m.in_reply_to": {"event_id": "$1"}},
                },
            }
        )

        assert event.msgtype == "m.text"
        assert event.body.endswith("ok")
        assert event.format == "org.matrix.custom.html"
        assert event.formatted_body == "<b>ok</b>"
        assert event.in_reply_to_event_id == "$1"

    def test_message_event_without_relation(self):
        event = MessageEvent({"content": {"body": "hi"}})
        assert event.in_reply_to_event_id is None

    def test_parse_event(self):
        assert isinstance(
            TypedEvent.parse_event(join_rules_event()), JoinRulesEvent
        )
        assert isinstance(
            TypedEvent.parse_event({"type": "m.room.message", "content": {}}),
            MessageEvent,
        )

        state = TypedEvent.parse_event({"type": "m.room.name", "state_key": ""})
        assert type(state) is StateEvent

        event = TypedEvent.parse_event({"type": "m.reaction"})
        assert type(event) is RoomEvent

    @pytest.mark.parametrize("content", ["oops", ["x"], 3, None])
    def test_malformed_content(self, content):
        event = JoinRulesEvent({"type": "m.room.join_rules", "content": content})

        assert event.content == {}
        assert event.rule is None

    def test_malformed_unsigned(self):
        source = join_rules_event()
        source["unsigned"] = ["x"]
        event = JoinRulesEvent(source)

        assert event.unsigned == {}
        assert event.previous_content is None
        assert not event.redacted

    @pytest.mark.parametrize(
        "relation",
        ["x", ["$1"], {"m.in_reply_to": "$1"}, {"m.in_reply_to": None}],
    )
    def test_malformed_reply_relation(self, relation):
        event = MessageEvent({"content": {"body": "hi", "m.relates_to": relation}})
        assert event.in_reply_to_event_id is None

    def test_malformed_message_content(self):
        event = MessageEvent({"content": "hi"})

        assert event.body is None
        assert event.in_reply_to_event_id is None
