import copy

import pytest

from botkit import MessageEvent, RichReply

TEST_ROOM_ID = "!r:example.org"


class TestClass:
    def test_reply_content(self, message_event):
        content = RichReply.create_for(
            TEST_ROOM_ID, message_event, "ok", "<b>ok</b>"
        )

        assert content == {
            "m.relates_to": {"m.in_reply_to": {"event_id": "$1"}},
            "body": "> <@alice:example.org> hi\n> there\n\nok",
            "format": "org.matrix.custom.html",
            "formatted_body": (
                '<mx-reply><blockquote><a href="https://matrix.to/#/'
                '!r:example.org/$1">In reply to</a><a href="https://matrix.to'
                '/#/@alice:example.org">@alice:example.org</a><br />'
                "</blockquote></mx-reply><b>ok</b>"
            ),
        }

    def test_original_html_is_quoted(self, message_event):
        message_event["content"]["format"] = "org.matrix.custom.html"
        message_event["content"]["formatted_body"] = "<i>hi</i><br>there"

        content = RichReply.create_for(TEST_ROOM_ID, message_event, "ok", "ok")

        assert content["formatted_body"].endswith(
            "@alice:example.org</a><br /><i>hi</i><br>there"
            "</blockquote></mx-reply>ok"
        )

    def test_reply_is_pure(self, message_event):
        original = copy.deepcopy(message_event)

        first = RichReply.create_for(TEST_ROOM_ID, message_event, "a", "<p>a</p>")
        second = RichReply.create_for(TEST_ROOM_ID, message_event, "a", "<p>a</p>")

        assert first == second
        assert message_event == original

    def test_event_without_content(self):
        event = {"sender": "@bob:example.org", "event_id": "$2"}

        content = RichReply.create_for(TEST_ROOM_ID, event, "ok", "ok")

        assert content["body"] == "> <@bob:example.org> \n\nok"
        assert content["formatted_body"] == (
            '<mx-reply><blockquote><a href="https://matrix.to/#/'
            '!r:example.org/$2">In reply to</a><a href="https://matrix.to'
            '/#/@bob:example.org">@bob:example.org</a><br />'
            "</blockquote></mx-reply>ok"
        )

    def test_empty_body_fields(self):
        event = {
            "sender": "@bob:example.org",
            "event_id": "$3",
            "content": {"body": None, "formatted_body": None},
        }

        content = RichReply.create_for(TEST_ROOM_ID, event, "ok", "ok")

        assert content["body"] == "> <@bob:example.org> \n\nok"
        assert "<br /></blockquote>" in content["formatted_body"]

    def test_typed_event_input(self, message_event):
        typed = MessageEvent.from_dict(message_event)

        assert RichReply.create_for(
            TEST_ROOM_ID, typed, "ok", "ok"
        ) == RichReply.create_for(TEST_ROOM_ID, message_event, "ok", "ok")

    @pytest.mark.parametrize(
        "content",
        ["oops", ["x"], 42, {"body": 7, "formatted_body": ["<b>"]}],
    )
    def test_malformed_content(self, content):
        event = {"sender": "@bob:example.org", "event_id": "$4", "content": content}

        reply = RichReply.create_for(TEST_ROOM_ID, event, "ok", "<b>ok</b>")

        assert reply["body"] == "> <@bob:example.org> \n\nok"
        assert reply["formatted_body"] == (
            '<mx-reply><blockquote><a href="https://matrix.to/#/'
            '!r:example.org/$4">In reply to</a><a href="https://matrix.to'
            '/#/@bob:example.org">@bob:example.org</a><br />'
            "</blockquote></mx-reply><b>ok</b>"
        )
        assert reply["m.relates_to"] == {"m.in_reply_to": {"event_id": "$4"}}

    @pytest.mark.parametrize(
        "event, body, formatted_body",
        [
            (
                {"event_id": "$5", "content": {"body": "hi"}},
                "> <None> hi\n\nok",
                '<mx-reply><blockquote><a href="https://matrix.to/#/'
                '!r:example.org/$5">In reply to</a><a href="https://matrix.to'
                '/#/None">None</a><br /></blockquote></mx-reply>ok',
            ),
            (
                {"sender": "@bob:example.org", "content": {"body": "hi"}},
                "> <@bob:example.org> hi\n\nok",
                '<mx-reply><blockquote><a href="https://matrix.to/#/'
                '!r:example.org/None">In reply to</a><a href="https://matrix.to'
                '/#/@bob:example.org">@bob:example.org</a><br />'
                "</blockquote></mx-reply>ok",
            ),
            (
                {},
                "> <None> \n\nok",
                '<mx-reply><blockquote><a href="https://matrix.to/#/'
                '!r:example.org/None">In reply to</a><a href="https://matrix.to'
                '/#/None">None</a><br /></blockquote></mx-reply>ok',
            ),
        ],
    )
    def test_missing_sender_or_event_id(self, event, body, formatted_body):
        reply = RichReply.create_for(TEST_ROOM_ID, event, "ok", "ok")

        assert reply["body"] == body
        assert reply["formatted_body"] == formatted_body
        assert reply["m.relates_to"] == {
            "m.in_reply_to": {"event_id": event.get("event_id")}
        }
