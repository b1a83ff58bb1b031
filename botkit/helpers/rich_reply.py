# Copyright © 2018, 2019 Damir Jelić <poljar@termina.org.uk>
#
# Permission to use, copy, modify, and/or distribute this software for
# any purpose with or without fee is hereby granted, provided that the
# above copyright notice and this permission notice appear in all copies.
#
# THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES
# WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR ANY
# SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES WHATSOEVER
# RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN ACTION OF
# CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF OR IN
# CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.

"""Rich reply helpers.

A rich reply carries a relation to the event it answers, and a quote of that
event so that clients which don't understand relations still show what is
being replied to:

    >>> content = RichReply.create_for(room_id, event, "ok", "<b>ok</b>")
    >>> await client.room_send(room_id, "m.room.message", content)
"""

from typing import Any, Dict, Mapping, Union

from ..events import TypedEvent

HTML_FORMAT = "org.matrix.custom.html"


class RichReply:
    """Helper for creating rich replies."""

    @staticmethod
    def create_for(
        room_id: str,
        event: Union[Mapping[str, Any], TypedEvent],
        with_text: str,
        with_html: str,
    ) -> Dict[str, Any]:
        """Generate the event content that replies to the given event.

        The original event is quoted as is. Its formatted body ends up in the
        fallback without being escaped, it is trusted the same way other
        Matrix clients trust it. Malformed events never raise: content that
        isn't an object, or a body that isn't a string, quotes as empty, and
        a missing sender or event id renders as None.

        Args:
            room_id (str): The room the event being replied to resides in.
                Only used to build the link to the original event.
            event (dict, TypedEvent): The event to reply to.
            with_text (str): The plain text to reply with.
            with_html (str): The HTML to reply with.

        Returns the content of the event representing the reply.
        """
        source = event.source if isinstance(event, TypedEvent) else event
        sender = source.get("sender")
        event_id = source.get("event_id")

        content = source.get("content")
        if not isinstance(content, Mapping):
            content = {}

        original_body = content.get("body")
        if not isinstance(original_body, str):
            original_body = ""

        original_html = content.get("formatted_body")
        if not isinstance(original_html, str):
            original_html = ""

        fallback_text = f"> <{sender}> " + "\n> ".join(original_body.split("\n"))
        fallback_html = (
            "<mx-reply><blockquote>"
            f'<a href="https://matrix.to/#/{room_id}/{event_id}">In reply to</a>'
            f'<a href="https://matrix.to/#/{sender}">{sender}</a>'
            f"<br />{original_html}"
            "</blockquote></mx-reply>"
        )

        return {
            "m.relates_to": {
                "m.in_reply_to": {
                    "event_id": event_id,
                },
            },
            "body": f"{fallback_text}\n\n{with_text}",
            "format": HTML_FORMAT,
            "formatted_body": fallback_html + with_html,
        }
