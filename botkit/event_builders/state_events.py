# Copyright © 2018, 2019 Damir Jelić <poljar@termina.org.uk>
# Copyright © 2019 miruka <miruka@disroot.org>
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

"""Matrix state events module.

Room state is never changed through the event wrappers, a new state event has
to be sent instead. The classes in this module build those events:

    >>> event_dict = ChangeJoinRulesBuilder("invite").as_dict()
    >>> await client.room_put_state(
    ...     room_id="!test:example.com",
    ...     event_type=event_dict["type"],
    ...     content=event_dict["content"],
    ...     state_key=event_dict["state_key"],
    ... )
"""

from dataclasses import dataclass, field

from .event_builder import EventBuilder


@dataclass
class ChangeJoinRulesBuilder(EventBuilder):
    """A state event sent to change who can join a room.

    Attributes:
        rule (str): Can be ``public``, meaning any user can join;
            ``invite``, meaning users must be invited to join the room;
            ``knock``, meaning users can ask to be invited; or ``private``.
            Other values are sent as they are and left to the homeserver.
    """

    rule: str = field()

    def as_dict(self):
        return {
            "type": "m.room.join_rules",
            "state_key": "",
            "content": {"join_rule": self.rule},
        }
