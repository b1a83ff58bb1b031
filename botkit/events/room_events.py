# Copyright © 2018-2019 Damir Jelić <poljar@termina.org.uk>
# Copyright © 2021 Famedly GmbH
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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Literal, Optional, TypedDict, TypeVar

__all__ = [
    "TypedEvent",
    "RoomEvent",
    "StateEvent",
    "JoinRule",
    "JoinRulesEventContent",
    "JoinRulesEvent",
    "MessageEventContent",
    "MessageEvent",
]

C = TypeVar("C")

JoinRule = Literal["public", "knock", "invite", "private"]


class JoinRulesEventContent(TypedDict, total=False):
    join_rule: JoinRule


class MessageEventContent(TypedDict, total=False):
    msgtype: str
    body: str
    format: str
    formatted_body: str


@dataclass
class TypedEvent(Generic[C]):
    """A Matrix event with a typed view of its content.

    The event dictionary is kept as it was received, nothing is copied or
    checked. Accessors read straight from it and return None for fields that
    are missing.

    Attributes:
        source (dict): The source dictionary of the event. This allows access
            to all the event fields in a non-secure way.

    """

    source: Dict[str, Any] = field()

    @property
    def raw(self) -> Dict[str, Any]:
        """The event dictionary this event wraps."""
        return self.source

    @property
    def type(self) -> Optional[str]:
        return self.source.get("type")

    @property
    def sender(self) -> Optional[str]:
        """The fully-qualified ID of the user who sent this event."""
        return self.source.get("sender")

    @property
    def content(self) -> C:
        """The content of the event.

        This is the very dictionary found in the source. An event without
        content, or with content that isn't an object, gets an empty one.
        """
        content = self.source.get("content")

        if not isinstance(content, dict):
            return {}  # type: ignore

        return content

    @classmethod
    def from_dict(cls, parsed_dict: Dict[str, Any]) -> TypedEvent:
        """Create a typed event from a dictionary.

        Args:
            parsed_dict (dict): The dictionary representation of the event.

        """
        return cls(parsed_dict)

    @classmethod
    def parse_event(cls, event_dict: Dict[str, Any]) -> TypedEvent:
        """Wrap a Matrix event into the most specific known event class.

        Unknown event types become a StateEvent if they carry a state key,
        and a RoomEvent otherwise. No validation takes place.

        Args:
            event_dict (dict): The dictionary representation of the event.

        """
        event_type = event_dict.get("type")

        if event_type == "m.room.join_rules":
            return JoinRulesEvent.from_dict(event_dict)
        elif event_type == "m.room.message":
            return MessageEvent.from_dict(event_dict)
        elif "state_key" in event_dict:
            return StateEvent.from_dict(event_dict)

        return RoomEvent.from_dict(event_dict)


@dataclass
class RoomEvent(TypedEvent[C]):
    """An event that was sent into a room."""

    @property
    def event_id(self) -> Optional[str]:
        """A globally unique event identifier."""
        return self.source.get("event_id")

    @property
    def timestamp(self) -> Optional[int]:
        """Timestamp in milliseconds on originating homeserver when this event
        was sent."""
        return self.source.get("origin_server_ts")

    @property
    def unsigned(self) -> Dict[str, Any]:
        unsigned = self.source.get("unsigned")
        return unsigned if isinstance(unsigned, dict) else {}

    @property
    def redacted(self) -> bool:
        return "redacted_because" in self.unsigned


@dataclass
class StateEvent(RoomEvent[C]):
    """A room event that carries a piece of the room state."""

    @property
    def state_key(self) -> Optional[str]:
        return self.source.get("state_key")

    @property
    def previous_content(self) -> Optional[C]:
        """The content this event replaced, if the server told us."""
        return self.unsigned.get("prev_content")


@dataclass
class JoinRulesEvent(StateEvent[JoinRulesEventContent]):
    """An m.room.join_rules state event.

    The rule is one of "public" meaning anyone can join the room without any
    restrictions, "invite" meaning users can only join if they have been
    previously invited, "knock" or "private". Whatever the server sent is
    returned, unknown rules included.

    """

    @property
    def rule(self) -> Optional[JoinRule]:
        """The join rule for the room."""
        return self.content.get("join_rule")


@dataclass
class MessageEvent(RoomEvent[MessageEventContent]):
    """An m.room.message event."""

    @property
    def msgtype(self) -> Optional[str]:
        return self.content.get("msgtype")

    @property
    def body(self) -> Optional[str]:
        return self.content.get("body")

    @property
    def format(self) -> Optional[str]:
        return self.content.get("format")

    @property
    def formatted_body(self) -> Optional[str]:
        return self.content.get("formatted_body")

    @property
    def in_reply_to_event_id(self) -> Optional[str]:
        """The id of the event this message replies to, if any."""
        relation = self.content.get("m.relates_to")  # type: ignore
        if not isinstance(relation, dict):
            return None

        in_reply_to = relation.get("m.in_reply_to")
        if not isinstance(in_reply_to, dict):
            return None

        return in_reply_to.get("event_id")
