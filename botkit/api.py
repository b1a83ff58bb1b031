# Copyright © 2018 Damir Jelić <poljar@termina.org.uk>
# Copyright © 2020-2021 Famedly GmbH
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

"""botkit api module.

This module contains primitives to build Matrix API http requests.

Every builder returns the HTTP method, the percent-encoded HTTP path and the
JSON body (or None) for the request. The tuple is meant to be handed to a
request dispatcher, query parameters are never baked into the path.

In general these functions are not directly called. One should use an existing
client like AsyncClient or the UnstableApis helper.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import quote, urlencode
from uuid import UUID

MATRIX_API_PATH: str = "/_matrix/client/r0"


class Api:
    """Matrix API class.

    Static methods reflecting the Matrix REST API.
    """

    @staticmethod
    def to_json(content_dict: Dict[Any, Any]) -> str:
        """Turn a dictionary into a json string."""
        return json.dumps(content_dict, separators=(",", ":"))

    @staticmethod
    def _build_path(
        path: Union[str, List[str]],
        base_path: str = MATRIX_API_PATH,
    ) -> str:
        """Builds a percent-encoded path from a list of strings.

        For example, turns ["hello", "wo/rld"] into "/hello/wo%2Frld".
        All special characters are percent encoded,
        including the forward slash (/).

        Args:
            path (List[str]): the list of path elements.
            base_path (str, optional): A base path to be prepended to path.
                Defaults to MATRIX_API_PATH.
        """
        if isinstance(path, str):
            quoted_path = quote(path, safe="")
        elif isinstance(path, list):
            quoted_path = "/".join([quote(str(part), safe="") for part in path])
        else:
            raise AssertionError(
                f"'path' must be of type List[str] or str, got {type(path)}"
            )

        built_path = f"{base_path}/{quoted_path}"

        return built_path.rstrip("/")

    @staticmethod
    def room_send(
        room_id: str,
        event_type: str,
        body: Dict[Any, Any],
        tx_id: Union[str, UUID],
    ) -> Tuple[str, str, Dict[Any, Any]]:
        """Send a message event to a room.

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            room_id (str): The room id of the room where the event will be sent
                to.
            event_type (str): The type of the message that will be sent.
            body(Dict): The body of the event. The fields in this
                object will vary depending on the type of event.
            tx_id (str): The transaction ID for this event.
        """
        path = ["rooms", room_id, "send", event_type, str(tx_id)]

        return "PUT", Api._build_path(path), body

    @staticmethod
    def room_get_event(room_id: str, event_id: str) -> Tuple[str, str, None]:
        """Get a single event based on roomId/eventId.

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            room_id (str): The room id of the room where the event is in.
            event_id (str): The event id to get.
        """
        path = ["rooms", room_id, "event", event_id]

        return "GET", Api._build_path(path), None

    @staticmethod
    def room_put_state(
        room_id: str,
        event_type: str,
        body: Dict[Any, Any],
        state_key: str = "",
    ) -> Tuple[str, str, Dict[Any, Any]]:
        """Send a state event.

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            room_id (str): The room id of the room where the event will be sent
                to.
            event_type (str): The type of the event that will be sent.
            body(Dict): The body of the event. The fields in this
                object will vary depending on the type of event.
            state_key: The key of the state to look up. Defaults to an empty
                string.
        """
        path = ["rooms", room_id, "state", event_type, state_key]

        return "PUT", Api._build_path(path), body

    @staticmethod
    def room_get_state(room_id: str) -> Tuple[str, str, None]:
        """Fetch the current state for a room.

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            room_id (str): The room id of the room where the state is fetched
                from.
        """
        path = ["rooms", room_id, "state"]

        return "GET", Api._build_path(path), None

    @staticmethod
    def create_group(localpart: str) -> Tuple[str, str, Dict[str, str]]:
        """Create a group (community).

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            localpart (str): The localpart of the new group id.
        """
        return "POST", Api._build_path(["create_group"]), {"localpart": localpart}

    @staticmethod
    def group_invite_user(
        group_id: str, user_id: str
    ) -> Tuple[str, str, Dict[Any, Any]]:
        """Invite a user to a group.

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            group_id (str): The group the user should be invited to.
            user_id (str): The user that should be invited.
        """
        path = ["groups", group_id, "admin", "users", "invite", user_id]

        return "PUT", Api._build_path(path), {}

    @staticmethod
    def group_set_profile(
        group_id: str, profile: Dict[str, Any]
    ) -> Tuple[str, str, Dict[str, Any]]:
        """Update the profile of a group.

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            group_id (str): The group whose profile should be updated.
            profile (Dict): The profile fields, sent as they are.
        """
        path = ["groups", group_id, "profile"]

        return "POST", Api._build_path(path), profile

    @staticmethod
    def group_set_join_policy(
        group_id: str, policy: str
    ) -> Tuple[str, str, Dict[str, Any]]:
        """Set the join policy of a group.

        Returns the HTTP method, HTTP path and data for the request.

        Args:
            group_id (str): The group whose join policy should be changed.
            policy (str): Either "open" or "invite". The value is not checked
                locally, the homeserver decides what it accepts.
        """
        path = ["groups", group_id, "settings", "m.join_policy"]
        content = {"m.join_policy": {"type": policy}}

        return "PUT", Api._build_path(path), content

    @staticmethod
    def query_string(query: Optional[Dict[str, Any]]) -> str:
        """Turn a query parameter mapping into a string to append to a path."""
        if not query:
            return ""

        return f"?{urlencode(query)}"
