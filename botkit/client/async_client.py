# Copyright © 2018, 2019 Damir Jelić <poljar@termina.org.uk>
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

import html
import logging
import re
from dataclasses import dataclass
from functools import wraps
from json.decoder import JSONDecodeError
from typing import Any, Dict, List, Mapping, Optional, Union
from uuid import UUID, uuid4

from aiohttp import ClientSession, ClientTimeout, ContentTypeError
from jsonschema.exceptions import SchemaError, ValidationError

from ..api import Api
from ..event_builders import ChangeJoinRulesBuilder
from ..events import JoinRulesEvent, TypedEvent
from ..exceptions import LocalProtocolError, MatrixRequestError, RemoteProtocolError
from ..helpers import RichReply
from ..schemas import Schemas, validate_json
from ..unstable_apis import UnstableApis
from .base_client import ClientConfig, RequestDispatcher

logger = logging.getLogger(__name__)

_BREAK_RE = re.compile(r"<br\s*/?>|</p>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")


def _html_to_text(html_text: str) -> str:
    text = _TAG_RE.sub("", _BREAK_RE.sub("\n", html_text))
    return html.unescape(text).rstrip("\n")


def client_session(func):
    """Ensure that the Async client has a valid client session."""

    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        if not self.client_session:
            self.client_session = ClientSession(
                timeout=ClientTimeout(total=self.config.request_timeout),
            )

        return await func(self, *args, **kwargs)

    return wrapper


@dataclass(frozen=True)
class AsyncClientConfig(ClientConfig):
    """Async botkit client configuration.

    Attributes:
        request_timeout (float): How many seconds a request has before
            raising `asyncio.TimeoutError`. Defaults to 60 seconds.

    """

    request_timeout: float = 60


def _validated(parsed: Any, schema: Dict[str, Any]) -> Any:
    try:
        validate_json(parsed, schema)
    except (SchemaError, ValidationError) as e:
        logger.warning("Error validating response: %s", e.message)
        raise RemoteProtocolError(
            f"Invalid response from homeserver: {e.message}"
        ) from e

    return parsed


class AsyncClient(RequestDispatcher):
    """An async IO matrix client.

    The client sends every request through ``do_request()``, which raises a
    ``MatrixRequestError`` for any non-success answer. Requests are not
    retried and nothing is cached.

    Args:
        homeserver (str): The URL of the homeserver which we want to connect
            to.
        access_token (str, optional): The access token sent with every
            request. Requests are unauthenticated if it is empty.
        config (AsyncClientConfig, optional): Configuration for the client.

    Example:
            >>> async with AsyncClient("https://example.org", "syt_abc") as client:
            ...     content = RichReply.create_for(room_id, event, "hi", "hi")
            ...     await client.room_send(room_id, "m.room.message", content)

    """

    def __init__(
        self,
        homeserver: str,
        access_token: str = "",
        config: Optional[AsyncClientConfig] = None,
    ):
        self.homeserver = homeserver.rstrip("/")
        self.access_token = access_token
        self.config: AsyncClientConfig = config or AsyncClientConfig()
        self.client_session: Optional[ClientSession] = None

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def unstable_apis(self) -> UnstableApis:
        """Unstable APIs bound to this client."""
        return UnstableApis(self)

    def _headers(self, has_body: bool) -> Dict[str, str]:
        headers = {"User-Agent": self.config.user_agent}

        if has_body:
            headers["Content-Type"] = "application/json"

        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        if self.config.custom_headers is not None:
            headers.update(self.config.custom_headers)

        return headers

    @client_session
    async def do_request(
        self,
        method: str,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send a request to the homeserver and decode the JSON answer.

        Raises a ``MatrixRequestError`` if the homeserver doesn't answer with
        a success status. Connection errors and timeouts are raised as aiohttp
        and asyncio raise them.

        Args:
            method (str): The request method that should be used. One of GET,
                POST, PUT, DELETE.
            path (str): The URL path of the request.
            query (Dict, optional): Query parameters to add to the URL.
            body (Any, optional): Data that will be sent as the JSON body of
                the request.
        """
        assert self.client_session

        url = self.homeserver + path + Api.query_string(query)
        data = Api.to_json(body) if body is not None else None

        logger.debug("Sending %s request to %s", method, path)

        async with self.client_session.request(
            method,
            url,
            data=data,
            headers=self._headers(data is not None),
        ) as transport_response:
            try:
                parsed = await transport_response.json()
            except (JSONDecodeError, ContentTypeError):
                parsed = None

            status = transport_response.status

        if status >= 400:
            error = MatrixRequestError.from_dict(status, parsed)
            logger.warning("Request %s %s failed: %s", method, path, error)
            raise error

        return parsed

    async def close(self):
        """Close the underlying http session."""
        if self.client_session:
            await self.client_session.close()
            self.client_session = None

    async def room_send(
        self,
        room_id: str,
        event_type: str,
        content: Dict[Any, Any],
        tx_id: Optional[Union[str, UUID]] = None,
    ) -> str:
        """Send a message event to a room.

        Returns the id of the sent event.

        Args:
            room_id (str): The room id of the room where the message should be
                sent to.
            event_type (str): The type of the message that will be sent.
            content (Dict[Any, Any]): The content of the message.
            tx_id (str, optional): The transaction ID of this event used to
                uniquely identify this message. A random one is used if it
                isn't given.
        """
        if not room_id:
            raise LocalProtocolError("A room id is needed to send an event")

        method, path, body = Api.room_send(
            room_id, event_type, content, tx_id or uuid4()
        )
        response = await self.do_request(method, path, None, body)

        return _validated(response, Schemas.room_event_id)["event_id"]

    async def room_put_state(
        self,
        room_id: str,
        event_type: str,
        content: Dict[Any, Any],
        state_key: str = "",
    ) -> str:
        """Send a state event to a room.

        Returns the id of the state event.

        Args:
            room_id (str): The room id of the room to send the event to.
            event_type (str): The type of the state to send.
            content (Dict[Any, Any]): The content of the event to be sent.
            state_key (str): The key of the state event to send.
        """
        if not room_id:
            raise LocalProtocolError("A room id is needed to send an event")

        method, path, body = Api.room_put_state(
            room_id, event_type, content, state_key
        )
        response = await self.do_request(method, path, None, body)

        return _validated(response, Schemas.room_event_id)["event_id"]

    async def room_get_event(self, room_id: str, event_id: str) -> Dict[str, Any]:
        """Fetch a single event from a room.

        Returns the raw event dictionary.

        Args:
            room_id (str): The room id of the room where the event is in.
            event_id (str): The event id to get.
        """
        method, path, _ = Api.room_get_event(room_id, event_id)
        return await self.do_request(method, path)

    async def room_get_state(self, room_id: str) -> List[Dict[str, Any]]:
        """Fetch the current state of a room.

        Returns the list of raw state events.

        Args:
            room_id (str): The room id of the room to fetch the state from.
        """
        method, path, _ = Api.room_get_state(room_id)
        response = await self.do_request(method, path)

        return _validated(response, Schemas.room_state)

    async def get_room_join_rules(self, room_id: str) -> Optional[JoinRulesEvent]:
        """Fetch the join rules of a room.

        Returns the m.room.join_rules state event of the room, or None if the
        room state doesn't contain one.

        Args:
            room_id (str): The room id of the room.
        """
        for event in await self.room_get_state(room_id):
            if event["type"] == "m.room.join_rules" and event["state_key"] == "":
                return JoinRulesEvent.from_dict(event)

        return None

    async def set_room_join_rule(self, room_id: str, rule: str) -> str:
        """Change who can join a room.

        Returns the id of the new m.room.join_rules state event.

        Args:
            room_id (str): The room id of the room.
            rule (str): The new join rule, it is sent as it is.
        """
        event_dict = ChangeJoinRulesBuilder(rule).as_dict()

        return await self.room_put_state(
            room_id,
            event_dict["type"],
            event_dict["content"],
            event_dict["state_key"],
        )

    async def _reply(
        self,
        room_id: str,
        event: Union[Mapping[str, Any], TypedEvent],
        text: str,
        html_text: str,
        msgtype: str,
    ) -> str:
        content = RichReply.create_for(room_id, event, text, html_text)
        content["msgtype"] = msgtype

        return await self.room_send(room_id, "m.room.message", content)

    async def reply_text(
        self,
        room_id: str,
        event: Union[Mapping[str, Any], TypedEvent],
        text: str,
    ) -> str:
        """Reply to an event with a plain text message.

        The text is HTML escaped for the formatted half of the reply.

        Returns the id of the sent event.
        """
        return await self._reply(room_id, event, text, html.escape(text), "m.text")

    async def reply_html_text(
        self,
        room_id: str,
        event: Union[Mapping[str, Any], TypedEvent],
        html_text: str,
    ) -> str:
        """Reply to an event with an HTML message.

        The plain text half of the reply is the HTML with its tags stripped,
        line breaks and paragraph ends become newlines.

        Returns the id of the sent event.
        """
        text = _html_to_text(html_text)
        return await self._reply(room_id, event, text, html_text, "m.text")

    async def reply_notice(
        self,
        room_id: str,
        event: Union[Mapping[str, Any], TypedEvent],
        text: str,
    ) -> str:
        """Reply to an event with a plain text notice."""
        return await self._reply(
            room_id, event, text, html.escape(text), "m.notice"
        )

    async def reply_html_notice(
        self,
        room_id: str,
        event: Union[Mapping[str, Any], TypedEvent],
        html_text: str,
    ) -> str:
        """Reply to an event with an HTML notice."""
        text = _html_to_text(html_text)
        return await self._reply(room_id, event, text, html_text, "m.notice")
