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

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ClientConfig:
    """botkit client configuration.

    Attributes:
        custom_headers (Dict[str, str], optional): A dictionary of custom
            http headers added to every request.
        user_agent (str): The User-Agent header sent with every request.

    """

    custom_headers: Optional[Dict[str, str]] = None
    user_agent: str = field(default="botkit")


class RequestDispatcher(ABC):
    """Something that can send a request to a Matrix homeserver.

    Higher level helpers only ever talk to the homeserver through
    ``do_request()``, which makes it easy to swap the transport out, a stub
    returning canned dictionaries is enough for testing.
    """

    @abstractmethod
    async def do_request(
        self,
        method: str,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON response.

        Implementations must raise if the homeserver answers with a
        non-success status, nothing above this layer checks for errors.

        Args:
            method (str): The request method that should be used. One of GET,
                POST, PUT, DELETE.
            path (str): The percent-encoded URL path of the request.
            query (Dict, optional): Query parameters to add to the URL.
            body (Any, optional): The JSON serializable request body.
        """
