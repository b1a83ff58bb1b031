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

from __future__ import annotations

from typing import Any, Optional

from jsonschema.exceptions import SchemaError, ValidationError

from .schemas import Schemas, validate_json

__all__ = [
    "ProtocolError",
    "LocalProtocolError",
    "RemoteProtocolError",
    "MatrixRequestError",
]


class ProtocolError(Exception):
    pass


class LocalProtocolError(ProtocolError):
    pass


class RemoteProtocolError(ProtocolError):
    pass


class MatrixRequestError(RemoteProtocolError):
    """The homeserver answered a request with a non-success status.

    Attributes:
        status_code (int): The HTTP status of the response.
        message (str): The human readable error the server returned.
        errcode (str, optional): The Matrix error code, e.g. M_FORBIDDEN.
            None if the body wasn't a Matrix error object.
        retry_after_ms (int, optional): How long the server asked us to wait
            before retrying, only set for rate limited requests.
        body (Any): The decoded response body, as it was received.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        errcode: Optional[str] = None,
        retry_after_ms: Optional[int] = None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.message = message
        self.errcode = errcode
        self.retry_after_ms = retry_after_ms
        self.body = body

        super().__init__(str(self))

    def __str__(self) -> str:
        if self.errcode:
            e = f"{self.status_code} {self.errcode} {self.message}"
        else:
            e = f"{self.status_code} {self.message}"

        if self.retry_after_ms:
            e = f"{e} - retry after {self.retry_after_ms}ms"

        return e

    @classmethod
    def from_dict(cls, status_code: int, parsed_dict: Any) -> MatrixRequestError:
        try:
            validate_json(parsed_dict, Schemas.error)
        except (SchemaError, ValidationError):
            return cls(status_code, "unknown error", body=parsed_dict)

        return cls(
            status_code,
            parsed_dict["error"],
            parsed_dict["errcode"],
            parsed_dict.get("retry_after_ms"),
            parsed_dict,
        )
