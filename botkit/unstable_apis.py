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

"""Unstable Matrix APIs.

Group (community) management never made it into a stable Matrix release.
The calls are thin: one request each, no retries and no local validation.
Whatever the dispatcher raises reaches the caller untouched.

Group and user ids are percent-encoded into the request path, the
dispatcher receives ``/groups/%2Bfoo%3Aexample.org`` for ``+foo:example.org``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Literal, Mapping, Union

from .api import Api

if TYPE_CHECKING:
    from .client.base_client import RequestDispatcher

__all__ = ["GroupProfile", "UnstableApis"]

GroupInviteState = Literal["join", "invite", "reject"]
GroupJoinPolicy = Literal["open", "invite"]


@dataclass
class GroupProfile:
    """The profile of a group.

    Attributes:
        name (str): The name of the group.
        avatar_url (str): The avatar for the group, an mxc:// URI.
        short_description (str): The short description for the group.
            Equivalent to a room's topic.
        long_description (str): The long description for the group. Most
            clients support HTML in this.
    """

    name: str = field()
    avatar_url: str = field()
    short_description: str = field()
    long_description: str = field()

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


class UnstableApis:
    """Unstable APIs that shouldn't be used in most circumstances."""

    def __init__(self, client: RequestDispatcher):
        self.client = client

    async def create_group(self, localpart: str) -> str:
        """Create a group.

        Returns the id of the created group.

        Args:
            localpart (str): The localpart for the group.
        """
        method, path, body = Api.create_group(localpart)
        response = await self.client.do_request(method, path, None, body)

        return response["group_id"]

    async def invite_user_to_group(
        self, group_id: str, user_id: str
    ) -> GroupInviteState:
        """Invite a user to a group.

        Returns the invite state for the user. This is normally "invite",
        but may be "join" or "reject" if the user's homeserver accepted or
        rejected the invite right away.

        Args:
            group_id (str): The group id to invite the user to, it is
                percent-encoded into the path.
            user_id (str): The user id to invite to the group, it is
                percent-encoded into the path.
        """
        method, path, body = Api.group_invite_user(group_id, user_id)
        response = await self.client.do_request(method, path, None, body)

        return response["state"]

    async def set_group_profile(
        self, group_id: str, profile: Union[GroupProfile, Mapping[str, Any]]
    ) -> Any:
        """Update a group's profile.

        Returns the response of the homeserver as it is.

        Args:
            group_id (str): The group id to update, it is percent-encoded
                into the path.
            profile (GroupProfile): The profile to update the group with. A
                plain mapping is sent verbatim.
        """
        if isinstance(profile, GroupProfile):
            profile = profile.as_dict()

        method, path, body = Api.group_set_profile(group_id, profile)
        return await self.client.do_request(method, path, None, body)

    async def set_group_join_policy(
        self, group_id: str, policy: GroupJoinPolicy
    ) -> Any:
        """Make a group publicly joinable ("open") or invite only ("invite").

        Returns the response of the homeserver as it is.

        Args:
            group_id (str): The group id to set the policy for, it is
                percent-encoded into the path.
            policy (str): The policy to set.
        """
        method, path, body = Api.group_set_join_policy(group_id, policy)
        return await self.client.do_request(method, path, None, body)
