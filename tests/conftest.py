import pytest
from conftest_async import aioresponse, async_client  # noqa: F401

from botkit import RequestDispatcher

ALICE_ID = "@alice:example.org"


class StubDispatcher(RequestDispatcher):
    """Records every request and answers with a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    async def do_request(self, method, path, query=None, body=None):
        self.requests.append((method, path, query, body))

        if self.error:
            raise self.error

        return self.response


@pytest.fixture
def dispatcher():
    return StubDispatcher()


@pytest.fixture
def message_event():
    return {
        "type": "m.room.message",
        "sender": ALICE_ID,
        "event_id": "$1",
        "origin_server_ts": 1432735824653,
        "content": {"msgtype": "m.text", "body": "hi\nthere"},
    }
