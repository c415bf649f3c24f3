import asyncio

import aiohttp
import pytest
from yarl import URL

from fritzer.boxconfig import BoxConfig
from fritzer.exceptions import ConnectivityError, FritzerException, TimeoutError
from fritzer.httpclient import HttpClient

URL_ = URL("http://127.0.0.1/login_sid.lua")


class _mock_response:
    def __init__(self, status, text=None, error=None):
        self.status = status
        self._text = text
        self.error = error

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_t, exc_v, exc_tb):
        pass

    async def text(self):
        if self.error:
            raise self.error
        return self._text


@pytest.mark.parametrize(
    ("error", "error_raises", "error_message"),
    [
        (
            aiohttp.ServerDisconnectedError(),
            ConnectivityError,
            "Box connection error: ",
        ),
        (aiohttp.ClientOSError(), ConnectivityError, "Box connection error: "),
        (
            aiohttp.ServerTimeoutError(),
            TimeoutError,
            "Unable to query the box, timed out: ",
        ),
        (asyncio.TimeoutError(), TimeoutError, "Unable to query the box, timed out: "),
        (Exception(), FritzerException, "Unable to query the box: "),
    ],
    ids=(
        "ServerDisconnectedError",
        "ClientOSError",
        "ServerTimeoutError",
        "TimeoutError",
        "Exception",
    ),
)
@pytest.mark.parametrize("mock_read", [False, True], ids=("request", "read"))
async def test_httpclient_errors(mocker, error, error_raises, error_message, mock_read):
    async def _request(*_, **__):
        return _mock_response(200, error=error)

    side_effect = _request if mock_read else error
    conn = mocker.patch.object(
        aiohttp.ClientSession, "request", side_effect=side_effect
    )
    client = HttpClient(BoxConfig("127.0.0.1"))

    with pytest.raises(error_raises, match=error_message):
        await client.get(URL_)

    assert conn.call_count == 1
    await client.close()


async def test_timeout_is_connectivity_error():
    assert issubclass(TimeoutError, ConnectivityError)
    assert issubclass(TimeoutError, asyncio.TimeoutError)


async def test_post(mocker):
    async def _request(*_, **__):
        return _mock_response(200, text="<SessionInfo/>")

    request = mocker.patch.object(
        aiohttp.ClientSession, "request", side_effect=_request
    )
    client = HttpClient(BoxConfig("127.0.0.1", timeout=3))

    status, text = await client.post(URL_, data="sid=1", params={"version": "2"})

    assert (status, text) == (200, "<SessionInfo/>")
    args, kwargs = request.call_args
    assert args == ("POST", URL_)
    assert kwargs["data"] == "sid=1"
    assert kwargs["params"] == {"version": "2"}
    assert kwargs["timeout"].total == 3
    await client.close()


async def test_non_200_is_returned(mocker):
    async def _request(*_, **__):
        return _mock_response(403, text="Forbidden")

    mocker.patch.object(aiohttp.ClientSession, "request", side_effect=_request)
    client = HttpClient(BoxConfig("127.0.0.1"))

    assert await client.get(URL_) == (403, "Forbidden")
    await client.close()


async def test_custom_client_session_is_not_closed():
    session = aiohttp.ClientSession()
    client = HttpClient(BoxConfig("127.0.0.1", http_client=session))

    assert client.client is session
    await client.close()

    assert not session.closed
    await session.close()
