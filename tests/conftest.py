from __future__ import annotations

import os

import pytest
from asyncclick.testing import CliRunner

from fritzer.boxconfig import BoxConfig
from fritzer.credentials import Credentials
from fritzer.sessioninfo import INVALID_SID, SessionInfo, User
from fritzer.sessionstore import SessionStore
from fritzer.transports import LoginTransport

# Challenge and password from the AVM session id technical note
MOCK_CHALLENGE = (
    "2$60000$c5b7ff41801c5f877d307bbdc93188ef$6000$d19cee81917f97da37430f45b8352db0"
)
MOCK_PWD = "my$uper$trongPa$$w0rd4U"  # noqa: S105
MOCK_RESPONSE = (
    "d19cee81917f97da37430f45b8352db0"
    "%24506cf2017a1f3ff399bd66d750979ebdb0cc22fbdaa134acf2ad26c71df6c20f"
)
# Cheap challenges for tests that do not check the derived value
FAST_CHALLENGE = "2$10$5a1711$10$5a1722"
OTHER_FAST_CHALLENGE = "2$20$6b2822$20$6b2833"
MOCK_USER = "fritz3456"
MOCK_SID = "9944e8a3d2b7c6a1"
OTHER_SID = "1234567890abcdef"


def session_xml(
    sid: str = INVALID_SID,
    challenge: str = FAST_CHALLENGE,
    users: list[tuple[str, bool]] | None = None,
    block_time: int = 0,
) -> str:
    """Return a session document as sent by the login endpoint."""
    if users is None:
        users = [(MOCK_USER, True)]
    user_elements = "".join(
        f'<User last="1">{name}</User>' if last else f"<User>{name}</User>"
        for name, last in users
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f"<SessionInfo><SID>{sid}</SID><Challenge>{challenge}</Challenge>"
        f"<BlockTime>{block_time}</BlockTime>"
        "<Rights><Name>Dial</Name><Access>2</Access>"
        "<Name>HomeAuto</Name><Access>2</Access></Rights>"
        f"<Users>{user_elements}</Users></SessionInfo>"
    )


def session_info(
    sid: str = INVALID_SID,
    challenge: str = FAST_CHALLENGE,
    users: list[User] | None = None,
) -> SessionInfo:
    if users is None:
        users = [User(MOCK_USER, last=True)]
    return SessionInfo(sid=sid, challenge=challenge, users=users)


class FakeLoginTransport(LoginTransport):
    """Login transport answering from a queue of session documents."""

    def __init__(self, *responses: SessionInfo | Exception) -> None:
        super().__init__(config=BoxConfig("127.0.0.1"))
        self._responses = list(responses)
        self.calls: list[tuple] = []

    @property
    def endpoint(self) -> str:
        return "/login_sid.lua"

    def _next(self, call: tuple) -> SessionInfo:
        self.calls.append(call)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def get_session_info(self) -> SessionInfo:
        return self._next(("probe",))

    async def connect_with_sid(self, sid: str) -> SessionInfo:
        return self._next(("sid", sid))

    async def connect_with_response(self, username: str, response: str) -> SessionInfo:
        return self._next(("credentials", username, response))

    async def logout(self, sid: str) -> SessionInfo:
        return self._next(("logout", sid))


class MemorySessionStore(SessionStore):
    def __init__(self, sid: str | None = None, fail_on_save: Exception | None = None):
        self.sid = sid
        self.saved: list[str] = []
        self.loads = 0
        self._fail_on_save = fail_on_save

    async def load(self) -> str | None:
        self.loads += 1
        return self.sid

    async def save(self, sid: str) -> None:
        if self._fail_on_save is not None:
            raise self._fail_on_save
        self.saved.append(sid)
        self.sid = sid


@pytest.fixture()
def config(tmp_path):
    return BoxConfig(
        "http://127.0.0.1",
        credentials=Credentials(password=MOCK_PWD),
        sid_path=str(tmp_path / "fritzer.sid"),
    )


@pytest.fixture()
def runner():
    """Runner fixture that unsets the FRITZER_ environment variables for tests."""
    FRITZER_VARS = {k: None for k in os.environ if k.startswith("FRITZER_")}
    return CliRunner(env=FRITZER_VARS)
