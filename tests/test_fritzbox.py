import pytest

from fritzer.boxconfig import BoxConfig
from fritzer.exceptions import AuthenticationError
from fritzer.fritzbox import Fritzbox
from fritzer.sessionstore import FileSessionStore
from fritzer.transports import Device, FritzboxLoginTransport, SwitchTransport

from .conftest import (
    MOCK_SID,
    OTHER_SID,
    FakeLoginTransport,
    MemorySessionStore,
    session_info,
)

SWITCHES = [Device("087610006161", "Living Room"), Device("087610006162", "Kitchen")]


class FakeSwitchTransport(SwitchTransport):
    def __init__(self, switches):
        super().__init__(config=BoxConfig("127.0.0.1"))
        self.switches = switches
        self.sids: list[str] = []

    @property
    def endpoint(self) -> str:
        return "/webservices/homeautoswitch.lua"

    async def get_switches(self, sid):
        self.sids.append(sid)
        return self.switches


async def test_get_switches(config):
    switch_transport = FakeSwitchTransport(SWITCHES)
    async with Fritzbox(
        config,
        login_transport=FakeLoginTransport(session_info(), session_info(MOCK_SID)),
        switch_transport=switch_transport,
        store=MemorySessionStore(),
    ) as box:
        await box.connect()

        assert box.is_connected()
        assert await box.get_switches() == SWITCHES
        assert switch_transport.sids == [MOCK_SID]


async def test_get_switches_not_connected(config):
    box = Fritzbox(
        config,
        login_transport=FakeLoginTransport(session_info()),
        switch_transport=FakeSwitchTransport(SWITCHES),
    )
    await box.session.update_session_info()

    with pytest.raises(AuthenticationError):
        await box.get_switches()
    await box.close()


async def test_connect_uses_sid_file(config, tmp_path):
    (tmp_path / "fritzer.sid").write_text(OTHER_SID)
    login_transport = FakeLoginTransport(session_info(), session_info(OTHER_SID))
    box = Fritzbox(config, login_transport=login_transport)

    info = await box.connect()

    assert info.sid == OTHER_SID
    assert login_transport.calls == [("probe",), ("sid", OTHER_SID)]
    await box.close()


async def test_connect_writes_sid_file(config, tmp_path):
    box = Fritzbox(
        config,
        login_transport=FakeLoginTransport(session_info(), session_info(MOCK_SID)),
    )

    await box.connect()

    assert (tmp_path / "fritzer.sid").read_text() == MOCK_SID
    await box.close()


async def test_default_collaborators(config):
    box = Fritzbox(config)

    assert isinstance(box._login_transport, FritzboxLoginTransport)
    assert isinstance(box.session._store, FileSessionStore)
    assert box.session_info is None
    assert not box.is_connected()
    assert "connected: False" in repr(box)
    await box.close()
