"""Transport for the AVM Home Automation (AHA) switch commands."""

from __future__ import annotations

import logging
from abc import abstractmethod
from dataclasses import dataclass

from ..exceptions import ConnectivityError
from .basetransport import BaseTransport

_LOGGER = logging.getLogger(__name__)


@dataclass
class Device:
    """A switchable actor of the box."""

    #: Actor identification number
    ain: str
    name: str


class SwitchTransport(BaseTransport):
    """Interface of transports operating switches."""

    @abstractmethod
    async def get_switches(self, sid: str) -> list[Device]:
        """Return all switches known to the box."""


class FritzboxSwitchTransport(SwitchTransport):
    """Switch transport for ``/webservices/homeautoswitch.lua``."""

    ENDPOINT = "/webservices/homeautoswitch.lua"

    @property
    def endpoint(self) -> str:
        """The path of the home automation endpoint."""
        return self.ENDPOINT

    async def get_switches(self, sid: str) -> list[Device]:
        """Return all switches known to the box with their names."""
        text = await self.send_command("getswitchlist", sid)
        ains = [ain.strip() for ain in text.split(",") if ain.strip()]
        _LOGGER.debug("Found %s switches: %s", len(ains), ains)

        switches = []
        for ain in ains:
            name = await self.send_command("getswitchname", sid, ain=ain)
            switches.append(Device(ain=ain, name=name))
        return switches

    async def send_command(
        self, command: str, sid: str, *, ain: str | None = None
    ) -> str:
        """Send a switch command and return the response text."""
        params = {"switchcmd": command, "sid": sid}
        if ain is not None:
            params["ain"] = ain

        status, text = await self._http_client.get(self.url, params=params)
        if status != 200:
            raise ConnectivityError(
                f"{self._base_url.host} responded with an unexpected "
                + f"status code {status} to {command}"
            )
        return text.rstrip("\n")
