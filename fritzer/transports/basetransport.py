"""Base class for all transport implementations.

All transport classes must derive from this to implement the common interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from yarl import URL

from ..httpclient import HttpClient

if TYPE_CHECKING:
    from ..boxconfig import BoxConfig


class BaseTransport(ABC):
    """Base class for all FRITZ!Box endpoint transports."""

    def __init__(
        self,
        *,
        config: BoxConfig,
        http_client: HttpClient | None = None,
    ) -> None:
        """Create a transport object."""
        self._config = config
        self._base_url = config.url
        self._http_client = http_client or HttpClient(config)

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """The path of the endpoint served by the transport."""

    @property
    def url(self) -> URL:
        """The url of the endpoint."""
        return self._base_url.join(URL(self.endpoint))

    async def close(self) -> None:
        """Close the underlying http client."""
        await self._http_client.close()
