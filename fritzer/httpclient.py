"""Module for HttpClient class."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from yarl import URL

from .boxconfig import BoxConfig
from .exceptions import (
    ConnectivityError,
    FritzerException,
    TimeoutError,
)

_LOGGER = logging.getLogger(__name__)


class HttpClient:
    """HttpClient Class."""

    def __init__(self, config: BoxConfig) -> None:
        self._config = config
        self._client_session: aiohttp.ClientSession | None = None

    @property
    def client(self) -> aiohttp.ClientSession:
        """Return the underlying http client."""
        if self._config.http_client and issubclass(
            self._config.http_client.__class__, aiohttp.ClientSession
        ):
            return self._config.http_client

        if not self._client_session:
            self._client_session = aiohttp.ClientSession()
        return self._client_session

    async def get(
        self,
        url: URL,
        *,
        params: dict[str, Any] | None = None,
    ) -> tuple[int, str]:
        """Send an http get request to the box."""
        return await self._request("GET", url, params=params)

    async def post(
        self,
        url: URL,
        *,
        params: dict[str, Any] | None = None,
        data: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[int, str]:
        """Send an http post request to the box."""
        return await self._request(
            "POST", url, params=params, data=data, headers=headers
        )

    async def _request(
        self,
        method: str,
        url: URL,
        *,
        params: dict[str, Any] | None = None,
        data: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[int, str]:
        _LOGGER.debug("%s %s", method, url)
        if self._config.timeout is None:
            _LOGGER.warning("Request timeout is set to None.")
        client_timeout = aiohttp.ClientTimeout(total=self._config.timeout)

        try:
            resp = await self.client.request(
                method,
                url,
                params=params,
                data=data,
                headers=headers,
                timeout=client_timeout,
            )
            async with resp:
                response_text = await resp.text()
        except (aiohttp.ServerTimeoutError, asyncio.TimeoutError) as ex:
            raise TimeoutError(
                "Unable to query the box, " + f"timed out: {url.host}: {ex}",
                ex,
            ) from ex
        except aiohttp.ClientError as ex:
            raise ConnectivityError(
                f"Box connection error: {url.host}: {ex}", ex
            ) from ex
        except Exception as ex:
            raise FritzerException(
                f"Unable to query the box: {url.host}: {ex}", ex
            ) from ex

        if resp.status != 200:
            _LOGGER.debug(
                "Box %s received status code %s with response %s",
                url.host,
                resp.status,
                response_text,
            )

        return resp.status, response_text

    async def close(self) -> None:
        """Close the ClientSession."""
        client = self._client_session
        self._client_session = None
        if client:
            await client.close()
