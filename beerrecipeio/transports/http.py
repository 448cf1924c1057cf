from __future__ import annotations

import threading
from typing import Callable, Optional

import httpx
import requests

from beerrecipeio.config import DecoderSettings, get_settings


class HttpxFetcher:
    def __init__(self, settings: Optional[DecoderSettings] = None, client: Optional[httpx.AsyncClient] = None) -> None:
        self.settings = settings or get_settings()
        self._client = client

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.http_timeout,
            verify=self.settings.verify_tls,
            follow_redirects=self.settings.follow_redirects,
            headers={"User-Agent": self.settings.user_agent},
        )

    async def fetch(self, location: str) -> bytes:
        if self._client is not None:
            return await self._get(self._client, location)
        async with self._new_client() as client:
            return await self._get(client, location)

    @staticmethod
    async def _get(client: httpx.AsyncClient, location: str) -> bytes:
        resp = await client.get(location)
        resp.raise_for_status()
        return resp.content


class RequestsFetcher:
    def __init__(self, settings: Optional[DecoderSettings] = None, session: Optional[requests.Session] = None) -> None:
        self.settings = settings or get_settings()
        self.session = session

    # ---- helpers ----
    def _get(self, location: str) -> requests.Response:
        getter = self.session.get if self.session is not None else requests.get
        return getter(
            location,
            headers={"User-Agent": self.settings.user_agent},
            timeout=self.settings.http_timeout,
            verify=self.settings.verify_tls,
            allow_redirects=self.settings.follow_redirects,
        )

    def _run(self, location: str, on_data: Callable[[bytes], None], on_error: Callable[[BaseException], None]) -> None:
        try:
            resp = self._get(location)
            resp.raise_for_status()
        except Exception as exc:  # every failure must reach the caller
            on_error(exc)
            return
        on_data(resp.content)

    # ---- CallbackFetcher ----
    def fetch(
        self,
        location: str,
        on_data: Callable[[bytes], None],
        on_error: Callable[[BaseException], None],
    ) -> None:
        worker = threading.Thread(
            target=self._run,
            args=(location, on_data, on_error),
            name="beerrecipeio-fetch",
            daemon=True,
        )
        worker.start()
