from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

import aiohttp

from application.ports.cloud_sync_port import CloudSyncError, CloudSyncPort
from domain.journal import MovieEntry
from domain.journal.payload import build_push_payload
from infrastructure.config.settings import CLOUD_SYNC_TIMEOUT_S, CLOUD_SYNC_USER_AGENT
from infrastructure.utils import EventLogger, redact_url

logger = logging.getLogger(__name__)


class SheetsSyncClient(CloudSyncPort):
    """HTTP client for a spreadsheet-backed web app endpoint.

    Contract of the endpoint (external, not owned here):
    - GET  <url>                                  -> {"data": [movie, ...]}
    - POST <url> {"action": "sync_all", "data": [...]} -> ignored

    Push is fire-and-forget: the endpoint answers with a redirect/opaque body
    and never confirms delivery, so the response is not read at all.
    """

    def __init__(
        self,
        *,
        timeout_s: float = CLOUD_SYNC_TIMEOUT_S,
        user_agent: str = CLOUD_SYNC_USER_AGENT,
    ) -> None:
        self._timeout_s = float(timeout_s or 30.0)
        self._user_agent = (user_agent or "").strip()
        self._session: aiohttp.ClientSession | None = None
        self._lock = asyncio.Lock()  # Protect session creation from concurrent access

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._user_agent:
            headers["user-agent"] = self._user_agent
        return headers

    async def _get_session(self) -> aiohttp.ClientSession:
        # Fast path: return existing session if available
        if self._session is not None and not self._session.closed:
            return self._session

        async with self._lock:
            if self._session is not None and not self._session.closed:
                return self._session

            timeout = aiohttp.ClientTimeout(total=self._timeout_s)
            self._session = aiohttp.ClientSession(timeout=timeout)
            return self._session

    async def fetch_collection(self, url: str) -> Any:
        events = EventLogger(logger, "[cloud_sync]", base_fields={"op": "pull", "url": redact_url(url)})
        events.debug("request")
        session = await self._get_session()
        try:
            async with session.get(url, headers=self._headers()) as resp:
                if resp.status >= 400:
                    text = await resp.text()
                    raise CloudSyncError(f"cloud pull failed ({resp.status}): {text[:200]}")
                # Web app endpoints often answer JSON as text/plain.
                data = await resp.json(content_type=None)
        except CloudSyncError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise CloudSyncError(f"cloud pull failed: {exc!r}") from exc
        except ValueError as exc:
            raise CloudSyncError(f"cloud pull returned a non-JSON body: {exc}") from exc
        events.info("response", status=resp.status)
        return data

    async def push_collection(self, url: str, movies: Sequence[MovieEntry]) -> None:
        events = EventLogger(logger, "[cloud_sync]", base_fields={"op": "push", "url": redact_url(url)})
        payload = build_push_payload(movies)
        session = await self._get_session()
        try:
            async with session.post(
                url,
                json=payload,
                headers=self._headers(),
                allow_redirects=False,
            ):
                pass
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise CloudSyncError(f"cloud push failed: {exc!r}") from exc
        events.info("sent", count=len(payload["data"]))

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
