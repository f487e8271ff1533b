from __future__ import annotations

from typing import Any, Protocol, Sequence

from domain.journal import MovieEntry


class CloudSyncError(RuntimeError):
    """Transport-level failure talking to the remote journal endpoint."""


class CloudSyncPort(Protocol):
    async def fetch_collection(self, url: str) -> Any:
        """GET the endpoint and return the decoded JSON body.

        Raises CloudSyncError on network errors, HTTP errors and non-JSON bodies.
        """
        ...

    async def push_collection(self, url: str, movies: Sequence[MovieEntry]) -> None:
        """POST the full list. The response is not read; only transport errors raise."""
        ...

    async def close(self) -> None:
        ...
