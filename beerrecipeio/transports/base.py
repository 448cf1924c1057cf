from __future__ import annotations

from typing import Callable, Protocol


class AsyncFetcher(Protocol):
    async def fetch(self, location: str) -> bytes:
        ...


class CallbackFetcher(Protocol):
    def fetch(
        self,
        location: str,
        on_data: Callable[[bytes], None],
        on_error: Callable[[BaseException], None],
    ) -> None:
        """Start a retrieval and report exactly one of ``on_data`` / ``on_error``."""
        ...
