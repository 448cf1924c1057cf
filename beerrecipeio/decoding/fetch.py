"""
Fetch-and-parse orchestration.

Both entry points only acquire bytes and hand them to the parser primitive;
they hold no format knowledge. Each call is independent: ``fetching`` then
either ``parsing -> done`` or ``failed``, with a single attempt.
"""
from __future__ import annotations

import asyncio
import threading
from typing import Callable, Optional, Union

from beerrecipeio.decoding.contract import RecipeParser, run_parser
from beerrecipeio.errors import TransportCancelledError, TransportError
from beerrecipeio.logging import get_logger, redact
from beerrecipeio.outcome import DecodeOutcome, Failure
from beerrecipeio.transports.base import AsyncFetcher, CallbackFetcher

Resolution = Union[bytes, TransportError]


class OneShotGate:
    """
    A gate that is released exactly once and carries the value it was released with.

    ``release`` may be called from any thread. The first call stores the value
    and opens the gate; later calls are rejected and return ``False``. ``wait``
    blocks until the gate is open and then returns the stored value.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._value: Optional[Resolution] = None
        self.releases = 0

    def release(self, value: Resolution) -> bool:
        with self._lock:
            if self._event.is_set():
                return False
            self._value = value
            self.releases += 1
            self._event.set()
        return True

    @property
    def is_released(self) -> bool:
        return self._event.is_set()

    def wait(self) -> Resolution:
        self._event.wait()
        return self._value


def _log(event: str, details: dict, level: str = "info") -> None:
    getattr(get_logger(), level)(event, extra={"details": redact(details)})


def _finish(parser: RecipeParser, location: str, data: bytes) -> DecodeOutcome:
    outcome = run_parser(parser, data)
    if outcome.ok:
        _log("decode_ok", {"location": location, "records": len(outcome.records)})
    else:
        _log("decode_failed", {"location": location, "kind": outcome.kind, "error": str(outcome.error)}, "warning")
    return outcome


def parse_blocking(
    parser: RecipeParser,
    location: str,
    fetcher: CallbackFetcher,
    gate_factory: Callable[[], OneShotGate] = OneShotGate,
) -> DecodeOutcome:
    """
    Fetch ``location`` and parse it, blocking the calling thread until done.

    The retrieval is issued through a callback-based fetcher. The callbacks
    resolve a fresh ``OneShotGate``; the caller waits on it, so the outcome is
    read only after it has been written. Callbacks arriving after the first
    resolution are ignored. There is no timeout here; a transport that never
    calls back blocks the caller.

    Args:
        parser: The parser primitive to hand the bytes to.
        location: URL of the recipe document.
        fetcher: A ``CallbackFetcher`` performing the retrieval.
        gate_factory: Builds the per-call gate.

    Returns:
        The parser's outcome, or a ``Failure`` with a ``TransportError``.
    """
    gate = gate_factory()

    def on_data(data: bytes) -> None:
        if isinstance(data, (bytes, bytearray, memoryview)):
            resolution = bytes(data)
        else:
            exc = TypeError(f"expected bytes, got {type(data).__name__}")
            resolution = TransportError(f"Fetch of {location} delivered a non-bytes payload", location=location, cause=exc)
        if not gate.release(resolution):
            _log("callback_ignored", {"location": location, "callback": "on_data"}, "warning")

    def on_error(exc: BaseException) -> None:
        error = TransportError(f"Failed to fetch {location}: {exc}", location=location, cause=exc)
        if not gate.release(error):
            _log("callback_ignored", {"location": location, "callback": "on_error"}, "warning")

    _log("fetch_started", {"location": location, "mode": "blocking"})
    try:
        fetcher.fetch(location, on_data, on_error)
    except Exception as exc:
        on_error(exc)

    resolution = gate.wait()
    if isinstance(resolution, TransportError):
        _log("fetch_failed", {"location": location, "error": str(resolution.cause)}, "warning")
        return Failure(resolution)
    return _finish(parser, location, resolution)


async def parse_async(parser: RecipeParser, location: str, fetcher: AsyncFetcher) -> DecodeOutcome:
    """
    Fetch ``location`` and parse it without blocking the event loop.

    The task suspends only while the fetcher is awaited. Any failure of the
    retrieval, cancellation included, is returned as a ``Failure`` instead of
    propagating; a cancelled retrieval yields ``TransportCancelledError``.

    Args:
        parser: The parser primitive to hand the bytes to.
        location: URL of the recipe document.
        fetcher: An ``AsyncFetcher`` performing the retrieval.

    Returns:
        The parser's outcome, or a ``Failure`` with a ``TransportError``.
    """
    _log("fetch_started", {"location": location, "mode": "async"})
    try:
        data = await fetcher.fetch(location)
    except asyncio.CancelledError as exc:
        _log("fetch_cancelled", {"location": location}, "warning")
        return Failure(TransportCancelledError(f"Fetch of {location} was cancelled", location=location, cause=exc))
    except Exception as exc:
        _log("fetch_failed", {"location": location, "error": str(exc)}, "warning")
        return Failure(TransportError(f"Failed to fetch {location}: {exc}", location=location, cause=exc))
    return _finish(parser, location, data)
