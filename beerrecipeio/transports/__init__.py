"""
Network collaborators used by the fetch-and-parse operations.

- ``HttpxFetcher``: async retrieval with ``httpx``.
- ``RequestsFetcher``: callback retrieval with ``requests`` on a worker thread.
"""
from beerrecipeio.transports.base import AsyncFetcher, CallbackFetcher
from beerrecipeio.transports.http import HttpxFetcher, RequestsFetcher

__all__ = [
    "AsyncFetcher",
    "CallbackFetcher",
    "HttpxFetcher",
    "RequestsFetcher",
]
