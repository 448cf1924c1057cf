import logging
import threading
import urllib.parse
from collections import deque
from functools import lru_cache
from typing import Deque, Dict, List, Optional

from beerrecipeio.config import get_settings

LOGGER_NAME = "beerrecipeio"


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, propagate: bool = False) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = propagate
    return logger


@lru_cache
def get_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_propagate)


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def redact_location(location: str) -> str:
    # user:password@host -> ***@host
    try:
        parts = urllib.parse.urlsplit(location)
    except ValueError:
        return location
    if "@" not in parts.netloc:
        return location
    host = parts.netloc.rsplit("@", 1)[1]
    return urllib.parse.urlunsplit(parts._replace(netloc=f"***@{host}"))


def redact(details: Optional[dict]) -> dict:
    if not details:
        return {}
    redacted_keys = {"authorization", "password", "token", "cookie"}
    cleaned = {}
    for key, value in details.items():
        if key.lower() in redacted_keys:
            cleaned[key] = "***"
        elif key == "location" and isinstance(value, str):
            cleaned[key] = redact_location(value)
        else:
            cleaned[key] = value
    return cleaned
