"""
Tagged decode outcome.

A decode call produces exactly one of ``Success`` (the ordered records found
in the document) or ``Failure`` (a single ``DecodeError``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from beerrecipeio.errors import DecodeError


@dataclass(frozen=True)
class Success:
    """
    The records decoded from one document, in document order.

    Attributes:
        records: The decoded recipe records. May be empty.
    """
    records: tuple[Any, ...] = ()

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> tuple[Any, ...]:
        return self.records


@dataclass(frozen=True)
class Failure:
    """
    A decode failure.

    Attributes:
        error: The typed error describing what went wrong.
    """
    error: DecodeError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> str:
        return self.error.kind

    def unwrap(self) -> tuple[Any, ...]:
        raise self.error


DecodeOutcome = Union[Success, Failure]


def success(records) -> Success:
    """Build a ``Success`` from any iterable of records."""
    return Success(records=tuple(records))
