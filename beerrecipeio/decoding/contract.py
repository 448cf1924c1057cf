"""
The parser primitive and the text adapter built on top of it.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from beerrecipeio.errors import DecodeError, EncodingError
from beerrecipeio.outcome import DecodeOutcome, Failure

# Strings are always encoded with this before reaching a parser.
TEXT_ENCODING = "utf-8"


@runtime_checkable
class RecipeParser(Protocol):
    """
    The single capability a recipe format has to provide.

    ``parse`` consumes one whole document and returns the records it holds in
    document order, or a ``Failure`` carrying a ``FormatError`` when the bytes
    cannot be interpreted. It must not have side effects.
    """

    def parse(self, data: bytes) -> DecodeOutcome:
        ...


def run_parser(parser: RecipeParser, data: bytes) -> DecodeOutcome:
    """
    Invoke a parser primitive and return its outcome.

    A parser that raises a ``DecodeError`` instead of returning a ``Failure``
    is normalised to the outcome form. Any other exception is a bug in the
    parser and propagates.

    Args:
        parser: Any object implementing ``RecipeParser``.
        data: The complete document bytes.

    Returns:
        The parser's outcome, unchanged.
    """
    try:
        return parser.parse(bytes(data))
    except DecodeError as exc:
        return Failure(exc)


def parse_text(parser: RecipeParser, text: str) -> DecodeOutcome:
    """
    Encode ``text`` with ``TEXT_ENCODING`` and parse the resulting bytes.

    Args:
        parser: Any object implementing ``RecipeParser``.
        text: The document as a string.

    Returns:
        The parser's outcome, or a ``Failure`` with an ``EncodingError`` if the
        string holds characters that UTF-8 cannot represent (lone surrogates).
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    try:
        data = text.encode(TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        error = EncodingError(f"Cannot encode text as {TEXT_ENCODING}: {exc.reason} at position {exc.start}")
        error.__cause__ = exc
        return Failure(error)
    return run_parser(parser, data)
