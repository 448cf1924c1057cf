"""
The recipe decoding contract.

A format only has to supply ``parse(data: bytes)``; everything else is built
from that one capability:

- ``parse_text``: encode a string as UTF-8 and parse it.
- ``parse_blocking``: fetch a URL through a callback transport, blocking the
  calling thread, then parse.
- ``parse_async``: fetch a URL through an async transport, then parse.
"""
from beerrecipeio.decoding.contract import (
    RecipeParser,
    TEXT_ENCODING,
    parse_text,
    run_parser,
)
from beerrecipeio.decoding.fetch import (
    OneShotGate,
    parse_async,
    parse_blocking,
)

__all__ = [
    "RecipeParser",
    "TEXT_ENCODING",
    "parse_text",
    "run_parser",
    "OneShotGate",
    "parse_async",
    "parse_blocking",
]
