from __future__ import annotations

from typing import Optional

from beerrecipeio.config import DecoderSettings, get_settings
from beerrecipeio.decoding import RecipeParser, parse_async, parse_blocking, parse_text, run_parser
from beerrecipeio.outcome import DecodeOutcome
from beerrecipeio.transports import AsyncFetcher, CallbackFetcher, HttpxFetcher, RequestsFetcher


class RecipeDecoder:
    """
    Binds a parser primitive to the transports used to fetch documents.

    Every method returns a ``DecodeOutcome``; none raises on a decode,
    encoding or transport failure.
    """

    def __init__(
        self,
        parser: RecipeParser,
        async_fetcher: Optional[AsyncFetcher] = None,
        callback_fetcher: Optional[CallbackFetcher] = None,
        settings: Optional[DecoderSettings] = None,
    ) -> None:
        self.parser = parser
        self.settings = settings or get_settings()
        self.async_fetcher = async_fetcher or HttpxFetcher(self.settings)
        self.callback_fetcher = callback_fetcher or RequestsFetcher(self.settings)

    def decode(self, data: bytes) -> DecodeOutcome:
        return run_parser(self.parser, data)

    def decode_text(self, text: str) -> DecodeOutcome:
        return parse_text(self.parser, text)

    def decode_url_sync(self, location: str) -> DecodeOutcome:
        return parse_blocking(self.parser, location, self.callback_fetcher)

    async def decode_url(self, location: str) -> DecodeOutcome:
        return await parse_async(self.parser, location, self.async_fetcher)
