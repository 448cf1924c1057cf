"""Tests for the RecipeDecoder facade."""
import pytest

from beerrecipeio import BeerXmlParser, RecipeDecoder
from beerrecipeio.config import DecoderSettings
from beerrecipeio.transports import HttpxFetcher, RequestsFetcher

from conftest import TWO_RECIPES_XML, FakeAsyncFetcher, FakeCallbackFetcher

URL = "http://brew.example.com/r.xml"


def _decoder(payload=TWO_RECIPES_XML, **kwargs):
    return RecipeDecoder(
        BeerXmlParser(),
        async_fetcher=FakeAsyncFetcher(payload=payload, **kwargs),
        callback_fetcher=FakeCallbackFetcher("error" if kwargs else "data", payload=payload, threaded=True, **kwargs),
    )


def test_default_fetchers_built_from_settings():
    settings = DecoderSettings(http_timeout=3.0)
    decoder = RecipeDecoder(BeerXmlParser(), settings=settings)
    assert isinstance(decoder.async_fetcher, HttpxFetcher)
    assert isinstance(decoder.callback_fetcher, RequestsFetcher)
    assert decoder.async_fetcher.settings is settings


def test_decode_bytes_and_text_agree():
    decoder = _decoder()
    assert decoder.decode(TWO_RECIPES_XML) == decoder.decode_text(TWO_RECIPES_XML.decode("utf-8"))


def test_decode_text_encoding_error():
    assert _decoder().decode_text("<RECIPES>\udfff</RECIPES>").kind == "encoding"


@pytest.mark.asyncio
async def test_url_paths_agree():
    decoder = _decoder()
    from_async = await decoder.decode_url(URL)
    assert from_async == decoder.decode_url_sync(URL) == decoder.decode(TWO_RECIPES_XML)


@pytest.mark.asyncio
async def test_url_paths_report_transport_errors():
    decoder = _decoder(error=ConnectionError("refused"))
    assert (await decoder.decode_url(URL)).kind == "transport"
    assert decoder.decode_url_sync(URL).kind == "transport"
