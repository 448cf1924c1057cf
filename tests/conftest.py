import threading

import pytest

from beerrecipeio.errors import FormatError
from beerrecipeio.outcome import Failure, success
from beerrecipeio.logging import get_logger, ring_buffer

TWO_RECIPES_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<RECIPES>
  <RECIPE>
    <NAME>Burton Ale</NAME>
    <VERSION>1</VERSION>
    <TYPE>All Grain</TYPE>
    <BREWER>Brad Smith</BREWER>
    <BATCH_SIZE>18.93</BATCH_SIZE>
    <BOIL_SIZE>20.82</BOIL_SIZE>
    <BOIL_TIME>60</BOIL_TIME>
    <EFFICIENCY>72.0</EFFICIENCY>
    <OG>1.056</OG>
    <FG>1.015</FG>
    <STYLE>
      <NAME>English IPA</NAME>
      <CATEGORY>India Pale Ale</CATEGORY>
      <TYPE>Ale</TYPE>
    </STYLE>
    <HOPS>
      <HOP>
        <NAME>Goldings, East Kent</NAME>
        <ALPHA>5.0</ALPHA>
        <AMOUNT>0.0638</AMOUNT>
        <USE>Boil</USE>
        <TIME>60.0</TIME>
      </HOP>
      <HOP>
        <NAME>Northern Brewer</NAME>
        <ALPHA>7.5</ALPHA>
        <AMOUNT>0.0142</AMOUNT>
        <USE>Aroma</USE>
        <TIME>5.0</TIME>
      </HOP>
    </HOPS>
    <FERMENTABLES>
      <FERMENTABLE>
        <NAME>Pale Malt (2 row) UK</NAME>
        <TYPE>Grain</TYPE>
        <AMOUNT>4.99</AMOUNT>
        <YIELD>78.0</YIELD>
        <COLOR>3.0</COLOR>
      </FERMENTABLE>
    </FERMENTABLES>
    <YEASTS>
      <YEAST>
        <NAME>Burton Ale</NAME>
        <TYPE>Ale</TYPE>
        <FORM>Liquid</FORM>
        <ATTENUATION>72.0</ATTENUATION>
      </YEAST>
    </YEASTS>
    <MASH>
      <NAME>Single Step Infusion</NAME>
      <MASH_STEPS>
        <MASH_STEP>
          <NAME>Mash In</NAME>
          <TYPE>Infusion</TYPE>
          <STEP_TEMP>67.8</STEP_TEMP>
          <STEP_TIME>60.0</STEP_TIME>
        </MASH_STEP>
      </MASH_STEPS>
    </MASH>
    <NOTES>  Condition for two weeks.  </NOTES>
  </RECIPE>
  <RECIPE>
    <NAME>Dry Stout</NAME>
    <TYPE>All Grain</TYPE>
    <BATCH_SIZE>20</BATCH_SIZE>
  </RECIPE>
</RECIPES>
"""

EMPTY_RECIPES_XML = b'<?xml version="1.0" encoding="UTF-8"?>\n<RECIPES></RECIPES>\n'


class LineParser:
    """Toy format: one ``recipe:<name>`` per line."""

    def parse(self, data: bytes):
        names = []
        for line in data.decode("utf-8").splitlines():
            if not line.strip():
                continue
            prefix, _, name = line.partition(":")
            if prefix != "recipe" or not name:
                return Failure(FormatError(f"bad line: {line!r}"))
            names.append(name)
        return success(names)


class RaisingParser:
    def parse(self, data: bytes):
        raise FormatError("always broken")


class FakeCallbackFetcher:
    """
    Callback fetcher that can be forced into either branch.

    mode: ``"data"``, ``"error"``, ``"both"`` (data then error), or ``"raise"``
    (fails before any callback). With ``threaded=True`` the callbacks run on a
    separate thread, like a real transport.
    """

    def __init__(self, mode: str = "data", payload: bytes = b"", error: BaseException | None = None, threaded: bool = False):
        self.mode = mode
        self.payload = payload
        self.error = error or ConnectionError("connection refused")
        self.threaded = threaded
        self.calls: list[str] = []
        self.threads: list[threading.Thread] = []

    def _deliver(self, on_data, on_error):
        if self.mode in ("data", "both"):
            on_data(self.payload)
        if self.mode in ("error", "both"):
            on_error(self.error)

    def fetch(self, location, on_data, on_error):
        self.calls.append(location)
        if self.mode == "raise":
            raise self.error
        if self.threaded:
            worker = threading.Thread(target=self._deliver, args=(on_data, on_error), daemon=True)
            self.threads.append(worker)
            worker.start()
        else:
            self._deliver(on_data, on_error)


class FakeAsyncFetcher:
    def __init__(self, payload: bytes = b"", error: BaseException | None = None):
        self.payload = payload
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, location: str) -> bytes:
        self.calls.append(location)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def line_parser():
    return LineParser()


@pytest.fixture
def log_events():
    handler = ring_buffer(get_logger())
    handler.clear()
    return handler
