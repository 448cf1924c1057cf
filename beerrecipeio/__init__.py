from beerrecipeio.decoder import RecipeDecoder
from beerrecipeio.decoding import RecipeParser, parse_async, parse_blocking, parse_text, run_parser
from beerrecipeio.errors import DecodeError, EncodingError, FormatError, TransportCancelledError, TransportError
from beerrecipeio.formats import BeerXmlParser
from beerrecipeio.models import BeerRecipe
from beerrecipeio.outcome import DecodeOutcome, Failure, Success
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "RecipeDecoder",
    "RecipeParser",
    "parse_async",
    "parse_blocking",
    "parse_text",
    "run_parser",
    "DecodeError",
    "EncodingError",
    "FormatError",
    "TransportError",
    "TransportCancelledError",
    "BeerXmlParser",
    "BeerRecipe",
    "DecodeOutcome",
    "Success",
    "Failure",
]

try:
    __version__ = version("beerrecipeio")
except PackageNotFoundError:
    __version__ = "0.0.0"
