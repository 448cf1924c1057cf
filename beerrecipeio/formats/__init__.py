"""
Concrete recipe formats. Each exposes a parser implementing ``RecipeParser``.
"""
from beerrecipeio.formats.beerxml import BeerXmlParser

__all__ = [
    "BeerXmlParser",
]
