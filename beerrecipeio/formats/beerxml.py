"""
Parser for BeerXML 1.0 recipe documents.

A document is a ``<RECIPES>`` element holding zero or more ``<RECIPE>``
elements; a bare ``<RECIPE>`` root is accepted as a one-recipe document.
Child tags are upper case, as BeerXML defines them. Records are returned in
document order and a document is either decoded completely or rejected.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional

from beerrecipeio.errors import FormatError
from beerrecipeio.models import BeerRecipe, Fermentable, Hop, MashStep, Style, Yeast
from beerrecipeio.outcome import DecodeOutcome, Failure, success


def _text(elem: ET.Element, tag: str) -> Optional[str]:
    child = elem.find(tag)
    if child is None or child.text is None:
        return None
    value = child.text.strip()
    return value or None


def _required_text(elem: ET.Element, tag: str) -> str:
    value = _text(elem, tag)
    if value is None:
        raise FormatError(f"<{elem.tag}> is missing required <{tag}>")
    return value


def _number(elem: ET.Element, tag: str) -> Optional[float]:
    value = _text(elem, tag)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise FormatError(f"<{elem.tag}>/<{tag}> is not a number: {value!r}") from exc


def _children(elem: ET.Element, group: str, tag: str) -> list[ET.Element]:
    container = elem.find(group)
    if container is None:
        return []
    return container.findall(tag)


def _style(recipe: ET.Element) -> Optional[Style]:
    elem = recipe.find("STYLE")
    if elem is None:
        return None
    return Style(
        name=_required_text(elem, "NAME"),
        category=_text(elem, "CATEGORY"),
        type=_text(elem, "TYPE"),
    )


def _hop(elem: ET.Element) -> Hop:
    return Hop(
        name=_required_text(elem, "NAME"),
        alpha=_number(elem, "ALPHA"),
        amount_kg=_number(elem, "AMOUNT"),
        use=_text(elem, "USE"),
        time_min=_number(elem, "TIME"),
    )


def _fermentable(elem: ET.Element) -> Fermentable:
    return Fermentable(
        name=_required_text(elem, "NAME"),
        type=_text(elem, "TYPE"),
        amount_kg=_number(elem, "AMOUNT"),
        yield_pct=_number(elem, "YIELD"),
        color=_number(elem, "COLOR"),
    )


def _yeast(elem: ET.Element) -> Yeast:
    return Yeast(
        name=_required_text(elem, "NAME"),
        type=_text(elem, "TYPE"),
        form=_text(elem, "FORM"),
        attenuation=_number(elem, "ATTENUATION"),
    )


def _mash_step(elem: ET.Element) -> MashStep:
    return MashStep(
        name=_required_text(elem, "NAME"),
        type=_text(elem, "TYPE"),
        temp_c=_number(elem, "STEP_TEMP"),
        time_min=_number(elem, "STEP_TIME"),
    )


def _recipe(elem: ET.Element) -> BeerRecipe:
    mash = elem.find("MASH")
    mash_steps = _children(mash, "MASH_STEPS", "MASH_STEP") if mash is not None else []
    return BeerRecipe(
        name=_required_text(elem, "NAME"),
        type=_text(elem, "TYPE"),
        brewer=_text(elem, "BREWER"),
        batch_size_l=_number(elem, "BATCH_SIZE"),
        boil_size_l=_number(elem, "BOIL_SIZE"),
        boil_time_min=_number(elem, "BOIL_TIME"),
        efficiency=_number(elem, "EFFICIENCY"),
        og=_number(elem, "OG"),
        fg=_number(elem, "FG"),
        style=_style(elem),
        hops=tuple(_hop(h) for h in _children(elem, "HOPS", "HOP")),
        fermentables=tuple(_fermentable(f) for f in _children(elem, "FERMENTABLES", "FERMENTABLE")),
        yeasts=tuple(_yeast(y) for y in _children(elem, "YEASTS", "YEAST")),
        mash_steps=tuple(_mash_step(s) for s in mash_steps),
        notes=_text(elem, "NOTES"),
    )


def decode_recipes(data: bytes) -> list[BeerRecipe]:
    """
    Decode a BeerXML document into recipes.

    Args:
        data: The raw document bytes. The XML declaration, if present,
            selects the character encoding.

    Returns:
        The recipes in document order. An empty or whitespace-only document
        yields an empty list.

    Raises:
        FormatError: If the bytes are not well-formed XML, the root element is
            neither ``RECIPES`` nor ``RECIPE``, or a recipe field is invalid.
    """
    if not data.strip():
        return []
    try:
        root = ET.fromstring(data)
    except (ET.ParseError, LookupError, ValueError) as exc:
        # LookupError: unknown encoding in the XML declaration
        raise FormatError(f"Malformed BeerXML document: {exc}") from exc

    if root.tag == "RECIPE":
        return [_recipe(root)]
    if root.tag != "RECIPES":
        raise FormatError(f"Unexpected root element <{root.tag}>, expected <RECIPES>")
    return [_recipe(elem) for elem in root.findall("RECIPE")]


class BeerXmlParser:
    """Parser primitive for BeerXML 1.0 documents."""

    def parse(self, data: bytes) -> DecodeOutcome:
        try:
            return success(decode_recipes(data))
        except FormatError as exc:
            return Failure(exc)
