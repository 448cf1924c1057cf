"""
Immutable beer recipe records produced by the bundled format parsers.

Quantities use BeerXML base units: kilograms, litres, minutes, degrees Celsius.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Style:
    name: str
    category: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class Hop:
    """
    A hop addition.

    Attributes:
        name: Hop variety.
        alpha: Alpha acid percentage.
        amount_kg: Weight in kilograms.
        use: One of ``"Boil"``, ``"Dry Hop"``, ``"Mash"``, ``"First Wort"``, ``"Aroma"``.
        time_min: Addition time in minutes.
    """
    name: str
    alpha: Optional[float] = None
    amount_kg: Optional[float] = None
    use: Optional[str] = None
    time_min: Optional[float] = None


@dataclass(frozen=True)
class Fermentable:
    name: str
    type: Optional[str] = None
    amount_kg: Optional[float] = None
    yield_pct: Optional[float] = None
    color: Optional[float] = None


@dataclass(frozen=True)
class Yeast:
    name: str
    type: Optional[str] = None
    form: Optional[str] = None
    attenuation: Optional[float] = None


@dataclass(frozen=True)
class MashStep:
    name: str
    type: Optional[str] = None
    temp_c: Optional[float] = None
    time_min: Optional[float] = None


@dataclass(frozen=True)
class BeerRecipe:
    """
    A decoded beer recipe.

    Attributes:
        name: Recipe name.
        type: ``"Extract"``, ``"Partial Mash"`` or ``"All Grain"``.
        brewer: Author of the recipe.
        batch_size_l: Target volume into the fermenter.
        boil_size_l: Pre-boil volume.
        boil_time_min: Boil duration.
        efficiency: Brewhouse efficiency percentage.
        og: Original gravity.
        fg: Final gravity.
        style: The beer style, if declared.
        hops: Hop additions in document order.
        fermentables: Fermentables in document order.
        yeasts: Yeasts in document order.
        mash_steps: Mash schedule in document order.
        notes: Free text notes.
    """
    name: str
    type: Optional[str] = None
    brewer: Optional[str] = None
    batch_size_l: Optional[float] = None
    boil_size_l: Optional[float] = None
    boil_time_min: Optional[float] = None
    efficiency: Optional[float] = None
    og: Optional[float] = None
    fg: Optional[float] = None
    style: Optional[Style] = None
    hops: tuple[Hop, ...] = ()
    fermentables: tuple[Fermentable, ...] = ()
    yeasts: tuple[Yeast, ...] = ()
    mash_steps: tuple[MashStep, ...] = ()
    notes: Optional[str] = None
