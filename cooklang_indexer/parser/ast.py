"""
Data structures produced by :py:func:`cooklang_indexer.parser.parse`.

These are deliberately minimal: only the parts of a recipe the indexer uses
are kept, so nothing outside :py:mod:`cooklang_indexer.parser` depends on the
classes of the underlying Cooklang library.
"""

from dataclasses import dataclass, field

from decimal import Decimal
from fractions import Fraction
from typing import List, Optional, Union

Quantity = Union[int, Decimal, Fraction, str, None]
"""
A parsed amount. Numbers (including fractions like '1/2') are parsed, blank
amounts are None and anything else is kept as a string (e.g. 'a pinch').
"""


@dataclass(frozen=True)
class Ingredient:
    """An ingredient, e.g. '@flour{200%g}' or '@red onion{1}(diced)'."""

    name: str

    quantity: Quantity = None

    unit: Optional[str] = None

    note: Optional[str] = None
    """The preparation note given in brackets after the amount, if any."""


@dataclass
class ParsedRecipe:
    """The result of parsing a Cooklang recipe."""

    title: Optional[str] = None
    """The 'title' given in the recipe's front matter, if any."""

    ingredients: List[Ingredient] = field(default_factory=list)
    """Every ingredient mention, in the order they appear."""

    steps: List[str] = field(default_factory=list)
    """The text of each step with markup replaced by plain names."""
