"""
Cooklang recipes are parsed using the `cooklang-py
<https://pypi.org/project/cooklang-py/>`_ library. The
:py:func:`cooklang_indexer.parser.parse` function wraps it, converting its
recipe objects into the types in :py:mod:`cooklang_indexer.parser.ast`:

.. autofunction:: cooklang_indexer.parser.parse

.. autoexception:: cooklang_indexer.parser.CooklangParseError
"""

from typing import Any, Optional, Tuple

from fractions import Fraction

import yaml

import cooklang_py  # type: ignore

from cooklang_indexer.parser import ast


class CooklangParseError(ValueError):
    """Thrown when a recipe is not valid Cooklang."""


# cooklang_py (and the YAML front matter loader beneath it) report malformed
# recipes using any of these.
_LIBRARY_ERRORS = (
    ValueError,
    IndexError,
    AttributeError,
    ZeroDivisionError,
    yaml.YAMLError,
)


def _amount(quantity: Any) -> Tuple[ast.Quantity, Optional[str]]:
    """Split a cooklang_py quantity into an (amount, unit) pair."""
    if not isinstance(quantity, cooklang_py.Quantity):
        return None, None

    amount = quantity.amount
    if isinstance(amount, Fraction):
        amount = Fraction(amount)
    elif isinstance(amount, str):
        amount = amount or None

    return amount, quantity.unit or None


def _step_text(step: Any) -> str:
    parts = []
    for section in step:
        if isinstance(section, str):
            parts.append(section)
        elif isinstance(section, cooklang_py.Timing):
            parts.append(str(section).strip())
        else:
            parts.append(section.name)
    return "".join(parts).strip()


def _title(metadata: Any) -> Optional[str]:
    try:
        title = metadata["title"]
    except KeyError:
        return None
    if title is None:
        return None
    return str(title).strip() or None


def parse(source: str) -> ast.ParsedRecipe:
    """
    Parse a Cooklang recipe (see :py:mod:`cooklang_indexer.parser.ast`).

    Raises
    ======
    CooklangParseError
        If the recipe is malformed or empty.
    """
    try:
        recipe = cooklang_py.Recipe(source)
    except _LIBRARY_ERRORS as e:
        raise CooklangParseError(str(e) or type(e).__name__)

    ingredients = []
    for ingredient in recipe.ingredients:
        amount, unit = _amount(ingredient.quantity)
        ingredients.append(
            ast.Ingredient(
                name=ingredient.name,
                quantity=amount,
                unit=unit,
                note=ingredient.notes or None,
            )
        )

    return ast.ParsedRecipe(
        title=_title(recipe.metadata),
        ingredients=ingredients,
        steps=[_step_text(step) for step in recipe.steps],
    )
