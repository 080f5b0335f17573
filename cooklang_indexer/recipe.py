"""
The recipe data model used by the indexer.

Recipes are loaded from Cooklang files using :py:func:`load_recipe` which
wraps the parser (:py:mod:`cooklang_indexer.parser`) so that the rest of the
indexer only depends on the simple :py:class:`Recipe` and
:py:class:`IngredientMention` types below.

.. autoclass:: Recipe
    :members:

.. autoclass:: IngredientMention
    :members:

.. autofunction:: load_recipe
"""

from typing import Optional, Tuple

from dataclasses import dataclass

from pathlib import Path, PurePosixPath

import re

from cooklang_indexer.exceptions import RecipeLoadError
from cooklang_indexer.normalize import normalize
from cooklang_indexer.parser import parse, CooklangParseError
from cooklang_indexer.parser.ast import Quantity


@dataclass(frozen=True)
class IngredientMention:
    """A single mention of an ingredient within a recipe."""

    name: str
    """The ingredient name as written in the recipe."""

    quantity: Quantity = None

    unit: Optional[str] = None

    note: Optional[str] = None

    @property
    def key(self) -> str:
        """The canonical ingredient key (see :py:func:`normalize`)."""
        return normalize(self.name)


@dataclass(frozen=True)
class Recipe:
    """A recipe from the collection being indexed."""

    path: PurePosixPath
    """The recipe file's path, relative to the collection root."""

    title: str

    ingredients: Tuple[IngredientMention, ...] = ()
    """The ingredient mentions, in the order they appear in the recipe."""

    steps: Tuple[str, ...] = ()
    """The plain text of each step."""

    @property
    def slug(self) -> str:
        """
        The recipe's path (relative to the collection root) without its
        extension, e.g. "mains/chicken_pasta".
        """
        return str(self.path.with_suffix(""))


def filename_to_title(filename: str) -> str:
    """
    Given a filename in snake case, camel case or containing Real Spaces(TM),
    returns a normalised rendering. For example "chickenPasta",
    "CHICKEN_PASTA" and "chicken-pasta" would all become "Chicken pasta".
    """
    # Surround numbers in whitespace
    filename = re.sub(
        r"[0-9]+",
        lambda match: f" {match.group(0)} ",
        filename,
    )

    # Add spaces at camel-case word boundaries
    filename = re.sub(
        r"([^A-Z])([A-Z])",
        lambda match: " ".join(g for g in match.groups() if g is not None),
        filename,
    )

    # Replace all runs of punctuation/spaces into single spaces
    filename = re.sub(r"[\W_]+", " ", filename)

    # Strip leading/trailing spaces
    filename = filename.strip()

    # Normalise case
    return " ".join(
        word.title() if i == 0 else word.lower()
        for i, word in enumerate(filename.split())
    )


def relative_recipe_path(root: Path, path: Path) -> PurePosixPath:
    """
    Get the path of a recipe file relative to the collection root. Throws a
    :py:exc:`ValueError` if the file is not within the root.
    """
    relative = Path(path).relative_to(root)
    if ".." in relative.parts:
        raise ValueError(f"{path} is not within {root}")
    return PurePosixPath(*relative.parts)


def load_recipe(root: Path, path: Path) -> Recipe:
    """
    Read and parse a Cooklang recipe file.

    The recipe's title is taken from the 'title' in its front matter, when
    given, and otherwise generated from its filename (see
    :py:func:`filename_to_title`). A leading byte order mark is ignored.

    Raises
    ======
    RecipeLoadError
        If the file cannot be read or is not valid Cooklang.
    """
    try:
        with path.open(encoding="utf-8-sig") as f:
            parsed = parse(f.read())
    except CooklangParseError as e:
        raise RecipeLoadError(f"Error while parsing {path}: {e}")
    except UnicodeDecodeError as e:
        raise RecipeLoadError(
            f"Error while reading {path}: not valid UTF-8 ({e.reason})"
        )
    except OSError as e:
        raise RecipeLoadError(f"Error while reading {path}: {e.strerror or e}")

    relative_path = relative_recipe_path(root, path)

    title = parsed.title
    if title is None:
        title = filename_to_title(relative_path.stem)

    return Recipe(
        path=relative_path,
        title=title,
        ingredients=tuple(
            IngredientMention(
                name=ingredient.name,
                quantity=ingredient.quantity,
                unit=ingredient.unit,
                note=ingredient.note,
            )
            for ingredient in parsed.ingredients
        ),
        steps=tuple(parsed.steps),
    )
