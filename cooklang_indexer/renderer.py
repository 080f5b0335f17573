"""
Rendering of a finalized ingredient index as a standalone HTML page.

.. autofunction:: render_index

.. autofunction:: write_index
"""

from typing import Iterable, List, NamedTuple, Optional, Sequence, Set

from pathlib import Path, PurePosixPath

import re

from cooklang_indexer.exceptions import OutputWriteError
from cooklang_indexer.href import recipe_href
from cooklang_indexer.index import IndexEntry
from cooklang_indexer.templates import ingredient_index_template


DEFAULT_TITLE = "Recipe Ingredient Index"


class RecipeLink(NamedTuple):
    title: str
    href: str


class RenderedEntry(NamedTuple):
    ingredient: str
    anchor: str
    """The 'id' of this ingredient's element within the page."""
    recipes: List[RecipeLink]


def make_anchors(ingredients: Iterable[str]) -> List[str]:
    """
    Produce a unique element ID for each ingredient, e.g. "ingredient-red-onion".
    """
    anchors: List[str] = []
    used: Set[str] = set()
    for ingredient in ingredients:
        base = "ingredient-" + re.sub(r"\s+", "-", ingredient.strip())
        anchor = base
        n = 2
        while anchor in used:
            anchor = f"{base}-{n}"
            n += 1
        used.add(anchor)
        anchors.append(anchor)
    return anchors


def render_index(
    entries: Sequence[IndexEntry],
    base_url: str,
    title: str = DEFAULT_TITLE,
    description_html: Optional[str] = None,
) -> str:
    """
    Render an ingredient index into a complete HTML document.

    Parameters
    ==========
    entries : [IndexEntry, ...]
        The finalized index (see
        :py:meth:`~cooklang_indexer.index.IngredientIndex.finalize`). Entries
        are rendered in the order given.
    base_url : str
        The URL below which the recipes are hosted. Each recipe is linked to
        using this URL followed by the recipe's slug (see
        :py:func:`~cooklang_indexer.href.recipe_href`).
    title : str
        The page title.
    description_html : str or None
        Optional HTML to include above the index.
    """
    recipe_paths: Set[PurePosixPath] = set()
    rendered_entries: List[RenderedEntry] = []
    for entry, anchor in zip(entries, make_anchors(e.ingredient for e in entries)):
        links = []
        for recipe in entry.recipes:
            recipe_paths.add(recipe.path)
            links.append(RecipeLink(recipe.title, recipe_href(base_url, recipe.path)))
        rendered_entries.append(RenderedEntry(entry.ingredient, anchor, links))

    return ingredient_index_template.render(
        title=title,
        description_html=description_html,
        entries=rendered_entries,
        recipe_count=len(recipe_paths),
    )


def write_index(html: str, output_path: Path) -> None:
    """
    Write a rendered index to 'output_path', replacing any existing file.
    Throws :py:exc:`OutputWriteError` on failure.
    """
    try:
        with output_path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(html)
    except OSError as e:
        raise OutputWriteError(f"Cannot write {output_path}: {e.strerror or e}")
