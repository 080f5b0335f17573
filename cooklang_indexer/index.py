"""
The ingredient index: a mapping from canonical ingredient name to the recipes
which use that ingredient.

An index is built up by adding recipes (or individual ingredient mentions) to
an :py:class:`IngredientIndex`. Once complete, it is finalized into a sorted
sequence of :py:class:`IndexEntry` tuples ready for rendering. No further
changes may be made after finalization.

.. autoclass:: IngredientIndex
    :members:

.. autoclass:: RecipeReference
    :members:

.. autoclass:: IndexEntry
    :members:
"""

from typing import Dict, Iterable, List, NamedTuple, Optional, Set, Tuple

from dataclasses import dataclass

from pathlib import PurePosixPath

from cooklang_indexer.exceptions import IndexFinalizedError
from cooklang_indexer.normalize import normalize
from cooklang_indexer.recipe import IngredientMention, Recipe


@dataclass(frozen=True)
class RecipeReference:
    """A reference to a recipe, as stored in the index."""

    path: PurePosixPath
    """The recipe's path relative to the collection root."""

    title: str

    def __post_init__(self) -> None:
        if self.path.is_absolute() or ".." in self.path.parts:
            raise ValueError(
                f"Recipe path {self.path} must be relative to the collection root"
            )

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeReference":
        return cls(path=recipe.path, title=recipe.title)

    @property
    def slug(self) -> str:
        """The recipe path without its extension (see :py:attr:`Recipe.slug`)."""
        return str(self.path.with_suffix(""))

    def sort_key(self) -> Tuple[str, str]:
        """Recipes are ordered by title, then by path."""
        return (self.title, str(self.path))


class IndexEntry(NamedTuple):
    """One ingredient and every recipe which uses it."""

    ingredient: str
    """The canonical ingredient name."""

    recipes: Tuple[RecipeReference, ...]
    """The recipes using this ingredient, sorted by title (then path)."""


class IngredientIndex:
    """
    An index from canonical ingredient names (see
    :py:func:`~cooklang_indexer.normalize.normalize`) to the set of recipes
    mentioning them.
    """

    _entries: Dict[str, Set[RecipeReference]]
    _finalized: bool

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._entries = {}
        self._finalized = False
        for recipe in recipes:
            self.add_recipe(recipe)

    def add(self, recipe: Recipe, mention: IngredientMention) -> None:
        """
        Record that 'recipe' uses the ingredient in 'mention'. Adding the same
        recipe and ingredient more than once has no further effect.
        """
        if self._finalized:
            raise IndexFinalizedError("Cannot add to a finalized ingredient index")
        key = normalize(mention.name)
        if not key:
            return
        self._entries.setdefault(key, set()).add(RecipeReference.from_recipe(recipe))

    def add_recipe(self, recipe: Recipe) -> None:
        """Add every ingredient mentioned by 'recipe'."""
        for mention in recipe.ingredients:
            self.add(recipe, mention)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> Tuple[IndexEntry, ...]:
        """
        Produce the sorted contents of the index. Ingredients are sorted
        lexicographically and the recipes for each are sorted by title, with
        ties broken by path.

        After this has been called, the index may no longer be modified
        (though calling this method again is allowed).
        """
        self._finalized = True
        return tuple(
            IndexEntry(
                ingredient=ingredient,
                recipes=tuple(
                    sorted(self._entries[ingredient], key=RecipeReference.sort_key)
                ),
            )
            for ingredient in sorted(self._entries)
        )

    def ingredients(self) -> List[str]:
        """Get a sorted list of all ingredients in the index."""
        return sorted(self._entries)

    def get_recipes_for_ingredient(
        self, ingredient: str
    ) -> Optional[List[RecipeReference]]:
        """
        Get the recipes (sorted by title then path) which use an ingredient,
        or None if the ingredient isn't in the index. The ingredient name need
        not be in its canonical form.
        """
        references = self._entries.get(normalize(ingredient))
        if references is None:
            return None
        return sorted(references, key=RecipeReference.sort_key)

    def __len__(self) -> int:
        """The number of distinct ingredients."""
        return len(self._entries)

    def __contains__(self, ingredient: object) -> bool:
        return isinstance(ingredient, str) and normalize(ingredient) in self._entries
