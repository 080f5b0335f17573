"""
Generate a cross-referenced ingredient index for a collection of Cooklang
recipes.

Example::

    >>> from pathlib import Path
    >>> from cooklang_indexer.generate import build_index
    >>> result = build_index(Path("path/to/recipes"))
    >>> for ingredient in result.index.ingredients():
    ...     print(ingredient, result.index.get_recipes_for_ingredient(ingredient))

The command line interface is provided by
:py:mod:`cooklang_indexer.scripts.cooklang_index`.
"""

__version__ = "0.1.0"
