"""
Generation of an ingredient index page for a directory of Cooklang recipes.

The process runs in a single pass:

1. The collection directory is walked for recipe files
   (:py:mod:`cooklang_indexer.walker`).
2. Each file is parsed (:py:func:`cooklang_indexer.recipe.load_recipe`).
   Files which fail to load are skipped and reported as warnings.
3. Every ingredient mention is added to an
   :py:class:`~cooklang_indexer.index.IngredientIndex`.
4. The index is finalized and rendered to HTML
   (:py:mod:`cooklang_indexer.renderer`) which is written out, by default to
   ``ingredient-index.html`` in the collection directory.

.. autofunction:: build_index

.. autofunction:: generate_ingredient_index
"""

from typing import Iterable, List, Optional, Tuple

from dataclasses import dataclass, field

from pathlib import Path

from cooklang_indexer.diagnostics import IndexWarning, WarningCallback, WarningKind
from cooklang_indexer.exceptions import RecipeLoadError
from cooklang_indexer.href import check_base_url
from cooklang_indexer.index import IndexEntry, IngredientIndex
from cooklang_indexer.readme import compile_readme_markdown, find_readme
from cooklang_indexer.recipe import load_recipe
from cooklang_indexer.renderer import DEFAULT_TITLE, render_index, write_index
from cooklang_indexer.walker import (
    DEFAULT_EXTENSIONS,
    check_recipe_root,
    walk_recipe_files,
)


OUTPUT_FILENAME = "ingredient-index.html"
"""The default filename of the generated index, within the collection."""


@dataclass
class IndexBuildResult:
    index: IngredientIndex

    recipe_count: int = 0
    """The number of recipe files successfully loaded."""

    warnings: List[IndexWarning] = field(default_factory=list)
    """Problems which caused files or directories to be skipped."""


@dataclass
class GenerationResult:
    output_path: Path

    entries: Tuple[IndexEntry, ...]
    """The finalized index, as rendered."""

    recipe_count: int

    warnings: List[IndexWarning]


def build_index(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    on_warning: WarningCallback = None,
) -> IndexBuildResult:
    """
    Build an ingredient index from every recipe in a collection directory.

    Recipes which cannot be read or parsed are skipped. These, and any
    directories which could not be read, are recorded in the returned
    warnings list (and also passed to 'on_warning', if given, as they occur).

    Raises
    ======
    RecipeRootNotFoundError, RecipeRootUnreadableError
        If 'root' is not a readable directory.
    """
    result = IndexBuildResult(index=IngredientIndex())

    def warn(warning: IndexWarning) -> None:
        result.warnings.append(warning)
        if on_warning is not None:
            on_warning(warning)

    for path in walk_recipe_files(root, extensions, on_warning=warn):
        try:
            recipe = load_recipe(root, path)
        except RecipeLoadError as e:
            warn(
                IndexWarning(
                    kind=WarningKind.parse_error, path=path, description=str(e)
                )
            )
            continue

        result.index.add_recipe(recipe)
        result.recipe_count += 1

    return result


def generate_ingredient_index(
    root: Path,
    base_url: str,
    output: Optional[Path] = None,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    title: Optional[str] = None,
    on_warning: WarningCallback = None,
) -> GenerationResult:
    """
    Generate an HTML ingredient index for a recipe collection.

    Parameters
    ==========
    root : Path
        The directory containing the Cooklang recipes.
    base_url : str
        The URL below which recipes are served. Recipe links consist of this
        URL followed by the recipe's path (without extension).
    output : Path or None
        The file to write. Defaults to ``ingredient-index.html`` in 'root'.
        Any existing file will be overwritten.
    extensions : [str, ...]
        The file extensions of recipe files.
    title : str or None
        The page title. If not given, the title from the collection's
        README.md or index.md is used, if present, or a generic default
        otherwise.
    on_warning : callable or None
        Called with each :py:class:`~cooklang_indexer.diagnostics.IndexWarning`
        as it occurs.

    Raises
    ======
    ConfigError
        If the root directory, base URL or collection README are invalid. Raised
        before any recipes are read.
    OutputWriteError
        If the index could not be written.
    """
    check_base_url(base_url)
    check_recipe_root(root)

    description_html: Optional[str] = None
    readme_path = find_readme(root)
    if readme_path is not None:
        readme_title, description_html = compile_readme_markdown(readme_path)
        if title is None:
            title = readme_title

    build = build_index(root, extensions, on_warning=on_warning)

    entries = build.index.finalize()
    html = render_index(
        entries,
        base_url,
        title=title if title is not None else DEFAULT_TITLE,
        description_html=description_html,
    )

    if output is None:
        output = root / OUTPUT_FILENAME
    write_index(html, output)

    return GenerationResult(
        output_path=output,
        entries=entries,
        recipe_count=build.recipe_count,
        warnings=build.warnings,
    )
