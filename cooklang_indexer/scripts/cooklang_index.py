"""
The ``cooklang-index`` command generates an ingredient index for a directory
of `Cooklang <https://cooklang.org/>`_ recipes: a single HTML page listing
every ingredient used and, for each, links to the recipes which use it.

Usage::

    $ cooklang-index RECIPES [BASE_URL]

The index is written to ``ingredient-index.html`` in the ``RECIPES``
directory (or to the file given with ``--output``) and replaces any index
already there.

Recipes
=======

Every file with a ``.cook`` extension in the directory, or any of its
subdirectories, is indexed. Ingredients are written in Cooklang as usual::

    Mix @flour{200%g} with @caster sugar{50%g} and a pinch of @salt.

Ingredient names are matched regardless of case or spacing, so ``@Flour``
and ``@flour`` in different recipes share a single entry in the index.
Singular and plural forms (e.g. ``@egg`` and ``@eggs``) are listed
separately.

Each recipe is listed using the ``title`` given in its YAML front matter::

    ---
    title: Fluffy pancakes
    ---

or, failing that, a title generated from its filename.

Recipes which cannot be read or parsed are skipped with a warning and do not
prevent the rest of the collection being indexed.

Links
=====

Recipes are linked to using ``BASE_URL`` (by default
``http://localhost:8080/r``) followed by the recipe's path within the
collection, without its extension. For example, with a base URL of
``https://example.com/recipes``, the recipe ``mains/Chicken pie.cook`` is
linked to as ``https://example.com/recipes/mains/Chicken%20pie``.

Readme files
============

If the directory contains a ``README.md`` or ``index.md`` file, its H1-level
title is used as the page title and the rest of its contents are shown above
the index.
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from cooklang_indexer.diagnostics import IndexWarning, WarningKind
from cooklang_indexer.exceptions import IndexerError
from cooklang_indexer.generate import generate_ingredient_index
from cooklang_indexer.walker import DEFAULT_EXTENSIONS


DEFAULT_BASE_URL = "http://localhost:8080/r"


def main() -> None:
    parser = ArgumentParser(
        description="""
            Generate an HTML ingredient index for a directory of Cooklang
            recipes.
        """,
    )

    parser.add_argument(
        "recipes",
        type=Path,
        help="""
            The directory containing the recipes.
        """,
    )
    parser.add_argument(
        "base_url",
        nargs="?",
        default=DEFAULT_BASE_URL,
        help="""
            The URL below which the recipes are served. Each recipe is linked
            to as this URL followed by the recipe's path (without extension).
            Default: %(default)s.
        """,
    )

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="""
            The file to write the index to. Any existing file will be
            overwritten. Default: ingredient-index.html in the recipe
            directory.
        """,
    )
    parser.add_argument(
        "--extension",
        "-e",
        action="extend",
        nargs="+",
        help="""
            The file extension used by recipe files. May be given multiple
            times. Default: .cook.
        """,
    )
    parser.add_argument(
        "--title",
        "-t",
        help="""
            The title of the generated page. Overrides any title given in a
            README.md file.
        """,
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="""
            Also print every ingredient, and the recipes using it, to stdout.
        """,
    )
    parser.add_argument(
        "--ignore",
        "-i",
        action="extend",
        default=[],
        nargs="+",
        choices=[k.name for k in WarningKind],
        help="""
            Don't show warnings of a certain type.
        """,
    )

    args = parser.parse_args()

    def on_warning(warning: IndexWarning) -> None:
        if warning.kind.name not in args.ignore:
            sys.stderr.write(f"{warning}\n")

    try:
        result = generate_ingredient_index(
            args.recipes,
            args.base_url,
            output=args.output,
            extensions=args.extension or DEFAULT_EXTENSIONS,
            title=args.title,
            on_warning=on_warning,
        )
    except IndexerError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)

    if args.list:
        for entry in result.entries:
            print(f"Ingredient: {entry.ingredient}")
            for recipe in entry.recipes:
                print(f"  Recipe: {recipe.title} ({recipe.path})")

    print(f"Index generated at: {result.output_path}")


if __name__ == "__main__":
    main()
