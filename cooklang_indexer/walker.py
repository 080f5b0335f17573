"""
Enumeration of the recipe files in a (possibly nested) collection directory.

.. autofunction:: walk_recipe_files
"""

from typing import Iterable, Iterator, Set, Tuple

import os

from pathlib import Path

from cooklang_indexer.diagnostics import IndexWarning, WarningCallback, WarningKind

from cooklang_indexer.exceptions import (
    RecipeRootNotFoundError,
    RecipeRootUnreadableError,
)


DEFAULT_EXTENSIONS: Tuple[str, ...] = (".cook",)
"""The file extensions of Cooklang recipes."""


def normalize_extensions(extensions: Iterable[str]) -> Tuple[str, ...]:
    """
    Normalise a list of extensions into lower case with a leading '.', e.g.
    "COOK" becomes ".cook".
    """
    return tuple(
        ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        for ext in extensions
    )


def check_recipe_root(root: Path) -> None:
    """
    Check that 'root' is a readable directory, throwing
    :py:exc:`RecipeRootNotFoundError` or :py:exc:`RecipeRootUnreadableError`
    if not.
    """
    if not root.is_dir():
        raise RecipeRootNotFoundError(f"{root} is not a directory")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise RecipeRootUnreadableError(f"Cannot read {root}: {e.strerror or e}")


def walk_recipe_files(
    root: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    on_warning: WarningCallback = None,
) -> Iterator[Path]:
    """
    Iterate over every recipe file within 'root' and its subdirectories.

    The root is checked immediately (see :py:func:`check_recipe_root`) but the
    directory tree is only walked as the returned iterator is consumed.
    Subdirectories which cannot be read are skipped and reported to
    'on_warning'. Files are produced in a stable (sorted) order.

    Parameters
    ==========
    root : Path
        The collection directory.
    extensions : [str, ...]
        The (case insensitive) extensions of files to produce.
    on_warning : callable or None
        Called with an :py:class:`IndexWarning` for each skipped directory.
    """
    check_recipe_root(root)
    return _walk(root, normalize_extensions(extensions), on_warning)


def _walk(
    root: Path, extensions: Tuple[str, ...], on_warning: WarningCallback
) -> Iterator[Path]:
    def onerror(error: OSError) -> None:
        if on_warning is not None:
            on_warning(
                IndexWarning(
                    kind=WarningKind.unreadable_directory,
                    path=Path(error.filename or root),
                    description=(
                        f"Skipped unreadable directory: {error.strerror or error}"
                    ),
                )
            )

    visited: Set[str] = set()

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=onerror, followlinks=True
    ):
        # Don't loop forever when symlinks form a cycle
        real_dirpath = os.path.realpath(dirpath)
        if real_dirpath in visited:
            dirnames[:] = []
            continue
        visited.add(real_dirpath)

        dirnames.sort()
        for filename in sorted(filenames):
            if os.path.splitext(filename)[1].lower() in extensions:
                yield Path(dirpath) / filename
