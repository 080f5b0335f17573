"""
Non-fatal problems encountered while indexing a recipe collection.

Problems which should not abort a run (e.g. a single unparsable recipe) are
not raised as exceptions but instead reported as :py:class:`IndexWarning`
objects. It is up to the caller to decide how (and whether) to show these to
the user.

.. autoclass:: IndexWarning
    :members:
    :undoc-members:

.. autoclass:: WarningKind
    :members:
    :undoc-members:
"""

from typing import Callable, Optional

from dataclasses import dataclass

from enum import Enum, auto

from pathlib import Path


class WarningKind(Enum):
    """Kinds of warning."""

    unreadable_directory = auto()
    parse_error = auto()


@dataclass(frozen=True)
class IndexWarning:
    """
    A description of a problem which caused part of the collection to be
    skipped.
    """

    kind: WarningKind
    path: Path
    description: str

    def __str__(self) -> str:
        return f"{self.path}: Warning: {self.description} [{self.kind.name}]"


WarningCallback = Optional[Callable[[IndexWarning], None]]
"""Type of the optional callbacks which receive warnings as they occur."""
