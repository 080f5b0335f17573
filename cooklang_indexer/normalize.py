"""
Canonical forms for ingredient names.

Ingredient mentions in different recipes (or within the same recipe) are
treated as the same ingredient when their names normalise to the same key.
Only case and whitespace are folded: 'Red  Onion' and 'red onion' share a key
but 'onion' and 'onions' do not.
"""

import re

_whitespace = re.compile(r"\s+")


def normalize(raw_name: str) -> str:
    """
    Return the canonical index key for an ingredient name.

    Example::

        >>> normalize("  Red \\t Onion ")
        'red onion'
    """
    return _whitespace.sub(" ", raw_name).strip().casefold()
