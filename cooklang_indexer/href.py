"""
Utilities for building links to recipes.
"""

from typing import Union

from pathlib import PurePosixPath

from urllib.parse import quote, urlsplit

from cooklang_indexer.exceptions import InvalidBaseURLError


def slug(path: Union[str, PurePosixPath]) -> str:
    """
    Get the URL path for a recipe given its path relative to the collection
    root. The extension is dropped and each path segment is percent-encoded.

    Example::

        >>> slug("mains/chicken & leek pie.cook")
        'mains/chicken%20%26%20leek%20pie'
    """
    path = PurePosixPath(path).with_suffix("")
    return "/".join(quote(part, safe="") for part in path.parts)


def recipe_href(base_url: str, path: Union[str, PurePosixPath]) -> str:
    """
    Create the link to a recipe hosted below 'base_url'.

    Example::

        >>> recipe_href("http://example.com/recipes", "chicken_pasta.cook")
        'http://example.com/recipes/chicken_pasta'
    """
    return f"{base_url.rstrip('/')}/{slug(path)}"


def check_base_url(base_url: str) -> None:
    """
    Check that 'base_url' is either an absolute http(s) URL or an absolute
    path, throwing :py:exc:`InvalidBaseURLError` if not.
    """
    if not base_url.strip():
        raise InvalidBaseURLError("The base URL must not be empty")
    if any(c.isspace() for c in base_url):
        raise InvalidBaseURLError(f"The base URL {base_url!r} contains whitespace")

    try:
        parts = urlsplit(base_url)
    except ValueError as e:
        raise InvalidBaseURLError(f"The base URL {base_url!r} is malformed: {e}")

    if parts.scheme:
        if parts.scheme not in ("http", "https"):
            raise InvalidBaseURLError(
                f"The base URL {base_url!r} must use http or https, not {parts.scheme}"
            )
        if not parts.netloc:
            raise InvalidBaseURLError(f"The base URL {base_url!r} has no host")
    elif not base_url.startswith("/") or base_url.startswith("//"):
        raise InvalidBaseURLError(
            f"The base URL {base_url!r} must be an http(s) URL or start with '/'"
        )

    if parts.query or parts.fragment:
        raise InvalidBaseURLError(
            f"The base URL {base_url!r} must not contain a query or fragment"
        )
