"""
An optional ``README.md`` (or ``index.md``) in the root of a recipe collection
may be used to give the generated index a title and an introduction. This
markdown document must start with a H1 title which will be used as the page
title. The rest of the document is shown above the index.
"""

from typing import Optional, Tuple

from pathlib import Path

from html import unescape

import marko  # type: ignore

from cooklang_indexer.exceptions import (
    MultipleReadmeError,
    ReadmeMalformedTitleError,
    ReadmeMissingTitleError,
    ReadmeUnreadableError,
)

README_NAMES = ("readme.md", "index.md")


def find_readme(directory: Path) -> Optional[Path]:
    """
    Find the readme file in 'directory', if any. Throws
    :py:exc:`MultipleReadmeError` if more than one is present.
    """
    readme_path: Optional[Path] = None
    for path in sorted(directory.iterdir()):
        if path.name.lower() in README_NAMES and path.is_file():
            if readme_path is None:
                readme_path = path
            else:
                raise MultipleReadmeError(
                    f"{directory} contains multiple readme files: "
                    f"{readme_path.name} and {path.name}."
                )
    return readme_path


def compile_readme_markdown(path: Path) -> Tuple[str, str]:
    """
    Read and compile a markdown 'README' document, stripping the <h1> heading
    and returning the title and remainder of the document separately.

    Returns
    =======
    title: str
        The title (free from HTML escape sequences)
    description: str
        The remainder of the compiled markdown HTML source.
    """

    try:
        with path.open(encoding="utf-8-sig") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadmeUnreadableError(f"Cannot read {path}: {e}")

    html = marko.Markdown()(source)

    lines = html.splitlines(keepends=True)

    first_line = (lines[0] if lines else "").strip()
    if not (first_line.startswith("<h1>") and first_line.endswith("</h1>")):
        raise ReadmeMissingTitleError(f"{path} must start with a h1-level title.")

    title = first_line[len("<h1>") : -len("</h1>")]
    if "<" in title:
        raise ReadmeMalformedTitleError(
            f"{path} must have only simple text in its h1 title"
        )

    title = unescape(title)
    description = "".join(lines[1:])

    return title, description
