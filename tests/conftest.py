import pytest

from typing import Callable, Mapping

import shutil

from pathlib import Path


MakeDirectoryFn = Callable[[Mapping[str, str]], Path]


@pytest.fixture
def recipes_path(tmp_path: Path) -> Path:
    return tmp_path / "recipes"


@pytest.fixture
def make_directory(recipes_path: Path) -> MakeDirectoryFn:
    """
    Text fixture which resolves to a function which takes a filename: content
    dictionary and returns a path to the generated directory.
    """
    shutil.rmtree(recipes_path, ignore_errors=True)
    recipes_path.mkdir()

    def make_directory(files: Mapping[str, str] = {}) -> Path:
        for filename, content in files.items():
            path = recipes_path / Path(filename)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                f.write(content)

        return recipes_path

    return make_directory
