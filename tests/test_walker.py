import pytest

from typing import Callable, Iterator, List, Mapping

import errno
import os

from pathlib import Path

from cooklang_indexer.diagnostics import IndexWarning, WarningKind
from cooklang_indexer.exceptions import RecipeRootNotFoundError

from cooklang_indexer.walker import normalize_extensions, walk_recipe_files

MakeDirectoryFn = Callable[[Mapping[str, str]], Path]


@pytest.fixture
def collection(make_directory: MakeDirectoryFn) -> Path:
    return make_directory(
        {
            "b.COOK": "",
            "a.cook": "",
            "notes.txt": "",
            "sub/d.cook": "",
            "sub/deeper/e.cook": "",
            "another/c.cook": "",
        }
    )


def relative(root: Path, paths: Iterator[Path]) -> List[str]:
    return [path.relative_to(root).as_posix() for path in paths]


def test_walk(collection: Path) -> None:
    assert relative(collection, walk_recipe_files(collection)) == [
        "a.cook",
        "b.COOK",
        "another/c.cook",
        "sub/d.cook",
        "sub/deeper/e.cook",
    ]


def test_custom_extensions(collection: Path) -> None:
    assert relative(collection, walk_recipe_files(collection, ["TXT"])) == [
        "notes.txt"
    ]


def test_empty(make_directory: MakeDirectoryFn) -> None:
    assert list(walk_recipe_files(make_directory({}))) == []


def test_lazy_and_not_restartable(collection: Path) -> None:
    files = walk_recipe_files(collection)
    assert next(files) == collection / "a.cook"
    assert len(list(files)) == 4
    assert list(files) == []


@pytest.mark.parametrize("name", ["does_not_exist", "a.cook"])
def test_root_not_a_directory(collection: Path, name: str) -> None:
    # NB: Must fail immediately, not when iterated
    with pytest.raises(RecipeRootNotFoundError):
        walk_recipe_files(collection / name)


def test_unreadable_subdirectory(
    collection: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    locked = collection / "sub"
    real_scandir = os.scandir

    def scandir(path: "os.PathLike[str]") -> "os.ScandirIterator[str]":
        if Path(path) == locked:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    warnings: List[IndexWarning] = []
    files = relative(
        collection, walk_recipe_files(collection, on_warning=warnings.append)
    )

    assert files == ["a.cook", "b.COOK", "another/c.cook"]
    assert len(warnings) == 1
    assert warnings[0].kind == WarningKind.unreadable_directory
    assert warnings[0].path == locked
    assert "Permission denied" in warnings[0].description


def test_follows_symlinks(make_directory: MakeDirectoryFn, tmp_path: Path) -> None:
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    (elsewhere / "x.cook").write_text("")

    root = make_directory({"a.cook": ""})
    os.symlink(elsewhere, root / "linked")

    assert relative(root, walk_recipe_files(root)) == ["a.cook", "linked/x.cook"]


def test_symlink_cycle(make_directory: MakeDirectoryFn) -> None:
    root = make_directory({"a.cook": "", "sub/b.cook": ""})
    os.symlink(root, root / "sub" / "loop")

    assert relative(root, walk_recipe_files(root)) == ["a.cook", "sub/b.cook"]


@pytest.mark.parametrize(
    "extensions, exp",
    [
        (["cook"], (".cook",)),
        ([".COOK"], (".cook",)),
        (["cook", ".md"], (".cook", ".md")),
    ],
)
def test_normalize_extensions(extensions: List[str], exp: tuple) -> None:
    assert normalize_extensions(extensions) == exp
