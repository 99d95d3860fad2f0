import os
from pathlib import Path

import pytest

from cowlib.cowconfig import COW_BUNDLED, find_in_parent, local_cow_dir
from cowlib.cowerror import CowError, CowNotFoundError
from cowlib.cowfile import cow_path, find_cow, list_cows, load_cow


@pytest.fixture
def cow_dirs(tmp_path: Path) -> tuple:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()

    (first / "moo.cow").write_text("first moo\n")
    (second / "moo.cow").write_text("second moo\n")
    (second / "bar.cow").write_text("bar\n")
    (second / "notes.txt").write_text("not a cow\n")
    (second / "dir.cow").mkdir()
    return first, second


def test_list_cows(cow_dirs: tuple, tmp_path: Path) -> None:
    # GIVEN.
    first, second = cow_dirs
    missing = tmp_path / "missing"

    # WHEN.
    ret = list_cows([first, second, missing])

    # THEN.
    assert ret == {first: ["moo"], second: ["bar", "moo"], missing: []}


def test_list_bundled_cows() -> None:
    assert list_cows([COW_BUNDLED]) == {COW_BUNDLED: ["default", "kitty", "tux"]}


def test_find_cow_first_match_wins(cow_dirs: tuple) -> None:
    # GIVEN.
    first, second = cow_dirs

    # WHEN.
    ret = find_cow("moo", [first, second])

    # THEN.
    assert ret == first / "moo.cow"


def test_find_cow_by_path(cow_dirs: tuple) -> None:
    # GIVEN.
    _, second = cow_dirs
    cowfile = str(second / "bar.cow")

    # WHEN.
    ret = find_cow(cowfile, [])

    # THEN.
    assert ret == Path(cowfile)


def test_find_cow_not_found(cow_dirs: tuple) -> None:
    # GIVEN.
    first, second = cow_dirs

    # WHEN.
    with pytest.raises(CowNotFoundError) as excinfo:
        find_cow("nope", [first, second])

    # THEN.
    assert str(excinfo.value) == "Could not find cowfile for 'nope'"
    assert excinfo.value.searched == [first, second]
    assert isinstance(excinfo.value, LookupError)
    assert isinstance(excinfo.value, CowError)


def test_load_cow(cow_dirs: tuple) -> None:
    assert load_cow("bar", list(cow_dirs)) == "bar\n"


def test_load_cow_repairs_bytes(tmp_path: Path) -> None:
    # GIVEN.
    (tmp_path / "bad.cow").write_bytes(b"\xff$eyes\n")

    # WHEN.
    ret = load_cow("bad", [tmp_path])

    # THEN.
    assert ret == "\ufffd$eyes\n"


def test_load_bundled_cow() -> None:
    assert "$the_cow" in load_cow("default", [COW_BUNDLED])


def test_cow_path(
    cow_dirs: tuple, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    # GIVEN.
    first, second = cow_dirs
    local = tmp_path / ".cows"
    workdir = tmp_path / "project" / "src"
    local.mkdir()
    workdir.mkdir(parents=True)

    monkeypatch.setenv("COWPATH", os.pathsep.join([str(first), "", str(second)]))
    monkeypatch.chdir(workdir)

    # WHEN.
    ret = cow_path()

    # THEN.
    assert ret == [first, second, local.resolve(), COW_BUNDLED]


def test_cow_path_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # GIVEN.
    monkeypatch.delenv("COWPATH", raising=False)

    # WHEN.
    ret = cow_path()

    # THEN.
    assert ret[-1] == COW_BUNDLED


def test_cow_path_skips_duplicates(monkeypatch: pytest.MonkeyPatch) -> None:
    # GIVEN.
    monkeypatch.setenv("COWPATH", str(COW_BUNDLED))

    # WHEN.
    ret = cow_path()

    # THEN.
    assert ret.count(COW_BUNDLED) == 1
    assert ret[0] == COW_BUNDLED


def test_find_in_parent(tmp_path: Path) -> None:
    # GIVEN.
    (tmp_path / ".cows").mkdir()
    deep = tmp_path / "a" / "b"
    deep.mkdir(parents=True)

    # THEN.
    assert find_in_parent(deep, Path(".cows")) == tmp_path / ".cows"
    assert local_cow_dir(deep) == (tmp_path / ".cows").resolve()
    assert find_in_parent(deep, Path("no-such-dir-for-cows")) is None
