from __future__ import annotations

import os
from pathlib import Path

import pytest

from class_locator.classpath import explode_class_path, paths
from class_locator.errors import ClasspathResolutionError


def test_explode_preserves_order_and_duplicates_and_skips_empty_tokens(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    class_path = os.pathsep.join([str(second), "", str(first), str(second)])

    entries = explode_class_path(class_path)

    assert entries == [
        str(second.resolve()),
        str(first.resolve()),
        str(second.resolve()),
    ]


def test_explode_canonicalizes_relative_entries(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "lib").mkdir()
    monkeypatch.chdir(tmp_path)

    entries = explode_class_path(os.pathsep.join(["lib", "./lib/../lib"]))

    expected = str((tmp_path / "lib").resolve())
    assert entries == [expected, expected]
    assert all(Path(entry).is_absolute() for entry in entries)


def test_explode_keeps_entries_that_do_not_exist(tmp_path: Path) -> None:
    missing = tmp_path / "missing.jar"

    assert explode_class_path(str(missing)) == [str(missing.resolve())]


def test_explode_empty_class_path_yields_no_entries() -> None:
    assert explode_class_path("") == []
    assert explode_class_path(os.pathsep * 3) == []


def test_explode_failure_names_offending_entry(monkeypatch) -> None:
    def failing_canonical_path(entry: str) -> str:
        if entry == "broken":
            raise OSError("cannot stat")
        return f"/resolved/{entry}"

    monkeypatch.setattr(paths, "canonical_path", failing_canonical_path)

    with pytest.raises(ClasspathResolutionError) as error:
        explode_class_path(os.pathsep.join(["ok", "broken", "later"]))

    assert error.value.entry == "broken"
    assert "cannot stat" in error.value.reason
