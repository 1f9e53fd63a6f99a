from __future__ import annotations

import os
import zipfile
from pathlib import Path

import pytest

from class_locator.classpath import ClasspathIndex
from class_locator.errors import MalformedArchiveError
from class_locator.providers import ClassFileProvider, JavaSourceProvider, JimpleProvider


def _index(*entries: Path) -> ClasspathIndex:
    class_path = os.pathsep.join(str(entry) for entry in entries)
    return ClasspathIndex(read_class_path=lambda: class_path)


def test_class_and_jimple_providers_find_their_suffix(tmp_path: Path) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "C.class").write_bytes(b"\xca\xfe")
    (tmp_path / "pkg" / "D.jimple").write_text("class D", encoding="utf-8")
    index = _index(tmp_path)

    class_source = ClassFileProvider(index).find("pkg.C")
    jimple_source = JimpleProvider(index).find("pkg.D")

    assert class_source is not None
    assert class_source.kind == "class"
    assert class_source.open_stream().read() == b"\xca\xfe"
    assert jimple_source is not None
    assert jimple_source.kind == "jimple"
    assert JimpleProvider(index).find("pkg.C") is None
    assert ClassFileProvider(index).find("pkg.D") is None


def test_java_provider_resolves_inner_classes_to_outer_source(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "B.java").write_text("class B { class C {} }", encoding="utf-8")
    provider = JavaSourceProvider(_index(tmp_path))

    source = provider.find("a.B$C$D")

    assert source is not None
    assert source.class_name == "a.B$C$D"
    assert source.kind == "java"
    assert source.origin.endswith(os.path.join("a", "B.java"))


def test_java_provider_follows_source_map(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "Other.java").write_text("class B {}", encoding="utf-8")
    mapping: dict[str, str] = {}
    provider = JavaSourceProvider(_index(tmp_path), source_map=lambda: mapping)

    assert provider.find("a.B") is None
    mapping["a.B"] = "a.Other"
    source = provider.find("a.B")

    assert source is not None
    assert source.origin.endswith("Other.java")


def test_java_provider_reports_sources_inside_archives(tmp_path: Path) -> None:
    jar = tmp_path / "src.jar"
    with zipfile.ZipFile(jar, "w") as archive:
        archive.writestr("a/B.java", "class B {}")

    with pytest.raises(MalformedArchiveError) as error:
        JavaSourceProvider(_index(jar)).find("a.B")

    assert error.value.class_name == "a.B"
    assert error.value.archive.endswith("src.jar!a/B.java")
