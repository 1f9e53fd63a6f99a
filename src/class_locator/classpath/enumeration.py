"""Enumeration of class-like artifacts under a path."""

from __future__ import annotations

import os
import zipfile
from collections.abc import Iterable
from pathlib import Path

from class_locator.classpath.paths import is_archive
from class_locator.errors import CompilationAbortedError
from class_locator.logging import DiagnosticLog

RECOGNIZED_SUFFIXES = (".class", ".jimple", ".java")


def classes_under(path: str, diagnostics: DiagnosticLog | None = None) -> list[str]:
    """Return dotted names of every class-like artifact beneath ``path``."""
    if is_archive(path, diagnostics):
        return _classes_in_archive(path, diagnostics)
    return _classes_in_tree(Path(path))


def classes_in_dynamic_package(
    prefix: str,
    class_path_entries: Iterable[str],
    diagnostics: DiagnosticLog | None = None,
) -> set[str]:
    """Return every class on the classpath whose dotted name starts with ``prefix``."""
    found: set[str] = set()
    for entry in class_path_entries:
        for class_name in classes_under(entry, diagnostics):
            if class_name.startswith(prefix):
                found.add(class_name)
    return found


def strip_recognized_suffix(name: str) -> str | None:
    """Return ``name`` without its recognized suffix, or None when unrecognized."""
    for suffix in RECOGNIZED_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return None


def _classes_in_archive(path: str, diagnostics: DiagnosticLog | None) -> list[str]:
    names: list[str] = []
    try:
        with zipfile.ZipFile(path) as archive:
            infos = archive.infolist()
    except (OSError, zipfile.BadZipFile) as exc:
        if diagnostics is not None:
            diagnostics.error("archive_read_failed", f"Error reading {path}: {exc}", path=path)
        raise CompilationAbortedError(f"Error reading {path}: {exc}") from exc
    for info in infos:
        stripped = strip_recognized_suffix(info.filename)
        if stripped is not None:
            names.append(stripped.replace("/", "."))
    return names


def _classes_in_tree(path: Path) -> list[str]:
    try:
        with os.scandir(path) as entries:
            children = sorted(entries, key=lambda item: item.name)
    except (NotADirectoryError, FileNotFoundError, PermissionError):
        return _classes_in_file(path.name)
    names: list[str] = []
    for child in children:
        if child.is_dir():
            names.extend(
                f"{child.name}.{name}" for name in _classes_in_tree(path / child.name)
            )
            continue
        names.extend(_classes_in_file(child.name))
    return names


def _classes_in_file(file_name: str) -> list[str]:
    stripped = strip_recognized_suffix(file_name)
    if stripped is None:
        return []
    return [stripped]
