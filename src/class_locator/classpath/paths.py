"""Classpath explosion, canonicalization and archive detection."""

from __future__ import annotations

import os
from pathlib import Path

from class_locator.errors import ClasspathResolutionError
from class_locator.logging import DiagnosticLog

ARCHIVE_SUFFIXES = (".zip", ".jar")


def canonical_path(entry: str) -> str:
    """Return the canonical absolute form of a classpath token."""
    return str(Path(entry).resolve())


def explode_class_path(class_path: str) -> list[str]:
    """Split a classpath string into canonical entries, keeping order and duplicates."""
    entries: list[str] = []
    for token in class_path.split(os.pathsep):
        if not token:
            continue
        try:
            entries.append(canonical_path(token))
        except (OSError, RuntimeError, ValueError) as exc:
            raise ClasspathResolutionError(entry=token, reason=str(exc)) from exc
    return entries


def is_readable_file(path: str | Path) -> bool:
    candidate = Path(path)
    return candidate.is_file() and os.access(candidate, os.R_OK)


def is_archive(path: str | Path, diagnostics: DiagnosticLog | None = None) -> bool:
    """Return True when path is a readable ``.zip`` or ``.jar`` file.

    Other readable regular files are reported once per path as unsupported
    classpath entries.
    """
    if not is_readable_file(path):
        return False
    if Path(path).suffix.lower() in ARCHIVE_SUFFIXES:
        return True
    if diagnostics is not None:
        diagnostics.warn_once(
            str(path),
            "unsupported_classpath_entry",
            "the following classpath entry is not a supported archive file "
            f"(must be .zip or .jar): {path}",
            path=str(path),
        )
    return False
