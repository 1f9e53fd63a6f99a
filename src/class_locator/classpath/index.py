"""Lazily built index over the configured classpath."""

from __future__ import annotations

import os
import zipfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from class_locator.classpath.found import ArchiveMember, FoundFile, PlainFile
from class_locator.classpath.paths import explode_class_path, is_archive, is_readable_file
from class_locator.errors import ResourceError
from class_locator.logging import DiagnosticLog

KIND_DIRECTORY = "directory"
KIND_ARCHIVE = "archive"
KIND_UNSUPPORTED = "unsupported"


@dataclass(slots=True, frozen=True)
class ClasspathEntry:
    """Canonical classpath root tagged with how it is searched."""

    path: str
    kind: str

    @property
    def is_archive(self) -> bool:
        return self.kind == KIND_ARCHIVE


def classify_entry(path: str, diagnostics: DiagnosticLog | None = None) -> ClasspathEntry:
    """Tag a canonical path as archive, unsupported file or directory."""
    if is_archive(path, diagnostics):
        return ClasspathEntry(path=path, kind=KIND_ARCHIVE)
    if Path(path).is_file():
        return ClasspathEntry(path=path, kind=KIND_UNSUPPORTED)
    return ClasspathEntry(path=path, kind=KIND_DIRECTORY)


class ClasspathIndex:
    """Ordered classpath roots, rebuilt from configuration after ``invalidate()``."""

    def __init__(
        self,
        read_class_path: Callable[[], str],
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self._read_class_path = read_class_path
        self._diagnostics = diagnostics
        self._entries: tuple[ClasspathEntry, ...] | None = None
        self._source_path: tuple[str, ...] | None = None

    def entries(self) -> tuple[ClasspathEntry, ...]:
        """Return classpath entries, building them on first use."""
        entries = self._entries
        if entries is None:
            exploded = explode_class_path(self._read_class_path())
            entries = tuple(classify_entry(path, self._diagnostics) for path in exploded)
            self._entries = entries
        return entries

    def paths(self) -> list[str]:
        """Return canonical entry paths in classpath order."""
        return [entry.path for entry in self.entries()]

    def invalidate(self) -> None:
        """Drop cached entries so the next query re-reads the classpath."""
        self._entries = None
        self._source_path = None

    def source_path(self) -> list[str]:
        """Return non-archive entries in classpath order."""
        source_path = self._source_path
        if source_path is None:
            source_path = tuple(entry.path for entry in self.entries() if not entry.is_archive)
            self._source_path = source_path
        return list(source_path)

    def lookup(self, relative_path: str) -> FoundFile | None:
        """Return the first entry holding ``relative_path`` (``/``-separated)."""
        for entry in self.entries():
            if entry.kind == KIND_ARCHIVE:
                found = lookup_in_archive(entry.path, relative_path)
            elif entry.kind == KIND_DIRECTORY:
                found = lookup_in_directory(entry.path, relative_path)
            else:
                continue
            if found is not None:
                return found
        return None


def lookup_in_directory(directory: str, relative_path: str) -> PlainFile | None:
    candidate = Path(directory + os.sep + relative_path.replace("/", os.sep))
    if is_readable_file(candidate):
        return PlainFile(path=candidate)
    return None


def lookup_in_archive(archive_path: str, relative_path: str) -> ArchiveMember | None:
    """Return the archive entry named exactly ``relative_path``.

    An archive that cannot be opened is fatal here, unlike provider-level
    archive failures.
    """
    try:
        archive = zipfile.ZipFile(archive_path)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ResourceError(
            archive_path,
            f"{exc} looking in archive {archive_path} for file {relative_path}",
        ) from exc
    try:
        info = archive.getinfo(relative_path)
    except KeyError:
        archive.close()
        return None
    return ArchiveMember(archive=archive, info=info, archive_path=archive_path)
