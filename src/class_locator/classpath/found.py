"""Artifacts located on the classpath and their byte streams."""

from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from class_locator.errors import ResourceError

_READ_CHUNK = 1024


@dataclass(slots=True, frozen=True)
class PlainFile:
    """Artifact stored as a regular file."""

    path: Path

    @property
    def origin(self) -> str:
        return str(self.path)

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    @property
    def in_archive(self) -> bool:
        return False

    def open_stream(self) -> BinaryIO:
        """Open a fresh handle positioned at the start of the file."""
        try:
            return self.path.open("rb")
        except OSError as exc:
            raise ResourceError(self.origin, str(exc)) from exc

    def close(self) -> None:
        """Plain files hold no handle between streams."""

    def __enter__(self) -> PlainFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass(slots=True)
class ArchiveMember:
    """Artifact stored as a named entry of an opened archive.

    The member owns ``archive`` and closes it on ``close()``; streams returned
    by ``open_stream()`` are fully materialized and outlive the archive.
    """

    archive: zipfile.ZipFile
    info: zipfile.ZipInfo
    archive_path: str

    @property
    def origin(self) -> str:
        return f"{self.archive_path}!{self.info.filename}"

    @property
    def size(self) -> int:
        return self.info.file_size

    @property
    def in_archive(self) -> bool:
        return True

    def open_stream(self) -> BinaryIO:
        """Read the whole entry into memory and return a stream over it."""
        size = self.info.file_size
        buffer = bytearray(size)
        count = 0
        try:
            with self.archive.open(self.info) as handle, memoryview(buffer) as view:
                while count < size:
                    read = handle.readinto(view[count : min(size, count + _READ_CHUNK)])
                    if not read:
                        break
                    count += read
        except (OSError, ValueError, zipfile.BadZipFile) as exc:
            raise ResourceError(self.origin, str(exc)) from exc
        return io.BytesIO(bytes(buffer))

    def close(self) -> None:
        self.archive.close()

    def __enter__(self) -> ArchiveMember:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


FoundFile = PlainFile | ArchiveMember
