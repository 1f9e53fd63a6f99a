"""Auxiliary resource loaders consulted after the classpath."""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Protocol

from class_locator.errors import ResourceError
from class_locator.naming import class_to_path
from class_locator.providers.base import KIND_CLASS, ClassSource
from class_locator.providers.classfile import CLASS_SUFFIX


class ResourceLoader(Protocol):
    """Looks up resources by ``/``-separated relative path."""

    def get_resource_as_stream(self, relative_path: str) -> BinaryIO | None:
        """Return a byte stream for the resource, or None when absent."""


class DirectoryResourceLoader:
    """Resource loader rooted at a directory outside the classpath."""

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @property
    def root(self) -> Path:
        return self._root

    def get_resource_as_stream(self, relative_path: str) -> BinaryIO | None:
        parts = [part for part in relative_path.split("/") if part not in ("", ".")]
        if not parts or ".." in parts:
            return None
        candidate = self._root.joinpath(*parts)
        if not candidate.is_file():
            return None
        return candidate.open("rb")

    def __repr__(self) -> str:
        return f"DirectoryResourceLoader({str(self._root)!r})"


class ResourceLoaderProvider:
    """Class-file provider reading ``a/b/C.class`` from one resource loader."""

    name = "resource"

    def __init__(self, loader: ResourceLoader) -> None:
        self._loader = loader

    def find(self, class_name: str) -> ClassSource | None:
        relative_path = class_to_path(class_name, CLASS_SUFFIX)
        origin = f"{self._loader!r}:{relative_path}"
        try:
            stream = self._loader.get_resource_as_stream(relative_path)
            if stream is None:
                return None
            with stream:
                data = stream.read()
        except OSError as exc:
            raise ResourceError(origin, str(exc)) from exc
        return ClassSource(
            class_name=class_name,
            kind=KIND_CLASS,
            origin=origin,
            opener=lambda: io.BytesIO(data),
        )
