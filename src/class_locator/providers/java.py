"""Provider for ``.java`` source files."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from class_locator.classpath import ClasspathIndex
from class_locator.errors import MalformedArchiveError
from class_locator.naming import class_to_path, source_for_class
from class_locator.providers.base import KIND_JAVA, ClassSource

JAVA_SUFFIX = ".java"

SourceMapReader = Callable[[], Mapping[str, str] | None]


class JavaSourceProvider:
    """Finds the source file declaring a class.

    Inner classes resolve to the file of their outer class. Sources are only
    usable from directories; a hit inside an archive is reported as a
    malformed-archive failure so later providers get their chance.
    """

    name = KIND_JAVA

    def __init__(self, index: ClasspathIndex, source_map: SourceMapReader | None = None) -> None:
        self._index = index
        self._source_map = source_map

    def find(self, class_name: str) -> ClassSource | None:
        mapping = self._source_map() if self._source_map is not None else None
        java_class_name = source_for_class(class_name, mapping)
        found = self._index.lookup(class_to_path(java_class_name, JAVA_SUFFIX))
        if found is None:
            return None
        if found.in_archive:
            found.close()
            raise MalformedArchiveError(class_name=class_name, archive=found.origin)
        return ClassSource.from_found(class_name, self.name, found)
