"""Provider for textual intermediate-representation files."""

from __future__ import annotations

from class_locator.classpath import ClasspathIndex
from class_locator.naming import class_to_path
from class_locator.providers.base import KIND_JIMPLE, ClassSource

JIMPLE_SUFFIX = ".jimple"


class JimpleProvider:
    """Finds ``a/b/C.jimple`` in directories and archives."""

    name = KIND_JIMPLE

    def __init__(self, index: ClasspathIndex) -> None:
        self._index = index

    def find(self, class_name: str) -> ClassSource | None:
        found = self._index.lookup(class_to_path(class_name, JIMPLE_SUFFIX))
        if found is None:
            return None
        return ClassSource.from_found(class_name, self.name, found)
