"""Provider for compiled ``.class`` files on the classpath."""

from __future__ import annotations

from class_locator.classpath import ClasspathIndex
from class_locator.naming import class_to_path
from class_locator.providers.base import KIND_CLASS, ClassSource

CLASS_SUFFIX = ".class"


class ClassFileProvider:
    """Finds ``a/b/C.class`` in directories and archives."""

    name = KIND_CLASS

    def __init__(self, index: ClasspathIndex) -> None:
        self._index = index

    def find(self, class_name: str) -> ClassSource | None:
        found = self._index.lookup(class_to_path(class_name, CLASS_SUFFIX))
        if found is None:
            return None
        return ClassSource.from_found(class_name, self.name, found)
