"""Class-name helpers shared by providers and output paths."""

from __future__ import annotations

from collections.abc import Mapping

INNER_CLASS_SEPARATOR = "$"


def source_for_class(class_name: str, source_map: Mapping[str, str] | None = None) -> str:
    """Return the name of the class whose source defines ``class_name``.

    Inner classes map to their outermost class (``a.B$C$D`` -> ``a.B``). The
    optional map then redirects classes declared in a differently named
    source file.
    """
    java_class_name = class_name
    if INNER_CLASS_SEPARATOR in class_name:
        java_class_name = class_name[: class_name.index(INNER_CLASS_SEPARATOR)]
    # Inner classes can live in a mapped outer class, so always consult the map.
    if source_map is not None:
        mapped = source_map.get(java_class_name)
        if mapped is not None:
            java_class_name = mapped
    return java_class_name


def package_name(class_name: str) -> str:
    """Return the dotted package of a class, empty for the default package."""
    if "." not in class_name:
        return ""
    return class_name.rsplit(".", 1)[0]


def short_name(class_name: str) -> str:
    """Return the class name without its package."""
    return class_name.rsplit(".", 1)[-1]


def class_to_path(class_name: str, suffix: str) -> str:
    """Return the ``/``-separated relative path for a class artifact."""
    return class_name.replace(".", "/") + suffix
