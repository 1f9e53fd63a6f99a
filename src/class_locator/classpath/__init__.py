"""Classpath indexing, lookup and enumeration."""

from .enumeration import (
    RECOGNIZED_SUFFIXES,
    classes_in_dynamic_package,
    classes_under,
    strip_recognized_suffix,
)
from .found import ArchiveMember, FoundFile, PlainFile
from .index import (
    KIND_ARCHIVE,
    KIND_DIRECTORY,
    KIND_UNSUPPORTED,
    ClasspathEntry,
    ClasspathIndex,
    classify_entry,
    lookup_in_archive,
    lookup_in_directory,
)
from .paths import ARCHIVE_SUFFIXES, canonical_path, explode_class_path, is_archive

__all__ = [
    "ARCHIVE_SUFFIXES",
    "ArchiveMember",
    "ClasspathEntry",
    "ClasspathIndex",
    "FoundFile",
    "KIND_ARCHIVE",
    "KIND_DIRECTORY",
    "KIND_UNSUPPORTED",
    "PlainFile",
    "RECOGNIZED_SUFFIXES",
    "canonical_path",
    "classes_in_dynamic_package",
    "classes_under",
    "classify_entry",
    "explode_class_path",
    "is_archive",
    "lookup_in_archive",
    "lookup_in_directory",
    "strip_recognized_suffix",
]
