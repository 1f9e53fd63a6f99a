"""Provider protocol and the class sources it produces."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import BinaryIO, Protocol

from class_locator.classpath import FoundFile

KIND_CLASS = "class"
KIND_JIMPLE = "jimple"
KIND_JAVA = "java"


@dataclass(slots=True, frozen=True)
class ClassSource:
    """Readable bytes for one class, handed to the matching parser.

    The locator never looks inside; ``kind`` names the provider format and
    ``origin`` where the bytes came from.
    """

    class_name: str
    kind: str
    origin: str
    opener: Callable[[], BinaryIO] = field(repr=False, compare=False)

    def open_stream(self) -> BinaryIO:
        """Return a fresh byte stream over the class artifact."""
        return self.opener()

    @classmethod
    def from_found(cls, class_name: str, kind: str, found: FoundFile) -> ClassSource:
        return cls(
            class_name=class_name,
            kind=kind,
            origin=found.origin,
            opener=found.open_stream,
        )


class ClassProvider(Protocol):
    """Protocol implemented by class providers.

    ``find`` returns a source, None when the class is not this provider's,
    or raises ``MalformedArchiveError``.
    """

    name: str

    def find(self, class_name: str) -> ClassSource | None:
        """Return the class source for ``class_name`` if this provider has it."""
