"""Ordered provider chain with first-hit resolution."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from class_locator.errors import MalformedArchiveError
from class_locator.providers.base import ClassProvider, ClassSource


def first_hit(providers: Iterable[ClassProvider], class_name: str) -> ClassSource | None:
    """Return the first provider hit, re-raising the last archive failure on a miss."""
    failure: MalformedArchiveError | None = None
    for provider in providers:
        try:
            source = provider.find(class_name)
        except MalformedArchiveError as exc:
            failure = exc
            continue
        if source is not None:
            return source
    if failure is not None:
        raise failure
    return None


@dataclass(slots=True)
class ProviderChain:
    """Providers consulted in registration order."""

    _providers: list[ClassProvider] = field(default_factory=list)

    def register(self, provider: ClassProvider) -> None:
        """Append a provider after the ones already registered."""
        self._providers.append(provider)

    def providers(self) -> tuple[ClassProvider, ...]:
        return tuple(self._providers)

    def names(self) -> tuple[str, ...]:
        """Return provider names in precedence order."""
        return tuple(provider.name for provider in self._providers)

    def find(self, class_name: str) -> ClassSource | None:
        """Resolve ``class_name`` against the chain."""
        return first_hit(self._providers, class_name)

    def __len__(self) -> int:
        return len(self._providers)
