"""Class source locator over the configured classpath."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from class_locator.classpath import (
    KIND_UNSUPPORTED,
    ClasspathEntry,
    ClasspathIndex,
    FoundFile,
    classes_in_dynamic_package,
    classes_under,
)
from class_locator.config import LocatorConfig
from class_locator.logging import DiagnosticLog
from class_locator.naming import source_for_class
from class_locator.output import extension_for, output_path_for, resolve_output_dir
from class_locator.providers import (
    ClassProvider,
    ClassSource,
    ProviderChain,
    ResourceLoader,
    ResourceLoaderProvider,
    build_provider_chain,
)
from class_locator.providers.registry import first_hit


class SourceLocator:
    """Resolves class names to class sources and computes output paths.

    Owns the classpath index, provider chain, resource loaders and
    source-to-class map. Not thread-safe; callers serialize access.
    """

    def __init__(self, config: LocatorConfig, diagnostics: DiagnosticLog | None = None) -> None:
        self._config = config
        self._diagnostics = diagnostics or DiagnosticLog(path=config.diagnostics_path)
        self._index = ClasspathIndex(
            read_class_path=lambda: self._config.soot_class_path,
            diagnostics=self._diagnostics,
        )
        self._providers: ProviderChain | None = None
        self._resource_loaders: list[ResourceLoader] = []
        self._source_to_class_map: dict[str, str] | None = None

    @property
    def config(self) -> LocatorConfig:
        return self._config

    @property
    def diagnostics(self) -> DiagnosticLog:
        return self._diagnostics

    def configure(self, config: LocatorConfig) -> None:
        """Replace configuration and drop everything derived from it."""
        self._config = config
        self._index.invalidate()
        self._providers = None

    def get_class_source(self, class_name: str) -> ClassSource | None:
        """Return the class source for ``class_name``, or None when nobody has it.

        Raises the last ``MalformedArchiveError`` seen when no provider
        succeeds.
        """
        self._index.entries()
        source = self._provider_chain().find(class_name)
        if source is not None:
            return source
        loaders = [ResourceLoaderProvider(loader) for loader in self._resource_loaders]
        return first_hit(loaders, class_name)

    def add_resource_loader(self, loader: ResourceLoader) -> None:
        """Consult ``loader`` after the classpath providers."""
        if any(existing is loader for existing in self._resource_loaders):
            return
        self._resource_loaders.append(loader)

    def resource_loaders(self) -> tuple[ResourceLoader, ...]:
        return tuple(self._resource_loaders)

    def set_class_providers(self, providers: Iterable[ClassProvider]) -> None:
        """Install an explicit provider chain instead of the precedence default."""
        chain = ProviderChain()
        for provider in providers:
            chain.register(provider)
        self._providers = chain

    def class_providers(self) -> tuple[ClassProvider, ...]:
        return self._provider_chain().providers()

    def _provider_chain(self) -> ProviderChain:
        chain = self._providers
        if chain is None:
            chain = build_provider_chain(
                self._config.src_prec,
                self._index,
                source_map=self.source_to_class_map,
            )
            self._providers = chain
        return chain

    def class_path(self) -> list[str]:
        """Return canonical classpath entries in order."""
        return self._index.paths()

    def class_path_entries(self) -> tuple[ClasspathEntry, ...]:
        return self._index.entries()

    def invalidate_class_path(self) -> None:
        self._index.invalidate()

    def source_path(self) -> list[str]:
        """Return classpath entries that are not archives."""
        return self._index.source_path()

    def lookup_in_class_path(self, relative_path: str) -> FoundFile | None:
        """Return the first classpath artifact at ``relative_path``."""
        return self._index.lookup(relative_path)

    def classes_under(self, path: str) -> list[str]:
        return classes_under(path, self._diagnostics)

    def classes_in_dynamic_package(self, prefix: str) -> set[str]:
        """Return classpath classes whose dotted name starts with ``prefix``.

        Unsupported classpath files are skipped.
        """
        searchable = [
            entry.path for entry in self._index.entries() if entry.kind != KIND_UNSUPPORTED
        ]
        return classes_in_dynamic_package(prefix, searchable, self._diagnostics)

    def output_dir(self) -> str:
        return resolve_output_dir(
            self._config.output_dir, self._config.output_jar, self._diagnostics
        )

    def extension_for(self, rep: str) -> str:
        return extension_for(rep)

    def output_path_for(self, class_name: str, rep: str | None = None) -> str | None:
        """Return the output file path of ``class_name`` for ``rep``.

        Defaults to the configured output format; ``none`` yields None.
        """
        return output_path_for(
            class_name,
            rep if rep is not None else self._config.output_format,
            output_dir=self._config.output_dir,
            output_jar=self._config.output_jar,
            diagnostics=self._diagnostics,
        )

    def source_for_class(self, class_name: str) -> str:
        """Return the class whose source file declares ``class_name``."""
        return source_for_class(class_name, self._source_to_class_map)

    def source_to_class_map(self) -> dict[str, str] | None:
        return self._source_to_class_map

    def set_source_to_class_map(self, mapping: Mapping[str, str] | None) -> None:
        self._source_to_class_map = dict(mapping) if mapping is not None else None

    def add_to_source_to_class_map(self, key: str, value: str) -> None:
        if self._source_to_class_map is None:
            self._source_to_class_map = {}
        self._source_to_class_map[key] = value
