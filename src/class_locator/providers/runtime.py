"""Provider chain construction from the source precedence selector."""

from __future__ import annotations

from class_locator.classpath import ClasspathIndex
from class_locator.errors import ConfigurationError
from class_locator.providers.base import KIND_CLASS, KIND_JAVA, KIND_JIMPLE, ClassProvider
from class_locator.providers.classfile import ClassFileProvider
from class_locator.providers.java import JavaSourceProvider, SourceMapReader
from class_locator.providers.jimple import JimpleProvider
from class_locator.providers.registry import ProviderChain

SRC_PREC_CLASS = "class"
SRC_PREC_ONLY_CLASS = "only-class"
SRC_PREC_INTERMEDIATE = "intermediate"
SRC_PREC_SOURCE = "source"

SRC_PRECEDENCES: dict[str, tuple[str, ...]] = {
    SRC_PREC_CLASS: (KIND_CLASS, KIND_JIMPLE, KIND_JAVA),
    SRC_PREC_ONLY_CLASS: (KIND_CLASS,),
    SRC_PREC_INTERMEDIATE: (KIND_JIMPLE, KIND_CLASS, KIND_JAVA),
    SRC_PREC_SOURCE: (KIND_JAVA, KIND_CLASS, KIND_JIMPLE),
}
_SRC_PREC_ALIASES = {
    "jimple": SRC_PREC_INTERMEDIATE,
    "java": SRC_PREC_SOURCE,
}


def normalize_src_prec(src_prec: str) -> str:
    """Return the canonical selector, raising ConfigurationError when unsupported."""
    selector = _SRC_PREC_ALIASES.get(src_prec, src_prec)
    if selector not in SRC_PRECEDENCES:
        supported = ", ".join(SRC_PRECEDENCES)
        raise ConfigurationError(
            f"Source precedence '{src_prec}' is not supported; use one of {supported}."
        )
    return selector


def build_provider_chain(
    src_prec: str,
    index: ClasspathIndex,
    source_map: SourceMapReader | None = None,
) -> ProviderChain:
    """Build the provider chain for a precedence selector."""
    order = SRC_PRECEDENCES[normalize_src_prec(src_prec)]
    available: dict[str, ClassProvider] = {
        KIND_CLASS: ClassFileProvider(index),
        KIND_JIMPLE: JimpleProvider(index),
        KIND_JAVA: JavaSourceProvider(index, source_map),
    }
    chain = ProviderChain()
    for kind in order:
        chain.register(available[kind])
    return chain
