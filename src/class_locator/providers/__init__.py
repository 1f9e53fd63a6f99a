"""Class providers and their precedence chain."""

from .base import KIND_CLASS, KIND_JAVA, KIND_JIMPLE, ClassProvider, ClassSource
from .classfile import ClassFileProvider
from .java import JavaSourceProvider
from .jimple import JimpleProvider
from .loaders import DirectoryResourceLoader, ResourceLoader, ResourceLoaderProvider
from .registry import ProviderChain, first_hit
from .runtime import (
    SRC_PREC_CLASS,
    SRC_PREC_INTERMEDIATE,
    SRC_PREC_ONLY_CLASS,
    SRC_PREC_SOURCE,
    SRC_PRECEDENCES,
    build_provider_chain,
    normalize_src_prec,
)

__all__ = [
    "ClassFileProvider",
    "ClassProvider",
    "ClassSource",
    "DirectoryResourceLoader",
    "JavaSourceProvider",
    "JimpleProvider",
    "KIND_CLASS",
    "KIND_JAVA",
    "KIND_JIMPLE",
    "ProviderChain",
    "ResourceLoader",
    "ResourceLoaderProvider",
    "SRC_PRECEDENCES",
    "SRC_PREC_CLASS",
    "SRC_PREC_INTERMEDIATE",
    "SRC_PREC_ONLY_CLASS",
    "SRC_PREC_SOURCE",
    "build_provider_chain",
    "first_hit",
    "normalize_src_prec",
]
