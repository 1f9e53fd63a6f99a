"""Output file paths for generated artifacts."""

from __future__ import annotations

import os
from pathlib import Path

from class_locator.config import DEFAULT_OUTPUT_DIR
from class_locator.errors import CompilationAbortedError
from class_locator.logging import DiagnosticLog
from class_locator.naming import package_name, short_name

OUTPUT_FORMAT_NONE = "none"
OUTPUT_FORMAT_CLASS = "class"
OUTPUT_FORMAT_DAVA = "dava"

OUTPUT_EXTENSIONS: dict[str, str] = {
    "baf": ".baf",
    "b": ".b",
    "jimple": ".jimple",
    "jimp": ".jimp",
    "shimple": ".shimple",
    "shimp": ".shimp",
    "grimp": ".grimp",
    "grimple": ".grimple",
    OUTPUT_FORMAT_CLASS: ".class",
    OUTPUT_FORMAT_DAVA: ".java",
    "jasmin": ".jasmin",
    "xml": ".xml",
}
_OUTPUT_FORMAT_ALIASES = {
    "intermediate": "jimple",
    "intermediate-short": "jimp",
    "ssa-intermediate": "shimple",
    "ssa-intermediate-short": "shimp",
    "class-file": OUTPUT_FORMAT_CLASS,
    "decompiled": OUTPUT_FORMAT_DAVA,
    "assembler": "jasmin",
}


def normalize_output_format(rep: str) -> str:
    """Return the canonical output tag for ``rep``."""
    output_format = _OUTPUT_FORMAT_ALIASES.get(rep, rep)
    if output_format != OUTPUT_FORMAT_NONE and output_format not in OUTPUT_EXTENSIONS:
        raise CompilationAbortedError(f"Unknown output format: {rep}")
    return output_format


def extension_for(rep: str) -> str:
    """Return the file extension for an output format."""
    extension = OUTPUT_EXTENSIONS.get(_OUTPUT_FORMAT_ALIASES.get(rep, rep))
    if extension is None:
        raise CompilationAbortedError(f"No file extension for output format: {rep}")
    return extension


def resolve_output_dir(
    output_dir: str, output_jar: bool, diagnostics: DiagnosticLog | None = None
) -> str:
    """Return the output directory, creating it unless output goes to an archive."""
    resolved = output_dir or DEFAULT_OUTPUT_DIR
    if not output_jar:
        ensure_directory(Path(resolved), diagnostics)
    return resolved


def ensure_directory(path: Path, diagnostics: DiagnosticLog | None = None) -> None:
    """Create ``path`` and its parents, aborting when that is impossible."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        if diagnostics is not None:
            diagnostics.error("mkdir_failed", f"Unable to create {path}", path=str(path))
        raise CompilationAbortedError(f"Unable to create {path}: {exc}") from exc


def output_path_for(
    class_name: str,
    rep: str,
    *,
    output_dir: str,
    output_jar: bool,
    diagnostics: DiagnosticLog | None = None,
) -> str | None:
    """Return where the ``rep`` artifact of ``class_name`` is written.

    Archive output drops the leading output directory. Decompiled sources go
    to ``dava/src/<package>/`` next to a ``dava/classes`` directory, both
    created even for archive output.
    """
    output_format = normalize_output_format(rep)
    if output_format == OUTPUT_FORMAT_NONE:
        return None

    prefix = "" if output_jar else resolve_output_dir(output_dir, output_jar, diagnostics)
    if prefix and not prefix.endswith(os.sep):
        prefix += os.sep

    if output_format != OUTPUT_FORMAT_DAVA:
        if output_format == OUTPUT_FORMAT_CLASS:
            name = class_name.replace(".", os.sep)
        else:
            name = class_name
        path = prefix + name + extension_for(output_format)
        if not output_jar:
            ensure_directory(Path(path).parent, diagnostics)
        return path

    dava_dir = prefix + "dava" + os.sep
    source_dir = dava_dir + "src" + os.sep
    package = package_name(class_name)
    if package:
        source_dir += package.replace(".", os.sep) + os.sep
    ensure_directory(Path(dava_dir + "classes"), diagnostics)
    ensure_directory(Path(source_dir), diagnostics)
    return source_dir + short_name(class_name) + extension_for(OUTPUT_FORMAT_DAVA)
