from __future__ import annotations

import pytest

from class_locator.errors import CompilationAbortedError
from class_locator.output import extension_for, normalize_output_format


@pytest.mark.parametrize(
    ("rep", "extension"),
    [
        ("baf", ".baf"),
        ("b", ".b"),
        ("jimple", ".jimple"),
        ("jimp", ".jimp"),
        ("shimple", ".shimple"),
        ("shimp", ".shimp"),
        ("grimp", ".grimp"),
        ("grimple", ".grimple"),
        ("class", ".class"),
        ("dava", ".java"),
        ("jasmin", ".jasmin"),
        ("xml", ".xml"),
    ],
)
def test_extension_table(rep: str, extension: str) -> None:
    assert extension_for(rep) == extension


@pytest.mark.parametrize(
    ("alias", "canonical"),
    [
        ("intermediate", "jimple"),
        ("intermediate-short", "jimp"),
        ("ssa-intermediate", "shimple"),
        ("ssa-intermediate-short", "shimp"),
        ("class-file", "class"),
        ("decompiled", "dava"),
        ("assembler", "jasmin"),
    ],
)
def test_descriptive_aliases_share_extensions(alias: str, canonical: str) -> None:
    assert normalize_output_format(alias) == canonical
    assert extension_for(alias) == extension_for(canonical)


@pytest.mark.parametrize("rep", ["none", "dex", ""])
def test_extension_query_for_unknown_tag_aborts(rep: str) -> None:
    with pytest.raises(CompilationAbortedError) as error:
        extension_for(rep)

    assert error.value.status == 1


def test_none_is_a_known_output_format() -> None:
    assert normalize_output_format("none") == "none"
