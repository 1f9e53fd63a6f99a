from __future__ import annotations

import os
from pathlib import Path

import pytest

from class_locator.config import CliOverrides, load_effective_config
from class_locator.errors import ConfigurationError


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config.project_root == tmp_path.resolve()
    assert config.soot_class_path == ""
    assert config.src_prec == "class"
    assert config.output_format == "jimple"
    assert config.output_dir == "sootOutput"
    assert config.output_jar is False
    assert config.diagnostics_path is None


def test_merge_order_defaults_then_file_then_cli(tmp_path: Path) -> None:
    (tmp_path / "class_locator.toml").write_text(
        "\n".join(
            [
                "[classpath]",
                'entries = ["lib/rt.jar", "classes"]',
                'src_prec = "intermediate"',
                "",
                "[output]",
                'format = "class"',
                'dir = "build"',
                "",
                "[diagnostics]",
                'log_path = "logs/diagnostics.jsonl"',
            ]
        ),
        encoding="utf-8",
    )
    overrides = CliOverrides(src_prec="source", output_jar=True)

    config = load_effective_config(tmp_path, overrides)

    assert config.soot_class_path == os.pathsep.join(["lib/rt.jar", "classes"])
    assert config.src_prec == "source"
    assert config.output_format == "class"
    assert config.output_dir == "build"
    assert config.output_jar is True
    assert config.diagnostics_path == (tmp_path / "logs" / "diagnostics.jsonl").resolve()


def test_string_class_path_and_public_snapshot(tmp_path: Path) -> None:
    (tmp_path / "class_locator.toml").write_text(
        "\n".join(["[classpath]", 'entries = "a.jar"']),
        encoding="utf-8",
    )

    snapshot = load_effective_config(tmp_path).to_public_dict()

    assert snapshot["classpath"] == {"soot_class_path": "a.jar", "src_prec": "class"}
    assert snapshot["output"] == {"format": "jimple", "dir": "sootOutput", "jar": False}
    assert snapshot["diagnostics"] == {"log_path": None}


def test_cli_class_path_override_wins(tmp_path: Path) -> None:
    (tmp_path / "class_locator.toml").write_text(
        "\n".join(["[classpath]", 'entries = "a.jar"']),
        encoding="utf-8",
    )

    config = load_effective_config(tmp_path, CliOverrides(soot_class_path=""))

    assert config.soot_class_path == ""


def test_invalid_field_type_names_the_field(tmp_path: Path) -> None:
    (tmp_path / "class_locator.toml").write_text(
        "\n".join(["[output]", 'jar = "yes"']),
        encoding="utf-8",
    )

    with pytest.raises(ConfigurationError, match="output.jar"):
        load_effective_config(tmp_path)


def test_invalid_section_type_raises_value_error(tmp_path: Path) -> None:
    (tmp_path / "class_locator.toml").write_text('classpath = "not-a-table"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="section 'classpath'"):
        load_effective_config(tmp_path)


def test_invalid_entries_type(tmp_path: Path) -> None:
    (tmp_path / "class_locator.toml").write_text(
        "\n".join(["[classpath]", "entries = [1, 2]"]),
        encoding="utf-8",
    )

    with pytest.raises(ConfigurationError, match="classpath.entries"):
        load_effective_config(tmp_path)


def test_malformed_toml_is_a_configuration_error(tmp_path: Path) -> None:
    (tmp_path / "class_locator.toml").write_text("[classpath\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid TOML"):
        load_effective_config(tmp_path)
