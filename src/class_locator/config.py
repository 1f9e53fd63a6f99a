"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from class_locator.errors import ConfigurationError

CONFIG_FILE_NAME = "class_locator.toml"
DEFAULT_OUTPUT_DIR = "sootOutput"
DEFAULT_OUTPUT_FORMAT = "jimple"
DEFAULT_SRC_PREC = "class"


@dataclass(slots=True, frozen=True)
class LocatorConfig:
    """Fully merged locator configuration."""

    project_root: Path
    soot_class_path: str
    src_prec: str
    output_format: str
    output_dir: str
    output_jar: bool
    diagnostics_path: Path | None = None

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "project_root": str(self.project_root),
            "classpath": {
                "soot_class_path": self.soot_class_path,
                "src_prec": self.src_prec,
            },
            "output": {
                "format": self.output_format,
                "dir": self.output_dir,
                "jar": self.output_jar,
            },
            "diagnostics": {
                "log_path": str(self.diagnostics_path) if self.diagnostics_path else None,
            },
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    soot_class_path: str | None = None
    src_prec: str | None = None
    output_format: str | None = None
    output_dir: str | None = None
    output_jar: bool | None = None
    diagnostics_path: Path | None = None


def default_config(project_root: Path) -> LocatorConfig:
    """Build default config for a given project root."""
    return LocatorConfig(
        project_root=project_root.resolve(),
        soot_class_path="",
        src_prec=DEFAULT_SRC_PREC,
        output_format=DEFAULT_OUTPUT_FORMAT,
        output_dir=DEFAULT_OUTPUT_DIR,
        output_jar=False,
    )


def load_config_file(project_root: Path) -> dict[str, object]:
    """Load optional class_locator.toml from the project root."""
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        try:
            payload = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"{CONFIG_FILE_NAME} is not valid TOML: {exc}") from exc
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"Config section '{key}' must be a table.")
    return value


def _class_path_value(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return os.pathsep.join(value)
    raise ConfigurationError(
        "Config field 'classpath.entries' must be a string or a list of strings."
    )


def _optional_str(value: object, name: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"Config field '{name}' must be a string.")
    return value


def _optional_bool(value: object, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"Config field '{name}' must be a boolean.")
    return value


def merge_config(
    base: LocatorConfig, payload: dict[str, object], overrides: CliOverrides
) -> LocatorConfig:
    """Merge defaults, project config, then CLI/startup overrides."""
    classpath_payload = _get_table(payload, "classpath")
    output_payload = _get_table(payload, "output")
    diagnostics_payload = _get_table(payload, "diagnostics")

    soot_class_path = base.soot_class_path
    if "entries" in classpath_payload:
        soot_class_path = _class_path_value(classpath_payload["entries"])

    diagnostics_path = base.diagnostics_path
    raw_log_path = _optional_str(diagnostics_payload.get("log_path"), "diagnostics.log_path", "")
    if raw_log_path:
        diagnostics_path = (base.project_root / raw_log_path).resolve()

    merged = LocatorConfig(
        project_root=base.project_root,
        soot_class_path=soot_class_path,
        src_prec=_optional_str(
            classpath_payload.get("src_prec"), "classpath.src_prec", base.src_prec
        ),
        output_format=_optional_str(
            output_payload.get("format"), "output.format", base.output_format
        ),
        output_dir=_optional_str(output_payload.get("dir"), "output.dir", base.output_dir),
        output_jar=_optional_bool(output_payload.get("jar"), "output.jar", base.output_jar),
        diagnostics_path=diagnostics_path,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: LocatorConfig, overrides: CliOverrides) -> LocatorConfig:
    """Apply startup overrides at highest precedence."""
    return LocatorConfig(
        project_root=config.project_root,
        soot_class_path=(
            overrides.soot_class_path
            if overrides.soot_class_path is not None
            else config.soot_class_path
        ),
        src_prec=overrides.src_prec or config.src_prec,
        output_format=overrides.output_format or config.output_format,
        output_dir=(
            overrides.output_dir if overrides.output_dir is not None else config.output_dir
        ),
        output_jar=(
            overrides.output_jar if overrides.output_jar is not None else config.output_jar
        ),
        diagnostics_path=(
            overrides.diagnostics_path.resolve()
            if overrides.diagnostics_path is not None
            else config.diagnostics_path
        ),
    )


def load_effective_config(
    project_root: Path, overrides: CliOverrides | None = None
) -> LocatorConfig:
    """Load effective config using merge order defaults -> project config -> overrides."""
    resolved_root = project_root.resolve()
    base = default_config(resolved_root)
    payload = load_config_file(resolved_root)
    return merge_config(base, payload, overrides or CliOverrides())
