"""Command line entrypoint for classpath queries."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from class_locator.config import CliOverrides, load_effective_config
from class_locator.errors import ConfigurationError, LocatorError
from class_locator.locator import SourceLocator
from class_locator.logging import DiagnosticLog


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for locator queries."""
    parser = argparse.ArgumentParser(prog="class-locator")
    parser.add_argument("--project-root", required=False, default=".")
    parser.add_argument("--classpath", "--cp", dest="classpath", required=False, default=None)
    parser.add_argument("--src-prec", required=False, default=None)
    parser.add_argument("--output-dir", required=False, default=None)
    parser.add_argument("--output-format", required=False, default=None)
    parser.add_argument("--output-jar", choices=("true", "false"), required=False, default=None)
    parser.add_argument("--diagnostics-log", required=False, default=None)

    commands = parser.add_subparsers(dest="command", required=True)
    find = commands.add_parser("find", help="Locate the source of one class.")
    find.add_argument("class_name")
    listing = commands.add_parser("list", help="List classes under a directory or archive.")
    listing.add_argument("path")
    package = commands.add_parser("package", help="List classpath classes under a prefix.")
    package.add_argument("prefix")
    output = commands.add_parser("output-path", help="Compute the output file of a class.")
    output.add_argument("class_name")
    output.add_argument("--format", dest="rep", required=False, default=None)
    commands.add_parser("classpath", help="Show the resolved classpath.")
    return parser


def create_locator(
    project_root: str,
    cli_overrides: CliOverrides | None = None,
    diagnostics_stream: TextIO | None = None,
) -> SourceLocator:
    """Create a configured locator instance."""
    config = load_effective_config(Path(project_root), overrides=cli_overrides)
    diagnostics = DiagnosticLog(path=config.diagnostics_path, stream=diagnostics_stream)
    return SourceLocator(config=config, diagnostics=diagnostics)


def run_command(locator: SourceLocator, args: argparse.Namespace) -> dict[str, object]:
    """Execute one parsed subcommand and return its JSON payload."""
    if args.command == "find":
        source = locator.get_class_source(args.class_name)
        return {
            "class_name": args.class_name,
            "found": source is not None,
            "kind": source.kind if source is not None else None,
            "origin": source.origin if source is not None else None,
        }
    if args.command == "list":
        return {"path": args.path, "classes": locator.classes_under(args.path)}
    if args.command == "package":
        return {
            "prefix": args.prefix,
            "classes": sorted(locator.classes_in_dynamic_package(args.prefix)),
        }
    if args.command == "output-path":
        rep = args.rep or locator.config.output_format
        return {
            "class_name": args.class_name,
            "format": rep,
            "path": locator.output_path_for(args.class_name, rep),
        }
    return {
        "entries": [
            {"path": entry.path, "kind": entry.kind} for entry in locator.class_path_entries()
        ],
        "source_path": locator.source_path(),
    }


def main(argv: list[str] | None = None, out_stream: TextIO | None = None) -> int:
    """Entrypoint for the class-locator process."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    out = out_stream or sys.stdout
    output_jar: bool | None = None
    if args.output_jar == "true":
        output_jar = True
    if args.output_jar == "false":
        output_jar = False
    overrides = CliOverrides(
        soot_class_path=args.classpath,
        src_prec=args.src_prec,
        output_format=args.output_format,
        output_dir=args.output_dir,
        output_jar=output_jar,
        diagnostics_path=Path(args.diagnostics_log) if args.diagnostics_log else None,
    )
    try:
        locator = create_locator(
            args.project_root, cli_overrides=overrides, diagnostics_stream=sys.stderr
        )
        payload = run_command(locator, args)
    except (LocatorError, ConfigurationError) as exc:
        error = {"code": type(exc).__name__, "message": str(exc)}
        out.write(f"{json.dumps({'error': error}, sort_keys=True)}\n")
        return getattr(exc, "status", 1)
    out.write(f"{json.dumps(payload, sort_keys=True)}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
