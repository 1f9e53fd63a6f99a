from __future__ import annotations

import io
import json
from pathlib import Path

from class_locator.logging import DiagnosticLog


def test_jsonl_schema_and_sorted_metadata(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "diagnostics.jsonl"
    diagnostics = DiagnosticLog(path=path)

    diagnostics.warn("unsupported_classpath_entry", "not an archive", path="x.txt", order=2)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    event = json.loads(lines[0])
    assert set(event.keys()) == {"code", "level", "message", "metadata", "timestamp"}
    assert event["level"] == "warning"
    assert event["code"] == "unsupported_classpath_entry"
    assert list(event["metadata"].keys()) == ["order", "path"]
    assert event["timestamp"].endswith("Z")


def test_warn_once_deduplicates_by_code_and_key() -> None:
    diagnostics = DiagnosticLog()

    assert diagnostics.warn_once("a", "code_one", "first") is not None
    assert diagnostics.warn_once("a", "code_one", "again") is None
    assert diagnostics.warn_once("a", "code_two", "other code") is not None

    assert [event.message for event in diagnostics.events] == ["first", "other code"]


def test_stream_echo_prefixes_level() -> None:
    stream = io.StringIO()
    diagnostics = DiagnosticLog(stream=stream)

    diagnostics.error("mkdir_failed", "Unable to create out")

    assert stream.getvalue() == "Error: Unable to create out\n"
