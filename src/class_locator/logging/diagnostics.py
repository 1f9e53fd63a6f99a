"""Diagnostic channel for warnings and fatal conditions."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TextIO

LEVEL_WARNING = "warning"
LEVEL_ERROR = "error"


@dataclass(slots=True, frozen=True)
class DiagnosticEvent:
    """Single diagnostic emitted while resolving or enumerating classes."""

    timestamp: str
    level: str
    code: str
    message: str
    metadata: dict[str, object]


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DiagnosticLog:
    """In-memory diagnostic log with optional JSONL file and text stream sinks."""

    def __init__(self, path: Path | None = None, stream: TextIO | None = None) -> None:
        self._path = path
        self._stream = stream
        self._events: list[DiagnosticEvent] = []
        self._seen_keys: set[str] = set()
        if self._path is not None:
            self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path | None:
        """Return on-disk JSONL path, if any."""
        return self._path

    @property
    def events(self) -> tuple[DiagnosticEvent, ...]:
        """Return events emitted through this log, oldest first."""
        return tuple(self._events)

    def emit(self, level: str, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        """Record one event and forward it to the configured sinks."""
        event = DiagnosticEvent(
            timestamp=utc_timestamp(),
            level=level,
            code=code,
            message=message,
            metadata={key: metadata[key] for key in sorted(metadata)},
        )
        self._events.append(event)
        if self._path is not None:
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(asdict(event), sort_keys=True))
                handle.write("\n")
        if self._stream is not None:
            self._stream.write(f"{level.capitalize()}: {message}\n")
            self._stream.flush()
        return event

    def warn(self, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        """Emit a warning."""
        return self.emit(LEVEL_WARNING, code, message, **metadata)

    def error(self, code: str, message: str, **metadata: object) -> DiagnosticEvent:
        """Emit an error that precedes a fatal failure."""
        return self.emit(LEVEL_ERROR, code, message, **metadata)

    def warn_once(
        self, key: str, code: str, message: str, **metadata: object
    ) -> DiagnosticEvent | None:
        """Emit a warning only the first time ``key`` is seen."""
        dedupe_key = f"{code}:{key}"
        if dedupe_key in self._seen_keys:
            return None
        self._seen_keys.add(dedupe_key)
        return self.warn(code, message, **metadata)

    def codes(self) -> tuple[str, ...]:
        return tuple(event.code for event in self._events)

