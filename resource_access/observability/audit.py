"""Audit logging interfaces and implementations for resource access.

This module provides the AuditSink abstract interface for recording resource
operations, along with concrete implementations writing JSON lines to a file
or to stdout.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from resource_access.models import AuditEvent


class AuditSink(ABC):
    """Abstract interface for audit logging.

    The repository reports every resolution, materialization, read and
    enumeration through an AuditSink, plus an "error" event for each failure
    before the failure is re-raised.
    """

    @abstractmethod
    def log(self, event: AuditEvent) -> None:
        """Record an audit event.

        Args:
            event: The AuditEvent to record, containing timestamp, operation kind,
                   logical name, and operation-specific details.
        """
        pass


def _to_json_line(event: AuditEvent) -> str:
    # Single line, no pretty printing
    return json.dumps(event.to_dict(), separators=(',', ':'))


class JSONLAuditSink(AuditSink):
    """Writes audit events to a JSONL (JSON Lines) file.

    Each audit event is serialized as a single JSON line and appended to the log file.

    Example log file content:
        {"ts":"2024-01-01T12:00:00","kind":"enumerate","name":"io/app",...}
        {"ts":"2024-01-01T12:00:01","kind":"read","name":"io/app/readme.txt",...}
    """

    def __init__(self, log_path: Path):
        """Initialize JSONLAuditSink with log file path.

        Args:
            log_path: Path to the JSONL log file. Parent directories will be created
                     if they don't exist.
        """
        self.log_path = Path(log_path)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, event: AuditEvent) -> None:
        """Append audit event as a JSON line to the log file.

        Raises:
            OSError: If the log file cannot be written to.
        """
        with open(self.log_path, 'a', encoding='utf-8') as f:
            f.write(_to_json_line(event) + '\n')


class StdoutAuditSink(AuditSink):
    """Writes audit events to stdout, one JSON line per event."""

    def log(self, event: AuditEvent) -> None:
        print(_to_json_line(event))
