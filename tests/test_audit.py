"""Unit tests for audit sinks."""

import json
from datetime import datetime
from pathlib import Path

import pytest

from resource_access.models import AuditEvent
from resource_access.observability.audit import AuditSink, JSONLAuditSink, StdoutAuditSink


@pytest.fixture
def event() -> AuditEvent:
    return AuditEvent(
        ts=datetime(2024, 1, 1, 12, 0, 0),
        kind="enumerate",
        name="io/app",
        detail={"mode": "list", "count": 3},
    )


class TestAuditSink:
    """Tests for AuditSink abstract interface."""

    def test_abstract_interface(self):
        """Test that AuditSink cannot be instantiated directly."""
        with pytest.raises(TypeError):
            AuditSink()

    def test_log_method_required(self):
        """Test that log method must be implemented."""
        with pytest.raises(TypeError):
            class IncompleteAuditSink(AuditSink):
                pass
            IncompleteAuditSink()


class TestJSONLAuditSink:
    """Tests for JSONLAuditSink."""

    def test_creates_parent_directories(self, temp_dir: Path):
        """Test that missing parent directories are created."""
        log_path = temp_dir / "logs" / "nested" / "audit.jsonl"

        JSONLAuditSink(log_path)

        assert log_path.parent.is_dir()

    def test_appends_one_line_per_event(self, temp_dir: Path, event: AuditEvent):
        """Test that each event is appended as one JSON line."""
        log_path = temp_dir / "audit.jsonl"
        sink = JSONLAuditSink(log_path)

        sink.log(event)
        sink.log(event)

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert AuditEvent.from_dict(json.loads(lines[0])) == event

    def test_compact_json(self, temp_dir: Path, event: AuditEvent):
        """Test that lines carry no pretty-printing whitespace."""
        log_path = temp_dir / "audit.jsonl"

        JSONLAuditSink(log_path).log(event)

        assert '", "' not in log_path.read_text(encoding="utf-8")


class TestStdoutAuditSink:
    """Tests for StdoutAuditSink."""

    def test_prints_json_line(self, capsys, event: AuditEvent):
        """Test that events are printed as JSON lines."""
        StdoutAuditSink().log(event)

        captured = capsys.readouterr()
        data = json.loads(captured.out)
        assert data["kind"] == "enumerate"
        assert data["name"] == "io/app"
        assert data["detail"] == {"mode": "list", "count": 3}
