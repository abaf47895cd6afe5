"""Tests for audit logger module."""

import json
from pathlib import Path

import pytest

from goexphash.audit import generate_run_id
from goexphash.audit.logger import AuditLogger


@pytest.fixture
def logger(tmp_path: Path) -> AuditLogger:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates the log file and sets initial state."""
    assert logger.log_path.exists()
    assert logger.current_stage is None
    assert logger.run_id == "test_run"


@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger) -> None:
    """Test event() writes a valid JSONL line with correct envelope."""
    logger.event("test_event", data={"key": "value"}, level="INFO", file="a.go")

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "test_event"
    assert evt["level"] == "INFO"
    assert evt["data"] == {"key": "value"}
    assert evt["file"] == "a.go"
    assert evt["ts"].endswith("Z")


@pytest.mark.unit
def test_logger_rejects_unknown_level(logger: AuditLogger) -> None:
    """Test levels are restricted to the known set."""
    with pytest.raises(ValueError, match="log level"):
        logger.event("x", level="TRACE")


@pytest.mark.unit
def test_logger_stage_context(logger: AuditLogger) -> None:
    """Test stage_started sets and stage_finished clears the current stage."""
    logger.stage_started("stage1_parse")
    logger.file_parsed("a.go", "p", 3)
    logger.stage_finished("stage1_parse", duration_seconds=0.1, counters={"files": 1})
    logger.event("after")

    events = _read_events(logger.log_path)

    assert [e["stage"] for e in events] == [
        "stage1_parse",
        "stage1_parse",
        "stage1_parse",
        None,
    ]
    assert events[1]["file"] == "a.go"
    assert events[1]["data"] == {"package": "p", "declarations": 3}
    assert events[2]["data"]["counters"] == {"files": 1}


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "kwargs", "expected_event", "expected_level"),
    [
        ("run_started", {"target": "pkg", "parameters": {"k": 1}}, "run_started", "INFO"),
        ("run_finished", {"status": "success", "duration_seconds": 1.5}, "run_finished", "INFO"),
        ("stage_started", {"stage": "s1"}, "stage_started", "INFO"),
        (
            "stage_finished",
            {"stage": "s1", "duration_seconds": 2.0, "counters": {"n": 5}},
            "stage_finished",
            "INFO",
        ),
        ("file_parsed", {"file": "a.go", "package": "p", "declarations": 1}, "file_parsed", "INFO"),
        ("descriptor", {"text": "const A = 1", "kind": "single-const"}, "descriptor", "DEBUG"),
        ("error", {"exception_class": "ParseError", "message": "bad"}, "error", "ERROR"),
    ],
)
def test_logger_convenience_methods(
    logger: AuditLogger,
    method: str,
    kwargs: dict,
    expected_event: str,
    expected_level: str,
) -> None:
    """Test all convenience methods produce correct event type and level."""
    getattr(logger, method)(**kwargs)

    events = _read_events(logger.log_path)

    assert len(events) == 1
    assert events[0]["event"] == expected_event
    assert events[0]["level"] == expected_level


@pytest.mark.unit
def test_logger_run_events_payload(logger: AuditLogger) -> None:
    """Test run events carry target, tool version and fingerprint."""
    logger.run_started("example.com/lib", {"verbose": False})
    logger.run_finished("success", 0.5, fingerprint="ab" * 32)

    started, finished = _read_events(logger.log_path)

    assert started["data"]["target"] == "example.com/lib"
    assert "tool_version" in started["data"]
    assert finished["data"] == {"status": "success", "duration_seconds": 0.5, "fingerprint": "ab" * 32}


@pytest.mark.unit
def test_logger_close_and_context_manager(tmp_path: Path) -> None:
    """Test close() flushes and context manager auto-closes."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="r1", log_path=log_path) as lg:
        lg.event("inside")

    with AuditLogger(run_id="r2", log_path=log_path) as lg2:
        lg2.event("second")

    events = _read_events(log_path)
    assert [e["run_id"] for e in events] == ["r1", "r2"]


@pytest.mark.unit
def test_logger_creates_parent_directories(tmp_path: Path) -> None:
    """Test logger creates nested parent directories."""
    nested = tmp_path / "a" / "b" / "events.jsonl"
    lg = AuditLogger(run_id="test", log_path=nested)
    lg.event("test")
    lg.close()

    assert nested.exists()
    assert len(_read_events(nested)) == 1


@pytest.mark.unit
def test_generate_run_id_format_and_uniqueness() -> None:
    """Test run ID has correct format and successive calls are unique."""
    rid1 = generate_run_id()
    rid2 = generate_run_id()

    parts = rid1.split("__")
    assert len(parts) == 2
    assert parts[0].endswith("Z")
    assert len(parts[1]) == 8
    assert rid1 != rid2
