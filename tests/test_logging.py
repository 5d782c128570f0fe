import io
import json
import logging

import pytest

from tle_stats.core import decode
from tle_stats.logging import configure_logging, get_logger, log_context, resolve_level
from tle_samples import ISS, join


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("tle_stats")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _setup_logger(level="INFO", fmt="json"):
    stream = io.StringIO()
    configure_logging(level=level, stream=stream, force=True, fmt=fmt)
    return get_logger("tests"), stream


def test_json_logging_includes_context_and_extras():
    logger, stream = _setup_logger()
    with log_context(source="file", origin="/tmp/active.tle"):
        logger.info("report_ready", extra={"total": 3, "years": 2})
    payload = json.loads(stream.getvalue())
    assert payload["message"] == "report_ready"
    assert payload["logger"] == "tle_stats.tests"
    assert payload["context"] == {"source": "file", "origin": "/tmp/active.tle"}
    assert payload["extra"] == {"total": 3, "years": 2}


def test_redaction_of_credential_fields():
    logger, stream = _setup_logger()
    with log_context(source="url", apiKey="abc123"):
        logger.info(
            "request",
            extra={"nested": {"token": "abc123", "visible": "ok"}, "params": [{"password": "pw", "group": "active"}]},
        )
    payload = json.loads(stream.getvalue())
    assert payload["context"] == {"source": "url", "apiKey": "***REDACTED***"}
    assert payload["extra"]["nested"] == {"token": "***REDACTED***", "visible": "ok"}
    assert payload["extra"]["params"] == [{"password": "***REDACTED***", "group": "active"}]


def test_origin_context_is_not_redacted():
    logger, stream = _setup_logger()
    with log_context(source="file", origin="/data/secret-stations.tle"):
        logger.info("loaded")
    payload = json.loads(stream.getvalue())
    assert payload["context"]["origin"] == "/data/secret-stations.tle"


def test_decoder_logs_skipped_frames_at_debug():
    _, stream = _setup_logger(level="DEBUG")
    decode(join(ISS, ("SHORT", "1 2", "2 1")))
    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    skipped = [e for e in events if e["message"] == "frame_skipped"]
    assert skipped == [skipped[0]]
    assert skipped[0]["extra"] == {"offset": 3, "reason": "short_line"}
    assert events[-1]["message"] == "decode_complete"


def test_text_format():
    logger, stream = _setup_logger(fmt="text")
    logger.warning("careful")
    assert stream.getvalue() == "WARNING: careful\n"


def test_unknown_format_rejected():
    with pytest.raises(ValueError):
        configure_logging(fmt="xml", force=True)


def test_resolve_level(monkeypatch):
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(30) == logging.WARNING
    assert resolve_level("bogus") == logging.INFO
    monkeypatch.setenv("TLE_STATS_LOG_LEVEL", "ERROR")
    assert resolve_level(None) == logging.ERROR


def test_get_logger_namespaces():
    assert get_logger().name == "tle_stats"
    assert get_logger("cli").name == "tle_stats.cli"
    assert get_logger("tle_stats.core").name == "tle_stats.core"
