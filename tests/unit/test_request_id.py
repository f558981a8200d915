"""Tests for request id sanitization and log correlation."""

import logging
import uuid

from clinic_portal.middleware.request_id import REQUEST_ID_MAX_LENGTH, sanitize_request_id
from clinic_portal.shared.telemetry import RequestIdFilter, request_id_var


def test_safe_id_is_kept() -> None:
    assert sanitize_request_id(" abc-123_X ") == "abc-123_X"


def test_unsafe_or_missing_id_is_replaced() -> None:
    for raw in (None, "", "a b", "id\nforged-log-line", "x" * (REQUEST_ID_MAX_LENGTH + 1)):
        replaced = sanitize_request_id(raw)
        assert str(uuid.UUID(replaced)) == replaced


def test_log_records_carry_request_id() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    token = request_id_var.set("req-1")
    try:
        RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req-1"

    outside = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    RequestIdFilter().filter(outside)
    assert outside.request_id == "-"
