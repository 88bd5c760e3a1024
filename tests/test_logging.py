"""
Tests for structured logging helpers
"""

from customers_api.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(50)}

    assert len(ids) == 50
    assert all(len(i) == 14 for i in ids)


def test_request_context_round_trip():
    request_id = set_request_context("req-123")
    assert request_id == "req-123"
    assert get_request_id() == "req-123"

    clear_request_context()
    assert get_request_id() is None


def test_set_request_context_generates_id():
    request_id = set_request_context()
    try:
        assert request_id
        assert get_request_id() == request_id
    finally:
        clear_request_context()


def test_request_context_filter_adds_request_id():
    processor = RequestContextFilter()

    set_request_context("req-456")
    try:
        event = processor(None, "info", {"event": "hello"})
    finally:
        clear_request_context()

    assert event == {"event": "hello", "request_id": "req-456"}
    assert processor(None, "info", {"event": "bye"}) == {"event": "bye"}


def test_configure_logging_json(capsys):
    configure_logging(debug=False)
    logger = get_logger("customers_api.tests")

    logger.info("Customer registered", customer_id="abc")

    out = capsys.readouterr().out
    assert "Customer registered" in out
    assert "abc" in out
