"""
Tests for structured logging helpers
"""

from blogql.logging import (
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
    assert all(len(request_id) == 14 for request_id in ids)
    assert all("=" not in request_id for request_id in ids)


def test_request_context_round_trip():
    set_request_context(request_id="req-123")
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
    set_request_context(request_id="req-456")
    try:
        event = RequestContextFilter()(None, "info", {"event": "hello"})
    finally:
        clear_request_context()

    assert event == {"event": "hello", "request_id": "req-456"}


def test_request_context_filter_without_request():
    event = RequestContextFilter()(None, "info", {"event": "hello"})

    assert event == {"event": "hello"}


def test_configure_logging_in_both_modes():
    for debug in (True, False):
        configure_logging(debug=debug)
        logger = get_logger(__name__)
        logger.info("Message with data", key="value", count=42)
