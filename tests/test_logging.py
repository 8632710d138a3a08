import logging

from moviedb.utils.middleware.logger import RequestIdFilter, request_id_ctx, setup_logging


def make_record() -> logging.LogRecord:
    return logging.LogRecord("moviedb", logging.INFO, __file__, 1, "hello", None, None)


def test_request_id_filter_defaults_to_dash():
    record = make_record()
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


def test_request_id_filter_uses_context_var():
    token = request_id_ctx.set("abc-123")
    try:
        record = make_record()
        RequestIdFilter().filter(record)
        assert record.request_id == "abc-123"
    finally:
        request_id_ctx.reset(token)
    assert request_id_ctx.get() is None


def test_setup_logging_sets_level_without_duplicate_handlers():
    root = logging.getLogger()
    setup_logging("WARNING")
    handlers = list(root.handlers)
    setup_logging("DEBUG")
    assert root.handlers == handlers
    assert root.level == logging.DEBUG
