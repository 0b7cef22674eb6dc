import io
import logging
import sys

import pytest

from solaredge_api.logging import ConsoleLog, SecretFilter


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def test_console_log_quiet_skips_handlers(restore_root_logger):
    log = ConsoleLog(level="INFO", quiet=True).setup()
    assert log.name == "solaredge"
    assert restore_root_logger.handlers == []


def test_console_log_writes_to_stderr_at_level(restore_root_logger):
    ConsoleLog(level="warning").setup()
    assert len(restore_root_logger.handlers) == 1
    handler = restore_root_logger.handlers[0]
    assert handler.stream is sys.stderr
    assert handler.level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_root_logger):
    ConsoleLog(level="chatty").setup()
    assert restore_root_logger.handlers[0].level == logging.INFO


def test_debug_modules_lowered_to_debug():
    target = logging.getLogger("solaredge.api.test-debug")
    try:
        ConsoleLog(level="INFO", quiet=True, debug_modules=["solaredge.api.test-debug"]).setup()
        assert target.level == logging.DEBUG
    finally:
        target.setLevel(logging.NOTSET)


def test_api_key_masked_in_third_party_lines():
    stream = io.StringIO()
    ConsoleLog(level="DEBUG", secrets=["AB+C/1"], stream=stream).setup()

    urllib3_log = logging.getLogger("urllib3.connectionpool")
    urllib3_log.debug(
        '%s://%s:%s "%s %s %s" %s %s',
        "https", "monitoringapi.solaredge.com", 443,
        "GET", "/site/1/details.json?api_key=AB%2BC%2F1", "HTTP/1.1", 200, None,
    )
    logging.getLogger("solaredge.api").info("key is AB+C/1")

    output = stream.getvalue()
    assert "AB%2BC%2F1" not in output
    assert "AB+C/1" not in output
    assert output.count("<hidden>") == 2
    assert "/site/1/details.json?api_key=<hidden>" in output


def test_secret_filter_leaves_other_records_alone():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "site %s ok", (42,), None)
    assert SecretFilter(["SECRET"]).filter(record)
    assert record.getMessage() == "site 42 ok"
    assert record.args == (42,)


def test_secret_filter_without_secrets():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", None, None)
    assert SecretFilter([None, ""]).filter(record)
    assert record.getMessage() == "plain"
