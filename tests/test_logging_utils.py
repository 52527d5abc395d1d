import logging

from grouplist.utils.logging import ensure_console_logger, get_logger


def _named(logger: logging.Logger, name: str) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "name", None) == name]


def test_get_logger_namespaces_children():
    assert get_logger().name == "grouplist"
    assert get_logger("grouplist").name == "grouplist"
    assert get_logger("grouplist.model").name == "grouplist.model"
    assert get_logger("cli").name == "grouplist.cli"


def test_console_handler_installed_once_and_relevelled():
    logger = logging.getLogger("grouplist.test.console")
    try:
        ensure_console_logger(logger, "test-console", level=logging.WARNING)
        ensure_console_logger(logger, "test-console", level=logging.DEBUG)

        handlers = _named(logger, "test-console")
        assert len(handlers) == 1
        assert logger.level == logging.DEBUG
        assert handlers[0].level == logging.DEBUG

        ensure_console_logger(logger, "test-console", level=logging.ERROR)
        assert logger.level == logging.ERROR
        assert handlers[0].level == logging.ERROR
    finally:
        for handler in _named(logger, "test-console"):
            logger.removeHandler(handler)
