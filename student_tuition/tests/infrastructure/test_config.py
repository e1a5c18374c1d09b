import logging

from student_tuition.config import LOG_FORMAT, configure_logging


def test_configure_logging_installs_single_handler(monkeypatch):
    logger = logging.getLogger("student_tuition")
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "level", logger.level)

    configure_logging(logging.INFO)
    configure_logging(logging.INFO)

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
