import logging

from depth_inspector.utils.logger import (
    LoggerMaxLevelFilter,
    TqdmStreamHandler,
    get_logger,
)


def test_package_logger():
    logger = get_logger()

    assert logger.name == "depth_inspector"
    assert not logger.propagate
    assert any(isinstance(h, TqdmStreamHandler) for h in logger.handlers)


def test_max_level_filter():
    max_info = LoggerMaxLevelFilter("info")

    def record(level):
        return logging.LogRecord("x", level, __file__, 1, "msg", None, None)

    assert max_info.filter(record(logging.DEBUG))
    assert max_info.filter(record(logging.INFO))
    assert not max_info.filter(record(logging.WARNING))


def test_info_to_stdout_warnings_to_stderr():
    logger = get_logger()

    stdout = [h for h in logger.handlers if h.level == logging.DEBUG]
    stderr = [h for h in logger.handlers if h.level == logging.WARNING]
    assert len(stdout) == 1 and len(stderr) == 1
    assert any(isinstance(f, LoggerMaxLevelFilter) for f in stdout[0].filters)
    assert not stderr[0].filters

    def record(level):
        return logging.LogRecord("x", level, __file__, 1, "msg", None, None)

    assert stdout[0].filter(record(logging.INFO))
    assert not stdout[0].filter(record(logging.WARNING))
