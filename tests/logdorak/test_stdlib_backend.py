import logging

import pytest

from logdorak import LogCall, LogLevel, Logger, StdlibBackend
from logdorak.config import TRACE_LEVEL_NAME, TRACE_LEVEL_NUM

NAME = "tests.logdorak.stdlib"


@pytest.fixture
def logger():
    return Logger(NAME, backend=StdlibBackend(NAME))


def test_trace_level_registered():
    assert logging.getLevelName(TRACE_LEVEL_NUM) == TRACE_LEVEL_NAME
    assert TRACE_LEVEL_NUM < logging.DEBUG


@pytest.mark.parametrize(
    "method, levelno",
    [
        ("error", logging.ERROR),
        ("warn", logging.WARNING),
        ("info", logging.INFO),
        ("debug", logging.DEBUG),
        ("trace", TRACE_LEVEL_NUM),
    ],
)
def test_level_mapping(logger, caplog, method, levelno):
    caplog.set_level(TRACE_LEVEL_NUM, logger=NAME)

    getattr(logger, method)("Value: ", 42, "!")

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == levelno
    assert record.name == NAME
    assert record.getMessage() == "Value: 42!"
    assert record.exc_info is None


def test_exception_attached(logger, caplog):
    caplog.set_level(logging.ERROR, logger=NAME)
    try:
        raise ConnectionError("thermostat offline")
    except ConnectionError as exc:
        logger.error("Unable to set the temperature to ", 19, "°C", exc)

    record = caplog.records[0]
    assert record.getMessage() == "Unable to set the temperature to 19°C"
    assert record.exc_info[0] is ConnectionError
    assert "thermostat offline" in caplog.text


def test_percent_signs_not_interpolated(logger, caplog):
    caplog.set_level(logging.INFO, logger=NAME)
    logger.info("progress: ", 50, "% of %s")
    assert caplog.records[0].getMessage() == "progress: 50% of %s"


def test_filtered_by_backend_level(logger, caplog):
    caplog.set_level(logging.INFO, logger=NAME)
    logger.debug("hidden")
    logger.trace("hidden too")
    assert caplog.records == []


def test_single_line_output(logger, caplog):
    caplog.set_level(logging.INFO, logger=NAME)
    logger.info("name=", "mallory\r\nINFO fake entry")
    assert caplog.text.count("\n") == 1


def test_injected_logging_logger():
    inner = logging.getLogger(f"{NAME}.injected")
    backend = StdlibBackend("ignored", logger=inner)
    assert backend.logger is inner
    assert backend.name == "ignored"


def set_temperature(logger, temperature):
    logger.info("Temperature has been set to ", temperature, "°C.")


def test_record_points_at_application_call_site(logger, caplog):
    caplog.set_level(logging.INFO, logger=NAME)

    set_temperature(logger, 21)

    record = caplog.records[0]
    assert record.funcName == "set_temperature"
    assert record.filename == "test_stdlib_backend.py"


def test_call_site_same_for_every_entry_point(logger, caplog):
    caplog.set_level(TRACE_LEVEL_NUM, logger=NAME)

    def handler():
        logger.trace("t", ValueError("v"))
        logger.warning("w")
        logger.log("debug", "d")
        logger.emit(LogLevel.ERROR, LogCall(parts=("e",)))

    handler()

    assert [r.funcName for r in caplog.records] == ["handler"] * 4


def test_direct_backend_call_site(caplog):
    caplog.set_level(logging.INFO, logger=NAME)
    backend = StdlibBackend(NAME, facade_frames=0)

    def report():
        backend.info("direct")

    report()

    assert caplog.records[0].funcName == "report"
