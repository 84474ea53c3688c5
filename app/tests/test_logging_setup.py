# app/tests/test_logging_setup.py
import logging

from app.core.logging import setup_logging


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_videoshelf", False)]


def test_should_install_one_handler_when_called_repeatedly():
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(_our_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG
    setup_logging("WARNING")


def test_should_leave_uvicorn_access_logger_alone():
    access = logging.getLogger("uvicorn.access")
    access.setLevel(logging.NOTSET)

    setup_logging("INFO")

    assert access.level == logging.NOTSET
