import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once for the API process.

    Repeated calls only adjust the level, so importing the app in tests
    does not stack handlers.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    if any(getattr(h, "_videoshelf", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._videoshelf = True  # type: ignore[attr-defined]
    root.addHandler(handler)
