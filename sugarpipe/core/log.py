import logging
import sys

import structlog

_FALLBACK_HANDLER_NAME = "sugarpipe_fallback_handler"

SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


class _StderrHandler(logging.StreamHandler):
    """A StreamHandler that always writes to the current `sys.stderr`."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def configure_structlog(level: int = logging.INFO) -> None:
    """Routes structlog through stdlib logging, rendering JSON lines on stderr."""
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.set_name(_FALLBACK_HANDLER_NAME)

    root_logger = logging.getLogger()
    # Avoid adding duplicate handlers
    if _FALLBACK_HANDLER_NAME not in [h.get_name() for h in root_logger.handlers]:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    structlog.configure(
        processors=SHARED_PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


class StructlogLogger:
    """A thin wrapper so stages and queries log with keyword event data."""

    def __init__(self, name: str):
        self.name = name
        self._logger = structlog.get_logger(name)

    def info(self, event: str, **data):
        self._logger.info(event, **data)

    def warning(self, event: str, **data):
        self._logger.warning(event, **data)

    def error(self, event: str, **data):
        self._logger.error(event, **data)

    def debug(self, event: str, **data):
        self._logger.debug(event, **data)

    def __repr__(self) -> str:
        return f"StructlogLogger(name='{self.name}')"


def get_logger(name: str) -> StructlogLogger:
    """
    Returns a structlog-backed logger for the given name.

    If the application has not configured structlog yet, a fallback
    configuration that writes JSON lines to stderr is installed first.
    """
    if not structlog.is_configured():
        configure_structlog()
    return StructlogLogger(name)
