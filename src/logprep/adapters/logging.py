"""Python logging handler adapter for logprep.

This adapter bridges Python's standard library logging module to a
logprep Logger, so records logged with ``logging`` are built, sanitized
and handed to the logger's output like any other logprep record.
"""

import logging
import traceback

from logprep.core.logger import Logger
from logprep.core.models import LogLevel

NOTICE = 25

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)

# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno", "pathname"]

# Loggers owned by this package; routing them back into a Logger could recurse
_OWN_LOGGER_PREFIX = "logprep"


def to_log_level(levelno: int) -> LogLevel:
    """Map a standard logging level number to a LogLevel.

    Args:
        levelno: Level number from a logging.LogRecord.

    Returns:
        The closest LogLevel at or below the given number. Level 25 maps
        to NOTICE, which the standard library does not define.
    """
    if levelno >= logging.CRITICAL:
        return LogLevel.CRITICAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARN
    if levelno >= NOTICE:
        return LogLevel.NOTICE
    if levelno >= logging.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class LogprepHandler(logging.Handler):
    """Logging handler that routes log records through a logprep Logger.

    Example:
        ```python
        output = InMemoryLogOutput()
        logger = Logger.from_configuration(LoggerConfiguration(), output)
        logging.getLogger().addHandler(LogprepHandler(logger))
        ```
    """

    def __init__(
        self,
        logger: Logger,
        include_attrs: list[str] | None = None,
        tags: list[str] | None = None,
    ) -> None:
        """Initialize the handler with a logprep Logger.

        Args:
            logger: Logger that builds, sanitizes and outputs records.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno", "pathname"].
            tags: Tags attached to every record emitted through this handler.
        """
        super().__init__()
        self._logger = logger
        self._include_attrs = (
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )
        self._tags = list(tags or [])

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record through the logprep pipeline.

        Args:
            record: The log record to emit.
        """
        if record.name.split(".")[0] == _OWN_LOGGER_PREFIX:
            return
        try:
            self._logger.log(
                to_log_level(record.levelno),
                record.getMessage(),
                self._collect_attributes(record),
                self._tags,
            )
        except Exception:
            self.handleError(record)

    def _collect_attributes(self, record: logging.LogRecord) -> dict[str, object]:
        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, object] = {
            "module": record.name,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        # Build attributes based on include_attrs configuration
        attributes: dict[str, object] = {
            key: attr_mapping[key] for key in self._include_attrs if key in attr_mapping
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS:
                attributes[key] = value

        # Extract exception info if present
        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attributes["exc_type"] = exc_type.__name__
            if exc_value is not None:
                attributes["exc_message"] = str(exc_value)
            if exc_tb is not None:
                attributes["exc_traceback"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )
        return attributes
