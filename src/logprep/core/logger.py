"""User-facing logger: merges logger-level context, builds, sanitizes, outputs."""

import threading
from collections.abc import Iterable, Mapping

from logprep.config import LoggerConfiguration
from logprep.core.builder import LogBuilder
from logprep.core.constraints import SanitizerConstraints
from logprep.core.models import LogLevel, LogRecord
from logprep.core.ports import DiagnosticSinkPort, LogOutputPort
from logprep.core.sanitizer import LogSanitizer


class Logger:
    """Logger that hands sanitized records to an output port.

    Attributes and tags added to the logger are attached to every record it
    produces. Attributes passed to a single call take precedence over
    logger-level attributes with the same key; call tags are appended after
    logger-level tags.

    Example:
        ```python
        output = InMemoryLogOutput()
        logger = Logger.from_configuration(LoggerConfiguration(service_name="checkout"), output)
        logger.add_tag_with_key("env", "prod")
        logger.info("order placed", {"order.id": 7})
        ```
    """

    def __init__(
        self,
        builder: LogBuilder,
        sanitizer: LogSanitizer,
        output: LogOutputPort,
    ) -> None:
        self.builder = builder
        self.sanitizer = sanitizer
        self.output = output
        self._lock = threading.Lock()
        self._attributes: dict[str, object] = {}
        self._tags: list[str] = []

    @classmethod
    def from_configuration(
        cls,
        config: LoggerConfiguration,
        output: LogOutputPort,
        diagnostics: DiagnosticSinkPort | None = None,
        **providers,
    ) -> "Logger":
        """Create a logger wired from a LoggerConfiguration.

        Args:
            config: Identity, versions and limits.
            output: Receives every sanitized record.
            diagnostics: Sanitization diagnostic sink
                (default: LoggingDiagnosticSink).
            **providers: Context providers forwarded to LogBuilder.
        """
        if diagnostics is None:
            from logprep.adapters.diagnostics import LoggingDiagnosticSink

            diagnostics = LoggingDiagnosticSink()
        return cls(
            builder=LogBuilder.from_configuration(config, **providers),
            sanitizer=LogSanitizer(
                diagnostics, SanitizerConstraints.from_configuration(config)
            ),
            output=output,
        )

    # === Logger-level context ===

    def add_attribute(self, key: str, value: object) -> None:
        """Attach an attribute to every subsequent record."""
        with self._lock:
            self._attributes[key] = value

    def remove_attribute(self, key: str) -> None:
        """Stop attaching an attribute. Unknown keys are ignored."""
        with self._lock:
            self._attributes.pop(key, None)

    def add_tag(self, tag: str) -> None:
        """Attach a tag to every subsequent record."""
        with self._lock:
            if tag not in self._tags:
                self._tags.append(tag)

    def remove_tag(self, tag: str) -> None:
        """Stop attaching a tag. Unknown tags are ignored."""
        with self._lock:
            self._tags = [existing for existing in self._tags if existing != tag]

    def add_tag_with_key(self, key: str, value: str) -> None:
        """Attach a "key:value" tag to every subsequent record."""
        self.add_tag(f"{key}:{value}")

    def remove_tags_with_key(self, key: str) -> None:
        """Stop attaching every "key:..." tag."""
        prefix = f"{key}:"
        with self._lock:
            self._tags = [tag for tag in self._tags if not tag.startswith(prefix)]

    # === Logging ===

    def log(
        self,
        level: LogLevel,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Build, sanitize and output one record.

        Returns:
            The sanitized LogRecord handed to the output port.
        """
        with self._lock:
            merged_attributes = dict(self._attributes)
            merged_tags = list(self._tags)
        if attributes:
            merged_attributes.update(attributes)
        if tags is not None:
            merged_tags.extend(tags)

        record = self.builder.create_record(
            level, message, merged_attributes, merged_tags
        )
        record = self.sanitizer.sanitize(record)
        self.output.write(record)
        return record

    def debug(
        self,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Log at DEBUG level."""
        return self.log(LogLevel.DEBUG, message, attributes, tags)

    def info(
        self,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Log at INFO level."""
        return self.log(LogLevel.INFO, message, attributes, tags)

    def notice(
        self,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Log at NOTICE level."""
        return self.log(LogLevel.NOTICE, message, attributes, tags)

    def warn(
        self,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Log at WARN level."""
        return self.log(LogLevel.WARN, message, attributes, tags)

    def error(
        self,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Log at ERROR level."""
        return self.log(LogLevel.ERROR, message, attributes, tags)

    def critical(
        self,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Log at CRITICAL level."""
        return self.log(LogLevel.CRITICAL, message, attributes, tags)
