"""Shared test fixtures for all test modules."""

from collections.abc import Callable

import pytest

from logprep.adapters.diagnostics import InMemoryDiagnosticSink
from logprep.adapters.output import InMemoryLogOutput
from logprep.core.builder import LogBuilder
from logprep.core.context import static_application_info
from logprep.core.models import ExecutionContext, LogLevel, LogRecord
from logprep.core.sanitizer import LogSanitizer
from logprep.core.values import wrap_attributes

# 2019-12-15T10:00:00Z
FIXED_TIMESTAMP = 1576404000.0


@pytest.fixture
def diagnostics() -> InMemoryDiagnosticSink:
    """Provide an empty diagnostic sink."""
    return InMemoryDiagnosticSink()


@pytest.fixture
def sanitizer(diagnostics: InMemoryDiagnosticSink) -> LogSanitizer:
    """Provide a sanitizer with default constraints reporting to `diagnostics`."""
    return LogSanitizer(diagnostics)


@pytest.fixture
def output() -> InMemoryLogOutput:
    """Provide an empty in-memory log output."""
    return InMemoryLogOutput()


@pytest.fixture
def builder() -> LogBuilder:
    """Provide a builder with a fixed clock, running as the main thread."""
    return LogBuilder(
        service_name="test-service-name",
        logger_name="test-logger-name",
        logger_version="1.0.0",
        clock=lambda: FIXED_TIMESTAMP,
        execution_context=lambda: ExecutionContext(is_main=True),
        application_info=static_application_info(version="1.2.3"),
    )


@pytest.fixture
def make_record() -> Callable[..., LogRecord]:
    """Factory fixture for records with the given attributes and tags.

    Attributes are wrapped, so tests can pass plain Python values.
    """

    def _record(
        attributes: dict[str, object] | None = None,
        tags: list[str] | None = None,
        **fields: object,
    ) -> LogRecord:
        defaults: dict[str, object] = {
            "timestamp": FIXED_TIMESTAMP,
            "level": LogLevel.INFO,
            "message": "message",
            "service_name": "service",
            "logger_name": "logger",
            "logger_version": "1.0.0",
            "thread_name": "main",
            "application_version": "1.2.3",
        }
        defaults.update(fields)
        return LogRecord(
            attributes=wrap_attributes(attributes) if attributes is not None else None,
            tags=tuple(tags) if tags is not None else None,
            **defaults,
        )

    return _record
