"""logprep: build and sanitize structured log records for a logging backend."""

from logprep.adapters.diagnostics import (
    InMemoryDiagnosticSink,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
)
from logprep.adapters.logging import LogprepHandler
from logprep.adapters.output import InMemoryLogOutput
from logprep.config import ConfigurationError, LoggerConfiguration, load_config
from logprep.core.builder import LogBuilder
from logprep.core.constraints import SanitizerConstraints
from logprep.core.encoding import encode_record, encode_records
from logprep.core.logger import Logger
from logprep.core.models import (
    ApplicationInfo,
    CarrierInfo,
    Diagnostic,
    DiagnosticKind,
    DiagnosticLevel,
    ExecutionContext,
    LogLevel,
    LogRecord,
    NetworkConnectionInfo,
    UserInfo,
)
from logprep.core.sanitizer import LogSanitizer
from logprep.core.values import EncodableValue, ValueKind

__all__ = [
    "ApplicationInfo",
    "CarrierInfo",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLevel",
    "EncodableValue",
    "ExecutionContext",
    "InMemoryDiagnosticSink",
    "InMemoryLogOutput",
    "LogBuilder",
    "LogLevel",
    "LogRecord",
    "LogSanitizer",
    "Logger",
    "LoggerConfiguration",
    "LoggingDiagnosticSink",
    "LogprepHandler",
    "NetworkConnectionInfo",
    "NullDiagnosticSink",
    "SanitizerConstraints",
    "UserInfo",
    "ValueKind",
    "encode_record",
    "encode_records",
    "load_config",
]
