"""Adapters implementing core ports."""

from logprep.adapters.diagnostics import (
    InMemoryDiagnosticSink,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
)
from logprep.adapters.logging import LogprepHandler
from logprep.adapters.output import InMemoryLogOutput

__all__ = [
    "InMemoryDiagnosticSink",
    "InMemoryLogOutput",
    "LogprepHandler",
    "LoggingDiagnosticSink",
    "NullDiagnosticSink",
]
