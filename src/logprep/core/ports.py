"""Port interfaces for the pipeline's collaborators.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from typing import Protocol, runtime_checkable

from logprep.core.models import Diagnostic, LogRecord


@runtime_checkable
class DiagnosticSinkPort(Protocol):
    """Port for the diagnostic side channel.

    Receives one Diagnostic per drop, rename or truncation performed by
    the sanitizer. Examples: LoggingDiagnosticSink, InMemoryDiagnosticSink.
    """

    def report(self, diagnostic: Diagnostic) -> None:
        """Report a diagnostic."""
        ...


@runtime_checkable
class LogOutputPort(Protocol):
    """Port for handing sanitized records to a transport layer.

    Example: InMemoryLogOutput.
    """

    def write(self, record: LogRecord) -> None:
        """Accept a sanitized log record."""
        ...
