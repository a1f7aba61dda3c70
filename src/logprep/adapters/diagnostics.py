"""Diagnostic sink adapters implementing DiagnosticSinkPort."""

import logging

from logprep.core.models import Diagnostic, DiagnosticKind, DiagnosticLevel

DIAGNOSTICS_LOGGER_NAME = "logprep.diagnostics"


class LoggingDiagnosticSink:
    """Reports diagnostics through Python's standard logging module.

    ERROR diagnostics are logged with ``logger.error``, WARNING diagnostics
    with ``logger.warning``. The diagnostic kind, subject and replacement
    are passed as ``extra`` fields for structured handlers.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER_NAME)

    def report(self, diagnostic: Diagnostic) -> None:
        """Log a diagnostic at the level matching its kind."""
        level = (
            logging.ERROR
            if diagnostic.level is DiagnosticLevel.ERROR
            else logging.WARNING
        )
        self._logger.log(
            level,
            diagnostic.message,
            extra={
                "diagnostic_kind": diagnostic.kind.value,
                "diagnostic_subject": diagnostic.subject,
                "diagnostic_replacement": diagnostic.replacement,
            },
        )


class InMemoryDiagnosticSink:
    """Collects diagnostics in a list.

    Suitable for testing and for callers that want to inspect what the
    sanitizer changed.
    """

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        """Store a diagnostic."""
        self.diagnostics.append(diagnostic)

    def kinds(self) -> list[DiagnosticKind]:
        """Kinds of all stored diagnostics, in report order."""
        return [diagnostic.kind for diagnostic in self.diagnostics]

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Stored diagnostics of one kind, in report order."""
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.kind is kind]

    def clear(self) -> None:
        """Forget all stored diagnostics."""
        self.diagnostics.clear()


class NullDiagnosticSink:
    """Discards every diagnostic."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Ignore a diagnostic."""
