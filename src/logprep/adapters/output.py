"""Log output adapter implementing LogOutputPort."""

from logprep.core.models import LogRecord


class InMemoryLogOutput:
    """Hand-off point between the pipeline and a transport layer.

    Sanitized records accumulate in write order until the transport
    drains them.
    """

    def __init__(self) -> None:
        self._records: list[LogRecord] = []

    def write(self, record: LogRecord) -> None:
        """Accept a sanitized log record."""
        self._records.append(record)

    def drain(self) -> list[LogRecord]:
        """Remove and return all pending records in write order."""
        records, self._records = self._records, []
        return records
