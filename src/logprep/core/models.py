"""Core domain models for log records and sanitization diagnostics."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from logprep.core.values import EncodableValue


class LogLevel(IntEnum):
    """Severity of a log record, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    NOTICE = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    @property
    def status(self) -> str:
        """Wire name of the level (e.g. "warn")."""
        return self.name.lower()


@dataclass(frozen=True)
class UserInfo:
    """Identity of the application user, if the application sets one."""

    id: str | None = None
    name: str | None = None
    email: str | None = None
    extra_info: dict[str, EncodableValue] = field(default_factory=dict)


@dataclass(frozen=True)
class NetworkConnectionInfo:
    """Snapshot of the device's network connection."""

    reachability: str = "maybe"
    available_interfaces: tuple[str, ...] = ()
    supports_ipv4: bool | None = None
    supports_ipv6: bool | None = None
    is_expensive: bool | None = None
    is_constrained: bool | None = None


@dataclass(frozen=True)
class CarrierInfo:
    """Snapshot of the mobile carrier, where one exists."""

    carrier_name: str | None = None
    carrier_iso_country_code: str | None = None
    carrier_allows_voip: bool | None = None
    radio_access_technology: str | None = None


@dataclass(frozen=True)
class ApplicationInfo:
    """Version metadata of the running application.

    Attributes:
        version: Full build version (e.g. "1.4.2+build.381").
        short_version: Marketing version (e.g. "1.4.2").
    """

    version: str | None = None
    short_version: str | None = None


@dataclass(frozen=True)
class ExecutionContext:
    """Identity of the execution unit making a logging call.

    Attributes:
        is_main: True on the process's main thread.
        name: Human-readable name explicitly given to the unit, if any.
    """

    is_main: bool
    name: str | None = None


@dataclass(frozen=True)
class LogRecord:
    """A single structured log event.

    Records are immutable: each pipeline stage returns a new record built
    with ``dataclasses.replace``.

    Attributes:
        timestamp: Unix timestamp in seconds, set once at construction.
        level: Severity of the event.
        message: The log message.
        service_name: Configured service identity.
        logger_name: Name of the logger that produced the record.
        logger_version: Version of this library.
        thread_name: Name of the execution unit that produced the record.
        application_version: Version of the running application.
        user_info: Opaque user context block.
        network_connection_info: Opaque network context block.
        carrier_info: Opaque carrier context block.
        attributes: User attributes, insertion ordered. None when absent.
        tags: User tags, ordered. None when absent.
    """

    timestamp: float
    level: LogLevel
    message: str
    service_name: str
    logger_name: str
    logger_version: str
    thread_name: str
    application_version: str
    user_info: UserInfo | None = None
    network_connection_info: NetworkConnectionInfo | None = None
    carrier_info: CarrierInfo | None = None
    attributes: dict[str, EncodableValue] | None = None
    tags: tuple[str, ...] | None = None


class DiagnosticLevel(Enum):
    """Severity of a sanitization diagnostic."""

    ERROR = "error"
    WARNING = "warning"


class DiagnosticKind(Enum):
    """What the sanitizer did to a piece of user data."""

    EMPTY_ATTRIBUTE_KEY = "empty-attribute-key"
    RESERVED_ATTRIBUTE_KEY = "reserved-attribute-key"
    ATTRIBUTE_KEY_RENAMED = "attribute-key-renamed"
    ATTRIBUTE_KEY_COLLISION = "attribute-key-collision"
    ATTRIBUTES_LIMIT_EXCEEDED = "attributes-limit-exceeded"
    EMPTY_TAG = "empty-tag"
    INVALID_TAG_START = "invalid-tag-start"
    TAG_CHARACTERS_REPLACED = "tag-characters-replaced"
    TAG_TRAILING_COLONS_REMOVED = "tag-trailing-colons-removed"
    TAG_TRUNCATED = "tag-truncated"
    RESERVED_TAG_KEY = "reserved-tag-key"
    TAGS_LIMIT_EXCEEDED = "tags-limit-exceeded"

    @property
    def level(self) -> DiagnosticLevel:
        """ERROR when data is discarded, WARNING when it is altered but kept."""
        if self in _WARNING_KINDS:
            return DiagnosticLevel.WARNING
        return DiagnosticLevel.ERROR


_WARNING_KINDS = frozenset(
    {
        DiagnosticKind.ATTRIBUTE_KEY_RENAMED,
        DiagnosticKind.TAG_CHARACTERS_REPLACED,
        DiagnosticKind.TAG_TRAILING_COLONS_REMOVED,
        DiagnosticKind.TAG_TRUNCATED,
    }
)


@dataclass(frozen=True)
class Diagnostic:
    """A report of one drop, rename or truncation.

    Attributes:
        kind: The action taken.
        message: Human-readable description.
        subject: The offending key or tag, before sanitization.
        replacement: The sanitized key or tag, for actions that keep the data.
        dropped_count: Number of items dropped, for limit diagnostics.
    """

    kind: DiagnosticKind
    message: str
    subject: str | None = None
    replacement: str | None = None
    dropped_count: int = 0

    @property
    def level(self) -> DiagnosticLevel:
        """Severity derived from the diagnostic kind."""
        return self.kind.level
