"""Record construction: caller-supplied fields plus ambient context."""

from collections.abc import Callable, Iterable, Mapping

from logprep.core.context import (
    current_execution_context,
    static_application_info,
    system_clock,
)
from logprep.config import LoggerConfiguration
from logprep.core.models import (
    ApplicationInfo,
    CarrierInfo,
    ExecutionContext,
    LogLevel,
    LogRecord,
    NetworkConnectionInfo,
    UserInfo,
)
from logprep.core.values import wrap_attributes

MAIN_THREAD_NAME = "main"
BACKGROUND_THREAD_NAME = "background"


def resolve_thread_name(context: ExecutionContext) -> str:
    """Name reported for the execution unit making a logging call.

    The main thread is always "main"; other units report their assigned
    name, or "background" when they have none.
    """
    if context.is_main:
        return MAIN_THREAD_NAME
    return context.name or BACKGROUND_THREAD_NAME


def resolve_application_version(info: ApplicationInfo) -> str:
    """Version reported for the running application.

    A non-empty short version wins over the full version, which wins over
    the empty string.
    """
    if info.short_version:
        return info.short_version
    if info.version is not None:
        return info.version
    return ""


def _check_callable(name: str, value: object) -> None:
    if value is not None and not callable(value):
        raise TypeError(f"{name} must be callable")


class LogBuilder:
    """Turns a logging call into a fully populated LogRecord.

    The builder performs no validation; LogSanitizer enforces backend
    constraints on its output.

    Example:
        ```python
        builder = LogBuilder(service_name="checkout", logger_name="orders")
        record = builder.create_record(LogLevel.INFO, "order placed", {"order.id": 7}, ["env:prod"])
        ```
    """

    def __init__(
        self,
        service_name: str,
        logger_name: str,
        logger_version: str = "",
        clock: Callable[[], float] = system_clock,
        execution_context: Callable[[], ExecutionContext] = current_execution_context,
        application_info: Callable[[], ApplicationInfo] | None = None,
        user_info: Callable[[], UserInfo | None] | None = None,
        network_connection_info: Callable[[], NetworkConnectionInfo | None] | None = None,
        carrier_info: Callable[[], CarrierInfo | None] | None = None,
    ) -> None:
        """Initialize the builder with identity and context providers.

        Args:
            service_name: Service reported with every record.
            logger_name: Logger name reported with every record.
            logger_version: Library version reported with every record.
            clock: Returns the current Unix timestamp.
            execution_context: Describes the calling thread.
            application_info: Returns application version metadata
                (default: no version known).
            user_info: Returns the current user block, if any.
            network_connection_info: Returns the network block, if any.
            carrier_info: Returns the carrier block, if any.

        Raises:
            TypeError: If a provider is not callable.
        """
        for name, provider in (
            ("clock", clock),
            ("execution_context", execution_context),
            ("application_info", application_info),
            ("user_info", user_info),
            ("network_connection_info", network_connection_info),
            ("carrier_info", carrier_info),
        ):
            _check_callable(name, provider)
        self.service_name = service_name
        self.logger_name = logger_name
        self.logger_version = logger_version
        self._clock = clock
        self._execution_context = execution_context
        self._application_info = application_info or static_application_info()
        self._user_info = user_info
        self._network_connection_info = network_connection_info
        self._carrier_info = carrier_info

    @classmethod
    def from_configuration(cls, config: LoggerConfiguration, **providers) -> "LogBuilder":
        """Create a builder from a LoggerConfiguration.

        Args:
            config: Identity and application versions.
            **providers: Context providers forwarded to the constructor.
        """
        providers.setdefault(
            "application_info",
            static_application_info(
                config.application_version, config.application_short_version
            ),
        )
        return cls(
            service_name=config.service_name,
            logger_name=config.logger_name,
            logger_version=config.logger_version,
            **providers,
        )

    def create_record(
        self,
        level: LogLevel,
        message: str,
        attributes: Mapping[str, object] | None = None,
        tags: Iterable[str] | None = None,
    ) -> LogRecord:
        """Create a log record stamped with the current context.

        Args:
            level: Severity of the event.
            message: The log message, may be empty.
            attributes: User attributes; values of any shape are wrapped.
            tags: User tags, in order.

        Returns:
            LogRecord with timestamp, identity, thread and version resolved.
        """
        return LogRecord(
            timestamp=self._clock(),
            level=level,
            message=message,
            service_name=self.service_name,
            logger_name=self.logger_name,
            logger_version=self.logger_version,
            thread_name=resolve_thread_name(self._execution_context()),
            application_version=resolve_application_version(self._application_info()),
            user_info=self._user_info() if self._user_info else None,
            network_connection_info=(
                self._network_connection_info()
                if self._network_connection_info
                else None
            ),
            carrier_info=self._carrier_info() if self._carrier_info else None,
            attributes=wrap_attributes(attributes) if attributes is not None else None,
            tags=tuple(tags) if tags is not None else None,
        )
