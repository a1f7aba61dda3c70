"""Configuration: frozen dataclass loaded from defaults and env vars."""

import os
from collections.abc import Mapping
from dataclasses import dataclass


class ConfigurationError(ValueError):
    """Raised when logger configuration is invalid."""


LIMIT_FIELDS = ("max_attributes", "max_tags", "max_tag_length", "max_nesting_depth")


def check_limits(obj: object) -> None:
    """Raise ConfigurationError unless every limit field is a positive integer."""
    for name in LIMIT_FIELDS:
        value = getattr(obj, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class LoggerConfiguration:
    """Identity and limits of a logger.

    Attributes:
        service_name: Service reported with every record.
        logger_name: Name of the logger reported with every record.
        logger_version: Version of the logging library.
        application_version: Full application version, if known.
        application_short_version: Short application version, if known.
        max_attributes: Maximum number of attributes per record.
        max_tags: Maximum number of tags per record.
        max_tag_length: Maximum length of a single tag.
        max_nesting_depth: Maximum number of dots kept in an attribute key.
    """

    service_name: str = "python"
    logger_name: str = "logprep"
    logger_version: str = "0.1.0"
    application_version: str | None = None
    application_short_version: str | None = None
    max_attributes: int = 256
    max_tags: int = 100
    max_tag_length: int = 200
    max_nesting_depth: int = 9

    def __post_init__(self) -> None:
        check_limits(self)


_ENV_STRINGS = {
    "service_name": "LOGPREP_SERVICE_NAME",
    "logger_name": "LOGPREP_LOGGER_NAME",
    "logger_version": "LOGPREP_LOGGER_VERSION",
    "application_version": "LOGPREP_APP_VERSION",
    "application_short_version": "LOGPREP_APP_SHORT_VERSION",
}

_ENV_INTS = {
    "max_attributes": "LOGPREP_MAX_ATTRIBUTES",
    "max_tags": "LOGPREP_MAX_TAGS",
    "max_tag_length": "LOGPREP_MAX_TAG_LENGTH",
    "max_nesting_depth": "LOGPREP_MAX_NESTING_DEPTH",
}


def load_config(environ: Mapping[str, str] | None = None) -> LoggerConfiguration:
    """Build LoggerConfiguration from defaults <- env vars.

    Args:
        environ: Environment mapping (default: os.environ).

    Returns:
        LoggerConfiguration with env var overrides applied.

    Raises:
        ConfigurationError: If a numeric variable is not an integer or a
            limit is not positive.
    """
    if environ is None:
        environ = os.environ

    kwargs: dict = {}
    for field_name, var in _ENV_STRINGS.items():
        if var in environ:
            kwargs[field_name] = environ[var]
    for field_name, var in _ENV_INTS.items():
        if var in environ:
            try:
                kwargs[field_name] = int(environ[var])
            except ValueError as exc:
                raise ConfigurationError(
                    f"{var} must be an integer, got {environ[var]!r}"
                ) from exc

    return LoggerConfiguration(**kwargs)
