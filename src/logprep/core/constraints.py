"""Constraints imposed by the logging backend on user data."""

from dataclasses import dataclass

from logprep.config import LoggerConfiguration, check_limits

# Attribute names the backend assigns its own meaning to
RESERVED_ATTRIBUTE_NAMES = frozenset(
    {
        "host",
        "message",
        "status",
        "service",
        "source",
        "error.kind",
        "error.message",
        "error.stack",
        "ddtags",
    }
)

# Tag keys the backend assigns its own meaning to
RESERVED_TAG_KEYS = frozenset({"host", "device", "source", "service"})


@dataclass(frozen=True)
class SanitizerConstraints:
    """Limits enforced by LogSanitizer.

    Attributes:
        reserved_attribute_names: Attribute keys dropped on sight.
        max_nesting_depth: Dots kept in an attribute key; later dots become "_".
        max_attributes: Attributes kept per record.
        max_tag_length: Characters kept per tag.
        reserved_tag_keys: Tag keys (text before the first ":") dropped on sight.
        max_tags: Tags kept per record.

    Raises:
        ConfigurationError: If a limit is not a positive integer.
    """

    reserved_attribute_names: frozenset[str] = RESERVED_ATTRIBUTE_NAMES
    max_nesting_depth: int = 9
    max_attributes: int = 256
    max_tag_length: int = 200
    reserved_tag_keys: frozenset[str] = RESERVED_TAG_KEYS
    max_tags: int = 100

    def __post_init__(self) -> None:
        check_limits(self)

    @classmethod
    def from_configuration(cls, config: LoggerConfiguration) -> "SanitizerConstraints":
        """Take the limits from a logger configuration."""
        return cls(
            max_nesting_depth=config.max_nesting_depth,
            max_attributes=config.max_attributes,
            max_tag_length=config.max_tag_length,
            max_tags=config.max_tags,
        )
