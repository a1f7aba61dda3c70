"""Record sanitization: enforce backend constraints on user data.

Attributes and tags are processed independently, each through a fixed
sequence of stages. Every stage sees the output of the previous one, so
later stages can rely on earlier normalization (reserved tag keys are
matched after lowercasing, truncation happens after character
replacement). Nothing here raises for any input: offending data is
dropped, renamed or truncated, and each action is reported to the
injected diagnostic sink.
"""

import logging
import re
import unicodedata
from collections.abc import Callable, Iterable
from dataclasses import replace

from logprep.core.constraints import SanitizerConstraints
from logprep.core.models import Diagnostic, DiagnosticKind, LogRecord
from logprep.core.ports import DiagnosticSinkPort
from logprep.core.values import EncodableValue

logger = logging.getLogger(__name__)

_ILLEGAL_TAG_CHARACTERS = re.compile(r"[^a-z0-9_:./-]")

Attributes = dict[str, EncodableValue]


class LogSanitizer:
    """Applies backend constraints to a built LogRecord.

    Example:
        ```python
        sink = InMemoryDiagnosticSink()
        sanitizer = LogSanitizer(sink)
        clean = sanitizer.sanitize(record)
        ```
    """

    def __init__(
        self,
        diagnostics: DiagnosticSinkPort,
        constraints: SanitizerConstraints | None = None,
    ) -> None:
        """Initialize the sanitizer.

        Args:
            diagnostics: Sink receiving one Diagnostic per action taken.
            constraints: Backend limits (default: SanitizerConstraints()).
        """
        self._diagnostics = diagnostics
        self.constraints = constraints or SanitizerConstraints()

    def sanitize(self, record: LogRecord) -> LogRecord:
        """Return a copy of the record with attributes and tags sanitized.

        All other fields are passed through unchanged.
        """
        return replace(
            record,
            attributes=self.sanitize_attributes(record.attributes),
            tags=self.sanitize_tags(record.tags),
        )

    # === Attributes ===

    def sanitize_attributes(self, attributes: Attributes | None) -> Attributes | None:
        """Run the attribute stages. None passes through as None."""
        if attributes is None:
            return None
        sanitized = self._remove_empty_keys(attributes)
        sanitized = self._remove_reserved_keys(sanitized)
        sanitized = self._limit_nesting(sanitized)
        return self._limit_attribute_count(sanitized)

    def _remove_empty_keys(self, attributes: Attributes) -> Attributes:
        kept: Attributes = {}
        for key, value in attributes.items():
            if key == "":
                self._report(
                    DiagnosticKind.EMPTY_ATTRIBUTE_KEY,
                    "Attribute key is empty. This attribute will be ignored.",
                    subject=key,
                )
                continue
            kept[key] = value
        return kept

    def _remove_reserved_keys(self, attributes: Attributes) -> Attributes:
        reserved = self.constraints.reserved_attribute_names
        kept: Attributes = {}
        for key, value in attributes.items():
            if key in reserved:
                self._report(
                    DiagnosticKind.RESERVED_ATTRIBUTE_KEY,
                    f"'{key}' is a reserved attribute name. "
                    "This attribute will be ignored.",
                    subject=key,
                )
                continue
            kept[key] = value
        return kept

    def _limit_nesting(self, attributes: Attributes) -> Attributes:
        renamed: Attributes = {}
        for key, value in attributes.items():
            sanitized_key = escape_nested_levels(key, self.constraints.max_nesting_depth)
            if sanitized_key != key:
                self._report(
                    DiagnosticKind.ATTRIBUTE_KEY_RENAMED,
                    f"Attribute '{key}' was modified to '{sanitized_key}' "
                    "to match backend constraints.",
                    subject=key,
                    replacement=sanitized_key,
                )
            if sanitized_key in renamed:
                self._report(
                    DiagnosticKind.ATTRIBUTE_KEY_COLLISION,
                    f"Attribute '{key}' collides with '{sanitized_key}' after "
                    "renaming. The earlier value will be replaced.",
                    subject=key,
                    replacement=sanitized_key,
                )
            renamed[sanitized_key] = value
        return renamed

    def _limit_attribute_count(self, attributes: Attributes) -> Attributes:
        limit = self.constraints.max_attributes
        if len(attributes) <= limit:
            return attributes
        dropped = len(attributes) - limit
        self._report(
            DiagnosticKind.ATTRIBUTES_LIMIT_EXCEEDED,
            f"Number of attributes exceeds the limit of {limit}. "
            f"{dropped} attribute(s) will be ignored.",
            dropped_count=dropped,
        )
        # Insertion order decides which attributes survive
        return dict(list(attributes.items())[:limit])

    # === Tags ===

    def sanitize_tags(self, tags: Iterable[str] | None) -> tuple[str, ...] | None:
        """Run the tag stages. None passes through as None."""
        if tags is None:
            return None
        sanitized = [tag.lower() for tag in tags]
        sanitized = [tag for tag in sanitized if self._starts_with_letter(tag)]
        sanitized = self._each(sanitized, self._replace_illegal_characters)
        sanitized = self._each(sanitized, self._remove_trailing_colons)
        sanitized = self._each(sanitized, self._limit_length)
        sanitized = [tag for tag in sanitized if not self._is_reserved(tag)]
        return self._limit_tag_count(sanitized)

    @staticmethod
    def _each(tags: list[str], stage: Callable[[str], str]) -> list[str]:
        return [stage(tag) for tag in tags]

    def _starts_with_letter(self, tag: str) -> bool:
        if not tag:
            self._report(DiagnosticKind.EMPTY_TAG, "Tag is empty and will be ignored.")
            return False
        # A combining mark joins the first letter into a non-ASCII character
        if "a" <= tag[0] <= "z" and not _is_combining(tag[1:2]):
            return True
        self._report(
            DiagnosticKind.INVALID_TAG_START,
            f"Tag '{tag}' starts with an invalid character and will be ignored.",
            subject=tag,
        )
        return False

    def _replace_illegal_characters(self, tag: str) -> str:
        sanitized = _ILLEGAL_TAG_CHARACTERS.sub("_", tag)
        if sanitized != tag:
            self._report_tag_change(DiagnosticKind.TAG_CHARACTERS_REPLACED, tag, sanitized)
        return sanitized

    def _remove_trailing_colons(self, tag: str) -> str:
        sanitized = tag.rstrip(":")
        if sanitized != tag:
            self._report_tag_change(
                DiagnosticKind.TAG_TRAILING_COLONS_REMOVED, tag, sanitized
            )
        return sanitized

    def _limit_length(self, tag: str) -> str:
        limit = self.constraints.max_tag_length
        if len(tag) <= limit:
            return tag
        sanitized = tag[:limit]
        self._report_tag_change(DiagnosticKind.TAG_TRUNCATED, tag, sanitized)
        return sanitized

    def _is_reserved(self, tag: str) -> bool:
        key, separator, _ = tag.partition(":")
        if separator and key in self.constraints.reserved_tag_keys:
            self._report(
                DiagnosticKind.RESERVED_TAG_KEY,
                f"'{key}' is a reserved tag key. This tag will be ignored.",
                subject=tag,
            )
            return True
        return False

    def _limit_tag_count(self, tags: list[str]) -> tuple[str, ...]:
        limit = self.constraints.max_tags
        if len(tags) > limit:
            dropped = len(tags) - limit
            self._report(
                DiagnosticKind.TAGS_LIMIT_EXCEEDED,
                f"Number of tags exceeds the limit of {limit}. "
                f"{dropped} tag(s) will be ignored.",
                dropped_count=dropped,
            )
            tags = tags[:limit]
        return tuple(tags)

    # === Diagnostics ===

    def _report_tag_change(self, kind: DiagnosticKind, tag: str, sanitized: str) -> None:
        self._report(
            kind,
            f"Tag '{tag}' was modified to '{sanitized}' to match backend constraints.",
            subject=tag,
            replacement=sanitized,
        )

    def _report(
        self,
        kind: DiagnosticKind,
        message: str,
        subject: str | None = None,
        replacement: str | None = None,
        dropped_count: int = 0,
    ) -> None:
        diagnostic = Diagnostic(
            kind=kind,
            message=message,
            subject=subject,
            replacement=replacement,
            dropped_count=dropped_count,
        )
        try:
            self._diagnostics.report(diagnostic)
        except Exception:
            # The side channel is best-effort and must never fail sanitization
            logger.debug("Diagnostic sink failed to report %s", kind.value, exc_info=True)


def _is_combining(char: str) -> bool:
    return bool(char) and unicodedata.category(char).startswith("M")


def escape_nested_levels(key: str, max_depth: int = 9) -> str:
    """Replace every "." after the first ``max_depth`` ones with "_".

    Args:
        key: Attribute key, e.g. "a.b.c".
        max_depth: Number of dots kept.

    Returns:
        The key with extra nesting levels flattened; all other characters
        are left untouched.
    """
    dots = 0
    escaped = []
    for char in key:
        if char == ".":
            dots += 1
            escaped.append("_" if dots > max_depth else char)
        else:
            escaped.append(char)
    return "".join(escaped)
