"""JSON encoder for sanitized log records.

Produces the object layout the logging backend ingests: reserved fields
at the top level, user attributes merged beside them and tags joined into
the ``ddtags`` field.
"""

import json
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from logprep.core.models import (
    CarrierInfo,
    LogRecord,
    NetworkConnectionInfo,
    UserInfo,
)


def format_timestamp(timestamp: float) -> str:
    """Format a Unix timestamp as ISO 8601 UTC with millisecond precision."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _encode_user_info(info: UserInfo) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    if info.id is not None:
        obj["usr.id"] = info.id
    if info.name is not None:
        obj["usr.name"] = info.name
    if info.email is not None:
        obj["usr.email"] = info.email
    for key, value in info.extra_info.items():
        obj[f"usr.{key}"] = value.to_native()
    return obj


def _encode_network_info(info: NetworkConnectionInfo) -> dict[str, Any]:
    obj: dict[str, Any] = {
        "network.client.reachability": info.reachability,
        "network.client.available_interfaces": list(info.available_interfaces),
    }
    optional = {
        "network.client.supports_ipv4": info.supports_ipv4,
        "network.client.supports_ipv6": info.supports_ipv6,
        "network.client.is_expensive": info.is_expensive,
        "network.client.is_constrained": info.is_constrained,
    }
    obj.update({key: value for key, value in optional.items() if value is not None})
    return obj


def _encode_carrier_info(info: CarrierInfo) -> dict[str, Any]:
    optional = {
        "network.client.sim_carrier.name": info.carrier_name,
        "network.client.sim_carrier.iso_country": info.carrier_iso_country_code,
        "network.client.sim_carrier.allows_voip": info.carrier_allows_voip,
        "network.client.sim_carrier.technology": info.radio_access_technology,
    }
    return {key: value for key, value in optional.items() if value is not None}


def encode_record(record: LogRecord) -> dict[str, Any]:
    """Encode a log record to a JSON-compatible dict.

    Args:
        record: A sanitized LogRecord. Unsanitized records encode too, but
            user attributes may then overwrite reserved fields.

    Returns:
        Dict ready for json.dumps.
    """
    obj: dict[str, Any] = {
        "date": format_timestamp(record.timestamp),
        "status": record.level.status,
        "message": record.message,
        "service": record.service_name,
        "logger.name": record.logger_name,
        "logger.version": record.logger_version,
        "logger.thread_name": record.thread_name,
        "version": record.application_version,
    }
    if record.user_info is not None:
        obj.update(_encode_user_info(record.user_info))
    if record.network_connection_info is not None:
        obj.update(_encode_network_info(record.network_connection_info))
    if record.carrier_info is not None:
        obj.update(_encode_carrier_info(record.carrier_info))
    if record.attributes:
        for key, value in record.attributes.items():
            obj[key] = value.to_native()
    if record.tags:
        obj["ddtags"] = ",".join(record.tags)
    return obj


def encode_records(records: Iterable[LogRecord]) -> str:
    """Encode log records to newline-delimited JSON.

    Args:
        records: An iterable of LogRecord objects.

    Returns:
        NDJSON string with one JSON object per line.
        Empty string if no records.
    """
    lines = [json.dumps(encode_record(record)) for record in records]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
