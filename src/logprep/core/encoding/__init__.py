"""Wire encoders for log records."""

from logprep.core.encoding.ndjson import encode_record, encode_records

__all__ = ["encode_record", "encode_records"]
