"""Encoders for exporting log records."""

from loglens.core.encoding.ndjson import encode_records, iter_ndjson, record_to_dict

__all__ = ["encode_records", "iter_ndjson", "record_to_dict"]
