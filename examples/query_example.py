"""Example: ingest a log file and run the catalog queries.

Run with:
    python examples/query_example.py path/to/app.log

Queries:
    WARN records, records for session 42111, records for business 319,
    and records between 16:04:22 and 16:04:50 (inclusive). Results are
    printed as NDJSON.
"""

import logging
import sys
from pathlib import Path

from loglens import create_catalog, encode_records, wrap

logging.basicConfig(level=logging.INFO)


def main(path: str) -> None:
    catalog = create_catalog()
    ingest = wrap(catalog.ingest, name="ingest")
    report = ingest(Path(path).read_text())
    for failure in report.failures:
        print(f"skipped {failure}", file=sys.stderr)

    print(encode_records(catalog.get_logs_by_log_level("WARN")), end="")
    print(encode_records(catalog.get_logs_by_session("42111")), end="")
    print(encode_records(catalog.get_logs_by_business("319")), end="")
    print(
        encode_records(
            catalog.get_logs_by_date_range("2012-09-13 16:04:22", "2012-09-13 16:04:50")
        ),
        end="",
    )
    print(ingest.report(), file=sys.stderr)


if __name__ == "__main__":
    main(sys.argv[1])
