"""Core domain: records, parsing, catalog and profiling."""
