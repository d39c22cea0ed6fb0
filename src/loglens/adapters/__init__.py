"""Adapters connecting loglens to storage and the logging module."""
