"""Storage adapters implementing core ports."""

from loglens.adapters.storage.indexed import IndexedStore, KeyFn, create_catalog

__all__ = [
    "IndexedStore",
    "KeyFn",
    "create_catalog",
]
