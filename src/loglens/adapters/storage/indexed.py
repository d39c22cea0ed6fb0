"""Multi-index in-memory storage adapter.

Records live once in an append-only list. Each named index maps a key to
the positions of matching records in that list, so an index costs one
integer per record and never a copy of the record.
"""

import logging
from collections.abc import Callable, Hashable, Iterator, Mapping
from datetime import timezone, tzinfo
from typing import Generic, TypeVar

from loglens.core.catalog import LogCatalog
from loglens.core.errors import DuplicateIndexError, LateIndexError, UnknownIndexError

T = TypeVar("T")
KeyFn = Callable[[T], Hashable]

logger = logging.getLogger(__name__)


class IndexedStore(Generic[T]):
    """In-memory implementation of RecordStorePort.

    Indexes must be defined before the first insert; from then on every
    insert is applied to all of them. Not thread-safe: callers serialize
    inserts against reads.

    Args:
        indexes: Optional mapping of index name to key function, registered
            in mapping order.
    """

    def __init__(self, indexes: Mapping[str, KeyFn[T]] | None = None) -> None:
        self._records: list[T] = []
        self._key_fns: dict[str, KeyFn[T]] = {}
        self._indexes: dict[str, dict[Hashable, list[int]]] = {}
        for name, key_fn in (indexes or {}).items():
            self.define_index(name, key_fn)

    @property
    def index_names(self) -> list[str]:
        """Names of the defined indexes, in definition order."""
        return list(self._key_fns)

    def define_index(self, name: str, key_fn: KeyFn[T]) -> None:
        """Register a new equality index.

        Args:
            name: Unique index name.
            key_fn: Pure function mapping a record to a hashable key.

        Raises:
            DuplicateIndexError: If ``name`` is already defined.
            LateIndexError: If the store already holds records.
        """
        if name in self._key_fns:
            raise DuplicateIndexError(name)
        if self._records:
            raise LateIndexError(name, len(self._records))
        self._key_fns[name] = key_fn
        self._indexes[name] = {}
        logger.debug("defined index %r", name)

    def insert(self, record: T) -> int:
        """Append a record and add it to every index.

        All keys are computed before anything is stored, so a failing key
        function leaves the store unchanged.

        Returns:
            Position of the record in insertion order.
        """
        keys = [(name, key_fn(record)) for name, key_fn in self._key_fns.items()]
        position = len(self._records)
        self._records.append(record)
        for name, key in keys:
            self._indexes[name].setdefault(key, []).append(position)
        return position

    def lookup(self, index_name: str, key: Hashable) -> list[T]:
        """Return the records indexed under ``key``, in insertion order.

        Raises:
            UnknownIndexError: If ``index_name`` was never defined.
        """
        positions = self._bucket(index_name).get(key, ())
        return [self._records[i] for i in positions]

    def count(self, index_name: str, key: Hashable) -> int:
        """Number of records indexed under ``key``."""
        return len(self._bucket(index_name).get(key, ()))

    def keys(self, index_name: str) -> list[Hashable]:
        """Distinct keys of an index, in the order they were first seen."""
        return list(self._bucket(index_name))

    def scan(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return every record matching ``predicate``, in insertion order."""
        return [record for record in self._records if predicate(record)]

    def get(self, position: int) -> T:
        """Return the record stored at ``position``."""
        return self._records[position]

    def _bucket(self, index_name: str) -> dict[Hashable, list[int]]:
        try:
            return self._indexes[index_name]
        except KeyError:
            raise UnknownIndexError(index_name) from None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)


def create_catalog(tz: tzinfo = timezone.utc) -> LogCatalog:
    """Create a LogCatalog backed by a fresh IndexedStore.

    Args:
        tz: Timezone the log timestamps are written in (default UTC).

    Returns:
        Empty catalog ready for ingestion.
    """
    return LogCatalog(IndexedStore(), tz=tz)
