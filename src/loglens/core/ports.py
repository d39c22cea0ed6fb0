"""Port interfaces for record storage.

The catalog depends only on this protocol, not on a concrete store.
"""

from collections.abc import Callable, Hashable, Iterator
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RecordStorePort(Protocol[T]):
    """Port for indexed record storage.

    Adapters implementing this protocol keep records in insertion order
    and answer equality lookups on named indexes.
    Examples: IndexedStore.
    """

    def define_index(self, name: str, key_fn: Callable[[T], Hashable]) -> None:
        """Register an equality index. Must precede the first insert."""
        ...

    def insert(self, record: T) -> int:
        """Append a record and index it. Returns its position."""
        ...

    def lookup(self, index_name: str, key: Hashable) -> list[T]:
        """Return records whose index key equals ``key``, in insertion order."""
        ...

    def scan(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return records matching ``predicate``, in insertion order."""
        ...

    def __iter__(self) -> Iterator[T]:
        """Iterate over records in insertion order."""
        ...

    def __len__(self) -> int:
        """Number of stored records."""
        ...
