# core/arena.py
"""
In-memory record store keyed by a monotonic id counter.
"""
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Arena(Generic[T]):
    """
    Holds records under ids 1, 2, 3, ... assigned in insertion order.

    Ids are never reused: there is no delete, and the counter only moves
    back to zero on an explicit ``reset()``.
    """

    def __init__(self) -> None:
        self._records: dict[int, T] = {}
        self._last_id = 0

    @property
    def last_id(self) -> int:
        return self._last_id

    def insert(self, record: T) -> int:
        """Store a record under the next id and return that id."""
        self._last_id += 1
        self._records[self._last_id] = record
        return self._last_id

    def get(self, record_id: int) -> T | None:
        return self._records.get(record_id)

    def replace(self, record_id: int, record: T) -> None:
        """Swap the record stored under an existing id."""
        if record_id not in self._records:
            raise KeyError(f"Id {record_id} not found")
        self._records[record_id] = record

    def values(self) -> list[T]:
        return [self._records[k] for k in sorted(self._records)]

    def items(self) -> list[tuple[int, T]]:
        return [(k, self._records[k]) for k in sorted(self._records)]

    def reset(self) -> None:
        self._records.clear()
        self._last_id = 0

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._records))
