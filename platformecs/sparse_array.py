"""Entities and the sparse component storage indexed by them."""

from __future__ import annotations

import copy
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from platformecs.errors import ComponentNotInsertedError

T = TypeVar("T")


class Entity(int):
    """An entity handle: a plain index into the component arrays."""

    def __repr__(self) -> str:
        return f"Entity({int(self)})"


class SparseArray(Generic[T]):
    """A growable array whose slots either hold a component or are empty (None).

    Reading past the end yields None rather than raising.
    """

    def __init__(self, component_type: Optional[Callable[[], T]] = None, size: int = 0) -> None:
        self.component_type = component_type
        self._data: List[Optional[T]] = [None] * size

    @staticmethod
    def _check_index(index: int) -> int:
        index = int(index)
        if index < 0:
            raise IndexError(f"negative index {index}")
        return index

    def __getitem__(self, index: int) -> Optional[T]:
        index = self._check_index(index)
        if index >= len(self._data):
            return None
        return self._data[index]

    def __setitem__(self, index: int, value: Optional[T]) -> None:
        index = self._check_index(index)
        if value is None:
            self.erase(index)
        else:
            self.insert_at(index, value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Optional[T]]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"SparseArray({self._data!r})"

    def insert_at(self, pos: int, component: T) -> T:
        """Store ``component`` at ``pos``, growing the array if needed."""
        pos = self._check_index(pos)
        if len(self._data) < pos + 1:
            self.resize(pos + 1)
        self._data[pos] = component
        return component

    def emplace_at(self, pos: int, *args: int) -> T:
        """Create a default component at ``pos`` and at every extra position given.

        Returns the component created at ``pos``.
        """
        if self.component_type is None:
            raise TypeError("SparseArray has no component type to construct")
        first = self.insert_at(pos, self.component_type())
        for other in args:
            self.insert_at(other, self.component_type())
        return first

    def erase(self, pos: int) -> None:
        """Empty the slot at ``pos``; out-of-range positions are ignored."""
        pos = self._check_index(pos)
        if pos < len(self._data):
            self._data[pos] = None

    def index_of(self, component: T) -> int:
        """Return the slot holding this very component object."""
        for index, value in enumerate(self._data):
            if value is not None and value is component:
                return index
        raise ComponentNotInsertedError()

    def resize(self, count: int) -> None:
        """Truncate or extend the array with empty slots to ``count`` slots."""
        count = int(count)
        if count < 0:
            raise ValueError(f"negative size {count}")
        if count < len(self._data):
            del self._data[count:]
        else:
            self._data.extend([None] * (count - len(self._data)))

    def copy(self) -> SparseArray[T]:
        """Return an independent copy holding copies of every component."""
        duplicate: SparseArray[T] = SparseArray(self.component_type)
        duplicate._data = copy.deepcopy(self._data)
        return duplicate