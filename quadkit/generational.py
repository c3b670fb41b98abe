"""Slot storage addressed by generational ids, so stale ids never alias new data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalId:
    """Index of a slot plus the generation it was issued for."""

    index: int
    generation: int


@dataclass
class _Cell(Generic[T]):
    generation: int
    state: T


class GenerationalStorage(Generic[T]):
    """A vector of slots that reuses freed slots under a new generation."""

    def __init__(self) -> None:
        self._cells: List[Optional[_Cell[T]]] = []
        self._free: List[Tuple[int, int]] = []

    def _live_cell(self, gid: GenerationalId) -> Optional[_Cell[T]]:
        if not 0 <= gid.index < len(self._cells):
            return None
        cell = self._cells[gid.index]
        if cell is None or cell.generation != gid.generation:
            return None
        return cell

    def push(self, data: T) -> GenerationalId:
        """Store data, reusing the most recently freed slot if there is one."""
        if self._free:
            index, old_generation = self._free.pop()
            generation = old_generation + 1
            self._cells[index] = _Cell(generation, data)
        else:
            index = len(self._cells)
            generation = 0
            self._cells.append(_Cell(generation, data))
        return GenerationalId(index, generation)

    def get(self, gid: GenerationalId) -> Optional[T]:
        """The data stored under gid, or None if the id is stale or unknown."""
        cell = self._live_cell(gid)
        return None if cell is None else cell.state

    def set(self, gid: GenerationalId, data: T) -> None:
        """Replace the data under a live id; raises KeyError for a stale id."""
        cell = self._live_cell(gid)
        if cell is None:
            raise KeyError(gid)
        cell.state = data

    def _is_current(self, index: int, cell: _Cell[T]) -> bool:
        return index < len(self._cells) and self._cells[index] is cell

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Visit live items in slot order and free those the predicate rejects."""
        for index, cell in list(enumerate(self._cells)):
            if cell is None or not self._is_current(index, cell):
                continue
            keep = predicate(cell.state)
            if not keep and self._is_current(index, cell):
                self._free.append((index, cell.generation))
                self._cells[index] = None

    def count(self) -> int:
        """Number of live items."""
        return sum(1 for cell in self._cells if cell is not None)

    def clear(self) -> None:
        """Drop every slot and every free index."""
        self._cells.clear()
        self._free.clear()

    def free(self, gid: GenerationalId) -> None:
        """Free the slot under gid; stale or unknown ids are ignored."""
        if self._live_cell(gid) is None:
            return
        self._free.append((gid.index, gid.generation))
        self._cells[gid.index] = None