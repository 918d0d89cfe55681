"""
Indexed binary min-heap over (vertex, key) pairs

A vertex -> slot list makes decrease_key O(log n) and membership O(1).
Vertices must lie in [0, capacity).
"""

from typing import List, NamedTuple

from .exceptions import HeapFull
from .graph import INFINITY

_NOT_IN_HEAP = -1


class HeapItem(NamedTuple):
    vertex: int
    key: int


# returned by extract_min on an empty heap
EMPTY = HeapItem(INFINITY, INFINITY)


class IndexedMinHeap:

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: List[HeapItem] = []
        self._slot: List[int] = [_NOT_IN_HEAP] * capacity

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, vertex: int) -> bool:
        return 0 <= vertex < self.capacity and self._slot[vertex] != _NOT_IN_HEAP

    def is_empty(self) -> bool:
        return not self._items

    def key(self, vertex: int):
        """current key of vertex, None when absent"""
        if vertex not in self:
            return None
        return self._items[self._slot[vertex]].key

    def peek(self) -> HeapItem:
        return self._items[0] if self._items else EMPTY

    def _place(self, index: int, item: HeapItem) -> None:
        self._items[index] = item
        self._slot[item.vertex] = index

    def _sift_up(self, index: int) -> None:
        items = self._items
        item = items[index]
        while index > 0:
            parent = (index - 1) // 2
            if item.key < items[parent].key:
                self._place(index, items[parent])
                index = parent
            else:
                break
        self._place(index, item)

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        item = items[index]
        while True:
            left = 2 * index + 1
            if left >= size:
                break
            smallest = left
            right = left + 1
            if right < size and items[right].key < items[left].key:
                smallest = right
            if items[smallest].key < item.key:
                self._place(index, items[smallest])
                index = smallest
            else:
                break
        self._place(index, item)

    def insert(self, vertex: int, key: int) -> None:
        """
        Add vertex with key; raises HeapFull when at capacity
        A vertex that is already queued gets decrease_key instead
        """
        if not 0 <= vertex < self.capacity:
            raise ValueError(f"vertex {vertex} outside heap range [0, {self.capacity})")
        if self._slot[vertex] != _NOT_IN_HEAP:
            self.decrease_key(vertex, key)
            return
        if len(self._items) >= self.capacity:
            raise HeapFull(f"heap is full (capacity {self.capacity})")
        self._items.append(HeapItem(vertex, key))
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, vertex: int, new_key: int) -> bool:
        """
        Lower vertex's key; no-op when absent or new_key is not smaller
        Returns True when the heap changed
        """
        if vertex not in self:
            return False
        index = self._slot[vertex]
        if new_key >= self._items[index].key:
            return False
        self._items[index] = HeapItem(vertex, new_key)
        self._sift_up(index)
        return True

    def extract_min(self) -> HeapItem:
        """Pop the smallest key; EMPTY when nothing is queued"""
        if not self._items:
            return EMPTY
        top = self._items[0]
        self._slot[top.vertex] = _NOT_IN_HEAP
        last = self._items.pop()
        if self._items:
            self._place(0, last)
            self._sift_down(0)
        return top

    def check_invariant(self) -> bool:
        """True when the slot map and heap order are both consistent"""
        items = self._items
        for i, item in enumerate(items):
            if self._slot[item.vertex] != i:
                return False
            if i > 0 and items[(i - 1) // 2].key > item.key:
                return False
        return sum(1 for s in self._slot if s != _NOT_IN_HEAP) == len(items)
