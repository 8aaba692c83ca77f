"""A doubly linked list and a handful of classic sorting routines."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass, field
from typing import Any, Optional

from enginetry.helpers import _format_value, swap


@dataclass(eq=False)
class Node:
    """A list node holding an integer and links to its neighbours."""

    data: int
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list that grows at the front."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self.count = 0

    def push_front(self, data: int) -> None:
        """Insert *data* as the new first element."""
        node = Node(data)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self.count += 1

    def forward_print(self) -> str:
        """Print the elements from head to tail, each followed by a space.

        Returns the line that was printed, without the trailing newline.
        """
        parts = []
        node = self.head
        while node is not None:
            parts.append(f"{node.data} ")
            node = node.next
        line = "".join(parts)
        print(line)
        return line

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self.count


def node_forward(head: Optional[Node], new_node: Optional[Node]) -> Optional[Node]:
    """Append *new_node* at the end of the chain starting at *head*; return the head."""
    if new_node is None:
        return head
    new_node.next = None
    if head is None:
        return new_node
    last = head
    while last.next is not None:
        last = last.next
    last.next = new_node
    return head


def _print_items(items: Iterable[Any]) -> None:
    print("".join(f"{_format_value(item)}, " for item in items))


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ascending in place, printing the sequence after every swap."""
    for i in range(len(items) - 1, 0, -1):
        max_index = i
        for j in range(i):
            if items[max_index] < items[j]:
                max_index = j
        if max_index != i:
            swap(items, i, max_index)
            print("after swapping sorting: ", end="")
            _print_items(items)


def desc_selection_sort(items: MutableSequence[Any]) -> None:
    """Sort descending in place."""
    for i in range(len(items) - 1, 0, -1):
        min_index = i
        for j in range(i):
            if items[min_index] > items[j]:
                min_index = j
        if min_index != i:
            swap(items, i, min_index)


def heapify(items: MutableSequence[Any], heap_size: int, parent_index: int) -> None:
    """Sift the element at *parent_index* down so the subtree is a max-heap."""
    while True:
        max_index = parent_index
        left = 2 * parent_index + 1
        right = 2 * parent_index + 2
        if left < heap_size and items[left] > items[max_index]:
            max_index = left
        if right < heap_size and items[right] > items[max_index]:
            max_index = right
        if max_index == parent_index:
            return
        swap(items, parent_index, max_index)
        parent_index = max_index


def _build_max_heap(items: MutableSequence[Any]) -> None:
    size = len(items)
    for parent in range((size - 2) // 2, -1, -1):
        heapify(items, size, parent)


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort ascending in place; prints the heap once it has been built."""
    _build_max_heap(items)
    _print_items(items)
    size = len(items)
    for i in range(size - 1, 0, -1):
        swap(items, 0, i)
        size -= 1
        heapify(items, size, 0)


def desc_heap_sort(items: MutableSequence[Any]) -> None:
    """Build a max-heap, then rotate the root to the back without re-sifting."""
    _build_max_heap(items)
    size = len(items)
    for i in range(size - 1, 0, -1):
        swap(items, 0, i)
        heapify(items, size, size - 1)


def merge(
    items: MutableSequence[Any], left_index: int, mid_point: int, right_index: int
) -> None:
    """Merge the sorted runs ``[left, mid]`` and ``[mid+1, right]`` in place."""
    left = deque(items[left_index:mid_point + 1])
    right = deque(items[mid_point + 1:right_index + 1])
    k = left_index
    while left and right:
        source = left if left[0] < right[0] else right
        items[k] = source.popleft()
        k += 1
    for rest in (left, right):
        while rest:
            items[k] = rest.popleft()
            k += 1


def merge_sort(items: MutableSequence[Any], left_index: int, right_index: int) -> None:
    """Sort ``items[left_index:right_index + 1]`` ascending in place."""
    if left_index < right_index:
        mid_point = (left_index + right_index) // 2
        merge_sort(items, left_index, mid_point)
        merge_sort(items, mid_point + 1, right_index)
        merge(items, left_index, mid_point, right_index)


def partition(items: Iterable[Any]) -> tuple[list[Any], list[Any], list[Any]]:
    """Split around the first element: return (less, equal, greater)."""
    less: list[Any] = []
    equal: list[Any] = []
    greater: list[Any] = []
    iterator = iter(items)
    try:
        pivot = next(iterator)
    except StopIteration:
        return less, equal, greater
    equal.append(pivot)
    for element in iterator:
        if element < pivot:
            less.append(element)
        elif element > pivot:
            greater.append(element)
        else:
            equal.append(element)
    return less, equal, greater


def _quick_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    less, equal, greater = partition(items)
    return _quick_sorted(less) + equal + _quick_sorted(greater)


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ascending in place by three-way partitioning."""
    items[:] = _quick_sorted(list(items))