"""Array-backed complete binary tree stored as esper entities."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from esper import World

from heapviz.components.node import DisplayPosition, Membership, NodeColor, NodeKey, NodeValue
from heapviz.constants import HEAP_NODE_COLOR, MIN_LEVELS
from heapviz.errors import InvalidConfiguration
from heapviz.layout import tree_layout

logger = logging.getLogger(__name__)

Layout = Callable[[int, int], Tuple[float, float]]


def capacity_for(levels: int) -> int:
    return 2 ** levels - 1


def parent_index(index: int) -> Optional[int]:
    if index <= 0:
        return None
    return (index - 1) // 2


def is_max_heap(values: Sequence[int]) -> bool:
    """True when every node is >= each of its children."""
    for i in range(1, len(values)):
        if values[(i - 1) // 2] < values[i]:
            return False
    return True


class HeapStore:
    """Owns the heap slot array; slot ``i`` holds the entity currently at that node.

    Slots only change through the swap queue, which exchanges entities between
    slots. Everything else here is construction or read access.
    """

    def __init__(self, world: World):
        self.world = world
        self.levels = 0
        self.slots: List[int] = []
        self.parent_indices: List[Optional[int]] = []

    def build(self, levels: int, layout: Layout = tree_layout) -> List[int]:
        if levels < MIN_LEVELS:
            raise InvalidConfiguration(f"levels must be >= {MIN_LEVELS}, got {levels}")
        self.clear()
        size = capacity_for(levels)
        for i in range(size):
            x, y = layout(i, levels)
            ent = self.world.create_entity(
                NodeKey(f"heap-{i}"),
                NodeValue(0),
                DisplayPosition(x, y),
                Membership(in_heap=True),
                NodeColor(HEAP_NODE_COLOR),
            )
            self.slots.append(ent)
            self.parent_indices.append(parent_index(i))
        self.levels = levels
        logger.debug("built heap with %d levels (%d nodes)", levels, size)
        return list(self.slots)

    def clear(self) -> None:
        for ent in self.slots:
            self.world.delete_entity(ent, immediate=True)
        self.slots = []
        self.parent_indices = []
        self.levels = 0

    def __len__(self) -> int:
        return len(self.slots)

    def root(self) -> int:
        return self.slots[0]

    def node(self, index: int) -> int:
        return self.slots[index]

    def value_at(self, index: int) -> int:
        return self.world.component_for_entity(self.slots[index], NodeValue).value

    def values(self) -> List[int]:
        return [self.world.component_for_entity(ent, NodeValue).value for ent in self.slots]

    def children(self, index: int) -> List[int]:
        left = 2 * index + 1
        return [c for c in (left, left + 1) if c < len(self.slots)]
