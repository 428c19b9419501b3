"""FIFO of pending slot exchanges, applied one per drain step."""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Optional

from esper import World

from heapviz.components.node import DisplayPosition, Membership
from heapviz.components.swap_entry import NodeRef, Pool, SwapEntry
from heapviz.systems.heap_store import HeapStore
from heapviz.systems.item_source import ItemSource

logger = logging.getLogger(__name__)


class SwapQueue:
    def __init__(self, world: World, heap: HeapStore, items: ItemSource):
        self.world = world
        self.heap = heap
        self.items = items
        self._pending: Deque[SwapEntry] = deque()
        self.applied: List[SwapEntry] = []

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def enqueue(self, a: NodeRef, b: NodeRef) -> SwapEntry:
        entry = SwapEntry(a, b)
        self._pending.append(entry)
        return entry

    def head(self) -> Optional[SwapEntry]:
        return self._pending[0] if self._pending else None

    def pending(self) -> List[SwapEntry]:
        return list(self._pending)

    def clear(self) -> None:
        self._pending.clear()
        self.applied = []

    def dequeue_and_apply(self) -> bool:
        """Apply the oldest pending exchange; False when nothing is queued.

        The two records trade slots and trade ``position`` and ``in_heap``, so
        each record moves to the other's display spot and membership while the
        slot keeps its place on screen.
        """
        if not self._pending:
            return False
        entry = self._pending.popleft()
        slots_a = self._slots(entry.a.pool)
        slots_b = self._slots(entry.b.pool)
        ent_a = slots_a[entry.a.index]
        ent_b = slots_b[entry.b.index]
        slots_a[entry.a.index], slots_b[entry.b.index] = ent_b, ent_a

        pos_a = self.world.component_for_entity(ent_a, DisplayPosition)
        pos_b = self.world.component_for_entity(ent_b, DisplayPosition)
        pos_a.x, pos_b.x = pos_b.x, pos_a.x
        pos_a.y, pos_b.y = pos_b.y, pos_a.y
        mem_a = self.world.component_for_entity(ent_a, Membership)
        mem_b = self.world.component_for_entity(ent_b, Membership)
        mem_a.in_heap, mem_b.in_heap = mem_b.in_heap, mem_a.in_heap

        self.applied.append(entry)
        logger.debug("applied swap %s <-> %s", entry.a, entry.b)
        return True

    def _slots(self, pool: Pool) -> List[int]:
        if pool is Pool.HEAP:
            return self.heap.slots
        return self.items.slots
