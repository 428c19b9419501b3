"""Tick-by-tick insertion state machine.

Finding the exchanges an insertion needs happens once, when the insertion
starts; applying them happens one per tick. The result of the algorithm is a
queue of swaps and pacing belongs to whoever calls ``tick()``.
"""
from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, List, Optional, Sequence, Tuple

from esper import World

from heapviz.components.node import DisplayPosition, Membership
from heapviz.components.playback_state import PlaybackState
from heapviz.components.swap_entry import NodeRef
from heapviz.constants import ITEM_SPACING
from heapviz.events.bus import (
    EVENT_INSERTION_STARTED,
    EVENT_ITEMS_ADVANCED,
    EVENT_RUN_COMPLETED,
    EVENT_SWAP_APPLIED,
    EventBus,
)
from heapviz.systems.heap_store import HeapStore
from heapviz.systems.item_source import ItemSource
from heapviz.systems.swap_queue import SwapQueue
from heapviz.tick_result import Advanced, Completed, InsertionStarted, NoOp, SwapApplied, TickResult

logger = logging.getLogger(__name__)

ChildChooser = Callable[[Sequence[int], int, Optional[int]], int]


def smaller_child(values: Sequence[int], left: int, right: Optional[int]) -> int:
    """Pick the smaller-valued child; the left child wins ties."""
    if right is None or values[left] <= values[right]:
        return left
    return right


def sift_down(
    values: Sequence[int],
    start: int = 0,
    choose_child: ChildChooser = smaller_child,
) -> List[Tuple[int, int]]:
    """Return the (parent, child) exchanges that walk ``start`` down the tree.

    Works on a copy of ``values``. At each node the child picked by
    ``choose_child`` is exchanged when its value is strictly greater; the walk
    stops at a leaf or at the first node needing no exchange.
    """
    shadow = list(values)
    size = len(shadow)
    exchanges: List[Tuple[int, int]] = []
    pos = start
    while True:
        assert 0 <= pos < size, f"sift-down position {pos} outside heap of {size}"
        left = 2 * pos + 1
        if left >= size:
            break
        right = left + 1 if left + 1 < size else None
        child = choose_child(shadow, left, right)
        assert child == left or child == right, f"comparator picked non-child {child} of {pos}"
        if shadow[child] <= shadow[pos]:
            break
        exchanges.append((pos, child))
        shadow[pos], shadow[child] = shadow[child], shadow[pos]
        pos = child
    return exchanges


class StepperPhase(Enum):
    IDLE = auto()
    DRAINING = auto()
    DONE = auto()


class InsertionStepper:
    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        state: PlaybackState,
        heap: HeapStore,
        items: ItemSource,
        queue: SwapQueue,
        *,
        choose_child: ChildChooser = smaller_child,
        shift: float = ITEM_SPACING,
    ):
        self.world = world
        self.event_bus = event_bus
        self.state = state
        self.heap = heap
        self.items = items
        self.queue = queue
        self.choose_child = choose_child
        self.shift = shift

    @property
    def phase(self) -> StepperPhase:
        if self.queue:
            return StepperPhase.DRAINING
        if self.state.current >= self.items.count:
            return StepperPhase.DONE
        return StepperPhase.IDLE

    def tick(self) -> TickResult:
        if self.state.paused:
            return NoOp()

        if self.queue:
            entry = self.queue.head()
            self.queue.dequeue_and_apply()
            self.event_bus.emit(EVENT_SWAP_APPLIED, entry=entry)
            return SwapApplied(entry)

        if self.state.current >= self.items.count:
            if self.state.completed:
                return NoOp()
            self.state.completed = True
            logger.info("run completed; heap values %s", self.heap.values())
            self.event_bus.emit(EVENT_RUN_COMPLETED, current=self.state.current)
            return Completed(self.state.current)

        self._shift_items()
        self.state.current += 1
        index = self.state.current
        value = self.items.value_at(index)
        if value is None or value <= self.heap.value_at(0):
            self.event_bus.emit(EVENT_ITEMS_ADVANCED, current=index)
            return Advanced(index)
        return self._start_insertion(index, value)

    def _shift_items(self) -> None:
        for ent in self.items.slots:
            if self.world.component_for_entity(ent, Membership).in_heap:
                continue
            self.world.component_for_entity(ent, DisplayPosition).x -= self.shift

    def _start_insertion(self, index: int, value: int) -> InsertionStarted:
        # Root<->item goes first; sift-down runs on values as they will be after it.
        self.queue.enqueue(NodeRef.heap(0), NodeRef.item(index))
        shadow = self.heap.values()
        shadow[0] = value
        for parent, child in sift_down(shadow, 0, self.choose_child):
            self.queue.enqueue(NodeRef.heap(parent), NodeRef.heap(child))
        swaps = len(self.queue)
        logger.debug("inserting item %d (value %d), %d swaps queued", index, value, swaps)
        self.event_bus.emit(EVENT_INSERTION_STARTED, index=index, value=value, swaps=swaps)
        return InsertionStarted(index=index, value=value, swaps=swaps)
