"""Pause/resume/speed/restart/depth commands over a single heap run."""
from __future__ import annotations

import logging
import math
import random

from esper import World

from heapviz.components.playback_state import PlaybackState
from heapviz.constants import (
    DEFAULT_LEVELS,
    DEFAULT_SPEED_MS,
    ITEM_COUNT,
    LEAD_IN_TICKS,
    MAX_LEVELS,
    MIN_LEVELS,
    PAUSED_INTERVAL_MS,
)
from heapviz.errors import InvalidConfiguration
from heapviz.events.bus import (
    EVENT_HEAP_REBUILT,
    EVENT_PLAYBACK_CHANGED,
    EVENT_STEP_TRANSITION,
    EventBus,
)
from heapviz.layout import item_layout, tree_layout
from heapviz.snapshot import EngineSnapshot, take_snapshot
from heapviz.systems.heap_store import HeapStore, Layout
from heapviz.systems.insertion_stepper import ChildChooser, InsertionStepper, smaller_child
from heapviz.systems.item_source import ItemLayout, ItemSource, ValueGenerator, uniform_values
from heapviz.systems.swap_queue import SwapQueue
from heapviz.tick_result import Advanced, InsertionStarted, SwapApplied, TickResult

logger = logging.getLogger(__name__)


def validate_levels(levels) -> int:
    if isinstance(levels, bool) or not isinstance(levels, int):
        raise InvalidConfiguration(f"levels must be an integer, got {levels!r}")
    if not MIN_LEVELS <= levels <= MAX_LEVELS:
        raise InvalidConfiguration(
            f"levels must be between {MIN_LEVELS} and {MAX_LEVELS}, got {levels}"
        )
    return levels


def validate_speed(speed_ms) -> int:
    if isinstance(speed_ms, bool) or not isinstance(speed_ms, (int, float)):
        raise InvalidConfiguration(f"speed must be a number of milliseconds, got {speed_ms!r}")
    if not math.isfinite(speed_ms):
        raise InvalidConfiguration(f"speed must be a finite number of milliseconds, got {speed_ms}")
    if speed_ms <= 0:
        raise InvalidConfiguration(f"speed must be positive, got {speed_ms}")
    return max(1, int(speed_ms))


class PlaybackController:
    """Owns the playback state and the stores; every command lands here.

    Invalid commands raise :class:`InvalidConfiguration` before anything is
    touched.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        levels: int = DEFAULT_LEVELS,
        speed_ms: int = DEFAULT_SPEED_MS,
        item_count: int = ITEM_COUNT,
        value_generator: ValueGenerator | None = None,
        rng: random.Random | None = None,
        choose_child: ChildChooser = smaller_child,
        heap_layout: Layout = tree_layout,
        track_layout: ItemLayout = item_layout,
    ):
        if item_count < 0:
            raise InvalidConfiguration(f"item count must not be negative, got {item_count}")
        self.world = world
        self.event_bus = event_bus
        self.state = PlaybackState(
            levels=validate_levels(levels),
            speed_ms=validate_speed(speed_ms),
        )
        self.state_entity = world.create_entity(self.state)
        self.item_count = item_count
        self.value_generator = value_generator or uniform_values(rng or getattr(world, "random", None))
        self.heap_layout = heap_layout
        self.track_layout = track_layout
        self.heap = HeapStore(world)
        self.items = ItemSource(world)
        self.queue = SwapQueue(world, self.heap, self.items)
        self.stepper = InsertionStepper(
            world, event_bus, self.state, self.heap, self.items, self.queue,
            choose_child=choose_child,
        )
        self.restart()

    @property
    def interval_ms(self) -> int:
        """Delay the clock should wait before the next tick."""
        return PAUSED_INTERVAL_MS if self.state.paused else self.state.speed_ms

    def transition_ms(self, result: TickResult) -> int:
        if isinstance(result, SwapApplied):
            return max(1, self.state.speed_ms // 2)
        if isinstance(result, (Advanced, InsertionStarted)):
            return self.state.speed_ms
        return 0

    def tick(self) -> TickResult:
        result = self.stepper.tick()
        duration = self.transition_ms(result)
        if duration:
            self.event_bus.emit(EVENT_STEP_TRANSITION, result=result, duration_ms=duration)
        return result

    def snapshot(self) -> EngineSnapshot:
        return take_snapshot(
            self.world,
            self.heap.slots,
            self.heap.parent_indices,
            self.items.slots,
            self.state,
        )

    def pause(self) -> None:
        if not self.state.paused:
            self.state.paused = True
            self._emit_changed()

    def resume(self) -> None:
        if self.state.paused:
            self.state.paused = False
            self._emit_changed()

    def set_speed(self, speed_ms) -> None:
        self.state.speed_ms = validate_speed(speed_ms)
        self._emit_changed()

    def set_levels(self, levels) -> None:
        self.state.levels = validate_levels(levels)
        self.restart()

    def restart(self) -> None:
        # Pending swaps are discarded whole; none is partially applied.
        self.queue.clear()
        self.heap.build(self.state.levels, self.heap_layout)
        self.items.build(self.item_count, self.value_generator, self.track_layout)
        self.state.current = -LEAD_IN_TICKS
        self.state.completed = False
        self.state.paused = False
        logger.info("restarted with %d levels and %d items", self.state.levels, self.item_count)
        self.event_bus.emit(EVENT_HEAP_REBUILT, levels=self.state.levels, item_count=self.item_count)
        self._emit_changed()

    def _emit_changed(self) -> None:
        self.event_bus.emit(
            EVENT_PLAYBACK_CHANGED,
            paused=self.state.paused,
            speed_ms=self.state.speed_ms,
            levels=self.state.levels,
        )
