from __future__ import annotations

from typing import Sequence

from heapviz.events.bus import EventBus
from heapviz.systems.item_source import fixed_values
from heapviz.systems.playback_controller import PlaybackController
from heapviz.tick_result import Completed, TickResult
from heapviz.world import create_engine


def make_engine(
    values: Sequence[int],
    levels: int,
    *,
    bus: EventBus | None = None,
    speed_ms: int = 200,
) -> PlaybackController:
    """Engine replaying ``values`` so runs are reproducible."""
    return create_engine(
        bus or EventBus(),
        levels=levels,
        speed_ms=speed_ms,
        item_count=len(values),
        value_generator=fixed_values(values),
    )


def run_until_completed(controller: PlaybackController, limit: int = 1000) -> list[TickResult]:
    """Tick until the run reports completion and return every result seen."""
    results: list[TickResult] = []
    for _ in range(limit):
        result = controller.tick()
        results.append(result)
        if isinstance(result, Completed):
            return results
    raise AssertionError(f"run did not complete within {limit} ticks")
