from __future__ import annotations

from typing import Any

from heapviz.events.bus import EVENT_TICK, EventBus
from heapviz.systems.playback_controller import PlaybackController


class TickClock:
    """Turns per-frame ``dt`` pulses into engine ticks at the controller's interval."""

    def __init__(self, event_bus: EventBus, controller: PlaybackController) -> None:
        self.event_bus = event_bus
        self.controller = controller
        self._elapsed_ms = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender: Any, **kwargs: Any) -> None:
        dt = kwargs.get("dt", 1 / 60)
        self._elapsed_ms += float(dt) * 1000.0
        # At most one engine step per frame; leftover time carries over.
        interval = self.controller.interval_ms
        if self._elapsed_ms >= interval:
            self._elapsed_ms = min(self._elapsed_ms - interval, float(interval))
            self.controller.tick()

    def reset(self) -> None:
        self._elapsed_ms = 0.0
