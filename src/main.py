"""Entry point for the heap insertion visualizer.

Sets up the ECS world, event bus, engine systems, and Arcade window.
"""
import logging

from arcade import Window, key, run, set_background_color, color
from heapviz.constants import MAX_LEVELS, WINDOW_HEIGHT, WINDOW_WIDTH
from heapviz.events.bus import EVENT_PLAYBACK_COMMAND, EVENT_TICK, EventBus
from heapviz.systems.animation import AnimationSystem
from heapviz.systems.playback_input_system import (
    COMMAND_RESTART,
    COMMAND_SET_LEVELS,
    COMMAND_SET_SPEED,
    COMMAND_TOGGLE_PAUSE,
    PlaybackInputSystem,
)
from heapviz.systems.render import RenderSystem
from heapviz.systems.tick_clock import TickClock
from heapviz.world import create_engine

SPEED_STEP_MS = 100
LEVEL_KEYS = {getattr(key, f"KEY_{n}"): n for n in range(1, MAX_LEVELS + 1)}


class HeapWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Heap insertion")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        # The engine builds before animation subscribes, so replay the initial rebuild by hand.
        self.controller = create_engine(self.event_bus)
        self.animation_system = AnimationSystem(self.controller.world, self.event_bus)
        self.animation_system.on_rebuilt(self)
        self.input_system = PlaybackInputSystem(self.event_bus, self.controller)
        self.tick_clock = TickClock(self.event_bus, self.controller)
        self.render_system = RenderSystem(
            self.controller.world, self.event_bus, self, self.controller, self.animation_system
        )
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        speed = self.controller.state.speed_ms
        if symbol == key.SPACE:
            self._command(COMMAND_TOGGLE_PAUSE)
        elif symbol == key.R:
            self._command(COMMAND_RESTART)
        elif symbol == key.UP:
            self._command(COMMAND_SET_SPEED, speed - SPEED_STEP_MS)
        elif symbol == key.DOWN:
            self._command(COMMAND_SET_SPEED, speed + SPEED_STEP_MS)
        elif symbol in LEVEL_KEYS:
            self._command(COMMAND_SET_LEVELS, LEVEL_KEYS[symbol])

    def _command(self, command: str, value=None):
        self.event_bus.emit(EVENT_PLAYBACK_COMMAND, command=command, value=value)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = HeapWindow()
    run()

if __name__ == "__main__":
    main()
