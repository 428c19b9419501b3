from esper import World

from heapviz.components.node import NodeColor, NodeValue
from heapviz.constants import EDGE_COLOR, NODE_RADIUS, TEXT_COLOR
from heapviz.events.bus import EVENT_PLAYBACK_CHANGED, EventBus
from heapviz.systems.animation import AnimationSystem
from heapviz.systems.playback_controller import PlaybackController


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, controller: PlaybackController,
                 animation: AnimationSystem):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.controller = controller
        self.animation = animation
        self.status_line = ""
        self.event_bus.subscribe(EVENT_PLAYBACK_CHANGED, self.on_playback_changed)

    def on_playback_changed(self, sender, **kwargs):
        state = "paused" if kwargs.get('paused') else "running"
        self.status_line = f"{state} | {kwargs.get('speed_ms')} ms | {kwargs.get('levels')} levels"

    def layout(self) -> dict[int, tuple[float, float]]:
        """Current draw coordinates per node entity."""
        slots = list(self.controller.heap.slots) + list(self.controller.items.slots)
        return {ent: self.animation.position_of(ent) for ent in slots}

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        coords = self.layout()
        try:
            arcade.get_window()
        except Exception:
            return

        heap = self.controller.heap
        for index, parent in enumerate(heap.parent_indices):
            if parent is None:
                continue
            x1, y1 = coords[heap.slots[parent]]
            x2, y2 = coords[heap.slots[index]]
            arcade.draw_line(x1, y1, x2, y2, EDGE_COLOR, 2)

        for ent, (x, y) in coords.items():
            color = self.world.component_for_entity(ent, NodeColor).color
            value = self.world.component_for_entity(ent, NodeValue).value
            arcade.draw_circle_filled(x, y, NODE_RADIUS, color)
            arcade.draw_text(str(value), x, y, TEXT_COLOR, 14, anchor_x="center", anchor_y="center")

        if self.status_line:
            arcade.draw_text(self.status_line, 10, self.window.height - 24, TEXT_COLOR, 12)
