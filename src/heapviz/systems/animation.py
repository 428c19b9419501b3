from typing import Dict, Tuple

from esper import World

from heapviz.components.animation_move import MoveAnimation
from heapviz.components.node import DisplayPosition, NodeKey
from heapviz.events.bus import EVENT_HEAP_REBUILT, EVENT_STEP_TRANSITION, EVENT_TICK, EventBus


class AnimationSystem:
    """Drives position transitions; each moving node carries its own MoveAnimation."""
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        # Last target handed out per entity, used as the start of the next move.
        self._targets: Dict[int, Tuple[float, float]] = {}
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_STEP_TRANSITION, self.on_step_transition)
        event_bus.subscribe(EVENT_HEAP_REBUILT, self.on_rebuilt)

    def on_rebuilt(self, sender, **kwargs):
        for ent in [ent for ent, _ in self.world.get_component(MoveAnimation)]:
            self.world.remove_component(ent, MoveAnimation)
        self._targets = {
            ent: pos.as_tuple()
            for ent, (_, pos) in self.world.get_components(NodeKey, DisplayPosition)
        }

    def on_step_transition(self, sender, **kwargs):
        duration = kwargs.get('duration_ms', 0) / 1000.0
        if duration <= 0:
            return
        for ent, (_, pos) in self.world.get_components(NodeKey, DisplayPosition):
            target = pos.as_tuple()
            previous = self._targets.get(ent, target)
            self._targets[ent] = target
            if previous == target:
                continue
            start = self.position_of(ent) if self.world.has_component(ent, MoveAnimation) else previous
            self.world.add_component(ent, MoveAnimation(src=start, dst=target, duration=duration))

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        finished = []
        for ent, anim in self.world.get_component(MoveAnimation):
            anim.progress += dt / anim.duration
            if anim.progress >= 1.0:
                anim.progress = 1.0
                finished.append(ent)
        for ent in finished:
            self.world.remove_component(ent, MoveAnimation)

    def position_of(self, ent: int) -> Tuple[float, float]:
        """Where the node should be drawn right now."""
        anim = self.world.try_component(ent, MoveAnimation)
        if anim is not None:
            return anim.current()
        return self.world.component_for_entity(ent, DisplayPosition).as_tuple()
