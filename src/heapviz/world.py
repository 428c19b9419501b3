import random

from esper import World

from heapviz.constants import DEFAULT_LEVELS, DEFAULT_SPEED_MS, ITEM_COUNT
from heapviz.events.bus import EventBus
from heapviz.systems.item_source import ValueGenerator
from heapviz.systems.playback_controller import PlaybackController


def create_world(rng: random.Random | None = None) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    return world


def create_engine(
    event_bus: EventBus,
    *,
    world: World | None = None,
    levels: int = DEFAULT_LEVELS,
    speed_ms: int = DEFAULT_SPEED_MS,
    item_count: int = ITEM_COUNT,
    value_generator: ValueGenerator | None = None,
    rng: random.Random | None = None,
) -> PlaybackController:
    """Build a world with a heap run ready to tick."""
    world = world or create_world(rng)
    return PlaybackController(
        world,
        event_bus,
        levels=levels,
        speed_ms=speed_ms,
        item_count=item_count,
        value_generator=value_generator,
        rng=rng,
    )
