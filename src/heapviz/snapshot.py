"""Read-only views handed to renderers after every tick."""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from esper import World

from heapviz.components.node import DisplayPosition, Membership, NodeColor, NodeKey, NodeValue
from heapviz.components.playback_state import PlaybackState


@dataclass(frozen=True, slots=True)
class NodeView:
    key: str
    value: int
    position: Tuple[float, float]
    in_heap: bool
    color: Tuple[int, int, int]
    parent_index: Optional[int] = None


@dataclass(frozen=True, slots=True)
class EngineSnapshot:
    heap_nodes: Tuple[NodeView, ...]
    items: Tuple[NodeView, ...]
    state: PlaybackState

    @property
    def heap_values(self) -> list[int]:
        return [node.value for node in self.heap_nodes]


def view_of(world: World, entity: int, parent_index: Optional[int] = None) -> NodeView:
    return NodeView(
        key=world.component_for_entity(entity, NodeKey).key,
        value=world.component_for_entity(entity, NodeValue).value,
        position=world.component_for_entity(entity, DisplayPosition).as_tuple(),
        in_heap=world.component_for_entity(entity, Membership).in_heap,
        color=world.component_for_entity(entity, NodeColor).color,
        parent_index=parent_index,
    )


def take_snapshot(world: World, heap_slots, parent_indices, item_slots, state: PlaybackState) -> EngineSnapshot:
    heap_nodes = tuple(
        view_of(world, ent, parent_indices[i]) for i, ent in enumerate(heap_slots)
    )
    items = tuple(view_of(world, ent) for ent in item_slots)
    return EngineSnapshot(heap_nodes=heap_nodes, items=items, state=replace(state))
