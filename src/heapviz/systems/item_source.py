"""Pre-generated track of values waiting to be inserted."""
from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from esper import World

from heapviz.components.node import DisplayPosition, Membership, NodeColor, NodeKey, NodeValue
from heapviz.constants import ITEM_COLOR, MAX_ITEM_VALUE, MIN_ITEM_VALUE
from heapviz.layout import item_layout

logger = logging.getLogger(__name__)

ValueGenerator = Callable[[int], int]
ItemLayout = Callable[[int], Tuple[float, float]]


def uniform_values(
    rng: random.Random | None = None,
    low: int = MIN_ITEM_VALUE,
    high: int = MAX_ITEM_VALUE,
) -> ValueGenerator:
    """Uniform integers in ``[low, high]``; every build draws fresh values."""
    source = rng or random.Random()

    def generate(index: int) -> int:
        return source.randint(low, high)

    return generate


def fixed_values(values: Sequence[int]) -> ValueGenerator:
    """Replay ``values`` by index, so every rebuild yields the same items."""
    frozen = tuple(values)

    def generate(index: int) -> int:
        return frozen[index]

    return generate


class ItemSource:
    def __init__(self, world: World):
        self.world = world
        self.slots: List[int] = []

    def build(
        self,
        count: int,
        value_generator: ValueGenerator,
        layout: ItemLayout = item_layout,
    ) -> List[int]:
        self.clear()
        for i in range(count):
            x, y = layout(i)
            ent = self.world.create_entity(
                NodeKey(f"item-{i}"),
                NodeValue(int(value_generator(i))),
                DisplayPosition(x, y),
                Membership(in_heap=False),
                NodeColor(ITEM_COLOR),
            )
            self.slots.append(ent)
        logger.debug("built %d items", count)
        return list(self.slots)

    def clear(self) -> None:
        for ent in self.slots:
            self.world.delete_entity(ent, immediate=True)
        self.slots = []

    def __len__(self) -> int:
        return len(self.slots)

    @property
    def count(self) -> int:
        return len(self.slots)

    def at(self, index: int) -> Optional[int]:
        """Entity at ``index``, or None past either end of the track."""
        if 0 <= index < len(self.slots):
            return self.slots[index]
        return None

    def value_at(self, index: int) -> Optional[int]:
        ent = self.at(index)
        if ent is None:
            return None
        return self.world.component_for_entity(ent, NodeValue).value

    def values(self) -> List[int]:
        return [self.world.component_for_entity(ent, NodeValue).value for ent in self.slots]
