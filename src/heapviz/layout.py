"""Default display layout for heap slots and the item track."""
from typing import Tuple

from heapviz.constants import (
    ITEM_ROW_Y,
    ITEM_SPACING,
    LEAD_IN_TICKS,
    LEVEL_GAP,
    TREE_TOP,
    WINDOW_WIDTH,
)

Position = Tuple[float, float]


def depth_of(index: int) -> int:
    """Tree level of slot ``index`` (root is level 0)."""
    return (index + 1).bit_length() - 1


def tree_layout(index: int, levels: int) -> Position:
    depth = depth_of(index)
    offset = index - (2 ** depth - 1)
    width_per_node = WINDOW_WIDTH / (2 ** depth)
    x = width_per_node * (offset + 0.5)
    y = TREE_TOP - depth * LEVEL_GAP
    return (x, y)


def item_origin_x() -> float:
    # Item number `current` always sits under the root once the track has shifted
    # LEAD_IN_TICKS + current times, so the origin is offset by the lead-in.
    root_x, _ = tree_layout(0, 1)
    return root_x + LEAD_IN_TICKS * ITEM_SPACING


def item_layout(index: int) -> Position:
    return (item_origin_x() + index * ITEM_SPACING, ITEM_ROW_Y)
