"""Components describing one heap slot or item record."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(slots=True)
class NodeKey:
    """Stable name assigned at build time (``heap-3``, ``item-7``).

    Survives exchanges and restarts so a renderer can track the shape.
    """
    key: str


@dataclass(slots=True)
class NodeValue:
    value: int = 0


@dataclass(slots=True)
class DisplayPosition:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(slots=True)
class Membership:
    in_heap: bool


@dataclass(slots=True)
class NodeColor:
    color: Tuple[int, int, int]
