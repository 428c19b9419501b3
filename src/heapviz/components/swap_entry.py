from dataclasses import dataclass
from enum import Enum


class Pool(Enum):
    """Which slot array a node reference points into."""
    HEAP = "heap"
    ITEMS = "items"


@dataclass(frozen=True, slots=True)
class NodeRef:
    pool: Pool
    index: int

    @classmethod
    def heap(cls, index: int) -> "NodeRef":
        return cls(Pool.HEAP, index)

    @classmethod
    def item(cls, index: int) -> "NodeRef":
        return cls(Pool.ITEMS, index)


@dataclass(frozen=True, slots=True)
class SwapEntry:
    """Ordered pair of slots whose records are exchanged in one drain step."""
    a: NodeRef
    b: NodeRef
