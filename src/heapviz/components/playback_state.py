"""Playback state resource shared by the controller and the stepper."""
from dataclasses import asdict, dataclass
from typing import Any, Dict

from heapviz.constants import DEFAULT_LEVELS, DEFAULT_SPEED_MS, LEAD_IN_TICKS


@dataclass(slots=True)
class PlaybackState:
    """Singleton component holding everything a tick depends on besides the nodes."""
    current: int = -LEAD_IN_TICKS
    levels: int = DEFAULT_LEVELS
    speed_ms: int = DEFAULT_SPEED_MS
    paused: bool = False
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlaybackState":
        return cls(**data)
