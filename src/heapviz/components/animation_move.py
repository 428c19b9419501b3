from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class MoveAnimation:
    src: Tuple[float, float]
    dst: Tuple[float, float]
    duration: float  # seconds
    progress: float = 0.0  # 0..1

    def current(self) -> Tuple[float, float]:
        p = self.progress
        return (
            self.src[0] + (self.dst[0] - self.src[0]) * p,
            self.src[1] + (self.dst[1] - self.src[1]) * p,
        )
