from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from .. import config

# Device state before the rig reports one
STATE_OFFLINE = "OFFLINE"

# --- Rig Models ---

@dataclass
class RigState:
    """Last known state of a single rig."""
    id: int
    position: float = config.DEFAULT_POSITION
    distance: float = config.DEFAULT_DISTANCE
    motion: bool = False
    state: str = STATE_OFFLINE

    @property
    def label(self) -> str:
        return f"{self.id:02d}"

    @property
    def object_height(self) -> float:
        return self.position - self.distance

# --- Layout Models ---

@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return self.x, self.y, self.width, self.height

@dataclass(frozen=True)
class RigLayout:
    """Bounding boxes of the four schematic elements."""
    rope: Rect
    light: Rect
    floor: Rect
    object: Rect

    def __iter__(self) -> Iterator[Tuple[str, Rect]]:
        yield "rope", self.rope
        yield "light", self.light
        yield "floor", self.floor
        yield "object", self.object
