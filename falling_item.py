# falling_item.py

from dataclasses import dataclass
from enum import Enum

LANE_COUNT = 3
CENTER_LANE = 1
SPAWN_Y = -30.0


class ItemKind(Enum):
    BENEFICIAL = 'apple'
    HARMFUL = 'bomb'


class ItemStatus(Enum):
    FALLING = 'falling'
    CAUGHT = 'caught'
    MISSED = 'missed'


@dataclass(eq=False)
class FallingItem:
    """One apple or bomb falling down a lane.

    `y` is the distance from the top of the play-field in pixels. Status moves
    from FALLING to CAUGHT or MISSED once and never comes back.
    """
    lane: int
    fall_speed: float
    kind: ItemKind
    y: float = SPAWN_Y
    status: ItemStatus = ItemStatus.FALLING

    def __post_init__(self):
        if not 0 <= self.lane < LANE_COUNT:
            raise ValueError(f"lane must be in [0, {LANE_COUNT - 1}], got {self.lane}")

    @property
    def is_falling(self):
        return self.status is ItemStatus.FALLING

    @property
    def is_harmful(self):
        return self.kind is ItemKind.HARMFUL

    def resolve(self, status: ItemStatus):
        if status is ItemStatus.FALLING:
            raise ValueError("cannot resolve an item back to FALLING")
        if not self.is_falling:
            raise ValueError(f"item already resolved as {self.status.value}")
        self.status = status
