# game_session.py

from dataclasses import dataclass, field
from typing import List

from falling_item import CENTER_LANE, FallingItem


@dataclass
class GameSession:
    """Everything that belongs to one play-through. Replaced, never reset."""
    time_remaining: int = 0
    score: int = 0
    level: int = 1
    catcher_lane: int = CENTER_LANE
    items: List[FallingItem] = field(default_factory=list)
    frame_count: int = 0
    # is_active gates per-frame work; ended records that the final score was published.
    # A fresh GameSession() before any start() is inactive but not ended.
    is_active: bool = False
    ended: bool = False
