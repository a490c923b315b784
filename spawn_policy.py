# spawn_policy.py

import logging
import random
from dataclasses import dataclass

from falling_item import LANE_COUNT, SPAWN_Y, FallingItem, ItemKind

logger = logging.getLogger(__name__)


@dataclass
class SpawnSettings:
    """Spawn tuning. Intervals are in frames, speeds in pixels per frame."""
    base_interval: int = 60
    min_interval: int = 20
    interval_step: int = 5
    base_harmful_chance: float = 0.2
    harmful_chance_step: float = 0.05
    base_speed: float = 2.0
    level_speed_step: float = 0.5
    speed_jitter: float = 1.0
    spawn_y: float = SPAWN_Y


class SpawnPolicy:
    def __init__(self, settings=None, rng=None):
        self.settings = settings or SpawnSettings()
        self.rng = rng or random.Random()

    def spawn_interval(self, level: int) -> int:
        s = self.settings
        return max(s.min_interval, s.base_interval - level * s.interval_step)

    def harmful_chance(self, level: int) -> float:
        s = self.settings
        chance = s.base_harmful_chance + level * s.harmful_chance_step
        return min(1.0, max(0.0, chance))

    def fall_speed(self, level: int) -> float:
        s = self.settings
        return s.base_speed + level * s.level_speed_step + self.rng.uniform(0, s.speed_jitter)

    def maybe_spawn(self, frame_count: int, level: int):
        """Return a new item when `frame_count` lands on the level's spawn cadence, else None."""
        if frame_count <= 0 or frame_count % self.spawn_interval(level) != 0:
            return None

        lane = self.rng.randrange(LANE_COUNT)
        kind = ItemKind.HARMFUL if self.rng.random() < self.harmful_chance(level) else ItemKind.BENEFICIAL
        item = FallingItem(lane=lane, fall_speed=self.fall_speed(level), kind=kind, y=self.settings.spawn_y)
        logger.debug("Spawned %s in lane %d at frame %d (speed=%.2f)", kind.value, lane, frame_count, item.fall_speed)
        return item
