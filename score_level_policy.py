# score_level_policy.py

from dataclasses import dataclass

from collision_resolver import ItemEvent


@dataclass(frozen=True)
class ScoreUpdate:
    score: int
    level: int
    leveled_up: bool
    delta: int = 0


class ScoreLevelPolicy:
    """Scoring rules: apples add, bombs subtract, misses are free.

    Level is derived from score in fixed steps but never drops within a
    session, so a bomb right after a level-up keeps the higher level.
    """

    def __init__(self, beneficial_reward=10, harmful_penalty=-50, level_threshold=300):
        if level_threshold <= 0:
            raise ValueError("level_threshold must be positive")
        self.beneficial_reward = beneficial_reward
        self.harmful_penalty = harmful_penalty
        self.level_threshold = level_threshold

    def derive_level(self, score: int) -> int:
        return 1 + max(score, 0) // self.level_threshold

    def delta_for(self, event: ItemEvent) -> int:
        if not event.caught:
            return 0
        return self.harmful_penalty if event.item.is_harmful else self.beneficial_reward

    def apply(self, event: ItemEvent, score: int, level: int) -> ScoreUpdate:
        delta = self.delta_for(event)
        new_score = score + delta
        new_level = max(level, self.derive_level(new_score))
        return ScoreUpdate(score=new_score, level=new_level, leveled_up=new_level > level, delta=delta)
