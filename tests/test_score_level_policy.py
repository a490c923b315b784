from collision_resolver import EventKind, ItemEvent
from falling_item import FallingItem, ItemKind
from score_level_policy import ScoreLevelPolicy


def caught(kind):
    return ItemEvent(EventKind.CAUGHT, FallingItem(lane=0, fall_speed=3.0, kind=kind))


def missed(kind=ItemKind.BENEFICIAL):
    return ItemEvent(EventKind.MISSED, FallingItem(lane=0, fall_speed=3.0, kind=kind))


def test_apple_catch_from_zero():
    update = ScoreLevelPolicy().apply(caught(ItemKind.BENEFICIAL), score=0, level=1)
    assert (update.score, update.level, update.leveled_up, update.delta) == (10, 1, False, 10)


def test_thirty_apples_level_up_exactly_once_at_300():
    policy = ScoreLevelPolicy()
    score, level = 0, 1
    level_ups = []
    for n in range(1, 41):
        update = policy.apply(caught(ItemKind.BENEFICIAL), score, level)
        score, level = update.score, update.level
        if update.leveled_up:
            level_ups.append((n, score, level))

    assert level_ups == [(30, 300, 2)]
    assert (score, level) == (400, 2)


def test_bomb_can_take_score_negative_without_dropping_level():
    policy = ScoreLevelPolicy()
    update = policy.apply(caught(ItemKind.HARMFUL), score=20, level=1)
    assert (update.score, update.level, update.leveled_up) == (-30, 1, False)
    assert policy.derive_level(-30) == 1


def test_level_holds_after_bomb_below_threshold():
    policy = ScoreLevelPolicy()
    update = policy.apply(caught(ItemKind.HARMFUL), score=310, level=2)
    assert update.score == 260
    assert policy.derive_level(260) == 1
    assert update.level == 2
    assert not update.leveled_up


def test_miss_has_no_score_effect():
    for kind in (ItemKind.BENEFICIAL, ItemKind.HARMFUL):
        update = ScoreLevelPolicy().apply(missed(kind), score=40, level=1)
        assert (update.score, update.level, update.leveled_up, update.delta) == (40, 1, False, 0)


def test_derive_level_steps():
    policy = ScoreLevelPolicy()
    assert policy.derive_level(0) == 1
    assert policy.derive_level(299) == 1
    assert policy.derive_level(300) == 2
    assert policy.derive_level(899) == 3
