import pytest

from collision_resolver import CollisionResolver, EventKind
from falling_item import FallingItem, ItemKind, ItemStatus

FIELD_HEIGHT = 400


def make_item(lane=1, speed=5.0, kind=ItemKind.BENEFICIAL, y=-30.0):
    return FallingItem(lane=lane, fall_speed=speed, kind=kind, y=y)


def run_ticks(resolver, items, lane, ticks):
    history = []
    for n in range(1, ticks + 1):
        for event in resolver.advance(items, lane, FIELD_HEIGHT):
            history.append((n, event))
    return history


def test_catch_line_and_zone():
    resolver = CollisionResolver()
    assert resolver.catch_line_y(FIELD_HEIGHT) == pytest.approx(340.0)
    assert resolver.in_catch_zone(320.0, FIELD_HEIGHT)
    assert resolver.in_catch_zone(360.0, FIELD_HEIGHT)
    assert not resolver.in_catch_zone(319.9, FIELD_HEIGHT)
    assert not resolver.in_catch_zone(360.1, FIELD_HEIGHT)


def test_item_in_catcher_lane_is_caught_once_inside_zone_window():
    resolver = CollisionResolver()
    item = make_item(lane=1)
    items = [item]

    history = run_ticks(resolver, items, lane=1, ticks=120)

    # Zone spans ticks (340-20+30)/5 .. (340+20+30)/5
    assert len(history) == 1
    tick, event = history[0]
    assert 70 <= tick <= 78
    assert tick == 70
    assert event.kind is EventKind.CAUGHT
    assert event.item is item
    assert item.status is ItemStatus.CAUGHT
    assert items == []


def test_item_in_other_lane_falls_through_and_is_missed():
    resolver = CollisionResolver()
    item = make_item(lane=0)
    items = [item]

    history = run_ticks(resolver, items, lane=2, ticks=120)

    assert [(tick, event.kind) for tick, event in history] == [(87, EventKind.MISSED)]
    assert item.status is ItemStatus.MISSED
    assert items == []


def test_catcher_arriving_mid_zone_still_catches():
    resolver = CollisionResolver()
    item = make_item(lane=2)
    items = [item]

    assert run_ticks(resolver, items, lane=0, ticks=72) == []
    assert item.is_falling
    assert resolver.in_catch_zone(item.y, FIELD_HEIGHT)

    events = resolver.advance(items, 2, FIELD_HEIGHT)
    assert [e.kind for e in events] == [EventKind.CAUGHT]


def test_events_follow_spawn_order_and_list_is_filtered_in_place():
    resolver = CollisionResolver()
    first = make_item(lane=1, y=318.0, speed=5.0)
    second = make_item(lane=1, y=319.0, speed=5.0, kind=ItemKind.HARMFUL)
    faraway = make_item(lane=1, y=0.0)
    items = [first, second, faraway]
    same_list = items

    events = resolver.advance(items, 1, FIELD_HEIGHT)

    assert [e.item for e in events] == [first, second]
    assert items is same_list
    assert items == [faraway]


def test_resolved_item_cannot_be_resolved_again():
    item = make_item()
    item.resolve(ItemStatus.CAUGHT)
    with pytest.raises(ValueError):
        item.resolve(ItemStatus.MISSED)
    assert item.status is ItemStatus.CAUGHT


def test_items_with_bad_lane_are_rejected():
    with pytest.raises(ValueError):
        make_item(lane=3)
