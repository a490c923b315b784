# collision_resolver.py

import logging
from dataclasses import dataclass
from enum import Enum

from falling_item import FallingItem, ItemStatus

logger = logging.getLogger(__name__)


class EventKind(Enum):
    CAUGHT = 'caught'
    MISSED = 'missed'


@dataclass(frozen=True)
class ItemEvent:
    kind: EventKind
    item: FallingItem

    @property
    def caught(self):
        return self.kind is EventKind.CAUGHT


@dataclass
class CatchZoneSettings:
    catch_line_ratio: float = 0.85
    catch_tolerance: float = 20.0


class CollisionResolver:
    """Moves falling items and decides which ones were caught or dropped."""

    def __init__(self, settings=None):
        self.settings = settings or CatchZoneSettings()

    def catch_line_y(self, field_height):
        return field_height * self.settings.catch_line_ratio

    def in_catch_zone(self, y, field_height):
        line_y = self.catch_line_y(field_height)
        tol = self.settings.catch_tolerance
        return line_y - tol <= y <= line_y + tol

    def advance(self, items, catcher_lane, field_height):
        """Advance every item one frame and resolve catches and misses.

        `items` is filtered in place so only FALLING items remain. Events come
        back in spawn order, which is also the order scores get applied.
        """
        events = []
        for item in items:
            if not item.is_falling:
                continue

            item.y += item.fall_speed

            if self.in_catch_zone(item.y, field_height) and item.lane == catcher_lane:
                item.resolve(ItemStatus.CAUGHT)
                events.append(ItemEvent(EventKind.CAUGHT, item))
            elif item.y > field_height:
                item.resolve(ItemStatus.MISSED)
                events.append(ItemEvent(EventKind.MISSED, item))

        items[:] = [item for item in items if item.is_falling]
        if events:
            logger.debug("Resolved %d item(s) this frame", len(events))
        return events
