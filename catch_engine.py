# catch_engine.py

import logging
import threading

import cv2

from collision_resolver import CollisionResolver
from config import GameConfig
from falling_item import ItemKind
from game import Game
from game_clock import GameClock
from game_session import GameSession
from helpers import draw_centered_text, lane_center_x, lane_separator_xs
from score_level_policy import ScoreLevelPolicy
from spawn_policy import SpawnPolicy

logger = logging.getLogger(__name__)

DEFAULT_LANE_LABELS = {'left': 0, 'center': 1, 'right': 2}

# Play-field size when neither a frame nor canvas dimensions are given.
DEFAULT_FIELD_SIZE = (400, 400)

SEPARATOR_COLOR = (90, 90, 90)
BASKET_COLOR = (40, 110, 170)
APPLE_COLOR = (40, 40, 220)
LEAF_COLOR = (60, 180, 60)
BOMB_COLOR = (30, 30, 30)
FUSE_COLOR = (0, 165, 255)
ITEM_RADIUS = 15


class GameEngine(Game):
    """Falling-items catch game: spawning, collision, scoring and the round timer.

    The engine owns one GameSession at a time. tick() is driven by the caller's
    frame loop; the countdown runs on the GameClock's own timer thread.
    """

    def __init__(self, spawn_policy=None, resolver=None, scoring=None, clock=None, lane_labels=None):
        self.spawn_policy = spawn_policy or SpawnPolicy()
        self.resolver = resolver or CollisionResolver()
        self.scoring = scoring or ScoreLevelPolicy()
        self.clock = clock or GameClock()
        self.lane_labels = dict(lane_labels or DEFAULT_LANE_LABELS)

        self.config = GameConfig()
        self._session = GameSession()
        self._end_lock = threading.RLock()

        self.on_score_change = None
        self.on_game_end = None
        self.on_item_event = None
        self.on_time_change = None

    # --------- callbacks (one per slot, re-registering replaces) ---------
    def set_score_change_callback(self, callback):
        self.on_score_change = callback

    def set_game_end_callback(self, callback):
        self.on_game_end = callback

    def set_item_event_callback(self, callback):
        self.on_item_event = callback

    def set_time_callback(self, callback):
        self.on_time_change = callback

    # --------- read-only state ---------
    @property
    def session(self):
        return self._session

    @property
    def is_active(self):
        return self._session.is_active

    @property
    def score(self):
        return self._session.score

    @property
    def level(self):
        return self._session.level

    @property
    def time_remaining(self):
        return self._session.time_remaining

    @property
    def catcher_lane(self):
        return self._session.catcher_lane

    @property
    def items(self):
        return tuple(self._session.items)

    # --------- lifecycle ---------
    def start(self, config=None):
        """Begin a fresh session. Restarting an active session abandons it silently."""
        config = GameConfig.coerce(config)

        # Cancel the old countdown before the new session exists.
        self.clock.stop()
        if self._session.is_active:
            logger.info("Restarting active session (score=%d, level=%d)", self._session.score, self._session.level)
            self._session.is_active = False

        self.config = config
        session = GameSession(time_remaining=config.duration_seconds, is_active=True)
        self._session = session
        self._bind_clock(session)
        self.clock.start(config.duration_seconds)
        logger.info("Game started (duration=%ds)", config.duration_seconds)

    def stop(self):
        """End the session and publish the final score once."""
        session = self._session
        with self._end_lock:
            if session.ended or not session.is_active:
                return
            session.ended = True
            session.is_active = False
        self.clock.stop()
        logger.info("Game over: score=%d level=%d", session.score, session.level)
        if self.on_game_end:
            self.on_game_end(session.score, session.level)

    def _bind_clock(self, session):
        # Each countdown run reports only to the session it was started for.
        self.clock.on_tick = lambda remaining: self._on_clock_tick(session, remaining)
        self.clock.on_expire = lambda: self._on_time_up(session)

    def _on_clock_tick(self, session, remaining):
        if session is not self._session:
            return
        session.time_remaining = remaining
        if self.on_time_change:
            self.on_time_change(remaining)

    def _on_time_up(self, session):
        if session is self._session and session.is_active:
            self.stop()

    # --------- input ---------
    def set_catcher_lane(self, label):
        """Move the catcher to the lane named by `label`. Unknown labels are ignored."""
        if not self._session.is_active or not isinstance(label, str):
            return False
        lane = self.lane_labels.get(label.strip().lower())
        if lane is None:
            logger.debug("Ignoring unknown lane label %r", label)
            return False
        self._session.catcher_lane = lane
        return True

    # --------- per-frame ---------
    def tick(self, frame=None, canvas_width=None, canvas_height=None):
        """Run one frame of the game and draw it onto `frame` if given.

        Returns the caught/missed events applied during this frame.
        """
        session = self._session
        if not session.is_active:
            return []

        width, height = self._field_size(frame, canvas_width, canvas_height)

        # stop() from the clock thread waits for the frame, so the final score it publishes includes it.
        with self._end_lock:
            if session.ended:
                return []
            session.frame_count += 1
            item = self.spawn_policy.maybe_spawn(session.frame_count, session.level)
            if item is not None:
                session.items.append(item)

            events = self.resolver.advance(session.items, session.catcher_lane, height)
            applied = []
            for event in events:
                if session.ended:
                    break
                self._apply_event(session, event)
                applied.append(event)

        if frame is not None:
            self.draw(frame, width, height)
        return applied

    def _apply_event(self, session, event):
        update = self.scoring.apply(event, session.score, session.level)
        if event.caught:
            session.score = update.score
            session.level = update.level
            if update.leveled_up:
                logger.info("Level up: %d (score=%d)", update.level, update.score)
            if self.on_score_change:
                self.on_score_change(session.score, session.level)
        if self.on_item_event:
            self.on_item_event(event)

    def _field_size(self, frame, canvas_width, canvas_height):
        if frame is not None:
            frame_h, frame_w = frame.shape[:2]
            return canvas_width or frame_w, canvas_height or frame_h
        default_w, default_h = DEFAULT_FIELD_SIZE
        return canvas_width or default_w, canvas_height or default_h

    # --------- drawing ---------
    def draw(self, frame, width, height):
        for x in lane_separator_xs(width):
            cv2.line(frame, (x, 0), (x, height), SEPARATOR_COLOR, 2)

        basket_x = lane_center_x(self._session.catcher_lane, width)
        basket_y = int(self.resolver.catch_line_y(height))
        cv2.rectangle(frame, (basket_x - 30, basket_y - 12), (basket_x + 30, basket_y + 18), BASKET_COLOR, -1)
        cv2.ellipse(frame, (basket_x, basket_y - 12), (26, 18), 0, 180, 360, BASKET_COLOR, 3)

        for item in self._session.items:
            self._draw_item(frame, item, width)
        return frame

    def _draw_item(self, frame, item, width):
        center = (lane_center_x(item.lane, width), int(item.y))
        if item.kind is ItemKind.BENEFICIAL:
            cv2.circle(frame, center, ITEM_RADIUS, APPLE_COLOR, -1)
            cv2.ellipse(frame, (center[0] + 5, center[1] - ITEM_RADIUS), (6, 3), -30, 0, 360, LEAF_COLOR, -1)
        else:
            cv2.circle(frame, center, ITEM_RADIUS, BOMB_COLOR, -1)
            cv2.line(frame, (center[0], center[1] - ITEM_RADIUS), (center[0] + 6, center[1] - ITEM_RADIUS - 8), FUSE_COLOR, 2)
            draw_centered_text(frame, '!', center, 0.6, (255, 255, 255), 2)

    # --------- Game interface ---------
    def handle_input(self, label):
        self.set_catcher_lane(label)

    def render(self, frame):
        self.tick(frame)
        return frame

    def reset(self):
        self.start(self.config)
