# game_manager.py

import logging
import os

import cv2
import numpy as np
import pygame

from catch_engine import GameEngine
from game_over_screen import GameOverScreen
from helpers import blend_rectangle
from input_module import InputModule
from lane_gestures import LaneGestureClassifier, PredictionStabilizer

logger = logging.getLogger(__name__)

KEY_LANES = {ord('a'): 'left', ord('s'): 'center', ord('d'): 'right'}
KEYBOARD_FRAME_SIZE = (720, 1280)
WINDOW_NAME = 'Catch Zone'


class GameManager:
    def __init__(self, config, camera_index=0, use_camera=True):
        self.config = config
        self.input = InputModule(camera_index) if use_camera else None

        self.classifier = LaneGestureClassifier()
        self.stabilizer = PredictionStabilizer(threshold=0.7, smoothing_frames=3)
        self.last_gesture = ""

        self.engine = GameEngine()
        self.engine.set_score_change_callback(self.on_score_change)
        self.engine.set_game_end_callback(self.on_game_end)
        self.engine.set_item_event_callback(self.on_item_event)

        self.current_game = self.engine
        # Written from the clock thread, picked up by the main loop.
        self.pending_result = None
        self.shown_level = 1

        self.catch_sound, self.bomb_sound, self.level_sound = self.load_sounds()

    def load_sounds(self):
        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Sound init failed: %s. Running without sound.", e)
            return None, None, None

        sounds = []
        for name, volume in (('catch.mp3', 0.4), ('explosion.mp3', 0.7), ('level_up.mp3', 0.5)):
            path = os.path.join('assets', 'sounds', name)
            sound = None
            if os.path.exists(path):
                try:
                    sound = pygame.mixer.Sound(path)
                    sound.set_volume(volume)
                except pygame.error as e:
                    logger.warning("Could not load %s: %s", path, e)
            sounds.append(sound)
        return tuple(sounds)

    # --------- engine callbacks ---------
    def on_score_change(self, score, level):
        if level > self.shown_level:
            self.shown_level = level
            if self.level_sound:
                self.level_sound.play()

    def on_item_event(self, event):
        if not event.caught:
            return
        sound = self.bomb_sound if event.item.is_harmful else self.catch_sound
        if sound:
            sound.play()

    def on_game_end(self, final_score, final_level):
        self.pending_result = (final_score, final_level)

    # --------- loop ---------
    def start_game(self):
        self.stabilizer.reset()
        self.pending_result = None
        self.shown_level = 1
        self.current_game = self.engine
        self.engine.start(self.config)

    def next_frame(self):
        if self.input is None:
            return np.zeros(KEYBOARD_FRAME_SIZE + (3,), dtype=np.uint8)
        frame = self.input.get_frame()
        if frame is None:
            return None

        results = self.input.process_pose(frame)
        self.input.draw_skeleton(frame, results)
        label = self.stabilizer.stabilize(self.classifier.classify(self.input.landmarks(results)))
        if label:
            self.last_gesture = label
            self.current_game.handle_input(label)
        return frame

    def draw_hud(self, frame):
        width = frame.shape[1]
        blend_rectangle(frame, (0, 0), (width, 60), (20, 20, 20), 0.7)
        hud = f"SCORE: {self.engine.score}   LEVEL: {self.engine.level}   TIME: {self.engine.time_remaining}"
        cv2.putText(frame, hud, (20, 40), cv2.FONT_HERSHEY_SIMPLEX, 0.9, (255, 255, 255), 2, cv2.LINE_AA)
        if self.last_gesture:
            cv2.putText(frame, self.last_gesture.upper(), (width - 180, 40), cv2.FONT_HERSHEY_SIMPLEX, 0.9, (0, 255, 0), 2, cv2.LINE_AA)
        return frame

    def run(self):
        self.start_game()
        try:
            while True:
                frame = self.next_frame()
                if frame is None:
                    continue

                if self.pending_result is not None and not self.current_game.is_menu():
                    self.current_game = GameOverScreen(*self.pending_result)

                frame = self.current_game.render(frame)
                if not self.current_game.is_menu():
                    frame = self.draw_hud(frame)
                cv2.imshow(WINDOW_NAME, frame)

                key = cv2.waitKey(16) & 0xFF
                if key == ord('q'):
                    break
                elif key == ord('r'):
                    self.start_game()
                elif key in KEY_LANES:
                    self.last_gesture = KEY_LANES[key]
                    self.current_game.handle_input(KEY_LANES[key])
        finally:
            self.engine.stop()
            if self.input is not None:
                self.input.release()
            cv2.destroyAllWindows()
