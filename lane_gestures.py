# lane_gestures.py

from collections import deque

import numpy as np

# MediaPipe Pose landmark indices
LEFT_SHOULDER = 11
RIGHT_SHOULDER = 12

LEFT, CENTER, RIGHT = 'left', 'center', 'right'


class LaneGestureClassifier:
    """Maps a pose to the lane the player is leaning toward.

    Uses the mid-point of the shoulders in normalized image x. The frame is
    mirrored before pose detection, so a small x is the player's left.
    """

    def __init__(self, left_edge=0.4, right_edge=0.6, min_visibility=0.5):
        if not 0.0 <= left_edge < right_edge <= 1.0:
            raise ValueError("need 0 <= left_edge < right_edge <= 1")
        self.left_edge = left_edge
        self.right_edge = right_edge
        self.min_visibility = min_visibility

    def classify(self, landmarks):
        """Returns (label, confidence), or None if the shoulders aren't visible."""
        if not landmarks or len(landmarks) <= RIGHT_SHOULDER:
            return None

        l_sh = landmarks[LEFT_SHOULDER]
        r_sh = landmarks[RIGHT_SHOULDER]
        confidence = min(l_sh.visibility, r_sh.visibility)
        if confidence < self.min_visibility:
            return None

        mid_x = float(np.mean([l_sh.x, r_sh.x]))
        if mid_x < self.left_edge:
            return LEFT, confidence
        if mid_x > self.right_edge:
            return RIGHT, confidence
        return CENTER, confidence


class PredictionStabilizer:
    """Debounces noisy per-frame predictions into lane-change events."""

    def __init__(self, threshold=0.7, smoothing_frames=3):
        if smoothing_frames < 1:
            raise ValueError("smoothing_frames must be at least 1")
        self.threshold = threshold
        self.history = deque(maxlen=smoothing_frames)
        self.last_label = None

    def stabilize(self, prediction):
        """Feed one (label, confidence) prediction, or None for no detection.

        Returns the label when the last `smoothing_frames` predictions agree with
        enough confidence and it differs from the label last returned, else None.
        """
        if prediction is None or prediction[1] < self.threshold:
            self.history.clear()
            return None

        label = prediction[0]
        self.history.append(label)
        if len(self.history) < self.history.maxlen:
            return None
        if any(seen != label for seen in self.history):
            return None
        if label == self.last_label:
            return None

        self.last_label = label
        return label

    def reset(self):
        self.history.clear()
        self.last_label = None
