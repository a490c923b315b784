import logging

import cv2
import mediapipe as mp

logger = logging.getLogger(__name__)


class InputModule:
    def __init__(self, camera_index=0, width=1280, height=720):
        self.cap = cv2.VideoCapture(camera_index)
        if not self.cap.isOpened():
            raise IOError(f"Cannot open camera {camera_index}")

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
        self.mp_pose = mp.solutions.pose
        self.mp_drawing = mp.solutions.drawing_utils
        self.pose = self.mp_pose.Pose(min_detection_confidence=0.5, min_tracking_confidence=0.5)

    def get_frame(self):
        success, frame = self.cap.read()
        if not success or frame is None:
            logger.debug("Ignoring empty camera frame.")
            return None
        if frame.shape[1] == 0:
            logger.warning("Frame has zero width.")
            return None
        return cv2.flip(frame, 1)

    def process_pose(self, frame):
        if frame is None:
            return None
        image_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return self.pose.process(image_rgb)

    def landmarks(self, results):
        if results is None or not results.pose_landmarks:
            return None
        return results.pose_landmarks.landmark

    def draw_skeleton(self, frame, results):
        if results is None or not results.pose_landmarks:
            return frame
        self.mp_drawing.draw_landmarks(
            frame, results.pose_landmarks, self.mp_pose.POSE_CONNECTIONS,
            landmark_drawing_spec=self.mp_drawing.DrawingSpec(color=(200, 200, 200), thickness=1, circle_radius=2),
            connection_drawing_spec=self.mp_drawing.DrawingSpec(color=(120, 120, 120), thickness=1, circle_radius=1)
        )
        return frame

    def release(self):
        self.cap.release()
        self.pose.close()
