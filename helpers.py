# helpers.py

import cv2
import numpy as np

# Lane centers and separators as fractions of the play-field width.
LANE_CENTERS = (0.16, 0.5, 0.84)
LANE_SEPARATORS = (0.33, 0.66)


def lane_center_x(lane, width):
    """Pixel x of a lane's center line."""
    return int(LANE_CENTERS[lane] * width)


def lane_separator_xs(width):
    return [int(ratio * width) for ratio in LANE_SEPARATORS]


def draw_centered_text(frame, text, center, font_scale, color, thickness=2):
    """Draws text centered on `center` (x, y)."""
    text_size, _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_SIMPLEX, font_scale, thickness)
    x = int(center[0] - text_size[0] / 2)
    y = int(center[1] + text_size[1] / 2)
    cv2.putText(frame, text, (x, y), cv2.FONT_HERSHEY_SIMPLEX, font_scale, color, thickness, cv2.LINE_AA)
    return frame


def blend_rectangle(frame, top_left, bottom_right, color, alpha):
    """
    Fills a rectangle blended over the frame.

    Args:
        frame: The BGR image to draw on, modified in place.
        top_left: (x, y) of the top-left corner.
        bottom_right: (x, y) of the bottom-right corner.
        color: BGR fill color.
        alpha: Opacity of the fill between 0 and 1.
    """
    x1, y1 = max(top_left[0], 0), max(top_left[1], 0)
    x2, y2 = min(bottom_right[0], frame.shape[1]), min(bottom_right[1], frame.shape[0])
    if x2 <= x1 or y2 <= y1:
        return frame

    roi = frame[y1:y2, x1:x2]
    fill = np.empty_like(roi)
    fill[:] = color
    frame[y1:y2, x1:x2] = cv2.addWeighted(fill, alpha, roi, 1 - alpha, 0)
    return frame
