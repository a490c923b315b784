# game_over_screen.py

from game import Game
from helpers import blend_rectangle, draw_centered_text


class GameOverScreen(Game):
    def __init__(self, final_score, final_level):
        self.final_score = final_score
        self.final_level = final_level

    def is_menu(self):
        return True

    def render(self, frame):
        height, width = frame.shape[:2]
        blend_rectangle(frame, (0, 0), (width, height), (20, 20, 20), 0.75)

        draw_centered_text(frame, "Game Over", (width // 2, height // 3), 2.0, (0, 215, 255), 4)
        draw_centered_text(frame, f"Score: {self.final_score}", (width // 2, height // 2), 1.2, (255, 255, 255), 2)
        draw_centered_text(frame, f"Level: {self.final_level}", (width // 2, height // 2 + 50), 1.0, (220, 220, 220), 2)
        draw_centered_text(frame, "Press R to play again, Q to quit", (width // 2, height - 60), 0.8, (200, 200, 200), 2)
        return frame
