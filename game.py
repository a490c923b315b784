# game.py

class Game:
    def handle_input(self, label):
        """Process a debounced gesture label."""
        pass

    def render(self, frame):
        """Advance one frame and draw on it. Returns the frame."""
        return frame

    def reset(self):
        """Reset game state."""
        pass

    def is_menu(self):
        """Return True if this is a menu screen, False if a playable game."""
        return False
