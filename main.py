import argparse
import logging

from config import DEFAULT_DURATION_SECONDS, GameConfig
from game_manager import GameManager


def main(argv=None):
    parser = argparse.ArgumentParser(prog="catch-zone", description="Lean left, center or right to catch falling apples.")
    parser.add_argument("--duration", type=int, default=DEFAULT_DURATION_SECONDS, help="Round length in seconds.")
    parser.add_argument("--camera", type=int, default=0, help="Camera device index.")
    parser.add_argument("--no-camera", action="store_true", help="Play with the keyboard only (a/s/d).")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = GameConfig(duration_seconds=args.duration).validate()
    GameManager(config, camera_index=args.camera, use_camera=not args.no_camera).run()


if __name__ == "__main__":
    main()
