"""
Terminal Trivia - multiple-choice quiz in the console.
Pick Easy, Medium or Hard, answer A-D, get your score.
"""

import os
import random
import sys

from loguru import logger

from .display import ConsoleDisplay
from .game import GameLoop
from .logger import configure_logger


def main(display=None, rng=None) -> int:
    configure_logger()
    logger.info(f"Terminal Trivia starting (pid {os.getpid()})")

    display = display or ConsoleDisplay()
    # One generator for the whole process, shared by every session
    rng = rng or random.Random()

    try:
        GameLoop(display, rng).run()
    except (KeyboardInterrupt, EOFError) as e:
        logger.info(f"Input closed ({type(e).__name__}), exiting")
        display.print_line("\nThanks for playing! 👋")

    return 0


if __name__ == '__main__':
    sys.exit(main())
