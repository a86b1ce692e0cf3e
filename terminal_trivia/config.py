"""
Config module - paths and fixed settings for Terminal Trivia.
"""

import sys
from pathlib import Path


# Determine base path (works for both dev and PyInstaller exe)
if getattr(sys, 'frozen', False):
    # Running as compiled exe
    BASE_DIR = Path(sys.executable).parent
else:
    # Running as script / installed package
    BASE_DIR = Path(__file__).parent

DATA_DIR_NAME = "data"
DATA_SUFFIX = ".json"

# Answer letters shown to the player, in display order
OPTION_KEYS = ("A", "B", "C", "D")
UNKNOWN_ANSWER_TEXT = "(unknown)"

# Difficulty menu
DIFFICULTY_KEYS = {
    "E": "easy",
    "M": "medium",
    "H": "hard",
}
QUIT_KEY = "Q"

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = "DEBUG"
LOG_RETENTION = "7 days"

HEADER_LINES = (
    "====================================",
    "           TERMINAL TRIVIA          ",
    "====================================",
)
RESULT_LINES = (
    "====================================",
    "             GAME  OVER             ",
    "====================================",
)
PRESS_ANY_KEY = "\nPress any key to return to the menu..."
