"""
Terminal Trivia - a console multiple-choice quiz game.
"""

from .game import GameLoop, QuizSession, SessionResult
from .quiz import Difficulty, Question, QuestionFormatError, QuestionLoader

__version__ = "1.0.0"

__all__ = [
    "Difficulty",
    "GameLoop",
    "Question",
    "QuestionFormatError",
    "QuestionLoader",
    "QuizSession",
    "SessionResult",
]
