"""
Game module - the quiz session and the menu loop around it.
"""

from dataclasses import dataclass

from loguru import logger

from .config import (
    DATA_DIR_NAME,
    DATA_SUFFIX,
    DIFFICULTY_KEYS,
    HEADER_LINES,
    OPTION_KEYS,
    PRESS_ANY_KEY,
    QUIT_KEY,
    RESULT_LINES,
)
from .quiz import (
    Difficulty,
    QuestionLoader,
    accuracy,
    format_percent,
    shuffle_questions,
    validate_answer,
)


@dataclass
class SessionResult:
    difficulty: Difficulty
    score: int
    total: int

    @property
    def accuracy(self) -> float:
        return accuracy(self.score, self.total)


def prompt_answer(display) -> str:
    """Ask until the player types A, B, C or D."""
    while True:
        choice = display.prompt("\nYour answer (A/B/C/D): ").strip().upper()
        if choice in OPTION_KEYS:
            return choice
        display.warn("Please enter A, B, C, or D.")


def prompt_for_difficulty(display):
    """Show the difficulty menu. Returns a Difficulty, or None when the player quits."""
    display.print_line("Choose a difficulty:")
    display.print_line("  [E] Easy")
    display.print_line("  [M] Medium")
    display.print_line("  [H] Hard")
    display.print_line("  [Q] Quit")

    while True:
        choice = display.prompt("\nYour choice: ").strip().upper()
        if choice == QUIT_KEY:
            return None
        if choice in DIFFICULTY_KEYS:
            return Difficulty(DIFFICULTY_KEYS[choice])
        display.warn("Please enter E, M, H, or Q.")


class QuizSession:
    """
    One playthrough of a question set.

    The questions are shuffled with the shared random generator, asked in
    order, and the final score is reported. There is no way to abort midway.
    """

    def __init__(self, display, rng, difficulty: Difficulty):
        self.display = display
        self.rng = rng
        self.difficulty = difficulty
        self.result = None

    def run(self, questions: list) -> tuple:
        shuffle_questions(questions, self.rng)

        total = len(questions)
        score = 0

        self.display.clear()
        self.display.print_line(f"Difficulty: {self.difficulty.label}")
        self.display.print_line(f"Questions:  {total}\n")

        for number, question in enumerate(questions, start=1):
            self.display.print_line(f"Q{number}. {question.text}")
            for key in OPTION_KEYS:
                if key in question.options:
                    self.display.print_line(f"   {key}) {question.options[key]}")

            choice = prompt_answer(self.display)
            if validate_answer(question, choice):
                self.display.good("Correct! ✔\n")
                score += 1
            else:
                self.display.bad(
                    f"Wrong! ✖  Correct answer was {question.answer}) {question.correct_text()}\n"
                )

        self.result = SessionResult(self.difficulty, score, total)
        self.show_result()
        logger.info(
            f"Finished {self.difficulty.value} session: {score}/{total} "
            f"({format_percent(self.result.accuracy)}%)"
        )
        return score, total

    def show_result(self) -> None:
        for line in RESULT_LINES:
            self.display.print_line(line)
        self.display.print_line(f"Difficulty: {self.difficulty.label}")
        self.display.print_line(f"Score:      {self.result.score} / {self.result.total}")
        self.display.print_line(f"Accuracy:   {format_percent(self.result.accuracy)}%")


class GameLoop:
    """Menu loop: pick a difficulty, play it, come back. Ends only on Quit."""

    def __init__(self, display, rng, loader: QuestionLoader = None):
        self.display = display
        self.rng = rng
        self.loader = loader or QuestionLoader(warn=display.warn)

    def print_header(self) -> None:
        for line in HEADER_LINES:
            self.display.print_line(line)
        self.display.print_line()

    def run(self) -> None:
        self.display.clear()
        self.print_header()

        while True:
            difficulty = prompt_for_difficulty(self.display)
            if difficulty is None:
                logger.info("Player quit")
                self.display.print_line("\nThanks for playing! 👋")
                return

            logger.info(f"Selected difficulty: {difficulty.value}")
            questions = self.loader.load(difficulty)
            if not questions:
                self.display.warn(
                    f"No questions found for '{difficulty.value}'. "
                    f"Make sure {DATA_DIR_NAME}/{difficulty.value}{DATA_SUFFIX} exists."
                )
                self.display.wait_for_key(PRESS_ANY_KEY)
                self.display.clear()
                continue

            QuizSession(self.display, self.rng, difficulty).run(questions)
            self.display.wait_for_key(PRESS_ANY_KEY)
            self.display.clear()
            self.print_header()
