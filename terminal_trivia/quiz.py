"""
Quiz logic module - handles question loading, normalization, shuffling and scoring.

Question files live in a ``data`` folder as ``<difficulty>.json``:

    [
        // comments and trailing commas are fine
        {"question": "What is 2+2?", "options": {"A": "3", "B": "4"}, "answer": "B"},
    ]
"""

import json
import os
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from pathlib import Path

from loguru import logger

from .config import BASE_DIR, DATA_DIR_NAME, DATA_SUFFIX, UNKNOWN_ANSWER_TEXT


class QuestionFormatError(ValueError):
    """Raised when a question file parses but does not hold a list of questions."""


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass
class Question:
    text: str = ""
    options: dict = field(default_factory=dict)  # 'A'~'D' -> option text
    answer: str = ""                             # may be missing from options

    def correct_text(self) -> str:
        """Option text for the correct letter, or a placeholder for bad data."""
        return self.options.get(self.answer, UNKNOWN_ANSWER_TEXT)


# ========================================
# Parsing
# ========================================

def strip_relaxed_json(text: str) -> str:
    """
    Remove // and /* */ comments and trailing commas so the result is plain JSON.
    Characters inside string literals are copied untouched.
    """
    out = []
    i = 0
    n = len(text)
    in_string = False

    while i < n:
        ch = text[i]

        if in_string:
            out.append(ch)
            if ch == '\\' and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
        elif text.startswith('//', i):
            end = text.find('\n', i)
            i = n if end == -1 else end
            continue
        elif text.startswith('/*', i):
            end = text.find('*/', i + 2)
            if end == -1:
                raise QuestionFormatError("Unterminated comment")
            i = end + 2
            continue
        elif ch in ']}':
            # Drop a comma left dangling before the closing bracket
            j = len(out) - 1
            while j >= 0 and out[j].isspace():
                j -= 1
            if j >= 0 and out[j] == ',':
                del out[j]

        out.append(ch)
        i += 1

    return ''.join(out)


def _as_text(value, what: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value)
    raise QuestionFormatError(f"Expected text for '{what}', got {type(value).__name__}")


def question_from_dict(record: dict) -> Question:
    """Build a Question from one raw record. Field names are matched case-insensitively."""
    if not isinstance(record, dict):
        raise QuestionFormatError(f"Expected a question object, got {type(record).__name__}")

    fields = {str(k).lower(): v for k, v in record.items()}

    options = fields.get("options") or {}
    if not isinstance(options, dict):
        raise QuestionFormatError(f"Expected an object for 'options', got {type(options).__name__}")

    return Question(
        text=_as_text(fields.get("question"), "question"),
        options={str(k): _as_text(v, "options") for k, v in options.items()},
        answer=_as_text(fields.get("answer"), "answer"),
    )


def parse_questions(text: str) -> list:
    """Parse the contents of a question file into a list of Questions."""
    data = json.loads(strip_relaxed_json(text))
    if data is None:
        return []
    if not isinstance(data, list):
        raise QuestionFormatError(f"Expected a list of questions, got {type(data).__name__}")
    return [question_from_dict(item) for item in data]


# ========================================
# Normalization
# ========================================

def normalize_question(question: Question) -> Question:
    """Trim text, canonicalize option keys to uppercase and uppercase the answer (in place)."""
    normalized = {}
    for key, value in question.options.items():
        key = (key or "").strip().upper()
        if key:
            # Later duplicates overwrite earlier ones
            normalized[key] = (value or "").strip()

    question.options = normalized
    question.answer = (question.answer or "").strip().upper()
    question.text = (question.text or "").strip()
    return question


def normalize_questions(questions: list) -> list:
    for q in questions:
        normalize_question(q)
    return questions


# ========================================
# Source discovery
# ========================================

def source_name(difficulty: Difficulty) -> str:
    return f"{difficulty.value.lower()}{DATA_SUFFIX}"


def candidate_paths(file_name: str, cwd: Path = None, base_dir: Path = None) -> list:
    """
    Locations to look for a question file, in priority order.
    Works when run from the project root, from an installed package,
    or from a nested build folder.
    """
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    base_dir = Path(base_dir) if base_dir is not None else BASE_DIR

    guesses = [
        cwd / DATA_DIR_NAME / file_name,
        base_dir / DATA_DIR_NAME / file_name,
        cwd / ".." / ".." / DATA_DIR_NAME / file_name,
        base_dir / ".." / DATA_DIR_NAME / file_name,  # package folder inside a checkout
    ]

    paths = []
    for guess in guesses:
        path = Path(os.path.abspath(guess))
        if path not in paths:
            paths.append(path)
    return paths


def find_source(file_name: str, exists=None, cwd: Path = None, base_dir: Path = None):
    """Return the first candidate path that exists, or None."""
    exists = exists or Path.is_file
    for path in candidate_paths(file_name, cwd=cwd, base_dir=base_dir):
        if exists(path):
            return path
    return None


class QuestionLoader:
    """
    Loads and normalizes the question set for a difficulty.
    Missing or broken files never raise; they produce a warning and an empty list.
    """

    def __init__(self, warn=None, exists=None, cwd: Path = None, base_dir: Path = None):
        self.warn = warn
        self.exists = exists
        self.cwd = cwd
        self.base_dir = base_dir

    def _warn(self, message: str) -> None:
        logger.warning(message)
        if self.warn:
            self.warn(message)

    def load(self, difficulty: Difficulty) -> list:
        file_name = source_name(difficulty)
        path = find_source(file_name, exists=self.exists, cwd=self.cwd, base_dir=self.base_dir)

        if path is None:
            self._warn(f"Could not find '{file_name}' in any expected data folder.")
            return []

        try:
            text = path.read_text(encoding="utf-8-sig")
            questions = normalize_questions(parse_questions(text))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            # json.JSONDecodeError and QuestionFormatError are ValueErrors
            self._warn(f"Failed to read '{path}': {e}")
            return []

        logger.info(f"Loaded {len(questions)} {difficulty.value} questions from {path}")
        return questions


# ========================================
# Session helpers
# ========================================

def shuffle_questions(questions: list, rng) -> list:
    """Fisher-Yates shuffle in place using the given random.Random instance."""
    for i in range(len(questions) - 1, 0, -1):
        j = rng.randint(0, i)
        questions[i], questions[j] = questions[j], questions[i]
    return questions


def validate_answer(question: Question, answer: str) -> bool:
    """Check if the selected letter is the correct one."""
    return (answer or "").strip().upper() == question.answer.upper()


def accuracy(score: int, total: int) -> float:
    """Percentage of correct answers rounded to 2 decimals; 0 when there were no questions."""
    if total <= 0:
        return 0.0
    # Half-up, so 0.625 shows as 0.63 rather than banker's 0.62
    percent = Decimal(score * 100) / Decimal(total)
    return float(percent.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_percent(value: float) -> str:
    """Render at most two decimals without trailing zeros (66.67, 50.5, 100)."""
    return f"{value:.2f}".rstrip("0").rstrip(".")
