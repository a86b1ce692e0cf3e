"""
Shared fixtures: a scripted display that records output, and a seeded RNG.
"""

import random
from contextlib import contextmanager

import pytest

from terminal_trivia.display import Display
from terminal_trivia.quiz import Question


class FakeDisplay(Display):
    """Feeds scripted answers to prompts and records everything printed."""

    def __init__(self, inputs=None):
        self.inputs = list(inputs or [])
        self.prompts = []
        self.lines = []
        self.styled = []
        self.clears = 0
        self.key_waits = 0
        self.style = None

    @contextmanager
    def emphasis(self, style):
        previous = self.style
        self.style = style
        try:
            yield self
        finally:
            self.style = previous

    def print_line(self, text=""):
        self.lines.append(text)
        self.styled.append((self.style, text))

    def prompt(self, text):
        self.prompts.append(text)
        if not self.inputs:
            raise EOFError("no more scripted input")
        return self.inputs.pop(0)

    def clear(self):
        self.clears += 1

    def wait_for_key(self, text):
        self.key_waits += 1

    def lines_with_style(self, style):
        return [text for s, text in self.styled if s == style]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_display():
    return FakeDisplay


@pytest.fixture
def make_question():
    def _make(text="Question?", options=None, answer="A"):
        if options is None:
            options = {"A": "one", "B": "two", "C": "three", "D": "four"}
        return Question(text=text, options=dict(options), answer=answer)
    return _make
