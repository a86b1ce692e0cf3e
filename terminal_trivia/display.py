"""
Display module - everything the game prints or asks goes through here.

ConsoleDisplay draws with rich. Colour changes are scoped with ``emphasis``
so the previous style comes back even if printing fails.
"""

from contextlib import contextmanager

from rich.console import Console

from .input_handler import read_key


WARN_STYLE = "yellow"
GOOD_STYLE = "green"
BAD_STYLE = "red"


class Display:
    """Interface used by the game. Subclasses provide the actual I/O."""

    def print_line(self, text: str = "") -> None:
        raise NotImplementedError

    def prompt(self, text: str) -> str:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def wait_for_key(self, text: str) -> None:
        raise NotImplementedError

    @contextmanager
    def emphasis(self, style: str):
        yield self

    def warn(self, text: str) -> None:
        with self.emphasis(WARN_STYLE):
            self.print_line(text)

    def good(self, text: str) -> None:
        with self.emphasis(GOOD_STYLE):
            self.print_line(text)

    def bad(self, text: str) -> None:
        with self.emphasis(BAD_STYLE):
            self.print_line(text)


class ConsoleDisplay(Display):

    def __init__(self, console: Console = None, key_reader=read_key):
        self.console = console or Console(highlight=False)
        self.key_reader = key_reader
        self.style = None

    @contextmanager
    def emphasis(self, style: str):
        previous = self.style
        self.style = style
        try:
            yield self
        finally:
            self.style = previous

    def print_line(self, text: str = "") -> None:
        # markup off: question text may contain [brackets]
        self.console.print(text, style=self.style, markup=False)

    def prompt(self, text: str) -> str:
        return self.console.input(text)

    def clear(self) -> None:
        self.console.clear()

    def wait_for_key(self, text: str) -> None:
        self.console.print(text, end="", style=self.style, markup=False)
        self.key_reader()
        self.console.print()
