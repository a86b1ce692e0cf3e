"""
Tests for the entry point and logging setup.
"""

import random
import types

import pytest
from loguru import logger

from terminal_trivia.app import main
from terminal_trivia.logger import configure_logger


@pytest.fixture(autouse=True)
def drop_log_sinks():
    """main() adds a file sink under each test's tmp dir; don't let it outlive the test."""
    yield
    logger.remove()


class TestMain:

    def test_quit_exits_zero(self, make_display, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        display = make_display(["q"])
        assert main(display=display, rng=random.Random(0)) == 0
        assert display.lines[-1] == "\nThanks for playing! 👋"

    def test_closed_input_exits_zero(self, make_display, tmp_path, monkeypatch):
        """Running out of input ends the game like a quit."""
        monkeypatch.chdir(tmp_path)
        display = make_display([])
        assert main(display=display, rng=random.Random(0)) == 0
        assert display.lines[-1] == "\nThanks for playing! 👋"

    def test_plays_data_from_cwd(self, make_display, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "easy.json").write_text(
            '[{"question": "Sky colour?", "options": {"a": "Blue", "b": "Green"}, "answer": "A"},]',
            encoding="utf-8",
        )
        display = make_display(["e", "a", "q"])
        assert main(display=display, rng=random.Random(0)) == 0
        assert "Q1. Sky colour?" in display.lines
        assert "Score:      1 / 1" in display.lines

    def test_unwritable_log_dir_still_plays(self, make_display, tmp_path, monkeypatch):
        """A file named 'logs' in the working dir must not stop the game."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "logs").write_text("not a folder", encoding="utf-8")
        display = make_display(["q"])
        assert main(display=display, rng=random.Random(0)) == 0
        assert display.lines[-1] == "\nThanks for playing! 👋"

    def test_builds_one_rng_for_the_loop(self, make_display, tmp_path, monkeypatch):
        """Without an injected generator, main creates exactly one and hands it to the loop."""
        monkeypatch.chdir(tmp_path)
        created = []

        class CountingRandom(random.Random):
            def __init__(self, *args):
                created.append(self)
                super().__init__(*args)

        loops = []

        class RecordingLoop:
            def __init__(self, display, rng):
                loops.append(rng)

            def run(self):
                pass

        monkeypatch.setattr("terminal_trivia.app.random", types.SimpleNamespace(Random=CountingRandom))
        monkeypatch.setattr("terminal_trivia.app.GameLoop", RecordingLoop)

        assert main(display=make_display()) == 0
        assert len(created) == 1
        assert loops == created


class TestLogger:

    def test_writes_to_log_dir(self, tmp_path):
        log_dir = tmp_path / "logs"
        assert configure_logger(log_dir=log_dir) is True
        logger.info("hello from test")
        logger.complete()
        files = list(log_dir.glob("trivia_*.log"))
        assert len(files) == 1
        assert "hello from test" in files[0].read_text(encoding="utf-8")

    def test_log_dir_blocked_by_file(self, tmp_path):
        blocker = tmp_path / "logs"
        blocker.write_text("", encoding="utf-8")
        assert configure_logger(log_dir=blocker) is False
        # logging still works, it just goes nowhere
        logger.info("dropped")
