"""
Input handler - reads a single keypress from the terminal.

Used for the "press any key" pauses. On a real terminal the key is read raw,
without echo and without waiting for Enter. When stdin is not a terminal
(piped input, IDE consoles) a whole line is consumed instead.
"""

import os
import sys


def _read_key_windows() -> str:
    import msvcrt

    ch = msvcrt.getwch()
    # Arrow/function keys arrive as a prefix plus a second code
    if ch in ('\x00', '\xe0'):
        msvcrt.getwch()
    return ch


def _read_key_posix(stream) -> str:
    import termios
    import tty

    fd = stream.fileno()
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        # Read bytes straight from the fd so an arrow key's whole escape
        # sequence is consumed, not left behind in the text buffer
        data = os.read(fd, 32)
    finally:
        # Always give the terminal back in cooked mode
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    ch = data.decode('utf-8', errors='replace')[:1]
    if ch == '\x03':
        raise KeyboardInterrupt
    return ch


def read_key(stream=None) -> str:
    """Block until one key is pressed and return it."""
    stream = stream or sys.stdin

    if not stream.isatty():
        line = stream.readline()
        if line == '':
            raise EOFError("stdin closed")
        return line[:1]

    if os.name == 'nt':
        return _read_key_windows()
    return _read_key_posix(stream)
