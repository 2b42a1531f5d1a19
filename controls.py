import curses
from collections import namedtuple

from board import Heading

KeyEvent = namedtuple("KeyEvent", ["name", "ctrl"], defaults=[False])
Turn = namedtuple("Turn", ["heading"])

PAUSE = "pause"
QUIT = "quit"

# arrows, vi keys, WASD
KEYMAP = {
    "KEY_UP": Heading.UP, "k": Heading.UP, "w": Heading.UP,
    "KEY_RIGHT": Heading.RIGHT, "l": Heading.RIGHT, "d": Heading.RIGHT,
    "KEY_DOWN": Heading.DOWN, "j": Heading.DOWN, "s": Heading.DOWN,
    "KEY_LEFT": Heading.LEFT, "h": Heading.LEFT, "a": Heading.LEFT,
}
PAUSE_KEY = KeyEvent("p")
QUIT_KEY = KeyEvent("c", ctrl=True)


def key_event(code):
    """KeyEvent for a curses getch() code; control chords come back as '^X'."""
    name = curses.keyname(code).decode("utf-8", "replace")
    if len(name) == 2 and name[0] == "^" and name != "^?":
        return KeyEvent(name[1].lower(), ctrl=True)
    return KeyEvent(name)


def map_key(event):
    """Intent for one key press: Turn(heading), PAUSE, QUIT or None."""
    if event is None: return None
    if event == QUIT_KEY: return QUIT
    if event.ctrl: return None
    if event == PAUSE_KEY: return PAUSE
    heading = KEYMAP.get(event.name)
    return Turn(heading) if heading is not None else None
