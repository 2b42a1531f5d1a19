import curses, locale, logging, sys

from controls import PAUSE, QUIT, Turn, key_event, map_key
from engine import SnakeEngine, State

# --- Config ---
CYCLE_TIME = 0.3        # seconds per tick at the start
SPEED_UP = 0.9997       # cycle time factor after every tick that keeps the game going
MIN_CYCLE_TIME = 0.05
MARGIN_COLUMNS, MARGIN_ROWS = 2, 2
MIN_WIDTH, MIN_HEIGHT = 14, 3  # narrowest grid whose bottom bar still fits score and [PAUSED]
ACCENT_PAIR = 1

log = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    pass


class CursesTerminal:
    """Raw-mode curses screen: key polling with a timeout and frame drawing."""

    def __init__(self, stdscr):
        self.scr = stdscr
        curses.raw()
        curses.curs_set(0)
        self.scr.keypad(True)
        self.accent = curses.A_BOLD
        if curses.has_colors():
            curses.use_default_colors()
            curses.init_pair(ACCENT_PAIR, curses.COLOR_YELLOW, -1)
            self.accent = curses.color_pair(ACCENT_PAIR)

    def size(self):
        return self.scr.getmaxyx()

    def poll(self, timeout):
        self.scr.timeout(max(0, round(timeout * 1000)))
        code = self.scr.getch()
        return None if code == -1 else key_event(code)

    def read(self):
        self.scr.timeout(-1)
        return key_event(self.scr.getch())

    def draw(self, lines):
        self.scr.erase()
        rows, cols = self.scr.getmaxyx()
        for y, line in enumerate(lines[:rows]):
            x = 0
            for text, accent in line:
                # the bottom-right cell can't be written without scrolling
                text = text[:max(0, cols - 1 - x)]
                if text: self.scr.addstr(y, x, text, self.accent if accent else curses.A_NORMAL)
                x += len(text)
        self.scr.refresh()


class Session:
    def __init__(self, terminal, rng=None, engine=None):
        self.terminal = terminal
        if engine is None:
            rows, cols = terminal.size()
            w, h = cols // 2 - MARGIN_COLUMNS, rows - MARGIN_ROWS
            if w < MIN_WIDTH or h < MIN_HEIGHT:
                raise TerminalError(f"terminal of {cols}x{rows} is too small to play")
            engine = SnakeEngine(w, h, rng)
        self.engine = engine
        self.cycle_time = CYCLE_TIME
        self.state = State.PLAYING

    def draw(self, paused=False):
        self.terminal.draw(self.engine.grid.render(self.engine.score, paused))

    def poll_intent(self):
        intent = map_key(self.terminal.poll(self.cycle_time))
        if intent == QUIT: raise SystemExit(1)
        if intent == PAUSE:
            self.pause()
            return None
        return intent

    def pause(self):
        log.debug("paused")
        self.draw(paused=True)
        while True:
            intent = map_key(self.terminal.read())
            if intent == QUIT: raise SystemExit(1)
            if intent == PAUSE: break
        log.debug("resumed")

    def tick(self):
        self.draw()
        intent = self.poll_intent()
        if isinstance(intent, Turn): self.engine.change_direction(intent.heading)
        self.state = self.engine.advance()
        if self.state is State.PLAYING:
            self.cycle_time = max(self.cycle_time * SPEED_UP, MIN_CYCLE_TIME)
        return self.state

    def play(self):
        while self.tick() is State.PLAYING: pass
        log.debug("game ended: %s, score %d", self.state.name, self.engine.score)
        return self.state


def run(stdscr):
    session = Session(CursesTerminal(stdscr))
    return session.play(), session.engine.score


def summary(state, score):
    return f"{'You win!' if state is State.WON else 'Game over!'}\nScore: {score}"


def main():
    locale.setlocale(locale.LC_ALL, "")
    try:
        state, score = curses.wrapper(run)
    except (TerminalError, curses.error) as e:
        sys.exit(f"snake: {e}")
    print(summary(state, score))


if __name__ == "__main__":
    main()
