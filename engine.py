import enum, logging, random
from collections import deque

from board import Cell, Grid, Heading, turn

log = logging.getLogger(__name__)


class State(enum.Enum):
    PLAYING = "playing"
    LOST = "lost"
    WON = "won"


class SnakeEngine:
    """Headless snake: grid, body (head first) and heading, advanced one tick at a time.

    The body deque and the grid's snake cells always describe the same set of
    coordinates; every mutation below touches both.
    """

    def __init__(self, w, h, rng=None):
        self.w, self.h = w, h
        self.rng = rng or random
        self.grid = Grid(w, h)
        self.direction = Heading.RIGHT
        head = (w // 2, h // 2)
        tail = (head[0] - 1, head[1])
        self.snake = deque([head, tail])
        self.grid.set(head, Cell.head(self.direction))
        self.grid.set(tail, Cell.BODY)
        self.food = self.grid.place_food(self.rng)
        log.debug("new %dx%d game, food at %s", w, h, self.food)

    @classmethod
    def from_body(cls, w, h, body, direction=Heading.RIGHT, food=None, rng=None):
        """Engine with an explicit layout; body is listed head first."""
        game = cls.__new__(cls)
        game.w, game.h = w, h
        game.rng = rng or random
        game.grid = Grid(w, h)
        game.direction = direction
        game.snake = deque(body)
        for pos in body[1:]: game.grid.set(pos, Cell.BODY)
        game.grid.set(body[0], Cell.head(direction))
        if food is not None: game.grid.set(food, Cell.FOOD)
        game.food = food
        return game

    @property
    def head(self): return self.snake[0]

    @property
    def tail(self): return self.snake[-1]

    @property
    def length(self): return len(self.snake)

    @property
    def score(self): return len(self.snake) - 2

    def change_direction(self, d):
        self.direction = turn(self.direction, d)

    def advance(self):
        old_head = self.snake[0]
        new_head = self.direction.step(old_head)
        self.snake.appendleft(new_head)
        old_tail = self.snake[-1]

        hit = self.grid.get(new_head)
        if hit is Cell.EMPTY:
            self.grid.set(new_head, Cell.head(self.direction))
            self.grid.set(old_head, Cell.BODY)
            self.grid.set(old_tail, Cell.EMPTY)
            self.snake.pop()
            return State.PLAYING

        if hit is Cell.FOOD:
            self.grid.set(new_head, Cell.head(self.direction))
            self.grid.set(old_head, Cell.BODY)
            self.food = self.grid.place_food(self.rng)
            log.debug("ate at %s, length %d, food now at %s", new_head, len(self.snake), self.food)
            return State.WON if self.food is None else State.PLAYING

        # wall or snake: the tick never happened
        self.snake.popleft()
        log.debug("hit %s at %s", hit.name, new_head)
        return State.LOST

    def snapshot(self):
        return self.grid.snapshot(), tuple(self.snake), self.direction
