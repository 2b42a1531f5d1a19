import enum
import numpy as np


class Heading(enum.Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def opposite(self):
        dx, dy = self.value
        return Heading((-dx, -dy))

    def step(self, pos):
        (x, y), (dx, dy) = pos, self.value
        return (x + dx, y + dy)


def turn(current, requested):
    """Heading after a turn request; a straight reversal is ignored."""
    if requested is current.opposite: return current
    return requested


class Cell(enum.IntEnum):
    EMPTY = 0
    BODY = 1
    FOOD = 2
    WALL = 3  # never stored, see Grid.get
    HEAD_UP = 4
    HEAD_RIGHT = 5
    HEAD_DOWN = 6
    HEAD_LEFT = 7

    @classmethod
    def head(cls, heading):
        return cls["HEAD_" + heading.name]

    @property
    def is_head(self):
        return self.name.startswith("HEAD_")

    @property
    def heading(self):
        return Heading[self.name[5:]] if self.is_head else None

    @property
    def is_snake(self):
        return self is Cell.BODY or self.is_head


# --- Glyphs (two columns per cell) ---
GLYPHS = {Cell.EMPTY: "  ", Cell.FOOD: "▒▒", Cell.BODY: "██", Cell.WALL: "██",
          Cell.HEAD_UP: "▀▀", Cell.HEAD_RIGHT: " █", Cell.HEAD_DOWN: "▄▄", Cell.HEAD_LEFT: "█ "}


class Grid:
    def __init__(self, width, height):
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.w, self.h = width, height
        self.cells = np.zeros((height, width), dtype=np.int8)

    def in_bounds(self, pos):
        x, y = pos
        return 0 <= x < self.w and 0 <= y < self.h

    def get(self, pos):
        if not self.in_bounds(pos): return Cell.WALL
        x, y = pos
        return Cell(int(self.cells[y, x]))

    def set(self, pos, cell):
        assert self.in_bounds(pos), f"{pos} is outside the {self.w}x{self.h} grid"
        assert cell is not Cell.WALL, "walls are implicit"
        x, y = pos
        self.cells[y, x] = cell

    def empty_cells(self):
        # argwhere yields (row, col), i.e. (y, x), in row-major order
        return [(int(x), int(y)) for y, x in np.argwhere(self.cells == Cell.EMPTY)]

    def count(self, cell):
        return int(np.count_nonzero(self.cells == cell))

    def place_food(self, rng):
        allowed = self.empty_cells()
        if not allowed: return None
        food = rng.choice(allowed)
        self.set(food, Cell.FOOD)
        return food

    def snapshot(self):
        return self.cells.copy()

    def render(self, score, paused=False):
        """Bordered frame as rows of (text, accent) spans; only head spans are accented."""
        lines = [[("┏" + "━━" * self.w + "┓", False)]]
        for row in self.cells:
            line = [("┃", False)]
            for code in row:
                cell = Cell(int(code))
                line.append((GLYPHS[cell], cell.is_head))
            line.append(("┃", False))
            lines.append(line)

        # bottom border is exactly as wide as the top one, cut short if the label won't fit
        label = f"┗━━ score: {score} " + ("━━ [PAUSED] " if paused else "")
        inner = self.w * 2 + 1
        bottom = (label + "━" * (inner - len(label)))[:inner] + "┛"
        lines.append([(bottom, False)])
        return lines


def render_text(lines):
    return "\n".join("".join(text for text, _ in line) for line in lines)
