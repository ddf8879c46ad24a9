"""The playing field: tiles, the player's position and movement rules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

TILE = 64

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTABLE = "C"
EXIT = "E"

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364

_MOVEMENT_KEYS = frozenset(
    {KEY_W, KEY_A, KEY_S, KEY_D, KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN}
)


@dataclass(frozen=True)
class Keys:
    """Which directions a key stands for."""

    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False

    @property
    def dx(self) -> int:
        """Horizontal step: 1 right, -1 left, 0 none."""
        return int(self.right) - int(self.left)

    @property
    def dy(self) -> int:
        """Vertical step: 1 down, -1 up, 0 none."""
        return int(self.down) - int(self.up)


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"


def get_keys(key: int) -> Keys:
    """The directions for a key symbol (WASD or the arrow keys)."""
    return Keys(
        right=key in (KEY_D, KEY_RIGHT),
        left=key in (KEY_A, KEY_LEFT),
        up=key in (KEY_W, KEY_UP),
        down=key in (KEY_S, KEY_DOWN),
    )


def key_pressed(key: int) -> bool:
    """True for the keys that move the player."""
    return key in _MOVEMENT_KEYS


@dataclass
class Board:
    """A grid of tiles with the player at column x, row y."""

    grid: list[list[str]]
    x: int
    y: int
    collectables: int
    moves: int = field(default=0)

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "Board":
        """Build a board from map lines; a trailing newline on each is ignored.

        The player is the last P found, scanning rows top to bottom.
        Raises ValueError when the map holds no player.
        """
        grid = [list(line[:-1] if line.endswith("\n") else line) for line in lines]
        position = None
        for row_index, row in enumerate(grid):
            for col_index, tile in enumerate(row):
                if tile == PLAYER:
                    position = (col_index, row_index)
        if position is None:
            raise ValueError("the map has no player")
        collectables = sum(row.count(COLLECTABLE) for row in grid)
        return cls(grid=grid, x=position[0], y=position[1], collectables=collectables)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self.grid)

    @property
    def rows(self) -> list[str]:
        """The rows as strings."""
        return ["".join(row) for row in self.grid]

    def tile(self, x: int, y: int) -> str:
        """The tile at column x, row y."""
        if not (0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])):
            raise IndexError(f"no tile at ({x}, {y})")
        return self.grid[y][x]

    def move(self, dx: int, dy: int) -> MoveResult:
        """Try to move the player by dx columns and dy rows.

        Walls block, as does the exit while collectables remain. Stepping
        on the exit with nothing left to collect wins the game and leaves
        the board as it is.
        """
        new_x, new_y = self.x + dx, self.y + dy
        try:
            target = self.tile(new_x, new_y)
        except IndexError:
            return MoveResult.BLOCKED
        if target == WALL:
            return MoveResult.BLOCKED
        if target == EXIT:
            return MoveResult.WON if self.collectables == 0 else MoveResult.BLOCKED
        result = MoveResult.MOVED
        if target == COLLECTABLE:
            self.collectables -= 1
            result = MoveResult.COLLECTED
        self.grid[self.y][self.x] = FLOOR
        self.grid[new_y][new_x] = PLAYER
        self.x, self.y = new_x, new_y
        self.moves += 1
        return result