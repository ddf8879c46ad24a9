"""Running a game: state, key handling, status output and the window loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Optional, TextIO, Union

from so_long.board import (
    COLLECTABLE,
    EXIT,
    FLOOR,
    PLAYER,
    TILE,
    WALL,
    Board,
    MoveResult,
    get_keys,
    key_pressed,
)
from so_long.libft.printf import printf, sprintf
from so_long.mapfile import MapError, read_map, validate_map

KEY_ESCAPE = 65307
DEFAULT_UPDATE = 2000
PLAYER_CLOSED = "!"

CLOSED_MESSAGE = "Game closed by the player."
WON_MESSAGE = "Contratulations, you won the game!!!"
INVALID_ELEMENT = "Error: Invalid element on map."
TOO_LARGE = "Error: Map is too large."
NO_WINDOW = "Error: Couldn't open the window."
NO_DISPLAY = "Error: Couldn't initializing MLX."
BAD_ARGUMENTS = "Error: Invalid number of arguments."

_ELEMENTS = frozenset({FLOOR, WALL, PLAYER, COLLECTABLE, EXIT, "\n"})

_SPRITE_FILES = {
    FLOOR: "./textures/xpm/spr_ground_64.xpm",
    WALL: "./textures/xpm/spr_wall.xpm",
    PLAYER: "./textures/xpm/spr_fat_cat.xpm",
    COLLECTABLE: "./textures/xpm/spr_food.xpm",
    EXIT: "./textures/xpm/spr_exit_closed.xpm",
}


class GameClosed(Exception):
    """The game has ended; text is what to tell the player."""

    def __init__(self, message: str = PLAYER_CLOSED) -> None:
        super().__init__(message)
        self.message = message

    @property
    def text(self) -> str:
        """The message to show."""
        return CLOSED_MESSAGE if self.message == PLAYER_CLOSED else self.message


def strlen_char(text: str, charset: str) -> int:
    """Number of characters of text before the first charset character."""
    index = text.find(charset)
    return len(text) if index < 0 else index


class Game:
    """A game in progress on a validated map."""

    def __init__(
        self,
        lines: Sequence[str],
        update: int = DEFAULT_UPDATE,
        stream: Optional[TextIO] = None,
    ) -> None:
        for line in lines:
            if any(ch not in _ELEMENTS for ch in line):
                raise MapError(INVALID_ELEMENT)
        self.lines = list(lines)
        self.board = Board.from_lines(self.lines)
        self.update = update
        self.icnt = 0
        self.screen_size = (0, 0)
        self.stream = stream

    def window_size(self) -> tuple[int, int]:
        """Width and height of the window in pixels."""
        width = TILE * strlen_char(self.lines[0], "\n")
        height = TILE * len(self.lines)
        return width, height

    def status_lines(self) -> list[str]:
        """The status report, one string per line."""
        width, height = self.window_size()
        screen_w, screen_h = self.screen_size
        return [
            sprintf("Screen_x: %d Screen_y: %d", screen_w, screen_h),
            sprintf("Hight: %d Width: %d", height, width),
            sprintf("Collectables: %d", self.board.collectables),
            sprintf("Player X: %d", self.board.x * TILE),
            sprintf("Player Y: %d", self.board.y * TILE),
            sprintf("Moves: %d", self.board.moves),
        ]

    def tick(self) -> list[str]:
        """Advance one frame; every update frames print and return the status."""
        self.icnt += 1
        if self.icnt < self.update:
            return []
        self.icnt = 0
        report = self.status_lines()
        for line in report:
            printf("%s\n", line, stream=self.stream)
        return report

    def handle_key(self, keysym: int) -> Optional[MoveResult]:
        """React to a key; raises GameClosed on escape or on winning."""
        if keysym == KEY_ESCAPE:
            raise GameClosed(CLOSED_MESSAGE)
        if not key_pressed(keysym):
            return None
        keys = get_keys(keysym)
        result = self.board.move(keys.dx, keys.dy)
        if result is MoveResult.WON:
            raise GameClosed(WON_MESSAGE)
        return result


def load_game(path: Union[str, os.PathLike]) -> Game:
    """Read and validate the map at path and start a game on it."""
    lines = read_map(path)
    validate_map(lines)
    return Game(lines)


_PYGAME_TO_KEYSYM_NAMES = {
    "K_ESCAPE": KEY_ESCAPE,
    "K_LEFT": 65361,
    "K_UP": 65362,
    "K_RIGHT": 65363,
    "K_DOWN": 65364,
}


def _load_sprites(pygame) -> dict:
    sprites = {}
    for tile, filename in _SPRITE_FILES.items():
        try:
            sprites[tile] = pygame.image.load(filename).convert()
        except (pygame.error, OSError, FileNotFoundError):
            sprites[tile] = None
    return sprites


def _draw(screen, sprites: dict, board: Board) -> None:
    for row_index, row in enumerate(board.grid):
        for col_index, tile in enumerate(row):
            sprite = sprites.get(tile)
            if sprite is not None:
                screen.blit(sprite, (col_index * TILE, row_index * TILE))


def _play(game: Game) -> None:
    import pygame

    keysyms = {getattr(pygame, name): sym for name, sym in _PYGAME_TO_KEYSYM_NAMES.items()}
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise GameClosed(NO_DISPLAY) from exc
    try:
        info = pygame.display.Info()
        game.screen_size = (info.current_w, info.current_h)
        width, height = game.window_size()
        if height > info.current_h or width > info.current_w:
            raise GameClosed(TOO_LARGE)
        try:
            screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise GameClosed(NO_WINDOW) from exc
        pygame.display.set_caption("so_long")
        sprites = _load_sprites(pygame)
        _draw(screen, sprites, game.board)
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise GameClosed()
                if event.type == pygame.KEYUP:
                    result = game.handle_key(keysyms.get(event.key, event.key))
                    if result in (MoveResult.MOVED, MoveResult.COLLECTED):
                        _draw(screen, sprites, game.board)
                        pygame.display.flip()
            game.tick()
            clock.tick(1000)
    finally:
        pygame.quit()


def run(path: Union[str, os.PathLike]) -> None:
    """Play the map at path until the game ends, then print why it ended."""
    try:
        game = load_game(path)
        _play(game)
    except MapError as exc:
        printf("%s\n", str(exc))
    except GameClosed as exc:
        printf("%s\n", exc.text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: expects the path of one map file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("%s\n", BAD_ARGUMENTS)
        return 1
    run(args[0])
    return 0