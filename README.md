# so_long

A small tile-based 2D game. You steer a cat around a walled map. It must eat
every piece of food on the map, and then it can leave through the exit.

## Installation

```
pip install .
```

Add the `test` extra to install the test tools as well:

```
pip install ".[test]"
```

## Playing

```
so_long path/to/map.ber
```

The command takes exactly one argument, the path of a map file. With any other
number of arguments it prints `Error: Invalid number of arguments.` and exits
with status 1.

Controls (acted on when the key is released):

- `W` / `Up`: move up
- `A` / `Left`: move left
- `S` / `Down`: move down
- `D` / `Right`: move right
- `Esc` or the window's close button: quit

Walls block the player. The exit also blocks the player while any
collectable is left. After the last collectable is eaten, stepping onto the
exit wins the game. While the game runs, it prints a status report to the
terminal every 2000 frames. The report gives the screen size, the window size,
the collectables left, the player's pixel position and the move count. When
the game ends, it prints why: the player closed it, the player won, or an error
message such as `Error: Invalid map.` or `Error: Map is too large.`.

## Map format

A map is a text file with one row per line. Each row uses these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectable  |
| `E`  | exit         |

A map is valid only if all of these hold:

- every line has the same length, newline included. Rows must be equal in
  length, and the last row must end with a newline like the others.
- there is exactly one `P` and exactly one `E`;
- there is at least one `C`;
- the first row and the last row are all walls;
- every row in between starts and ends with a wall.

Any other character on the map is rejected with
`Error: Invalid element on map.` Each tile is 64 pixels. A map larger than the
screen is rejected.

Example:

```
1111111
1P0C0E1
1111111
```

## Library use

You can load, check and play maps from your own code:

```python
from so_long.mapfile import read_map, validate_map, MapError
from so_long.board import Board, MoveResult

lines = read_map("maps/small.ber")   # raises MapError if the file can't be read
count = validate_map(lines)          # number of collectables; raises MapError if invalid
board = Board.from_lines(lines)
result = board.move(1, 0)            # MoveResult.BLOCKED, MOVED, COLLECTED or WON
```

`so_long.game.Game` holds a game in progress without any window.
`Game.handle_key(keysym)` takes key symbols and raises `GameClosed` on escape or
on a win. `Game.tick()` advances one frame. `Game.status_lines()` returns the
status report. `so_long.game.load_game(path)` reads and validates a map and
returns a `Game`.

The package also has small helper modules under `so_long.libft`:

- `chars`: character classes, `atoi` and `itoa`
- `memory`: byte buffers
- `cstrings`: strings
- `linkedlist`: a singly linked list
- `output`: writing text
- `printf`: a small `printf`/`sprintf`
- `linereader`: reading a stream line by line

## What it does not do

The package ships no sprite images. The game looks for them under
`./textures/xpm/`, relative to the current directory:

- `spr_ground_64.xpm`
- `spr_wall.xpm`
- `spr_fat_cat.xpm`
- `spr_food.xpm`
- `spr_exit_closed.xpm`

A sprite that is missing or cannot be loaded is not drawn, so its tiles stay
blank. The game has no enemies, no score saving and no on-screen move counter.