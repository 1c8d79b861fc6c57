# solong

A small top-down puzzle game. You walk a player around a walled map, pick up
every collectible, and then step onto the exit to win. Each move that
succeeds is counted and printed to the terminal.

## Installing

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
solong maps/level.ber
```

The only argument is the path to a map file. Its name must end in `.ber`.
The command exits with status 0 when the game ends and 1 when it cannot
start.

Controls:

| Key    | Action     |
|--------|------------|
| `w`    | move up    |
| `a`    | move left  |
| `s`    | move down  |
| `d`    | move right |
| Escape | quit       |

Closing the window also quits. After the first move the terminal shows
`first step`. After each later move it shows the running count, for example
`5 steps`.

You can only step onto the exit once every collectible has been picked up.
Stepping onto it then ends the game; that last move is not counted.

## Map format

A map is a plain text file of equally long lines. Empty lines are ignored.
Each character is one 32×32 pixel tile:

| Character | Tile        |
|-----------|-------------|
| `1`       | wall        |
| `0`       | floor       |
| `P`       | player      |
| `C`       | collectible |
| `E`       | exit        |

Example:

```
1111111111
1P0C00C0E1
1111111111
```

The command prints one of these messages and exits with status 1 when:

| Message           | Cause                                                      |
|-------------------|------------------------------------------------------------|
| `argument`        | not exactly one argument was given                         |
| `error 1`         | the file cannot be opened                                  |
| `error 5`         | the file is empty                                          |
| `error 4`         | the lines do not all have the same length                  |
| `error p`         | there is not exactly one `P`                               |
| `error e`         | there is not exactly one `E`                               |
| `error c`         | there is no `C`                                            |
| `not a .ber`      | the file name does not end in `.ber`                       |
| `error 2`         | the map is not closed by walls, or the player cannot reach every collectible and the exit |
| `not a good size` | the window would be larger than 1920×1080 pixels           |
| `image`           | a tile image could not be loaded                           |

A map that passes these checks but holds a character other than the five
above is accepted; when the window draws it, the game stops at once.

The tile images are read from an `xpm/` directory under the current working
directory: `player.xpm`, `Exit.xpm`, `item.xpm`, `floor.xpm` and `wall.xpm`,
loaded through pygame.

## Using it as a library

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction

try:
    game_map = load_map("maps/level.ber")
except MapError as exc:
    print(exc)
else:
    game = Game(game_map)
    game.move(Direction.RIGHT)
    print(game.player(), game.steps)
```

- `solong.mapfile`: `load_map` and `parse_map` (for map text already in
  memory) return a `GameMap`, or raise `MapError` with one of the messages
  above. The individual checks are available too: `check_extension`,
  `check_rectangular`, `check_walls`, `check_elements`, `has_valid_path`,
  along with `split_lines` and `flood_fill`.
- `solong.game`: `Game` holds the map, `steps`, `running` and `won`. Use
  `move(direction)` with a `Direction`, or `handle_key(key)` with a `Key`
  code, which returns the step message to report, if any.
  `step_message(steps)` builds that message.
- `solong.display`: `Renderer(game, image_dir)` opens the window; `run()`
  plays until the game stops and returns the step count. `window_size(map)`
  gives the window's pixel size.
- `solong.format`: `c_format` and `c_printf` offer printf-style formatting
  for `%c %s %p %d %i %u %x %X %%`.

## What it does not include

The package ships no maps and no tile images; you provide both. There is
no menu, no level selection and no saving of progress: one run plays one
map.