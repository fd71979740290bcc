# jvida

An interactive Game of Life. You choose the size of a square world
(10 to 60 cells on a side), place and remove live cells, and watch the
population evolve generation by generation under the classic rules:

- **Birth:** a dead cell with exactly 3 live neighbours comes to life.
- **Survival:** a live cell with 2 or 3 live neighbours stays alive.
- **Overcrowding:** a live cell with 4 or more live neighbours dies.
- **Loneliness:** a live cell with 0 or 1 live neighbours dies.

Cells outside the world count as dead; the edges do not wrap around.
The prompts and messages are in Portuguese.

## Installation

```
pip install .
```

## Playing

Start the game with:

```
jvida
```

The saved generation goes to the file `CONFIG_INIC` in the current
directory; choose another file with `--config`:

```
jvida --config my_world.bin
```

First enter the world size (the question repeats until it is between
10 and 60), then choose from the menu:

| Option | Action |
|--------|--------|
| 1 | Show the map |
| 2 | Clear the map, then optionally show it |
| 3 | Add live cells by row and column; choosing an occupied cell offers to remove it |
| 4 | Show or hide the dead neighbours of live cells on the map |
| 5 | Run the simulation for a given number of generations, drawing the map after each (two seconds apart) |
| 6 | Save the current live cells as an initial generation |
| 7 | Load a saved initial generation, replacing the current world |
| 8 | Show the evolution rules |
| 0 | Quit |

Live cells are drawn as `O`, empty cells as `.`, and, when neighbours
are shown, dead cells next to a live cell as `+`. The game ends on
option 0 or when input runs out.

## Using the library

The world can also be driven from Python:

```python
from jvida.model import World

world = World(10)
for row, col in [(4, 3), (4, 4), (4, 5)]:
    world.add(row, col)

world.step()
print(world.render(False))
print(sorted(world.live_cells()))
```

`jvida.model` holds `World` and `Cell`, and `validate_dimension`, which
raises `ValueError` for a size outside 10 to 60. `World.add` returns
`False` for a cell that is already alive, `World.remove` raises
`KeyError` for one that is not, and both raise `ValueError` for a
position outside the world. `World.dead_neighbours`,
`World.count_live_neighbours` and `World.next_generation_cells` expose
the pieces `World.step` is built from.

`jvida.storage.save_world(world, path)` writes the world size and its
live cells as little-endian 32-bit integers; `jvida.storage.load_world(path)`
reads them back, raising `OSError` if the file cannot be read and
`jvida.storage.StorageError` if its contents are damaged or invalid.

`jvida.view` holds the menu, rules and status texts (`menu_text`,
`rules_text`, `message_text` with the `Message` enum, `format_cells`).

`jvida.controller.Game(read_line, write, config_path)` runs the menu
with any line reader and writer, which makes it easy to script; its
`run()` method plays until the player quits or `read_line` returns an
empty string.

## Running the tests

```
pip install .[test]
pytest
```