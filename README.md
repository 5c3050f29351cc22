# dante

Text mazes: a generator that carves a maze of walls (`X`) and free cells
(`*`), and a solver that looks for a path from the top-left corner to the
bottom-right corner and marks it with `o`.

## Installation

```
pip install .
```

## Generating a maze

```
dante-generator WIDTH HEIGHT [perfect]
```

`WIDTH` and `HEIGHT` are read leniently: anything before the first digit is
skipped (each `-` in it flips the sign) and reading stops at the first
non-digit. Both must come out as at least 1, otherwise the command exits
with status 84. The maze is perfect only when exactly three arguments are
given and the third is `perfect`.

A perfect maze has one of the two cells next to the exit walled off when
both are open. An imperfect maze has about a tenth of its cells' worth of
walls knocked open after carving, which creates loops. The exit cell in the
bottom-right corner is always free. The maze is printed on standard output
followed by a newline, and the command exits with status 1.

```
dante-generator 20 10 perfect > maze.txt
```

## Solving a maze

```
dante-solver maze.txt
```

The file must hold only `X`, `*` and newlines, every line must end with a
newline and have the same length, and the cell just before the final
newline must be free. The solver walks greedily towards the exit, always
stepping to the open, unvisited neighbour closest to it and backing out of
dead ends. Because neighbours it passes over are marked as visited, the
search can miss a route that exists; it then reports the maze as unsolvable.

On success the maze is printed with the path drawn as `o` (without a final
newline) and the command exits with status 1. A missing file, invalid
input or an unsolvable maze ends the command with exit status 84 and no
output.

## Using it from Python

```python
import random

from dante.generator import generate_maze
from dante.solver import InvalidMazeError, solve_text

maze = generate_maze(21, 11, True, random.Random(4))
try:
    print(solve_text(maze + "\n"))
except InvalidMazeError as error:
    print("no solution:", error)
```

`generate_maze` returns the rows without a final newline, so add one before
handing the text to the solver.

- `dante.generator.MazeGenerator(width, height, perfect=False, rng=None)`
  raises `ValueError` for a dimension below 1; `generate()` builds a fresh
  maze and `render()` returns it as text.
- `dante.solver.Board.from_text(text)` parses a maze, `solve()` returns the
  list of cell indexes on the path found, and `render(path)` draws it.
- `dante.solver.check_text(text)` validates raw text up front.
- Malformed or unsolvable input raises `dante.solver.InvalidMazeError`, a
  subclass of `ValueError`.
- `dante.common` holds the cell symbols and the helpers `parse_number`,
  `random_between` and `is_even`.

## Running the tests

```
pip install .[test]
pytest
```