"""Maze solving by greedy depth-first search towards the exit."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dante.common import EXIT_ERROR, EXIT_OK, FREE_CELL, PATH_CELL, WALL

_ALLOWED = frozenset((WALL, FREE_CELL, "\n"))
_NO_BEST = 1_000_000


class InvalidMazeError(ValueError):
    """Raised when maze text is malformed or the maze cannot be solved."""


def check_text(text: str) -> None:
    """Validate raw maze text.

    Only wall, free-cell and newline characters are accepted, and the
    character before the last one (the exit cell of a newline-terminated
    maze) must be free.
    """
    for char in text:
        if char not in _ALLOWED:
            raise InvalidMazeError(f"unexpected character {char!r} in maze")
    if len(text) < 2 or text[-2] != FREE_CELL:
        raise InvalidMazeError("maze exit is not a free cell")


@dataclass(frozen=True)
class Board:
    """A rectangular maze stored row by row as a flat string of cells."""

    width: int
    height: int
    cells: str

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Build a board from newline-terminated rows of cell symbols."""
        if "\n" not in text:
            raise InvalidMazeError("maze has no complete line")
        height = text.count("\n")
        rows = text.split("\n")[:height]
        width = len(rows[0])
        if width == 0:
            raise InvalidMazeError("maze has an empty first line")
        for number, row in enumerate(rows, start=1):
            if len(row) != width:
                raise InvalidMazeError(
                    f"line {number} has {len(row)} cells, expected {width}"
                )
        return cls(width, height, "".join(rows))

    @property
    def size(self) -> int:
        return self.width * self.height

    def _neighbours(self, cell: int) -> tuple[int, int, int, int]:
        """North, south, east and west cells; -1 off the side of a row."""
        w = self.width
        column = cell % w
        east = cell + 1 if column + 1 < w else -1
        west = cell - 1 if column - 1 >= 0 else -1
        return cell - w, cell + w, east, west

    def _distance(self, cell: int) -> int:
        """Whole-number distance used to rank cells towards the exit."""
        row, column = divmod(cell, self.width)
        return int(math.hypot(self.width - 1 - row, self.height - 1 - column))

    def solve(self) -> list[int]:
        """Return the cells of a path from the top-left to the bottom-right.

        At each step the unvisited free neighbour closest to the exit is
        taken; every neighbour that improved on the best distance so far is
        marked as visited. Dead ends are backtracked out of.
        """
        end = self.size - 1
        passed = [False] * self.size
        stack = [0]
        current = 0
        while current != end:
            best_distance = _NO_BEST
            best = -1
            for neighbour in self._neighbours(stack[-1]):
                if not 0 <= neighbour < self.size:
                    continue
                distance = self._distance(neighbour)
                if (
                    distance < best_distance
                    and self.cells[neighbour] != WALL
                    and not passed[neighbour]
                ):
                    passed[neighbour] = True
                    best_distance = distance
                    best = neighbour
            if best == -1:
                stack.pop()
                if not stack:
                    raise InvalidMazeError("maze has no solution")
                current = stack[-1]
            else:
                stack.append(best)
                current = best
        return stack

    def render(self, path: Iterable[int] = ()) -> str:
        """Return the board with ``path`` cells marked, without a final newline."""
        on_path = set(path)
        marked = "".join(
            PATH_CELL if index in on_path else cell
            for index, cell in enumerate(self.cells)
        )
        w = self.width
        return "\n".join(marked[start:start + w] for start in range(0, len(marked), w))


def solve_text(text: str) -> str:
    """Validate, solve and render a maze given as text."""
    check_text(text)
    board = Board.from_text(text)
    return board.render(board.solve())


def main(argv: Sequence[str] | None = None) -> int:
    """Print the solution of the maze file named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return EXIT_ERROR
    try:
        with open(args[0], encoding="latin-1", newline="") as handle:
            text = handle.read()
        solution = solve_text(text)
    except (OSError, InvalidMazeError):
        return EXIT_ERROR
    sys.stdout.write(solution)
    return EXIT_OK